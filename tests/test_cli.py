"""Tests for the command line interface."""

import json
import pytest
from pathlib import Path

from cli import main, parse_args


TWO_MODULES = "module top\n  wire a;\nendmodule\nmodule sub\n  wire b;\nendmodule\n"


class TestParseArgs:
    """Tests for argument parsing."""

    def test_required_options(self):
        """Test that input and output directory are required."""
        with pytest.raises(SystemExit):
            parse_args(["-i", "a.sv"])
        with pytest.raises(SystemExit):
            parse_args(["-o", "out"])

    def test_defaults(self):
        """Test default option values."""
        parsed = parse_args(["-i", "a.sv", "-o", "out"])

        assert parsed.input == "a.sv"
        assert parsed.output_dir == "out"
        assert not parsed.recursive
        assert not parsed.dry_run
        assert parsed.manifest is None
        assert parsed.summary == "tree"


class TestMain:
    """Tests for the main entry point."""

    def test_split_file(self, tmp_path, capsys):
        """Test a successful run prints a summary and writes files."""
        source = tmp_path / "a.sv"
        source.write_text(TWO_MODULES)
        out = tmp_path / "out"

        assert main(["-i", str(source), "-o", str(out)]) == 0

        captured = capsys.readouterr()
        assert "top (lines 1-3)" in captured.out
        assert "Wrote 2 module(s)" in captured.err
        assert (out / "top.sv").read_text() == "module top\n  wire a;\nendmodule\n"

    def test_invalid_extension(self, tmp_path, capsys):
        """Test that a .txt input fails with exit status 1."""
        source = tmp_path / "a.txt"
        source.write_text(TWO_MODULES)

        assert main(["-i", str(source), "-o", str(tmp_path / "out")]) == 1
        assert "Error:" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()

    def test_no_input_found(self, tmp_path, capsys):
        """Test that a directory without sources fails."""
        (tmp_path / "src").mkdir()

        assert main(["-i", str(tmp_path / "src"), "-o", str(tmp_path / "out")]) == 1
        assert "no .sv or .v files" in capsys.readouterr().err

    def test_duplicate_module(self, tmp_path, capsys):
        """Test that duplicates fail and write nothing."""
        source = tmp_path / "a.sv"
        source.write_text(TWO_MODULES + "module top\nendmodule\n")
        out = tmp_path / "out"

        assert main(["-i", str(source), "-o", str(out)]) == 1
        assert "'top'" in capsys.readouterr().err
        assert not out.exists()

    def test_warnings(self, tmp_path, capsys):
        """Test warnings for spanning and unterminated modules."""
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.sv").write_text("module top\n")
        (src / "b.sv").write_text("endmodule\nmodule open\n")

        assert main(["-i", str(src), "-o", str(tmp_path / "out")]) == 0

        err = capsys.readouterr().err
        assert "module 'top' starts in" in err
        assert "module 'open'" in err and "skipped" in err

    def test_quiet(self, tmp_path, capsys):
        """Test that quiet mode prints nothing on success."""
        source = tmp_path / "a.sv"
        source.write_text(TWO_MODULES + "module open\n")

        assert main(["-i", str(source), "-o", str(tmp_path / "out"), "-q"]) == 0

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_dry_run_with_manifest(self, tmp_path, capsys):
        """Test that a dry run writes the manifest but no modules."""
        source = tmp_path / "a.sv"
        source.write_text(TWO_MODULES)
        out = tmp_path / "out"
        manifest = tmp_path / "manifest.json"

        code = main([
            "-i", str(source), "-o", str(out),
            "--dry-run", "--manifest", str(manifest), "--summary", "none",
        ])

        assert code == 0
        assert not out.exists()
        data = json.loads(manifest.read_text())
        assert [m["name"] for m in data["modules"]] == ["top", "sub"]
        assert Path(data["modules"][0]["output"]).name == "top.sv"
        assert capsys.readouterr().out == ""
