"""Tests for the module store data model."""

import pytest
from pathlib import Path

from errors import DuplicateModule
from store.model import ModuleRecord, ModuleStore


def make_record(name, source=Path("a.sv"), lines=None, start=1):
    """Build a sealed record."""
    record = ModuleRecord(name, source, start)
    body = lines if lines is not None else [f"module {name}", "endmodule"]
    for line in body:
        record.append(line)
    record.seal(source, start + len(body) - 1)
    return record


class TestModuleRecord:
    """Tests for ModuleRecord class."""

    def test_body_is_newline_terminated(self):
        """Test that appended lines are joined with newlines."""
        record = make_record("top", lines=["module top", "  wire a;", "endmodule"])

        assert record.body == "module top\n  wire a;\nendmodule\n"
        assert record.line_count == 3

    def test_append_after_seal(self):
        """Test that sealed records are immutable."""
        record = make_record("top")

        with pytest.raises(RuntimeError):
            record.append("  wire late;")

    def test_double_seal(self):
        """Test that a record can only be sealed once."""
        record = make_record("top")

        with pytest.raises(RuntimeError):
            record.seal(Path("a.sv"), 9)

    def test_spans_files(self):
        """Test detection of records closed in a different file."""
        record = ModuleRecord("top", Path("a.sv"), 1)
        record.append("module top")
        assert not record.spans_files

        record.append("endmodule")
        record.seal(Path("b.sv"), 1)

        assert record.spans_files
        assert not make_record("sub").spans_files


class TestModuleStore:
    """Tests for ModuleStore class."""

    def test_empty_store(self):
        """Test empty store initialization."""
        store = ModuleStore()

        assert len(store) == 0
        assert store.names == []
        assert list(store.entries()) == []

    def test_insert(self):
        """Test inserting records."""
        store = ModuleStore()
        record = make_record("top")

        store.insert(record)

        assert len(store) == 1
        assert "top" in store
        assert store.get("top") is record
        assert store.get("missing") is None

    def test_duplicate_insert(self):
        """Test that names must be unique."""
        store = ModuleStore()
        store.insert(make_record("top"))

        with pytest.raises(DuplicateModule) as excinfo:
            store.insert(make_record("top", source=Path("b.sv")))

        assert excinfo.value.name == "top"
        assert len(store) == 1

    def test_names_are_case_sensitive(self):
        """Test that name equality is exact."""
        store = ModuleStore()
        store.insert(make_record("top"))
        store.insert(make_record("Top"))

        assert store.names == ["top", "Top"]

    def test_open_record_rejected(self):
        """Test that unsealed records cannot be stored."""
        store = ModuleStore()
        record = ModuleRecord("top", Path("a.sv"), 1)
        record.append("module top")

        with pytest.raises(ValueError):
            store.insert(record)

    def test_insertion_order(self):
        """Test that entries follow insertion order, not sort order."""
        store = ModuleStore()
        for name in ["zeta", "alpha", "mid"]:
            store.insert(make_record(name))

        assert [name for name, _ in store.entries()] == ["zeta", "alpha", "mid"]
        assert list(store) == ["zeta", "alpha", "mid"]
        assert [r.name for r in store.records] == ["zeta", "alpha", "mid"]

    def test_entries_reiterable(self):
        """Test that entries() can be consumed more than once."""
        store = ModuleStore()
        store.insert(make_record("a"))
        store.insert(make_record("b"))

        assert list(store.entries()) == list(store.entries())
