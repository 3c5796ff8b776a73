#!/usr/bin/env python3
"""
SV Split CLI

A tool for splitting SystemVerilog/Verilog source files that hold several
modules into one file per module.
"""

import argparse
import sys
from pathlib import Path

from errors import SplitError
from exporters import to_ascii, to_json, OUTPUT_EXTENSION
from scanner.builder import split


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="svsplit",
        description="Split .sv/.v files into one file per module.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  svsplit -i top.sv -o split/               # Split one file
  svsplit -i rtl/ -o split/                 # Split every .sv/.v file in rtl/
  svsplit -i rtl/ -o split/ -r              # Include subdirectories
  svsplit -i rtl/ -o split/ --dry-run       # Report modules, write nothing
  svsplit -i rtl/ -o split/ --manifest m.json  # Also write a JSON manifest
        """,
    )

    parser.add_argument(
        "-i", "--input",
        type=str,
        required=True,
        help="Input .sv/.v file or directory of such files",
    )

    parser.add_argument(
        "-o", "--output-dir",
        type=str,
        required=True,
        help="Directory to write one file per module into (created if missing)",
    )

    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Also scan subdirectories when the input is a directory",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and report modules without writing any files",
    )

    parser.add_argument(
        "--manifest",
        type=str,
        default=None,
        help="Write a JSON manifest of the split modules to this file",
    )

    parser.add_argument(
        "--summary",
        choices=["none", "tree", "ascii"],
        default="tree",
        help="Summary printed to stdout: 'tree' (Unicode), 'ascii' (pure ASCII) or 'none'",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report errors",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    input_path = Path(parsed.input)
    output_dir = Path(parsed.output_dir)

    try:
        result = split(
            input_path,
            output_dir,
            recursive=parsed.recursive,
            extension=OUTPUT_EXTENSION,
            dry_run=parsed.dry_run,
        )
    except SplitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    store = result.store

    if not parsed.quiet:
        if result.unterminated is not None:
            record = result.unterminated
            print(
                f"Warning: module '{record.name}' opened at {record.source}:{record.start_line} "
                "never reached 'endmodule' and was skipped",
                file=sys.stderr,
            )
        for _, record in store.entries():
            if record.spans_files:
                print(
                    f"Warning: module '{record.name}' starts in {record.source} "
                    f"and ends in {record.end_source}",
                    file=sys.stderr,
                )

    if parsed.manifest:
        try:
            manifest_path = Path(parsed.manifest)
            manifest_path.write_text(to_json(store, output_dir=output_dir), encoding="utf-8")
        except OSError as e:
            print(f"Error writing manifest: {e}", file=sys.stderr)
            return 1

    if parsed.quiet:
        return 0

    if parsed.summary != "none" and len(store):
        print(to_ascii(store, style=parsed.summary))

    if parsed.dry_run:
        print(f"Found {len(store)} module(s); nothing written (dry run)", file=sys.stderr)
    else:
        print(f"Wrote {len(result.written)} module(s) to {output_dir}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
