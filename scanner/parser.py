"""Line-oriented scanner that cuts module blocks out of source files."""

import re
from pathlib import Path
from typing import Iterable, NamedTuple, Optional, Sequence, Union

from errors import DuplicateModule, UnreadableSource
from store.model import ModuleRecord, ModuleStore
from .discovery import SourceUnit


# A start boundary begins at column zero; indented keywords do not count.
START_PATTERN = re.compile(r"^module\s+(\w+)")
# An end boundary is the whole line, with no trailing characters.
END_LINE = "endmodule"


class AwaitingBoundary(NamedTuple):
    """Scan state outside of any module."""


class InModule(NamedTuple):
    """Scan state while a module is open; carries the open record."""

    record: ModuleRecord


ScanState = Union[AwaitingBoundary, InModule]


def match_start(line: str) -> Optional[str]:
    """
    Return the module name if the line is a start boundary.

    Args:
        line: Source line without its line terminator.

    Returns:
        The captured identifier, or None if the line does not open a module.
    """
    match = START_PATTERN.match(line)
    if match is None:
        return None
    return match.group(1)


def is_end(line: str) -> bool:
    """Check if the line is exactly an end boundary."""
    return line == END_LINE


def _strip_terminator(raw: str) -> str:
    """Remove a single trailing "\\n" or "\\r\\n"."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


class ModuleScanner:
    """
    Two-state scanner that fills a ModuleStore.

    All units fed to one scanner form a single continuous stream: a module
    left open at the end of one file keeps accumulating lines from the next
    file. Call finish() once the last unit has been scanned.
    """

    def __init__(self, store: Optional[ModuleStore] = None):
        self.store = store if store is not None else ModuleStore()
        self.state: ScanState = AwaitingBoundary()
        self.unterminated: Optional[ModuleRecord] = None

    def scan_unit(self, unit: SourceUnit) -> None:
        """
        Scan every line of one source unit.

        Raises:
            UnreadableSource: If the file cannot be opened or decoded.
            DuplicateModule: If a module name repeats.
        """
        try:
            # Split on "\n" only; a lone "\r" stays part of the line.
            with open(unit.path, "r", encoding="utf-8", newline="\n") as handle:
                self.scan_lines(handle, unit.path)
        except (OSError, UnicodeDecodeError) as e:
            raise UnreadableSource(unit.path, e) from e

    def scan_lines(self, lines: Iterable[str], source: Path) -> None:
        """
        Feed lines from one source into the state machine.

        Args:
            lines: Lines with or without trailing newlines.
            source: Path the lines came from, recorded on the records.
        """
        for line_number, raw in enumerate(lines, start=1):
            line = _strip_terminator(raw)
            state = self.state

            if isinstance(state, AwaitingBoundary):
                name = match_start(line)
                if name is None:
                    continue
                if name in self.store:
                    raise DuplicateModule(name, source, line_number)
                record = ModuleRecord(name, source, line_number)
                record.append(line)
                self.state = InModule(record)
                continue

            record = state.record
            record.append(line)
            if is_end(line):
                record.seal(source, line_number)
                self.store.insert(record)
                self.state = AwaitingBoundary()

    def finish(self) -> ModuleStore:
        """
        End the stream and return the store.

        A module still open at this point is dropped without error and
        remembered in ``unterminated``.
        """
        if isinstance(self.state, InModule):
            self.unterminated = self.state.record
            self.state = AwaitingBoundary()
        return self.store


def scan_sources(units: Sequence[SourceUnit]) -> ModuleStore:
    """
    Scan source units in order and return the populated module store.

    Args:
        units: Validated source units, scanned as one concatenated stream.

    Returns:
        ModuleStore containing every sealed module.
    """
    scanner = ModuleScanner()
    for unit in units:
        scanner.scan_unit(unit)
    return scanner.finish()
