"""Data model for module records and the name-unique module store."""

from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from errors import DuplicateModule


class ModuleRecord:
    """
    One module block captured from the source stream.

    A record is opened on its start boundary line and accumulates lines
    until it is sealed on its end boundary line. Sealed records are
    immutable.
    """

    def __init__(self, name: str, source: Path, start_line: int):
        self.name = name
        self.source = source
        self.start_line = start_line
        self.end_source: Optional[Path] = None
        self.end_line: Optional[int] = None
        self._lines: List[str] = []
        self._sealed = False

    @property
    def sealed(self) -> bool:
        """Return True once the end boundary has been seen."""
        return self._sealed

    @property
    def body(self) -> str:
        """Return the accumulated text, one newline-terminated line per entry."""
        return "".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def spans_files(self) -> bool:
        """Check if the record was opened in one file and closed in another."""
        return self.end_source is not None and self.end_source != self.source

    def append(self, line: str) -> None:
        """
        Append one line (without its terminator) to the body.

        Raises:
            RuntimeError: If the record has already been sealed.
        """
        if self._sealed:
            raise RuntimeError(f"module '{self.name}' is sealed and cannot be extended")
        self._lines.append(line + "\n")

    def seal(self, source: Path, line_number: int) -> None:
        """Mark the record complete at the given end location."""
        if self._sealed:
            raise RuntimeError(f"module '{self.name}' is already sealed")
        self.end_source = source
        self.end_line = line_number
        self._sealed = True

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"ModuleRecord(name={self.name!r}, source={str(self.source)!r}, lines={len(self._lines)}, {state})"


class ModuleStore:
    """
    Insertion-ordered collection of sealed module records.

    Module names are unique: inserting a name that is already present
    raises DuplicateModule. Iteration follows first-insertion order so
    output files are written in a deterministic order.
    """

    def __init__(self):
        self._records: Dict[str, ModuleRecord] = {}

    @property
    def names(self) -> List[str]:
        """Return module names in insertion order."""
        return list(self._records)

    @property
    def records(self) -> List[ModuleRecord]:
        """Return records in insertion order."""
        return list(self._records.values())

    def insert(self, record: ModuleRecord) -> None:
        """
        Add a sealed record to the store.

        Raises:
            DuplicateModule: If a record with the same name already exists.
            ValueError: If the record is still open.
        """
        if record.name in self._records:
            raise DuplicateModule(record.name, record.source, record.start_line)
        if not record.sealed:
            raise ValueError(f"module '{record.name}' must be sealed before it is stored")
        self._records[record.name] = record

    def get(self, name: str) -> Optional[ModuleRecord]:
        """Get the record for a module name, or None."""
        return self._records.get(name)

    def entries(self) -> Iterator[Tuple[str, ModuleRecord]]:
        """Iterate over (name, record) pairs in insertion order."""
        for name, record in self._records.items():
            yield name, record

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        """Return the number of stored modules."""
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        """Check if a module name is in the store."""
        return name in self._records

    def __repr__(self) -> str:
        return f"ModuleStore(modules={len(self._records)})"
