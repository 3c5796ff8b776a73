"""Source file validation and discovery."""

import os
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Set

from errors import InvalidEncoding, InvalidExtension, NoInputFound, UnreadableSource


RECOGNIZED_EXTENSIONS = ("sv", "v")
DEFAULT_EXCLUDE_DIRS = {
    ".git", ".hg", ".svn",
    "__pycache__", ".venv", "venv",
    ".idea", ".vscode",
    "build", "dist",
}


class SourceUnit(NamedTuple):
    """A validated input file that contributes lines to the scan."""

    path: Path
    extension: str


def validate_source(path: Path) -> SourceUnit:
    """
    Confirm that a path names a recognized hardware source file.

    Args:
        path: Candidate input file.

    Returns:
        SourceUnit describing the file.

    Raises:
        InvalidEncoding: If the path is not representable as UTF-8.
        InvalidExtension: If the extension is missing or not recognized.
    """
    path = Path(path)
    try:
        str(path).encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidEncoding(path) from None

    extension = path.suffix[1:] if path.suffix else None
    if extension not in RECOGNIZED_EXTENSIONS:
        raise InvalidExtension(path, extension, RECOGNIZED_EXTENSIONS)

    return SourceUnit(path, extension)


def iter_sources(
    path: Path,
    recursive: bool = False,
    exclude_dirs: Optional[Set[str]] = None,
) -> Iterator[SourceUnit]:
    """
    Iterate over the source units found at a path.

    A file is validated and yielded on its own; validation errors propagate.
    A directory is listed in sorted order and entries that are not readable
    source files are skipped without being reported.

    Args:
        path: Input file or directory.
        recursive: If True, descend into subdirectories.
        exclude_dirs: Directory names to skip when recursing.
                     If None, uses DEFAULT_EXCLUDE_DIRS.

    Yields:
        SourceUnit objects in scan order.

    Raises:
        NoInputFound: If the path is neither a file nor a directory.
        UnreadableSource: If the input directory itself cannot be listed.
    """
    if exclude_dirs is None:
        exclude_dirs = DEFAULT_EXCLUDE_DIRS

    path = Path(path)
    if path.is_file():
        yield validate_source(path)
        return
    if not path.is_dir():
        raise NoInputFound(path, "input is neither a file nor a directory")

    def _walk(current: Path) -> Iterator[SourceUnit]:
        try:
            entries = sorted(current.iterdir())
        except OSError as e:
            if current == path:
                raise UnreadableSource(path, e) from e
            return

        for entry in entries:
            try:
                is_dir = entry.is_dir()
                readable_file = entry.is_file() and os.access(entry, os.R_OK)
            except OSError:
                continue
            if is_dir:
                if recursive and entry.name not in exclude_dirs:
                    yield from _walk(entry)
                continue
            if not readable_file:
                continue
            try:
                yield validate_source(entry)
            except (InvalidExtension, InvalidEncoding):
                continue

    yield from _walk(path)


def discover_sources(path: Path, recursive: bool = False) -> List[SourceUnit]:
    """Return the list of source units found at a path."""
    return list(iter_sources(path, recursive=recursive))
