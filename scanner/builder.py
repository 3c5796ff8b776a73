"""Pipeline that discovers sources, scans them, and writes the modules."""

from pathlib import Path
from typing import List, Optional, Tuple

from errors import NoInputFound
from exporters.writer import OUTPUT_EXTENSION, write_modules
from store.model import ModuleRecord, ModuleStore
from .discovery import discover_sources
from .parser import ModuleScanner


class SplitResult:
    """Outcome of a split run."""

    def __init__(
        self,
        store: ModuleStore,
        written: List[Path],
        unterminated: Optional[ModuleRecord] = None,
    ):
        self.store = store
        self.written = written
        self.unterminated = unterminated


def build_store(path: Path, recursive: bool = False) -> Tuple[ModuleStore, Optional[ModuleRecord]]:
    """
    Discover and scan every source unit under a path.

    Args:
        path: Input file or directory.
        recursive: If True, descend into subdirectories.

    Returns:
        The populated store and the module left open at end of input, if any.

    Raises:
        NoInputFound: If no usable source files were found.
    """
    path = Path(path)
    units = discover_sources(path, recursive=recursive)
    if not units:
        raise NoInputFound(path)

    scanner = ModuleScanner()
    for unit in units:
        scanner.scan_unit(unit)
    store = scanner.finish()
    return store, scanner.unterminated


def split(
    path: Path,
    output_dir: Path,
    recursive: bool = False,
    extension: str = OUTPUT_EXTENSION,
    dry_run: bool = False,
) -> SplitResult:
    """
    Split every module found under a path into its own file.

    Nothing is written unless the whole scan succeeds.
    """
    store, unterminated = build_store(path, recursive=recursive)
    written = write_modules(store, output_dir, extension=extension, dry_run=dry_run)
    return SplitResult(store, written, unterminated)
