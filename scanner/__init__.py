"""Scanner module for source discovery and module boundary scanning."""

from .discovery import discover_sources, iter_sources, validate_source, SourceUnit
from .parser import ModuleScanner, scan_sources
from .builder import build_store, split, SplitResult

__all__ = [
    "discover_sources",
    "iter_sources",
    "validate_source",
    "SourceUnit",
    "ModuleScanner",
    "scan_sources",
    "build_store",
    "split",
    "SplitResult",
]
