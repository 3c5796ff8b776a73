"""ASCII tree-style summary of split modules grouped by source file."""

from pathlib import Path
from typing import Dict, List, Optional

from store.model import ModuleRecord, ModuleStore


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "


def to_ascii(
    store: ModuleStore,
    base: Optional[Path] = None,
    style: str = "tree",
) -> str:
    """
    Convert a module store to an ASCII tree.

    Each source file is a root; its modules are listed beneath it in the
    order they were found, with their line ranges.

    Args:
        store: The module store to summarize.
        base: Optional base path for relative path display.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).

    Returns:
        ASCII tree string.
    """
    if style == "ascii":
        branch, last = ASCII_BRANCH, ASCII_LAST
    else:
        branch, last = UNICODE_BRANCH, UNICODE_LAST

    # Group by originating file, keeping first-seen order
    groups: Dict[Path, List[ModuleRecord]] = {}
    for _, record in store.entries():
        groups.setdefault(record.source, []).append(record)

    lines: List[str] = []
    for i, (source, records) in enumerate(groups.items()):
        lines.append(_get_display_path(source, base))
        for j, record in enumerate(records):
            connector = last if j == len(records) - 1 else branch
            lines.append(f"{connector}{_describe(record, base)}")

        # Add blank line between source files (except after last)
        if i < len(groups) - 1:
            lines.append("")

    return "\n".join(lines)


def _describe(record: ModuleRecord, base: Optional[Path]) -> str:
    """Render one module entry."""
    if record.spans_files:
        end = f"{_get_display_path(record.end_source, base)}:{record.end_line}"
        return f"{record.name} (lines {record.start_line}-{end}) [SPANS FILES]"
    return f"{record.name} (lines {record.start_line}-{record.end_line})"


def _get_display_path(path: Path, base: Optional[Path]) -> str:
    """Get the display path for a source file."""
    if base is not None:
        try:
            rel_path = path.resolve().relative_to(base.resolve())
            return str(rel_path).replace("\\", "/")
        except ValueError:
            pass
    return str(path).replace("\\", "/")
