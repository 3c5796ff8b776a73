"""JSON manifest exporter for split modules (machine-friendly format)."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from store.model import ModuleStore
from .writer import OUTPUT_EXTENSION, output_path_for


def to_json(
    store: ModuleStore,
    output_dir: Optional[Path] = None,
    base: Optional[Path] = None,
    indent: int = 2,
    extension: str = OUTPUT_EXTENSION,
) -> str:
    """
    Convert a module store to a JSON manifest.

    Args:
        store: The module store to export.
        output_dir: Directory the modules are written to. If None, the
                    "output" field of every entry is null.
        base: Optional base path for relative path display.
        indent: JSON indentation level.
        extension: Output file extension used to compute "output".

    Returns:
        JSON string with a "count" and a "modules" list in store order.
    """
    modules: List[Dict[str, Any]] = []
    for name, record in store.entries():
        output = None
        if output_dir is not None:
            output = _get_path_str(output_path_for(name, output_dir, extension), base)
        modules.append({
            "name": name,
            "source": _get_path_str(record.source, base),
            "start_line": record.start_line,
            "end_source": _get_path_str(record.end_source, base),
            "end_line": record.end_line,
            "lines": record.line_count,
            "output": output,
        })

    data: Dict[str, Any] = {
        "count": len(modules),
        "modules": modules,
    }

    return json.dumps(data, indent=indent)


def _get_path_str(path: Path, base: Optional[Path]) -> str:
    """Get the string representation of a path."""
    if base is not None:
        try:
            rel_path = path.resolve().relative_to(base.resolve())
            return str(rel_path).replace("\\", "/")
        except ValueError:
            pass
    return str(path).replace("\\", "/")
