"""Writer that materializes each stored module to its own file."""

from pathlib import Path
from typing import List

from errors import (
    DirectoryCreateFailed,
    FileRemoveFailed,
    FileWriteFailed,
    UnsafeModuleName,
)
from store.model import ModuleStore


OUTPUT_EXTENSION = "sv"


def output_path_for(name: str, output_dir: Path, extension: str = OUTPUT_EXTENSION) -> Path:
    """
    Compute the destination file for a module.

    Raises:
        UnsafeModuleName: If the name is not a single plain path component.
    """
    if not name or name in {".", ".."} or "/" in name or "\\" in name or "\0" in name:
        raise UnsafeModuleName(name)
    return Path(output_dir) / f"{name}.{extension}"


def write_modules(
    store: ModuleStore,
    output_dir: Path,
    extension: str = OUTPUT_EXTENSION,
    dry_run: bool = False,
) -> List[Path]:
    """
    Write one file per module in the store.

    Existing files with the same name are removed and recreated. Files are
    written in store order.

    Args:
        store: Sealed module records to write.
        output_dir: Destination directory, created if missing.
        extension: Extension of every output file, whatever the input was.
        dry_run: If True, only compute the destination paths.

    Returns:
        The destination paths in store order.

    Raises:
        UnsafeModuleName: If any module name cannot be used as a file name.
        DirectoryCreateFailed: If the output directory cannot be created.
        FileRemoveFailed: If an existing output file cannot be removed.
        FileWriteFailed: If an output file cannot be written.
    """
    output_dir = Path(output_dir)

    # Resolve every destination before touching the disk.
    targets = [
        (output_path_for(name, output_dir, extension), record)
        for name, record in store.entries()
    ]
    if dry_run:
        return [path for path, _ in targets]

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateFailed(output_dir, e) from e

    written: List[Path] = []
    for path, record in targets:
        if path.exists() or path.is_symlink():
            try:
                path.unlink()
            except OSError as e:
                raise FileRemoveFailed(path, e) from e
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(record.body)
        except OSError as e:
            raise FileWriteFailed(path, e) from e
        written.append(path)

    return written
