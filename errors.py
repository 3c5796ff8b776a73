"""Error types raised while discovering, scanning, and writing modules."""

from pathlib import Path
from typing import Optional, Sequence


class SplitError(Exception):
    """Base class for every failure that aborts a split run."""


class InvalidExtension(SplitError):
    """Input path has no extension or one that is not recognized."""

    def __init__(self, path: Path, extension: Optional[str], recognized: Sequence[str]):
        self.path = path
        self.extension = extension
        self.recognized = tuple(recognized)
        if extension:
            detail = f"extension '{extension}' must be one of {list(self.recognized)}"
        else:
            detail = f"no file extension, expected one of {list(self.recognized)}"
        super().__init__(f"Input file {path}: {detail}")


class InvalidEncoding(SplitError):
    """Path cannot be represented as valid UTF-8 text."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Input path {path!r} is not valid UTF-8")


class NoInputFound(SplitError):
    """Discovery produced no usable source files."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = reason or "no .sv or .v files were found for splitting"
        super().__init__(f"{path}: {message}")


class UnreadableSource(SplitError):
    """A source file could not be opened or one of its lines could not be read."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read {path}: {reason}")


class DuplicateModule(SplitError):
    """A module name was captured more than once across all inputs."""

    def __init__(self, name: str, source: Optional[Path] = None, line: Optional[int] = None):
        self.name = name
        self.source = source
        self.line = line
        location = ""
        if source is not None:
            location = f" (again at {source}:{line})" if line is not None else f" (again in {source})"
        super().__init__(
            f"module name '{name}' has already been parsed{location}; "
            "duplicate module names cannot be split"
        )


class DirectoryCreateFailed(SplitError):
    """Output directory could not be created."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"Problem creating directory {path}: {reason}")


class FileRemoveFailed(SplitError):
    """An existing output file could not be removed before rewriting it."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not remove file {path}: {reason}")


class FileWriteFailed(SplitError):
    """An output file could not be created or written."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write file {path}: {reason}")


class UnsafeModuleName(SplitError):
    """Module name would not map to a single file inside the output directory."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"module name '{name}' is not usable as a file name")
