"""Module store holding the sealed module records of a split run."""

from .model import ModuleRecord, ModuleStore

__all__ = ["ModuleRecord", "ModuleStore"]
