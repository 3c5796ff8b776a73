"""Exporters for writing split modules and summarizing them."""

from .writer import write_modules, OUTPUT_EXTENSION
from .ascii_exporter import to_ascii
from .json_exporter import to_json

__all__ = ["write_modules", "OUTPUT_EXTENSION", "to_ascii", "to_json"]
