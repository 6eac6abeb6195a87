"""Utility functions for configdoc."""

from .atomic_write import write_atomic
from .source_reader import SourceReader

__all__ = ["SourceReader", "write_atomic"]
