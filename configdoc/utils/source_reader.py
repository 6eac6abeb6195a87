"""
Source file reader.

Reads the files listed by a documentation variant, relative to a source root,
strictly in the listed order. Scanner state and metadata merging depend on
that order, so files are never reordered or skipped: any unreadable file
aborts the whole run.
"""

from pathlib import Path
from typing import Iterator, List, Tuple
import logging

from configdoc.exceptions import SourceReadError

logger = logging.getLogger(__name__)


class SourceReader:
    """Read source files relative to a base directory."""

    def __init__(self, base_path: Path):
        """
        Initialize the reader.

        Args:
            base_path: Source root the variant's file list is relative to

        Raises:
            SourceReadError: If the base path is missing or not a directory
        """
        self.base_path = Path(base_path).resolve()

        if not self.base_path.exists():
            raise SourceReadError(f"Source root does not exist: {self.base_path}")

        if not self.base_path.is_dir():
            raise SourceReadError(f"Source root is not a directory: {self.base_path}")

    def read(self, relative_path: str) -> str:
        """
        Read one file as UTF-8.

        Raises:
            SourceReadError: If the file is missing, unreadable or not UTF-8
        """
        file_path = self.base_path / relative_path
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Cannot read source file {file_path}: {e}") from e

        logger.debug(f"Read {relative_path} ({len(content)} chars)")
        return content

    def read_all(self, relative_paths: List[str]) -> Iterator[Tuple[str, str]]:
        """
        Yield (relative_path, content) pairs in the given order.

        Example:
            >>> reader = SourceReader(Path("aura"))
            >>> for name, text in reader.read_all(["src/net.cpp"]):
            ...     print(name, len(text))
        """
        logger.info(f"Reading {len(relative_paths)} source files from {self.base_path}")
        for relative_path in relative_paths:
            yield relative_path, self.read(relative_path)
