"""
Schema aggregation across source files.

Scan results are merged in file-list order. A key's metadata accumulates:
facts from an earlier file stay unless a later file sets the same field.
"""

from typing import Dict, Iterable, List
import logging

from configdoc.schemas import (
    ExtractedSchema,
    FileScanResult,
    KeyMetadata,
    ScanDiagnostic,
    SchemaEntry,
)

logger = logging.getLogger(__name__)


class SchemaAggregator:
    """Collect per-file scan results into a single ExtractedSchema."""

    def __init__(self):
        self.entries: List[SchemaEntry] = []
        self.metadata: Dict[str, KeyMetadata] = {}
        self.diagnostics: List[ScanDiagnostic] = []
        self.source_files: List[str] = []

    def add(self, result: FileScanResult) -> None:
        """
        Merge the result of one file.

        Must be called in the same order the files are listed in.
        """
        self.entries.extend(result.entries)
        self.diagnostics.extend(result.diagnostics)
        self.source_files.append(result.source_file)

        for key_name, file_metadata in result.metadata.items():
            if key_name not in self.metadata:
                self.metadata[key_name] = KeyMetadata()
            self.metadata[key_name].merge(file_metadata)

    def build(self) -> ExtractedSchema:
        """Return the merged schema."""
        logger.info(
            f"Aggregated {len(self.entries)} entries for {len(self.metadata)} keys "
            f"from {len(self.source_files)} files"
        )
        return ExtractedSchema(
            entries=list(self.entries),
            metadata={name: meta.model_copy() for name, meta in self.metadata.items()},
            diagnostics=list(self.diagnostics),
            source_files=list(self.source_files),
        )


def aggregate_schema(results: Iterable[FileScanResult]) -> ExtractedSchema:
    """
    Convenience function to merge scan results in order.

    Example:
        >>> schema = aggregate_schema([scanner.scan_text(text, "src/net.cpp")])
        >>> len(schema.entries)
    """
    aggregator = SchemaAggregator()
    for result in results:
        aggregator.add(result)
    return aggregator.build()
