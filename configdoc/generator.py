"""
Configuration documentation generator - main orchestration logic.

Ties together reading, scanning, aggregation and formatting for one
documentation variant:
1. Read the variant's source files in order
2. Scan each file for accessor calls
3. Merge the per-file results
4. Render and atomically write the Markdown document
"""

from pathlib import Path
from typing import Optional
import logging

from configdoc.extractors import LineScanner, SchemaAggregator
from configdoc.formatters import MarkdownFormatter
from configdoc.schemas import ExtractedSchema, GenerationOutput
from configdoc.utils import SourceReader, write_atomic
from configdoc.variants import DocVariant

logger = logging.getLogger(__name__)


class ConfigDocGenerator:
    """
    Main generator for configuration reference documents.

    Any file-level error (unreadable source, failed write) propagates and
    nothing is written; scanning problems are reported as diagnostics.
    """

    def __init__(
        self,
        source_root: Path,
        variant: DocVariant,
        output_path: Optional[Path] = None
    ):
        """
        Initialize the generator.

        Args:
            source_root: Directory the variant's source files are relative to
            variant: Documentation variant to generate
            output_path: Output file (default: variant.output_path under source_root)
        """
        self.source_root = Path(source_root)
        self.variant = variant
        self.output_path = Path(output_path) if output_path else self.source_root / variant.output_path

        logger.info(f"Initialized generator for variant '{variant.name}'")
        logger.info(f"  Sources: {self.source_root}")
        logger.info(f"  Output: {self.output_path}")

    def extract(self) -> ExtractedSchema:
        """Read and scan every source file, returning the merged schema."""
        reader = SourceReader(self.source_root)
        scanner = LineScanner(self.variant)
        aggregator = SchemaAggregator()

        for relative_path, content in reader.read_all(self.variant.source_files):
            aggregator.add(scanner.scan_text(content, relative_path))

        return aggregator.build()

    def generate(self, schema_json_path: Optional[Path] = None) -> GenerationOutput:
        """
        Run the complete generation pipeline.

        Args:
            schema_json_path: Also dump the extracted schema as JSON here

        Returns:
            GenerationOutput summary
        """
        logger.info(f"[1/2] Extracting schema from {len(self.variant.source_files)} files...")
        schema = self.extract()

        logger.info(f"[2/2] Rendering {self.output_path.name}...")
        formatter = MarkdownFormatter(self.variant)
        content = formatter.format(schema)

        # Schema JSON first so a failed dump leaves the document untouched
        if schema_json_path:
            schema_json_path = write_atomic(schema_json_path, schema.model_dump_json(indent=2))
            logger.info(f"Saved schema JSON to {schema_json_path}")

        formatter.save(self.output_path, content)

        diagnostics = schema.diagnostics + formatter.diagnostics
        output = GenerationOutput(
            variant=self.variant.name,
            output_path=str(self.output_path),
            schema_json_path=str(schema_json_path) if schema_json_path else "",
            files_scanned=len(schema.source_files),
            total_entries=len(schema.entries),
            rendered_entries=formatter.rendered_count,
            unique_keys=len({entry.key_name for entry in schema.entries}),
            diagnostics=diagnostics,
        )

        if diagnostics:
            logger.warning(f"{len(diagnostics)} diagnostics reported for '{self.variant.name}'")

        return output
