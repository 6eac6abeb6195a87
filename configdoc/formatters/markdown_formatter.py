"""
Markdown formatter for extracted configuration schemas.

Structure:
Config
==========
# Supported config keys
## `bot.name`
Type: string
Constraints: Min length: 1. Max length: 15.
Default value: Aura Bot
Error handling: Use default value
Reloadable: Yes, but it doesn't affect currently hosted games.

Entries are sorted by key name. The output depends only on the schema and the
variant, so unchanged input always renders to identical text.
"""

import re
from pathlib import Path
from typing import List
import logging

from configdoc.extractors import classify_accessor, decode_default, extract_constraints
from configdoc.schemas import ExtractedSchema, ReloadMode, ScanDiagnostic, SchemaEntry
from configdoc.utils import write_atomic
from configdoc.variants import DocVariant

logger = logging.getLogger(__name__)

ANGLE_BRACKET_PATTERN = re.compile(r'([<>])')

RELOAD_NOTES = {
    ReloadMode.NEXT_SESSION: "Reloadable: Yes, but it doesn't affect currently hosted games.",
    ReloadMode.INSTANT: "Reloadable: Yes.",
    ReloadMode.NOT_RELOADABLE: "Reloadable: Cannot be reloaded.",
}


class MarkdownFormatter:
    """Render an ExtractedSchema as a Markdown reference document."""

    def __init__(self, variant: DocVariant):
        """
        Initialize the formatter.

        Args:
            variant: Variant controlling title, deny-list and decoding rules
        """
        self.variant = variant
        self.diagnostics: List[ScanDiagnostic] = []
        self.rendered_count = 0

    def format(self, schema: ExtractedSchema) -> str:
        """
        Generate the Markdown document.

        Args:
            schema: Merged schema from the aggregator

        Returns:
            Markdown text
        """
        self.diagnostics = []
        lines = [
            self.variant.title,
            "==========",
            f"# Supported {self.variant.noun} keys",
        ]

        rendered = 0
        for entry in self.sorted_entries(schema):
            lines.extend(self._format_entry(entry, schema))
            lines.append("")
            rendered += 1

        self.rendered_count = rendered
        logger.info(f"Rendered {rendered} of {len(schema.entries)} entries ({self.variant.name})")

        content = "\n".join(lines)
        if self.variant.escape_angle_brackets:
            content = ANGLE_BRACKET_PATTERN.sub(r'\\\1', content)
        return content

    def sorted_entries(self, schema: ExtractedSchema) -> List[SchemaEntry]:
        """Entries that will be rendered, in output order."""
        retained = [e for e in schema.entries if not self.variant.is_excluded(e.key_name)]
        # Stable sort keeps file order for repeated key names
        return sorted(retained, key=lambda e: e.key_name)

    def _format_entry(self, entry: SchemaEntry, schema: ExtractedSchema) -> List[str]:
        key_type = classify_accessor(entry.accessor_name, self.variant.string_index_as_enum)
        if not key_type.recognized:
            self.diagnostics.append(ScanDiagnostic(
                kind="unrecognized_accessor",
                message=f"Unhandled accessor name {entry.accessor_name}",
                source_file=entry.source_file,
                line_number=entry.line_number,
                key_name=entry.key_name,
            ))
        metadata = schema.metadata_for(entry.key_name)

        attributes = [f"Type: {key_type.semantic_type or 'unknown'}"]

        if entry.raw_default_args:
            constraints = extract_constraints(entry.accessor_name, entry.key_name, entry.raw_default_args)
            if constraints:
                attributes.append(f"Constraints: {'. '.join(constraints)}.")

        if key_type.optional:
            attributes.append("Optional key: Yes")
            if metadata.fail_on_error:
                attributes.append("Error handling: Abort operation")
        else:
            if entry.raw_default_args:
                default = decode_default(
                    entry.raw_default_args,
                    entry.key_name,
                    overrides=self.variant.default_overrides,
                    named_constants=self.variant.named_constants,
                    list_defaults=self.variant.list_defaults,
                )
                attributes.append(f"Default value: {default}")
            handling = "Abort operation" if metadata.fail_on_error else "Use default value"
            attributes.append(f"Error handling: {handling}")

        reload_note = RELOAD_NOTES.get(metadata.reload_mode)
        if reload_note:
            attributes.append(reload_note)

        prefix = "- " if self.variant.bullet_attributes else ""
        return [f"## `{entry.key_name}`"] + [f"{prefix}{attr}" for attr in attributes]

    def save(self, output_path: Path, content: str):
        """
        Write the document atomically.

        The content goes to a temporary file in the target directory which then
        replaces the output, so a failed write never leaves a partial document.

        Raises:
            OutputWriteError: If the document cannot be written
        """
        output_path = write_atomic(output_path, content)
        logger.info(f"Saved {output_path} ({len(content)} chars)")


def generate_markdown(
    schema: ExtractedSchema,
    variant: DocVariant,
    output_path: Path
) -> str:
    """
    Convenience function to render and save a schema.

    Args:
        schema: Merged schema
        variant: Documentation variant
        output_path: Where to save the document

    Returns:
        Generated Markdown content
    """
    formatter = MarkdownFormatter(variant)
    content = formatter.format(schema)
    formatter.save(output_path, content)
    return content
