"""
configdoc - Configuration reference generator.

Scans source code for configuration accessor calls such as
`CFG->GetString("bot.name", 1, 15, "Aura Bot")` and renders the keys they read
(type, default, constraints, reload and error-handling behaviour) as a
Markdown reference document. The source code stays the single source of truth.

Main Components:
- Extractors: Accessor classification, literal decoding, line scanning, aggregation
- Formatters: Markdown rendering
- Variants: Which files are scanned and how each document is rendered
- Generator: Orchestrates the whole run

Usage:
    from pathlib import Path
    from configdoc import ConfigDocGenerator, get_variant

    generator = ConfigDocGenerator(Path("aura"), get_variant("config"))
    result = generator.generate()
"""

from .schemas import (
    ReloadMode,
    SchemaEntry,
    KeyMetadata,
    KeyType,
    ScanDiagnostic,
    FileScanResult,
    ExtractedSchema,
    GenerationOutput,
)
from .variants import DocVariant, BUILTIN_VARIANTS, get_variant, load_variant_file
from .generator import ConfigDocGenerator

__all__ = [
    # Main generator
    "ConfigDocGenerator",

    # Variants
    "DocVariant",
    "BUILTIN_VARIANTS",
    "get_variant",
    "load_variant_file",

    # Schemas
    "ReloadMode",
    "SchemaEntry",
    "KeyMetadata",
    "KeyType",
    "ScanDiagnostic",
    "FileScanResult",
    "ExtractedSchema",
    "GenerationOutput",
]

__version__ = "0.1.0"
