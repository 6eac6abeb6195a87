"""
Pydantic schemas for configdoc.

This module defines the data models shared by the scanner, the aggregator and
the Markdown formatter.

Architecture:
- SchemaEntry: One matched accessor call site
- KeyMetadata: Cross-cutting facts about a key name (reload mode, fail-fast)
- KeyType: Semantic type derived from an accessor name
- ScanDiagnostic: Non-fatal scanning problem
- FileScanResult: Scanner output for a single source file
- ExtractedSchema: Merged scanner output across all files
- GenerationOutput: Summary of one documentation run
"""

from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


# ============================================================================
# KEY SCHEMAS
# ============================================================================

class ReloadMode(str, Enum):
    """Whether a key can be changed by reloading the configuration."""
    NOT_RELOADABLE = "not_reloadable"
    NEXT_SESSION = "next_session"
    INSTANT = "instant"
    UNSET = "unset"


class SchemaEntry(BaseModel):
    """
    A single configuration read found in the source code.

    Key names are not unique: the same key may be read from several places and
    every read is kept.
    """
    key_name: str = Field(description="Dotted configuration key (e.g. 'net.host_port.min')")
    accessor_name: str = Field(description="Accessor function token (e.g. 'GetUint16')")
    raw_default_args: Optional[str] = Field(
        None,
        description="Arguments captured after the key name (required accessors only)"
    )
    source_file: str = Field(default="", description="Source file the call was found in")
    line_number: int = Field(default=0, description="1-based line number of the call")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "key_name": "bot.virtual_host_name",
                "accessor_name": "GetString",
                "raw_default_args": "1, 15, \"Aura Bot\"",
                "source_file": "src/config_game.cpp",
                "line_number": 31
            }
        }


class KeyMetadata(BaseModel):
    """Facts about a key name gathered from lines other than the read itself."""
    reload_mode: ReloadMode = Field(default=ReloadMode.UNSET, description="Reload semantics")
    fail_on_error: bool = Field(default=False, description="Whether a failed read aborts the operation")

    def merge(self, other: "KeyMetadata") -> None:
        """
        Apply facts from another record on top of this one.

        A set reload mode overwrites, an unset one is ignored. The fail-fast
        flag is only ever raised, never cleared.
        """
        if other.reload_mode != ReloadMode.UNSET:
            self.reload_mode = other.reload_mode
        if other.fail_on_error:
            self.fail_on_error = True


class KeyType(BaseModel):
    """Semantic type of a key as derived from its accessor name."""
    semantic_type: str = Field(description="Lower-cased type name (e.g. 'uint32', 'enum')")
    optional: bool = Field(description="True for GetMaybe* accessors")
    recognized: bool = Field(default=True, description="False when the accessor prefix is unknown")


# ============================================================================
# SCAN RESULT SCHEMAS
# ============================================================================

class ScanDiagnostic(BaseModel):
    """A non-fatal problem found while scanning or classifying."""
    kind: Literal["orphaned_statement", "unrecognized_accessor"] = Field(description="Diagnostic kind")
    message: str = Field(description="Human-readable description")
    source_file: str = Field(default="", description="File the problem was found in")
    line_number: int = Field(default=0, description="Line the problem was found on")
    key_name: Optional[str] = Field(None, description="Key involved, if any")


class FileScanResult(BaseModel):
    """Everything the scanner found in one source file."""
    source_file: str
    entries: List[SchemaEntry] = Field(default_factory=list)
    metadata: Dict[str, KeyMetadata] = Field(default_factory=dict)
    diagnostics: List[ScanDiagnostic] = Field(default_factory=list)
    lines_scanned: int = 0


class ExtractedSchema(BaseModel):
    """
    Schema merged across all scanned files.

    Entries keep file-list order, then line order. Metadata is keyed by key
    name and holds the union of facts observed in every file.
    """
    entries: List[SchemaEntry] = Field(default_factory=list)
    metadata: Dict[str, KeyMetadata] = Field(default_factory=dict)
    diagnostics: List[ScanDiagnostic] = Field(default_factory=list)
    source_files: List[str] = Field(default_factory=list)

    def metadata_for(self, key_name: str) -> KeyMetadata:
        """Return the metadata for a key, or an empty record if none was observed."""
        return self.metadata.get(key_name) or KeyMetadata()


# ============================================================================
# OUTPUT SCHEMAS
# ============================================================================

class GenerationOutput(BaseModel):
    """Summary of a documentation generation run."""
    variant: str = Field(description="Documentation variant name")
    output_path: str = Field(description="Path of the written Markdown document")
    schema_json_path: str = Field(default="", description="Path of the JSON schema dump, if written")
    files_scanned: int = Field(description="Number of source files scanned")
    total_entries: int = Field(description="Accessor calls matched")
    rendered_entries: int = Field(description="Entries written to the document")
    unique_keys: int = Field(description="Distinct key names matched")
    diagnostics: List[ScanDiagnostic] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "variant": "config",
                "output_path": "CONFIG.md",
                "schema_json_path": "",
                "files_scanned": 6,
                "total_entries": 214,
                "rendered_entries": 209,
                "unique_keys": 207,
                "diagnostics": []
            }
        }
