"""
Documentation variants.

A variant describes one generated document: which source files are scanned,
how accessor calls are spelled in them, and how the result is rendered. Two
variants are built in (`config` for the bot configuration and `map` for map
configuration files); additional ones can be loaded from JSON.
"""

from pathlib import Path
from typing import Dict, List
import logging

from pydantic import BaseModel, Field, ValidationError

from configdoc.exceptions import VariantError

logger = logging.getLogger(__name__)


DEFAULT_NAMED_CONSTANTS: Dict[str, str] = {
    "MAP_TRANSFERS_AUTOMATIC": "auto",
    "COMMAND_PERMISSIONS_AUTO": "auto",
    "REALM_AUTH_PVPGN": "pvpgn",
    "CFG.GetHomeDir(": "Aura home directory",
    "CFG->GetHomeDir(": "Aura home directory",
}


class DocVariant(BaseModel):
    """Everything that differs between two generated documents."""
    name: str = Field(description="Variant identifier used on the command line")
    title: str = Field(description="Document title")
    noun: str = Field(description="Word used in the section header ('config', 'map')")
    output_path: str = Field(description="Output path, relative to the source root")
    source_files: List[str] = Field(description="Source files to scan, in order")

    # Accessor call spelling
    receiver: str = Field(default="CFG", description="Object the accessors are called on")
    separators: List[str] = Field(default_factory=lambda: ["->"], description="Member access tokens")

    # Reload attribution
    session_scoped_files: List[str] = Field(
        default_factory=list,
        description="Files whose keys only take effect for the next session"
    )
    instant_reload_files: List[str] = Field(
        default_factory=list,
        description="Files whose keys take effect immediately on reload"
    )

    # Behaviour switches
    strict_applies_to_optional: bool = Field(
        default=False,
        description="Whether strict mode marks optional keys as fail-fast"
    )
    string_index_as_enum: bool = Field(default=False, description="Render StringIndex keys as 'enum'")
    list_defaults: bool = Field(default=False, description="Decode brace lists as multi-value defaults")
    escape_angle_brackets: bool = Field(default=False, description="Escape < and > in the output")
    bullet_attributes: bool = Field(default=False, description="Prefix attribute lines with '- '")

    # Literal decoding
    default_overrides: Dict[str, str] = Field(
        default_factory=dict,
        description="Hand-written default descriptions by key name"
    )
    named_constants: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_NAMED_CONSTANTS),
        description="Known constants and their documented meaning"
    )

    # Keys never documented
    excluded_key_suffixes: List[str] = Field(default_factory=list)
    excluded_key_substrings: List[str] = Field(default_factory=list)

    def is_excluded(self, key_name: str) -> bool:
        """True if the key is on the deny-list and must not be rendered."""
        if any(key_name.endswith(suffix) for suffix in self.excluded_key_suffixes):
            return True
        return any(part in key_name for part in self.excluded_key_substrings)

    def receiver_spellings(self) -> List[str]:
        """All ways the receiver can prefix a call (e.g. 'CFG.', 'CFG->')."""
        return [f"{self.receiver}{sep}" for sep in self.separators]


CONFIG_VARIANT = DocVariant(
    name="config",
    title="Config",
    noun="config",
    output_path="CONFIG.md",
    source_files=[
        "src/net.cpp",
        "src/config_bot.cpp",
        "src/config_game.cpp",
        "src/config_irc.cpp",
        "src/config_net.cpp",
        "src/config_realm.cpp",
    ],
    separators=["->"],
    session_scoped_files=["src/config_game.cpp"],
    excluded_key_suffixes=["--but_its_hardcoded"],
    excluded_key_substrings=[".gameranger."],
)

MAP_VARIANT = DocVariant(
    name="map",
    title="Map",
    noun="map",
    output_path="CONFIG_MAPS.md",
    source_files=[
        "src/map.cpp",
        "src/game_result.cpp",
    ],
    separators=[".", "->"],
    strict_applies_to_optional=True,
    string_index_as_enum=True,
    list_defaults=True,
    escape_angle_brackets=True,
    bullet_attributes=True,
    default_overrides={
        "net.host_port.min": "<net.host_port.only>",
        "net.host_port.max": "<net.host_port.min>",
    },
)

BUILTIN_VARIANTS: Dict[str, DocVariant] = {
    CONFIG_VARIANT.name: CONFIG_VARIANT,
    MAP_VARIANT.name: MAP_VARIANT,
}


def get_variant(name: str) -> DocVariant:
    """
    Look up a built-in variant by name.

    Raises:
        VariantError: If no built-in variant has that name
    """
    try:
        return BUILTIN_VARIANTS[name]
    except KeyError:
        valid = ", ".join(sorted(BUILTIN_VARIANTS))
        raise VariantError(f"Unknown variant '{name}' (valid: {valid})") from None


def load_variant_file(path: Path) -> DocVariant:
    """
    Load a variant definition from a JSON file.

    Args:
        path: Path to a JSON document matching the DocVariant model

    Returns:
        Parsed DocVariant

    Raises:
        VariantError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise VariantError(f"Cannot read variant file {path}: {e}") from e

    try:
        variant = DocVariant.model_validate_json(raw)
    except ValidationError as e:
        raise VariantError(f"Invalid variant file {path}: {e}") from e

    logger.debug(f"Loaded variant '{variant.name}' from {path}")
    return variant
