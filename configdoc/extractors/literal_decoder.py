"""
Literal decoding for captured accessor arguments.

The scanner captures the raw argument text that follows the key name, e.g.
`1, 15, "Aura Bot"` or `0x1F4`. These helpers turn that text into the value
shown in the documentation and into a list of validation constraints.

Decoding is best-effort: anything that is not recognised is shown as written,
minus surrounding quotes. None of these functions raise.
"""

from typing import Dict, List, Optional

EMPTY = "Empty"

EMPTY_MARKERS = {
    "emptyString",
    "string(",
    "string()",
    "filesystem::path(",
    "filesystem::path()",
}

FIELD_PREFIX = "m_"
HEX_PREFIX = "0x"


def _split_args(raw_args: str) -> List[str]:
    return [part.strip() for part in raw_args.split(",")]


def _decode_brace_list(raw_args: str) -> Optional[str]:
    """Decode `{a, b, c}` into `a b c`; None if the fragment is not a brace list."""
    if not (raw_args.endswith("}") and "{" in raw_args):
        return None

    interior = raw_args[raw_args.index("{") + 1:-1]
    values = [value for value in _split_args(interior) if value]
    return " ".join(values) if values else EMPTY


def _decode_literal(literal: str, named_constants: Dict[str, str]) -> str:
    if literal in EMPTY_MARKERS:
        return EMPTY
    if literal.startswith(FIELD_PREFIX):
        # Member fields cannot be resolved statically
        return EMPTY
    if literal.lower().startswith(HEX_PREFIX):
        try:
            return str(int(literal, 16))
        except ValueError:
            pass
    if literal in named_constants:
        return named_constants[literal]

    if literal.startswith('"'):
        literal = literal[1:]
    if literal.endswith('"'):
        literal = literal[:-1]
    return literal


def decode_default(
    raw_args: str,
    key_name: str,
    *,
    overrides: Optional[Dict[str, str]] = None,
    named_constants: Optional[Dict[str, str]] = None,
    list_defaults: bool = False
) -> str:
    """
    Decode the default value of a required key.

    Only the last argument is the default; earlier ones are bounds or
    separators. Brace lists are kept whole when `list_defaults` is set.

    Args:
        raw_args: Argument text captured after the key name
        key_name: Key being documented (for hand-written overrides)
        overrides: Default descriptions by key name, checked first
        named_constants: Known constant names and their documented meaning
        list_defaults: Decode `{a, b}` as the multi-value default `a b`

    Returns:
        Display text for the default value

    Example:
        >>> decode_default("0x1F4", "net.port")
        '500'
        >>> decode_default('1, 15, "Aura Bot"', "bot.name")
        'Aura Bot'
    """
    if overrides and key_name in overrides:
        return overrides[key_name]

    raw_args = raw_args.strip()

    if list_defaults:
        decoded = _decode_brace_list(raw_args)
        if decoded is not None:
            return decoded

    last_arg = _split_args(raw_args)[-1]
    return _decode_literal(last_arg, named_constants or {})


def extract_constraints(accessor_name: str, key_name: str, raw_args: Optional[str]) -> List[str]:
    """
    Extract documented validation constraints from accessor arguments.

    Only `GetString(key, min, max, default)` carries constraints: the first
    two arguments are the length bounds.

    Returns:
        List of constraint descriptions (empty for every other accessor)
    """
    if not raw_args or accessor_name != "GetString":
        return []

    parts = _split_args(raw_args)
    if len(parts) < 3:
        return []

    return [f"Min length: {parts[0]}", f"Max length: {parts[1]}"]
