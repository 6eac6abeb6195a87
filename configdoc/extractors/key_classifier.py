"""
Key type classification.

Maps an accessor function name to the semantic type of the key it reads:
`GetUint32` reads a required `uint32`, `GetMaybeBool` an optional `bool`.
"""

import logging

from configdoc.schemas import KeyType

logger = logging.getLogger(__name__)

OPTIONAL_PREFIX = "GetMaybe"
REQUIRED_PREFIX = "Get"
ENUM_TYPE_NAME = "stringindex"


def classify_accessor(accessor_name: str, string_index_as_enum: bool = False) -> KeyType:
    """
    Classify an accessor function name.

    Args:
        accessor_name: Accessor token, e.g. "GetMaybeUint16"
        string_index_as_enum: Render StringIndex accessors as "enum"

    Returns:
        KeyType; `recognized` is False when the name has no known prefix
    """
    if accessor_name.startswith(OPTIONAL_PREFIX):
        sub_name = accessor_name[len(OPTIONAL_PREFIX):]
        optional = True
    elif accessor_name.startswith(REQUIRED_PREFIX):
        sub_name = accessor_name[len(REQUIRED_PREFIX):]
        optional = False
    else:
        logger.error(f"Unhandled accessor name {accessor_name}")
        return KeyType(semantic_type="", optional=False, recognized=False)

    semantic_type = sub_name.lower()
    if string_index_as_enum and semantic_type == ENUM_TYPE_NAME:
        semantic_type = "enum"

    return KeyType(semantic_type=semantic_type, optional=optional)
