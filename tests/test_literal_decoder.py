"""Unit tests for default value decoding and constraint extraction."""

from configdoc.extractors import decode_default, extract_constraints
from configdoc.variants import DEFAULT_NAMED_CONSTANTS


class TestDecodeDefault:
    """Default values are decoded from the last argument."""

    def test_hex_literal_becomes_decimal(self):
        assert decode_default("0x1F4", "net.port") == "500"

    def test_invalid_hex_falls_through(self):
        assert decode_default("0xZZ", "net.port") == "0xZZ"

    def test_last_argument_is_the_default(self):
        assert decode_default('4, 64, "abc"', "bot.name") == "abc"

    def test_quotes_are_stripped(self):
        assert decode_default('"Aura Bot"', "bot.name") == "Aura Bot"

    def test_plain_literal_kept(self):
        assert decode_default("false", "bot.enabled") == "false"

    def test_empty_string_marker(self):
        assert decode_default("emptyString", "realm.username") == "Empty"

    def test_string_constructor_is_empty(self):
        assert decode_default("string(", "map.title") == "Empty"

    def test_member_field_is_empty(self):
        assert decode_default("m_MapIsMelee", "map.melee") == "Empty"

    def test_empty_path_is_empty(self):
        assert decode_default("filesystem::path(", "bot.home_path") == "Empty"
        assert decode_default("filesystem::path()", "bot.home_path") == "Empty"

    def test_named_constants(self):
        assert decode_default("MAP_TRANSFERS_AUTOMATIC", "k", named_constants=DEFAULT_NAMED_CONSTANTS) == "auto"
        assert decode_default("REALM_AUTH_PVPGN", "k", named_constants=DEFAULT_NAMED_CONSTANTS) == "pvpgn"
        assert decode_default("CFG.GetHomeDir(", "k", named_constants=DEFAULT_NAMED_CONSTANTS) == "Aura home directory"

    def test_named_constants_need_a_table(self):
        assert decode_default("MAP_TRANSFERS_AUTOMATIC", "k") == "MAP_TRANSFERS_AUTOMATIC"

    def test_override_takes_precedence(self):
        overrides = {"net.host_port.max": "<net.host_port.min>"}
        assert decode_default("0x10", "net.host_port.max", overrides=overrides) == "<net.host_port.min>"
        assert decode_default("0x10", "net.host_port.other", overrides=overrides) == "16"

    def test_brace_list_default(self):
        assert decode_default("{1, 2, 3}", "map.ids", list_defaults=True) == "1 2 3"

    def test_brace_list_after_separator(self):
        assert decode_default("',', {1, 2, 3}", "map.ids", list_defaults=True) == "1 2 3"

    def test_empty_brace_list(self):
        assert decode_default("',', {}", "udp.blocklist", list_defaults=True) == "Empty"

    def test_brace_list_not_at_end_uses_last_argument(self):
        raw = '{"none", "mpq", "fs"}, MAP_FILE_SOURCE_CATEGORY_NONE'
        assert decode_default(raw, "map.source", list_defaults=True) == "MAP_FILE_SOURCE_CATEGORY_NONE"


class TestExtractConstraints:
    """Only GetString with bounds yields constraints."""

    def test_string_with_bounds(self):
        constraints = extract_constraints("GetString", "bot.name", '4, 64, "abc"')
        assert constraints == ["Min length: 4", "Max length: 64"]

    def test_string_without_bounds(self):
        assert extract_constraints("GetString", "bot.trigger", '"!"') == []

    def test_other_accessors(self):
        assert extract_constraints("GetUint8", "map.num", "1, 2, 3") == []

    def test_missing_args(self):
        assert extract_constraints("GetString", "bot.name", None) == []
