"""Unit tests for Markdown rendering."""

import pytest

from configdoc.exceptions import OutputWriteError
from configdoc.extractors import LineScanner, aggregate_schema
from configdoc.formatters import MarkdownFormatter, generate_markdown
from configdoc.schemas import ExtractedSchema, KeyMetadata, ReloadMode, SchemaEntry
from configdoc.variants import CONFIG_VARIANT, MAP_VARIANT


def _schema(variant, text, source_file):
    return aggregate_schema([LineScanner(variant).scan_text(text, source_file)])


class TestConfigVariant:
    """Plain attribute lines, deny-list and reload notes."""

    TEXT = (
        '  CFG->GetString("bot.name", 1, 15, "Aura Bot");\n'
        '  CFG->GetUint16("a.port", 0x1F4);\n'
        '  CFG->GetMaybeBool("b.opt");\n'
        '  CFG->GetBool("c.hidden--but_its_hardcoded", true);\n'
        '  CFG->GetBool("realm.gameranger.enabled", true);\n'
    )

    def test_full_document(self):
        schema = _schema(CONFIG_VARIANT, self.TEXT, "src/config_game.cpp")
        content = MarkdownFormatter(CONFIG_VARIANT).format(schema)

        expected = "\n".join([
            "Config",
            "==========",
            "# Supported config keys",
            "## `a.port`",
            "Type: uint16",
            "Default value: 500",
            "Error handling: Use default value",
            "Reloadable: Yes, but it doesn't affect currently hosted games.",
            "",
            "## `b.opt`",
            "Type: bool",
            "Optional key: Yes",
            "",
            "## `bot.name`",
            "Type: string",
            "Constraints: Min length: 1. Max length: 15.",
            "Default value: Aura Bot",
            "Error handling: Use default value",
            "Reloadable: Yes, but it doesn't affect currently hosted games.",
            "",
        ])
        assert content == expected

    def test_deny_listed_keys_never_rendered(self):
        schema = _schema(CONFIG_VARIANT, self.TEXT, "src/config_game.cpp")
        content = MarkdownFormatter(CONFIG_VARIANT).format(schema)

        assert "but_its_hardcoded" not in content
        assert "gameranger" not in content

    def test_rendered_count_excludes_deny_listed_keys(self):
        schema = _schema(CONFIG_VARIANT, self.TEXT, "src/config_game.cpp")
        formatter = MarkdownFormatter(CONFIG_VARIANT)
        formatter.format(schema)

        assert len(schema.entries) == 5
        assert formatter.rendered_count == 3

    def test_rendering_is_deterministic(self):
        schema = _schema(CONFIG_VARIANT, self.TEXT, "src/config_game.cpp")
        formatter = MarkdownFormatter(CONFIG_VARIANT)
        assert formatter.format(schema) == formatter.format(schema)

    def test_sorted_regardless_of_input_order(self):
        text = 'CFG->GetBool("zeta", true);\nCFG->GetBool("Alpha", true);\nCFG->GetBool("alpha", true);'
        schema = _schema(CONFIG_VARIANT, text, "src/config_bot.cpp")
        entries = MarkdownFormatter(CONFIG_VARIANT).sorted_entries(schema)
        assert [e.key_name for e in entries] == ["Alpha", "alpha", "zeta"]

    def test_fail_fast_and_not_reloadable(self):
        text = (
            "// == SECTION START: Cannot be reloaded ==\n"
            'CFG->GetString("realm.username", emptyString);\n'
            "CFG->FailIfErrorLast();\n"
        )
        content = MarkdownFormatter(CONFIG_VARIANT).format(_schema(CONFIG_VARIANT, text, "src/config_realm.cpp"))

        assert "Default value: Empty\n" in content
        assert "Error handling: Abort operation\n" in content
        assert "Reloadable: Cannot be reloaded.\n" in content

    def test_instant_reload_note(self):
        schema = ExtractedSchema(
            entries=[SchemaEntry(key_name="k", accessor_name="GetBool", raw_default_args="true")],
            metadata={"k": KeyMetadata(reload_mode=ReloadMode.INSTANT)},
        )
        content = MarkdownFormatter(CONFIG_VARIANT).format(schema)
        assert "Reloadable: Yes.\n" in content

    def test_optional_key_never_shows_default(self):
        text = 'CFG->GetMaybeUint16("net.port.opt");'
        content = MarkdownFormatter(CONFIG_VARIANT).format(_schema(CONFIG_VARIANT, text, "src/net.cpp"))

        assert "Optional key: Yes" in content
        assert "Default value" not in content
        assert "Error handling" not in content


class TestMapVariant:
    """Bulleted attributes, enums, list defaults and escaping."""

    TEXT = (
        '  m_Mode = CFG.GetStringIndex("map.mode", {"fast", "race"}, READY_MODE_EXPECT_RACE);\n'
        "  CFG.SetStrictMode(true);\n"
        '  m_Ids = CFG.GetSet("map.ids", \',\', {1, 2, 3});\n'
        '  optional<Version> v = CFG->GetMaybeVersion("map.version");\n'
        "  CFG.SetStrictMode(wasStrict);\n"
        '  m_Port = CFG->GetUint16("net.host_port.max", 0);\n'
    )

    def _content(self):
        return MarkdownFormatter(MAP_VARIANT).format(_schema(MAP_VARIANT, self.TEXT, "src/map.cpp"))

    def test_header(self):
        assert self._content().startswith("Map\n==========\n# Supported map keys\n")

    def test_enum_type_and_constant_default(self):
        content = self._content()
        assert "## `map.mode`\n- Type: enum\n- Default value: READY_MODE_EXPECT_RACE\n" in content

    def test_list_default(self):
        content = self._content()
        assert "## `map.ids`\n- Type: set\n- Default value: 1 2 3\n- Error handling: Abort operation\n" in content

    def test_optional_key_under_strict_mode(self):
        content = self._content()
        assert "## `map.version`\n- Type: version\n- Optional key: Yes\n- Error handling: Abort operation\n" in content

    def test_angle_brackets_escaped(self):
        assert "- Default value: \\<net.host_port.min\\>" in self._content()


class TestUnrecognizedAccessor:
    """Entries with unknown accessors are still documented."""

    def test_placeholder_type_and_diagnostic(self):
        schema = ExtractedSchema(entries=[
            SchemaEntry(key_name="x", accessor_name="ReadInt", raw_default_args="5",
                        source_file="src/net.cpp", line_number=7),
        ])
        formatter = MarkdownFormatter(CONFIG_VARIANT)
        content = formatter.format(schema)

        assert "## `x`\nType: unknown\nDefault value: 5\nError handling: Use default value\n" in content
        assert len(formatter.diagnostics) == 1
        assert formatter.diagnostics[0].kind == "unrecognized_accessor"
        assert formatter.diagnostics[0].line_number == 7


class TestSave:
    """Documents are written atomically."""

    def test_generate_markdown_writes_file(self, tmp_path):
        schema = _schema(CONFIG_VARIANT, 'CFG->GetBool("a", true);', "src/net.cpp")
        output_path = tmp_path / "docs" / "CONFIG.md"

        content = generate_markdown(schema, CONFIG_VARIANT, output_path)

        assert output_path.read_text(encoding="utf-8") == content

    def test_failed_write_leaves_no_partial_file(self, tmp_path):
        target = tmp_path / "CONFIG.md"
        target.mkdir()

        with pytest.raises(OutputWriteError):
            MarkdownFormatter(CONFIG_VARIANT).save(target, "content")

        assert [p.name for p in tmp_path.iterdir()] == ["CONFIG.md"]
