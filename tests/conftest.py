"""Shared fixtures for configdoc tests."""

from pathlib import Path
from typing import Dict

import pytest


CONFIG_SOURCES = {
    "src/net.cpp": (
        "CNet::CNet(CConfig* CFG)\n"
        "{\n"
        "  m_HostPort = CFG->GetUint16(\"net.host_port.only\", 0);\n"
        "}\n"
    ),
    "src/config_bot.cpp": (
        "  // == SECTION START: Cannot be reloaded ==\n"
        "  m_HomePath = CFG->GetPath(\"bot.home_path\", filesystem::path());\n"
        "  // == SECTION END ==\n"
        "  m_Greeting = CFG->GetString(\"bot.greeting\", \"Welcome!\");\n"
    ),
    "src/config_game.cpp": (
        "  m_VirtualHostName = CFG->GetString(\"bot.name\", 1, 15, \"Aura Bot\");\n"
    ),
    "src/config_irc.cpp": (
        "  optional<string> password = CFG->GetMaybeString(\"irc.password\");\n"
    ),
    "src/config_net.cpp": "",
    "src/config_realm.cpp": (
        "  m_Enabled = CFG->GetBool(\"realm.gameranger.enabled\", false);\n"
        "  m_Legacy = CFG->GetBool(\"realm.legacy--but_its_hardcoded\", true);\n"
        "  m_UserName = CFG->GetString(\"realm.username\", emptyString);\r\n"
        "  CFG->FailIfErrorLast();\r\n"
    ),
}


def write_sources(root: Path, files: Dict[str, str]) -> Path:
    """Write source files relative to root and return root."""
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
    return root


@pytest.fixture
def config_root(tmp_path):
    """Source tree containing every file of the built-in config variant."""
    return write_sources(tmp_path / "aura", CONFIG_SOURCES)


@pytest.fixture
def make_sources(tmp_path):
    """Factory writing an ad-hoc source tree under tmp_path."""
    def _make(files: Dict[str, str], name: str = "sources") -> Path:
        return write_sources(tmp_path / name, files)
    return _make
