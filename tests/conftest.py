"""Shared pytest fixtures for plebtext tests."""

import sys
from pathlib import Path

import pytest

# Add the package to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

BECH32_BODY = ("qpzry9x8gf2tvdw0s3jn54khce6mua7l" * 2)[:58]
NPUB = "npub1" + BECH32_BODY
NOTE = "note1" + BECH32_BODY


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep tests away from the user's real config file."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.delenv("PLEBTEXT_CONFIG", raising=False)


@pytest.fixture
def npub() -> str:
    return NPUB


@pytest.fixture
def note_id() -> str:
    return NOTE
