"""Tests for configuration loading and the default emoji table."""

import json
import logging

from plebtext.config import DEFAULT_CONFIG, get_config_path, load_config, load_emoji_table, save_config
from plebtext.models import PlebtextConfig


def test_load_config_defaults_when_file_missing():
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert PlebtextConfig.model_validate(config).web.port == 5174


def test_config_path_env_override(monkeypatch, tmp_path):
    path = tmp_path / "custom.json"
    monkeypatch.setenv("PLEBTEXT_CONFIG", str(path))
    assert get_config_path() == path


def test_save_and_load_merges_with_defaults():
    save_config({"web": {"port": 9000}})
    config = load_config()
    assert config["web"] == {"host": "127.0.0.1", "port": 9000}
    assert config["display"]["plain_text_markdown_links"] is False


def test_load_config_does_not_leak_mutations_into_defaults():
    config = load_config()
    config["emoji"]["names"]["zap"] = "https://example.com/zap.gif"
    assert DEFAULT_CONFIG["emoji"]["names"] == {}


def test_load_emoji_table_merges_file_and_inline_names(tmp_path):
    table_path = tmp_path / "emoji.json"
    table_path.write_text(json.dumps({"zap": "https://example.com/file-zap.gif", "wave": "https://example.com/wave.gif"}))
    config = {"emoji": {"table_path": str(table_path), "names": {"zap": "https://example.com/zap.gif"}}}

    assert load_emoji_table(config) == {
        "zap": "https://example.com/zap.gif",
        "wave": "https://example.com/wave.gif",
    }


def test_load_emoji_table_skips_unreadable_file(tmp_path, caplog):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    config = {"emoji": {"table_path": str(broken), "names": {"ok": "https://example.com/ok.gif"}}}

    with caplog.at_level(logging.WARNING, logger="plebtext.config"):
        table = load_emoji_table(config)

    assert table == {"ok": "https://example.com/ok.gif"}
    assert "Could not read emoji table" in caplog.text


def test_load_emoji_table_reads_saved_config():
    save_config({"emoji": {"names": {"pepe": "https://example.com/pepe.png"}}})
    assert load_emoji_table() == {"pepe": "https://example.com/pepe.png"}
