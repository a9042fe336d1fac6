"""CLI tests for parse, plain, extract and config commands."""

import json

from click.testing import CliRunner

from plebtext.cli import cli
from plebtext.config import load_config, read_user_config


def test_parse_json_output():
    result = CliRunner().invoke(cli, ["parse", "--format", "json", "$BTC #btc"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {"type": "cashtag", "symbol": "BTC"},
        {"type": "text", "text": " "},
        {"type": "hashtag", "tag": "btc"},
    ]


def test_parse_reads_stdin_and_resolves_emoji_options():
    result = CliRunner().invoke(
        cli,
        ["parse", "-f", "json", "-e", ":zap:=https://example.com/zap.gif"],
        input=":zap: :nope:",
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {"type": "custom_emoji", "name": "zap", "image_url": "https://example.com/zap.gif"},
        {"type": "text", "text": " "},
        {"type": "custom_emoji", "name": "nope", "image_url": None},
    ]


def test_parse_emoji_from_tags_file(tmp_path):
    tags_path = tmp_path / "tags.json"
    tags_path.write_text(json.dumps([["emoji", "wave", "https://example.com/wave.gif"]]))

    result = CliRunner().invoke(cli, ["parse", "-f", "json", "--tags", str(tags_path), ":wave:"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)[0]["image_url"] == "https://example.com/wave.gif"


def test_parse_rejects_malformed_emoji_option():
    result = CliRunner().invoke(cli, ["parse", "-e", "nourl", "hi"])

    assert result.exit_code == 2


def test_parse_rejects_invalid_tags_file(tmp_path):
    tags_path = tmp_path / "tags.json"
    tags_path.write_text("{oops")

    result = CliRunner().invoke(cli, ["parse", "--tags", str(tags_path), "hi"])

    assert result.exit_code == 2


def test_parse_table_output():
    result = CliRunner().invoke(cli, ["parse", "gm #nostr"])

    assert result.exit_code == 0, result.output
    assert "hashtag" in result.output
    assert "nostr" in result.output


def test_plain_command(npub):
    result = CliRunner().invoke(cli, ["plain", f"Hello nostr:{npub} #nostr https://example.com"])

    assert result.exit_code == 0, result.output
    assert result.output == "Hello @npub1qpz...khce #nostr\n"


def test_plain_command_drops_markdown_links_by_default():
    result = CliRunner().invoke(cli, ["plain", "see [docs](https://example.com)"])

    assert result.exit_code == 0, result.output
    assert result.output == "see\n"


def test_plain_command_respects_config_default():
    CliRunner().invoke(cli, ["config", "set", "display.plain_text_markdown_links", "true"])

    result = CliRunner().invoke(cli, ["plain", "see [docs](https://example.com)"])

    assert result.exit_code == 0, result.output
    assert result.output == "see docs\n"

    result = CliRunner().invoke(cli, ["plain", "--no-link-text", "see [docs](https://example.com)"])
    assert result.output == "see\n"


def test_extract_hashtags_from_stdin():
    result = CliRunner().invoke(cli, ["extract", "hashtags"], input="#a #b\n$CC")

    assert result.exit_code == 0, result.output
    assert result.output == "a\nb\n"


def test_extract_legacy_mentions_with_tags(tmp_path):
    tags_path = tmp_path / "tags.json"
    tags_path.write_text(json.dumps([["p", "abc"], ["e", "def", "wss://relay.example.com"]]))

    result = CliRunner().invoke(cli, ["extract", "legacy", "--tags", str(tags_path), "hi #[0] #[1] #[5]"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["0\tnpub\tabc", "1\tnote\tdef", "5\t-"]


def test_config_set_validates_values():
    ok = CliRunner().invoke(cli, ["config", "set", "web.port", "8000"])
    assert ok.exit_code == 0, ok.output
    assert load_config()["web"]["port"] == 8000

    bad = CliRunner().invoke(cli, ["config", "set", "web.port", "not-a-port"])
    assert bad.exit_code == 2
    assert load_config()["web"]["port"] == 8000


def test_config_path_command(tmp_path, monkeypatch):
    path = tmp_path / "plebtext.json"
    monkeypatch.setenv("PLEBTEXT_CONFIG", str(path))

    result = CliRunner().invoke(cli, ["config", "path"])

    assert result.exit_code == 0
    assert result.output.strip() == str(path)


def test_config_set_stores_only_overrides():
    result = CliRunner().invoke(cli, ["config", "set", "display.plain_text_markdown_links", "true"])

    assert result.exit_code == 0, result.output
    assert read_user_config() == {"display": {"plain_text_markdown_links": True}}


def test_config_set_rejects_unknown_keys_and_sections():
    unknown = CliRunner().invoke(cli, ["config", "set", "web.colour", "blue"])
    assert unknown.exit_code == 2
    assert "unknown key" in unknown.output

    section = CliRunner().invoke(cli, ["config", "set", "emoji.names", "{}"])
    assert section.exit_code == 2
    assert read_user_config() == {}


def test_config_unset_restores_default():
    CliRunner().invoke(cli, ["config", "set", "web.port", "8000"])

    result = CliRunner().invoke(cli, ["config", "unset", "web.port"])

    assert result.exit_code == 0, result.output
    assert read_user_config() == {}
    assert load_config()["web"]["port"] == 5174

    again = CliRunner().invoke(cli, ["config", "unset", "web.port"])
    assert again.exit_code == 0
    assert "not set" in again.output


def test_config_show_prints_effective_settings():
    CliRunner().invoke(cli, ["config", "set", "web.port", "8000"])

    shown = CliRunner().invoke(cli, ["config", "show"])
    assert shown.exit_code == 0, shown.output
    assert json.loads(shown.output)["web"] == {"host": "127.0.0.1", "port": 8000}

    defaults = CliRunner().invoke(cli, ["config", "show", "--defaults"])
    assert json.loads(defaults.output)["web"]["port"] == 5174


def test_config_emoji_add_list_remove():
    added = CliRunner().invoke(cli, ["config", "emoji", "add", ":zap:", "https://example.com/zap.gif"])
    assert added.exit_code == 0, added.output
    assert load_config()["emoji"]["names"] == {"zap": "https://example.com/zap.gif"}

    listed = CliRunner().invoke(cli, ["config", "emoji", "list"])
    assert ":zap:" in listed.output

    parsed = CliRunner().invoke(cli, ["parse", "--format", "json", ":zap:"])
    assert json.loads(parsed.output) == [
        {"type": "custom_emoji", "name": "zap", "image_url": "https://example.com/zap.gif"},
    ]

    removed = CliRunner().invoke(cli, ["config", "emoji", "remove", "zap"])
    assert removed.exit_code == 0, removed.output
    assert read_user_config() == {}

    missing = CliRunner().invoke(cli, ["config", "emoji", "remove", "zap"])
    assert missing.exit_code == 1


def test_config_emoji_add_rejects_bad_shortcode():
    result = CliRunner().invoke(cli, ["config", "emoji", "add", "no spaces", "https://example.com/x.gif"])
    assert result.exit_code == 2
