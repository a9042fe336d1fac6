"""Configuration management for plebtext."""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

# Application name for XDG paths
APP_NAME = "plebtext"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "emoji": {
        "names": {},  # shortcode -> image URL used when a request supplies none
        "table_path": None,  # optional JSON file with more shortcodes
    },
    "display": {
        "plain_text_markdown_links": False,
    },
    "web": {
        "host": "127.0.0.1",
        "port": 5174,
    },
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory."""
    return Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))


def get_config_path() -> Path:
    """
    Get the path to the config file.

    PLEBTEXT_CONFIG overrides the XDG default.
    """
    env_path = os.environ.get("PLEBTEXT_CONFIG")
    if env_path:
        return Path(env_path)
    return get_xdg_config_home() / APP_NAME / "config.json"


def read_user_config() -> dict[str, Any]:
    """Read only the values stored in the config file, without defaults."""
    config_path = get_config_path()
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        return json.load(f)


def load_config() -> dict[str, Any]:
    """Load configuration, merging with defaults."""
    return deep_merge(copy.deepcopy(DEFAULT_CONFIG), read_user_config())


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_emoji_table(config: dict[str, Any] | None = None) -> dict[str, str]:
    """
    Get the default custom emoji table.

    Entries from emoji.table_path are loaded first; inline emoji.names win.
    An unreadable table file is logged and skipped.
    """
    if config is None:
        config = load_config()
    emoji_cfg = config.get("emoji", {})
    table: dict[str, str] = {}

    table_path = emoji_cfg.get("table_path")
    if table_path:
        try:
            with open(Path(table_path).expanduser()) as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            log.warning("Could not read emoji table %s: %s", table_path, exc)
            loaded = {}
        if isinstance(loaded, dict):
            table.update({str(k): str(v) for k, v in loaded.items() if k and v})

    names = emoji_cfg.get("names") or {}
    table.update({str(k): str(v) for k, v in names.items() if k and v})
    return table
