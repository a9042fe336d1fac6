"""Config commands.

Only values the user changed are written to the config file; everything else
keeps following ``DEFAULT_CONFIG``.
"""

import json
import re
from typing import Any

import rich_click as click
from pydantic import ValidationError
from rich.table import Table

from ..config import DEFAULT_CONFIG, deep_merge, get_config_path, load_emoji_table, read_user_config, save_config
from ..models import PlebtextConfig
from ._console import console

_SHORTCODE_RE = re.compile(r"[A-Za-z0-9_]+")


def _key_path(key: str) -> list[str]:
    """Split a dotted key and check it names a leaf of the default config."""
    parts = key.split(".")
    node: Any = DEFAULT_CONFIG
    for part in parts:
        if not isinstance(node, dict) or part not in node:
            raise click.BadParameter(f"unknown key {key!r}", param_hint="key")
        node = node[part]
    if isinstance(node, dict):
        raise click.BadParameter(f"{key!r} is a section, not a value", param_hint="key")
    return parts


def _parse_value(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def _validated(user_cfg: dict[str, Any], param_hint: str) -> PlebtextConfig:
    try:
        return PlebtextConfig.model_validate(deep_merge(DEFAULT_CONFIG, user_cfg))
    except ValidationError as exc:
        messages = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())
        raise click.BadParameter(messages, param_hint=param_hint) from exc


def _prune(cfg: dict[str, Any], parts: list[str]) -> bool:
    """Remove the value at ``parts`` and any section it leaves empty."""
    head, *rest = parts
    if head not in cfg:
        return False
    if not rest:
        del cfg[head]
        return True
    child = cfg[head]
    if not isinstance(child, dict) or not _prune(child, rest):
        return False
    if not child:
        del cfg[head]
    return True


@click.group()
def config():
    """Manage configuration."""


@config.command("show")
@click.option("--defaults", is_flag=True, help="Show built-in defaults instead of the effective config")
def config_show(defaults: bool):
    """Show the effective configuration as JSON."""
    settings = PlebtextConfig() if defaults else _validated(read_user_config(), "config file")
    console.print_json(settings.model_dump_json())


@config.command("path")
def config_path():
    """Show configuration file path."""
    click.echo(str(get_config_path()))


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value (e.g., web.port 8000)."""
    parts = _key_path(key)
    user_cfg = read_user_config()

    section = user_cfg
    for part in parts[:-1]:
        section = section.setdefault(part, {})
    section[parts[-1]] = _parse_value(value)

    _validated(user_cfg, "value")
    save_config(user_cfg)
    console.print(f"Set {key} = {section[parts[-1]]!r}")


@config.command("unset")
@click.argument("key")
def config_unset(key: str):
    """Drop a configured value so the default applies again."""
    parts = _key_path(key)
    user_cfg = read_user_config()
    if not _prune(user_cfg, parts):
        console.print(f"{key} is not set; default applies")
        return
    save_config(user_cfg)
    console.print(f"Unset {key}")


@config.group("emoji")
def emoji():
    """Manage the default custom emoji table."""


@emoji.command("list")
def emoji_list():
    """List the shortcodes available when a note carries no emoji tags."""
    table = load_emoji_table()
    if not table:
        console.print("No custom emoji configured.")
        return

    out = Table(show_header=True)
    out.add_column("Shortcode", style="cyan")
    out.add_column("Image URL", overflow="fold")
    for name in sorted(table):
        out.add_row(f":{name}:", table[name])
    console.print(out)


@emoji.command("add")
@click.argument("name")
@click.argument("url")
def emoji_add(name: str, url: str):
    """Map :NAME: to an image URL."""
    name = name.strip(":")
    if not _SHORTCODE_RE.fullmatch(name):
        raise click.BadParameter("shortcodes use letters, digits and underscores", param_hint="name")
    user_cfg = read_user_config()
    user_cfg.setdefault("emoji", {}).setdefault("names", {})[name] = url
    save_config(user_cfg)
    console.print(f"Added :{name}:")


@emoji.command("remove")
@click.argument("name")
def emoji_remove(name: str):
    """Forget the image URL for :NAME:."""
    name = name.strip(":")
    user_cfg = read_user_config()
    if not _prune(user_cfg, ["emoji", "names", name]):
        raise click.ClickException(f":{name}: is not configured")
    save_config(user_cfg)
    console.print(f"Removed :{name}:")
