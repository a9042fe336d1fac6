"""Shared CLI utilities."""

import json
import sys
from pathlib import Path

import rich_click as click

from ..config import load_emoji_table
from ..tags import emoji_table_from_tags


def _read_content(text: str | None) -> str:
    """Use the TEXT argument, or stdin when it is omitted or `-`."""
    if text is None or text == "-":
        return sys.stdin.read()
    return text


def _load_tags(path: Path | None) -> list[list[str]]:
    """Read a JSON tag array (`[["emoji", "name", "url"], ...]`) from disk."""
    if path is None:
        return []
    try:
        raw = path.read_text()
    except OSError as exc:
        raise click.BadParameter(f"cannot read {path}: {exc}", param_hint="--tags") from exc
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}", param_hint="--tags") from exc
    if not isinstance(decoded, list):
        raise click.BadParameter(f"{path} must contain a JSON array of tags", param_hint="--tags")
    return [[str(part) for part in tag] for tag in decoded if isinstance(tag, list)]


def _emoji_pairs(values: tuple[str, ...]) -> dict[str, str]:
    table: dict[str, str] = {}
    for value in values:
        name, sep, url = value.partition("=")
        if not sep or not name.strip() or not url.strip():
            raise click.BadParameter(f"expected NAME=URL, got {value!r}", param_hint="--emoji")
        table[name.strip().strip(":")] = url.strip()
    return table


def _build_emoji_table(values: tuple[str, ...], tags: list[list[str]]) -> dict[str, str]:
    """Config defaults, then emoji tags, then --emoji options (last wins)."""
    table = load_emoji_table()
    table.update(emoji_table_from_tags(tags))
    table.update(_emoji_pairs(values))
    return table
