"""Parse, plain-text and extract commands."""

import json
from pathlib import Path

import rich_click as click
from rich.table import Table

from ..config import load_config
from ..parser import parse
from ..segments import segment_to_dict
from ..tags import resolve_legacy_mention
from ..views import (
    extract_cashtags,
    extract_hashtags,
    extract_images,
    extract_legacy_mentions,
    extract_links,
    extract_mentions,
    to_plain_text,
)
from ._console import console
from ._helpers import _build_emoji_table, _load_tags, _read_content


def _segment_detail(data: dict) -> str:
    return ", ".join(f"{key}={value!r}" for key, value in data.items() if key != "type" and value is not None)


@click.command("parse")
@click.argument("text", required=False, default=None)
@click.option("--emoji", "-e", "emoji", multiple=True, help="Custom emoji as NAME=URL (repeatable)")
@click.option(
    "--tags",
    "tags_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="JSON file with the note's tag array",
)
@click.option("--format", "-f", "fmt", type=click.Choice(["table", "json"]), default="table", help="Output format")
def parse_command(text: str | None, emoji: tuple[str, ...], tags_path: Path | None, fmt: str):
    """
    Split note content into typed segments.

    \b
    Reads TEXT, or stdin when TEXT is omitted or "-".

    \b
    EXAMPLES:
      plebtext parse "gm #nostr https://example.com/cat.png"
      plebtext parse -e party=https://example.com/party.gif ":party: time"
      cat note.txt | plebtext parse --format json
    """
    content = _read_content(text)
    tags = _load_tags(tags_path)
    segments = parse(content, _build_emoji_table(emoji, tags))
    rows = [segment_to_dict(segment) for segment in segments]

    if fmt == "json":
        click.echo(json.dumps(rows, indent=2, ensure_ascii=False))
        return

    if not rows:
        console.print("No segments.")
        return

    table = Table(show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Value", overflow="fold")
    for idx, row in enumerate(rows):
        table.add_row(str(idx), row["type"], _segment_detail(row))
    console.print(table)


@click.command("plain")
@click.argument("text", required=False, default=None)
@click.option(
    "--link-text/--no-link-text",
    default=None,
    help="Keep markdown link display text (default from config)",
)
def plain(text: str | None, link_text: bool | None):
    """Print note content reduced to plain text."""
    if link_text is None:
        link_text = load_config().get("display", {}).get("plain_text_markdown_links", False)
    click.echo(to_plain_text(_read_content(text), keep_link_text=link_text))


@click.command("extract")
@click.argument(
    "what",
    type=click.Choice(["images", "hashtags", "cashtags", "mentions", "legacy", "links"]),
)
@click.argument("text", required=False, default=None)
@click.option(
    "--tags",
    "tags_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="JSON tag array used to resolve legacy #[N] mentions",
)
def extract(what: str, text: str | None, tags_path: Path | None):
    """Extract one kind of entity from note content, one per line."""
    segments = parse(_read_content(text))

    if what == "images":
        lines = extract_images(segments)
    elif what == "hashtags":
        lines = extract_hashtags(segments)
    elif what == "cashtags":
        lines = extract_cashtags(segments)
    elif what == "mentions":
        lines = [f"{m.entity_kind.value}\t{m.identifier}" for m in extract_mentions(segments)]
    elif what == "links":
        lines = [link["url"] for link in extract_links(segments)]
    else:
        tags = _load_tags(tags_path)
        lines = []
        for mention in extract_legacy_mentions(segments):
            ref = resolve_legacy_mention(mention, tags)
            if ref is None:
                lines.append(f"{mention.index}\t-")
            else:
                lines.append(f"{mention.index}\t{ref.entity_kind.value}\t{ref.value}")

    for line in lines:
        click.echo(line)
