"""Helpers for the tag list that travels alongside a note's content."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .segments import EntityKind, LegacyMention

Tag = Sequence[str]


@dataclass(frozen=True)
class LegacyReference:
    """Target of a `#[N]` back-reference."""

    entity_kind: EntityKind
    value: str
    relay: str | None = None


def emoji_table_from_tags(tags: Sequence[Tag] | None) -> dict[str, str]:
    """Build the shortcode -> image URL table from `["emoji", name, url]` tags."""
    table: dict[str, str] = {}
    for tag in tags or []:
        if len(tag) < 3 or tag[0] != "emoji":
            continue
        name = str(tag[1] or "").strip()
        url = str(tag[2] or "").strip()
        if not name or not url or name in table:
            continue
        table[name] = url
    return table


def hashtags_from_tags(tags: Sequence[Tag] | None) -> list[str]:
    """Lower-cased `t` tag values, de-duplicated in order."""
    seen: set[str] = set()
    hashtags: list[str] = []
    for tag in tags or []:
        if len(tag) < 2 or tag[0] != "t":
            continue
        value = str(tag[1] or "").strip().lstrip("#").lower()
        if not value or value in seen:
            continue
        seen.add(value)
        hashtags.append(value)
    return hashtags


def resolve_legacy_mention(mention: LegacyMention, tags: Sequence[Tag] | None) -> LegacyReference | None:
    """Resolve `#[N]` against the N-th tag (`p` for profiles, `e` for events)."""
    if not tags or mention.index >= len(tags):
        return None
    tag = tags[mention.index]
    if len(tag) < 2 or not tag[1]:
        return None
    relay = tag[2] if len(tag) > 2 and tag[2] else None
    if tag[0] == "p":
        return LegacyReference(EntityKind.PUBLIC_KEY, tag[1], relay)
    if tag[0] == "e":
        return LegacyReference(EntityKind.NOTE, tag[1], relay)
    return None
