"""Note content parser.

Turns a raw note string into an ordered list of typed segments:

    sanitize -> normalize newlines -> scan all families -> resolve overlaps -> build

The concatenated raw text of the result always equals the normalized input.
Parsing never raises for string input and keeps no state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .entities import EntityDecoder, classify_entity
from .link_utils import classify_url
from .matchers import Match, MatchFamily, find_matches, resolve
from .segments import (
    Cashtag,
    CodeBlock,
    ContentSegment,
    CustomEmoji,
    Hashtag,
    InlineCode,
    LegacyMention,
    LightningInvoice,
    MarkdownLink,
    Newline,
    Text,
)
from .text_utils import prepare

log = logging.getLogger(__name__)


def _segment_for(
    found: Match,
    emoji_names: Mapping[str, str],
    decoder: EntityDecoder | None,
) -> ContentSegment:
    groups = found.groups
    match found.family:
        case MatchFamily.CODE_BLOCK:
            return CodeBlock(code=groups[1] or "", language=groups[0] or None)
        case MatchFamily.INLINE_CODE:
            return InlineCode(groups[0] or "")
        case MatchFamily.MARKDOWN_LINK:
            return MarkdownLink(text=groups[0] or "", url=groups[1] or "")
        case MatchFamily.URL:
            return classify_url(found.value)
        case MatchFamily.ENTITY:
            return classify_entity(groups[0] or "", decoder)
        case MatchFamily.LEGACY_MENTION:
            return LegacyMention(int(groups[0] or 0))
        case MatchFamily.HASHTAG:
            return Hashtag(groups[0] or "")
        case MatchFamily.CASHTAG:
            return Cashtag(groups[0] or "")
        case MatchFamily.CUSTOM_EMOJI:
            name = groups[0] or ""
            return CustomEmoji(name=name, image_url=emoji_names.get(name))
        case MatchFamily.LIGHTNING:
            return LightningInvoice(found.value)
        case MatchFamily.NEWLINE:
            return Newline(len(found.value))
    raise ValueError(f"Unhandled match family: {found.family!r}")


def build_segments(
    text: str,
    matches: list[Match],
    emoji_names: Mapping[str, str] | None = None,
    decoder: EntityDecoder | None = None,
) -> list[ContentSegment]:
    """Fill the gaps between resolved matches with text segments."""
    names = emoji_names or {}
    segments: list[ContentSegment] = []
    current = 0
    for match in matches:
        if match.start > current:
            segments.append(Text(text[current : match.start]))
        segments.append(_segment_for(match, names, decoder))
        current = match.end
    if current < len(text):
        segments.append(Text(text[current:]))
    return segments


def parse(
    content: str,
    emoji_names: Mapping[str, str] | None = None,
    *,
    decoder: EntityDecoder | None = None,
) -> list[ContentSegment]:
    """Parse note content into segments.

    ``emoji_names`` maps custom emoji shortcodes to image URLs; unknown
    shortcodes still produce a ``CustomEmoji`` segment without an image.
    ``decoder`` optionally fills the decoded fields of mention segments.
    """
    if not isinstance(content, str):
        raise TypeError(f"content must be str, not {type(content).__name__}")
    if not content:
        return []

    text = prepare(content)
    if not text:
        return []

    resolved = resolve(find_matches(text))
    segments = build_segments(text, resolved, emoji_names, decoder)
    log.debug("Parsed %d chars into %d segments (%d matches)", len(text), len(segments), len(resolved))
    return segments
