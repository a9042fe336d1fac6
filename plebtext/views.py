"""Derived views over parsed note content."""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from .link_utils import _display_url_for, _domain_for
from .parser import parse
from .segments import (
    Cashtag,
    CodeBlock,
    ContentSegment,
    CustomEmoji,
    Hashtag,
    Image,
    InlineCode,
    LegacyMention,
    LightningInvoice,
    MarkdownLink,
    Mention,
    Newline,
    Text,
    Url,
    Video,
    YouTube,
)

Content = str | Sequence[ContentSegment]


def _segments(content: Content) -> Sequence[ContentSegment]:
    if isinstance(content, str):
        return parse(content)
    return content


def extract_images(content: Content) -> list[str]:
    """Image URLs in order of appearance."""
    return [s.url for s in _segments(content) if isinstance(s, Image)]


def extract_hashtags(content: Content) -> list[str]:
    return [s.tag for s in _segments(content) if isinstance(s, Hashtag)]


def extract_cashtags(content: Content) -> list[str]:
    return [s.symbol for s in _segments(content) if isinstance(s, Cashtag)]


def extract_mentions(content: Content) -> list[Mention]:
    return [s for s in _segments(content) if isinstance(s, Mention)]


def extract_legacy_mentions(content: Content) -> list[LegacyMention]:
    return [s for s in _segments(content) if isinstance(s, LegacyMention)]


def extract_links(content: Content) -> list[dict[str, str]]:
    """Every outbound link (plain, media, YouTube and markdown) with display metadata."""
    links: list[dict[str, str]] = []
    for segment in _segments(content):
        if isinstance(segment, (Url, Image, Video, YouTube, MarkdownLink)):
            links.append(
                {
                    "url": segment.url,
                    "display_url": _display_url_for(segment.url),
                    "domain": _domain_for(segment.url),
                    "type": segment.kind,
                }
            )
    return links


def _plain_text_piece(segment: ContentSegment, keep_link_text: bool) -> str:
    match segment:
        case Text(text=text):
            return text
        case Newline():
            return "\n"
        case Mention():
            return f"@{segment.short_display}"
        case LegacyMention() | Hashtag() | Cashtag() | CustomEmoji():
            return segment.raw
        case InlineCode(code=code) | CodeBlock(code=code):
            return code
        case MarkdownLink(text=text):
            return text if keep_link_text else ""
        case Url() | Image() | Video() | YouTube() | LightningInvoice():
            return ""
        case _:
            assert_never(segment)


def to_plain_text(content: Content, *, keep_link_text: bool = False) -> str:
    """Reduce content to readable text.

    Mentions are shortened to ``@npub1abc...wxyz``; links, media and invoices
    are dropped. Each newline run becomes a single line break. Pass
    ``keep_link_text=True`` to keep a markdown link's display text.
    """
    pieces = [_plain_text_piece(segment, keep_link_text) for segment in _segments(content)]
    return "".join(pieces).strip()
