"""Pattern families found in note text and the overlap resolver that merges them."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import IntEnum

from .link_utils import clean_url_candidate

BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"


class MatchFamily(IntEnum):
    """Segment families in resolution priority order (lower value wins ties)."""

    CODE_BLOCK = 0
    INLINE_CODE = 1
    MARKDOWN_LINK = 2
    URL = 3
    ENTITY = 4
    LEGACY_MENTION = 5
    HASHTAG = 6
    CASHTAG = 7
    CUSTOM_EMOJI = 8
    LIGHTNING = 9
    NEWLINE = 10


@dataclass(frozen=True)
class Match:
    start: int
    end: int
    family: MatchFamily
    value: str
    groups: tuple[str | None, ...] = ()


_CODE_BLOCK_RE = re.compile(r"```([\w+#.-]*)\n(.*?)```", re.DOTALL)
_INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
_MARKDOWN_LINK_RE = re.compile(r"\[([^\[\]\n]+)\]\((https?://[^\s()<>]+)\)", re.IGNORECASE)
_URL_RE = re.compile(r"https?://[^\s<>\[\]]+", re.IGNORECASE)
_ENTITY_RE = re.compile(
    r"nostr:((?i:(?:"
    rf"npub1[{BECH32_CHARSET}]{{58}}"
    rf"|nprofile1[{BECH32_CHARSET}]+"
    rf"|note1[{BECH32_CHARSET}]{{58}}"
    rf"|nevent1[{BECH32_CHARSET}]+"
    rf"|naddr1[{BECH32_CHARSET}]+"
    r")(?![0-9a-z])))"
)
_LEGACY_MENTION_RE = re.compile(r"#\[(0|[1-9][0-9]{0,8})\]")
_HASHTAG_RE = re.compile(r"#([^\W\d_]\w*)")
_CASHTAG_RE = re.compile(r"(?<![\w$])\$([A-Z]{2,5})\b")
_CUSTOM_EMOJI_RE = re.compile(r":([A-Za-z0-9_]+):")
_LIGHTNING_RE = re.compile(r"\b(lnbc[a-z0-9]+)\b", re.IGNORECASE)
_NEWLINE_RE = re.compile(r"\n+")


def _regex_matches(pattern: re.Pattern[str], family: MatchFamily) -> Callable[[str], Iterator[Match]]:
    def _scan(text: str) -> Iterator[Match]:
        for match in pattern.finditer(text):
            yield Match(match.start(), match.end(), family, match.group(0), match.groups())

    return _scan


def _url_matches(text: str) -> Iterator[Match]:
    # Trailing punctuation is given back to the surrounding text.
    for match in _URL_RE.finditer(text):
        url = clean_url_candidate(match.group(0))
        yield Match(match.start(), match.start() + len(url), MatchFamily.URL, url)


SCANNERS: dict[MatchFamily, Callable[[str], Iterator[Match]]] = {
    MatchFamily.CODE_BLOCK: _regex_matches(_CODE_BLOCK_RE, MatchFamily.CODE_BLOCK),
    MatchFamily.INLINE_CODE: _regex_matches(_INLINE_CODE_RE, MatchFamily.INLINE_CODE),
    MatchFamily.MARKDOWN_LINK: _regex_matches(_MARKDOWN_LINK_RE, MatchFamily.MARKDOWN_LINK),
    MatchFamily.URL: _url_matches,
    MatchFamily.ENTITY: _regex_matches(_ENTITY_RE, MatchFamily.ENTITY),
    MatchFamily.LEGACY_MENTION: _regex_matches(_LEGACY_MENTION_RE, MatchFamily.LEGACY_MENTION),
    MatchFamily.HASHTAG: _regex_matches(_HASHTAG_RE, MatchFamily.HASHTAG),
    MatchFamily.CASHTAG: _regex_matches(_CASHTAG_RE, MatchFamily.CASHTAG),
    MatchFamily.CUSTOM_EMOJI: _regex_matches(_CUSTOM_EMOJI_RE, MatchFamily.CUSTOM_EMOJI),
    MatchFamily.LIGHTNING: _regex_matches(_LIGHTNING_RE, MatchFamily.LIGHTNING),
    MatchFamily.NEWLINE: _regex_matches(_NEWLINE_RE, MatchFamily.NEWLINE),
}


def find_matches(text: str) -> list[Match]:
    """Run every scanner over ``text``; results may overlap across families."""
    matches: list[Match] = []
    for scan in SCANNERS.values():
        matches.extend(scan(text))
    return matches


def resolve(matches: list[Match]) -> list[Match]:
    """Keep a sorted, non-overlapping subset of ``matches``.

    Earlier starts win; equal starts are decided by family priority. A match is
    dropped when it begins before the end of the last kept match.
    """
    kept: list[Match] = []
    last_end = 0
    for match in sorted(matches, key=lambda m: (m.start, m.family)):
        if match.start < last_end:
            continue
        kept.append(match)
        last_end = match.end
    return kept
