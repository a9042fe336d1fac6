"""Input repair and whitespace normalization applied before pattern matching."""

from __future__ import annotations

import re

REPLACEMENT_CHAR = "\ufffd"

_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def _is_high_surrogate(char: str) -> bool:
    return "\ud800" <= char <= "\udbff"


def _is_low_surrogate(char: str) -> bool:
    return "\udc00" <= char <= "\udfff"


def sanitize(text: str) -> str:
    """Repair surrogate code points so the text is valid Unicode.

    A high surrogate immediately followed by a low surrogate is joined into the
    character the pair encodes. Any other surrogate is replaced with U+FFFD.
    """
    if not text or not _SURROGATE_RE.search(text):
        return text

    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if _is_high_surrogate(char):
            if i + 1 < length and _is_low_surrogate(text[i + 1]):
                high = ord(char) - 0xD800
                low = ord(text[i + 1]) - 0xDC00
                out.append(chr(0x10000 + (high << 10) + low))
                i += 2
                continue
            out.append(REPLACEMENT_CHAR)
        elif _is_low_surrogate(char):
            out.append(REPLACEMENT_CHAR)
        else:
            out.append(char)
        i += 1
    return "".join(out)


def normalize_newlines(text: str) -> str:
    """Trim every line and collapse runs of 3+ newlines to exactly 2."""
    if not text:
        return text
    trimmed = "\n".join(line.strip() for line in text.split("\n"))
    return _EXCESS_NEWLINES_RE.sub("\n\n", trimmed)


def prepare(text: str) -> str:
    """Sanitize then normalize; the string every matcher runs against."""
    return normalize_newlines(sanitize(text))
