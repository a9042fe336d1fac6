"""Utilities for cleaning and classifying links found in note text."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from .segments import Image, Url, Video, YouTube

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg")
VIDEO_EXTENSIONS = (".mp4", ".webm", ".mov", ".avi", ".mkv")

_ALWAYS_TRIMMED = ",.;:!?"
_BRACKET_PAIRS = {")": "(", "]": "["}

_YOUTUBE_HOST = r"https?://(?:www\.|m\.|music\.)?"
_YOUTUBE_ID = r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"

# (path detector, id extractor); a detector hit without an id falls through.
_YOUTUBE_PATTERNS = (
    (
        re.compile(_YOUTUBE_HOST + r"youtube\.com/watch\b", re.IGNORECASE),
        re.compile(r"[?&]v=" + _YOUTUBE_ID),
    ),
    (
        re.compile(r"https?://youtu\.be/", re.IGNORECASE),
        re.compile(r"youtu\.be/" + _YOUTUBE_ID, re.IGNORECASE),
    ),
    (
        re.compile(_YOUTUBE_HOST + r"youtube\.com/shorts/", re.IGNORECASE),
        re.compile(r"/shorts/" + _YOUTUBE_ID),
    ),
    (
        re.compile(_YOUTUBE_HOST + r"youtube\.com/embed/", re.IGNORECASE),
        re.compile(r"/embed/" + _YOUTUBE_ID),
    ),
    (
        re.compile(_YOUTUBE_HOST + r"youtube\.com/v/", re.IGNORECASE),
        re.compile(r"/v/" + _YOUTUBE_ID),
    ),
)


def clean_url_candidate(url: str) -> str:
    """Trim punctuation commonly attached to URLs in plain text.

    Closing brackets are only trimmed while they are unbalanced, so
    ``https://en.wikipedia.org/wiki/Foo_(bar)`` survives intact.
    """
    cleaned = url
    while cleaned:
        last = cleaned[-1]
        if last in _ALWAYS_TRIMMED:
            cleaned = cleaned[:-1]
            continue
        opener = _BRACKET_PAIRS.get(last)
        if opener and cleaned.count(opener) < cleaned.count(last):
            cleaned = cleaned[:-1]
            continue
        break
    return cleaned


def parse_youtube_video_id(url: str | None) -> str | None:
    """Extract the 11-character video id from a YouTube watch/short/embed/share URL."""
    if not url:
        return None
    for detector, extractor in _YOUTUBE_PATTERNS:
        if not detector.match(url):
            continue
        match = extractor.search(url)
        if match:
            return match.group(1)
    return None


def _path_for(url: str) -> str:
    try:
        return (urlparse(url).path or "").lower()
    except ValueError:
        return ""


def _domain_for(url: str) -> str:
    try:
        return (urlparse(url).netloc or "").lower()
    except ValueError:
        return ""


def _display_url_for(url: str) -> str:
    try:
        parsed = urlparse(url)
    except ValueError:
        return url
    host = (parsed.netloc or "").lower()
    path = parsed.path or ""
    query = f"?{parsed.query}" if parsed.query else ""
    if not host:
        return url
    return f"{host}{path}{query}"


def classify_url(url: str) -> Url | Image | Video | YouTube:
    """Turn a raw URL match into the most specific link segment."""
    cleaned = clean_url_candidate(url)

    video_id = parse_youtube_video_id(cleaned)
    if video_id:
        return YouTube(url=cleaned, video_id=video_id)

    path = _path_for(cleaned)
    if path.endswith(IMAGE_EXTENSIONS):
        return Image(cleaned)
    if path.endswith(VIDEO_EXTENSIONS):
        return Video(cleaned)
    return Url(cleaned)
