"""Pydantic models for FastAPI request and response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ParseRequest(BaseModel):
    """Note content to segment."""

    content: str
    emoji: dict[str, str] | None = None
    tags: list[list[str]] = []


class ParseResponse(BaseModel):
    """Ordered segments for a note."""

    segments: list[dict[str, Any]] = []


class PlainTextRequest(BaseModel):
    content: str
    keep_link_text: bool | None = None


class PlainTextResponse(BaseModel):
    text: str = ""


class MentionOut(BaseModel):
    """A protocol entity mention."""

    entity_kind: str
    identifier: str
    short_display: str


class LegacyMentionOut(BaseModel):
    """A `#[N]` back-reference, resolved against tags when possible."""

    index: int
    entity_kind: str | None = None
    value: str | None = None


class LinkOut(BaseModel):
    url: str
    display_url: str = ""
    domain: str = ""
    type: str = "url"


class ExtractRequest(BaseModel):
    content: str
    tags: list[list[str]] = []


class ExtractResponse(BaseModel):
    """Everything the derived views pull out of a note."""

    images: list[str] = []
    hashtags: list[str] = []
    tag_hashtags: list[str] = []
    cashtags: list[str] = []
    mentions: list[MentionOut] = []
    legacy_mentions: list[LegacyMentionOut] = []
    links: list[LinkOut] = []
