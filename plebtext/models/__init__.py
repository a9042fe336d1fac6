"""Pydantic models for the plebtext application."""

from __future__ import annotations

from .api import (
    ExtractRequest,
    ExtractResponse,
    LegacyMentionOut,
    LinkOut,
    MentionOut,
    ParseRequest,
    ParseResponse,
    PlainTextRequest,
    PlainTextResponse,
)
from .config import (
    DisplayConfig,
    EmojiConfig,
    PlebtextConfig,
    WebConfig,
)

__all__ = [
    "DisplayConfig",
    "EmojiConfig",
    "ExtractRequest",
    "ExtractResponse",
    "LegacyMentionOut",
    "LinkOut",
    "MentionOut",
    "ParseRequest",
    "ParseResponse",
    "PlainTextRequest",
    "PlainTextResponse",
    "PlebtextConfig",
    "WebConfig",
]
