"""Pydantic models for plebtext configuration."""

from __future__ import annotations

from pydantic import BaseModel


class EmojiConfig(BaseModel):
    """Default custom emoji table."""

    names: dict[str, str] = {}
    table_path: str | None = None


class DisplayConfig(BaseModel):
    """Plain-text rendering options."""

    plain_text_markdown_links: bool = False


class WebConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 5174


class PlebtextConfig(BaseModel):
    """Top-level plebtext configuration."""

    emoji: EmojiConfig = EmojiConfig()
    display: DisplayConfig = DisplayConfig()
    web: WebConfig = WebConfig()
