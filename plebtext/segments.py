"""Typed content segments produced by the note parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, assert_never


class EntityKind(str, Enum):
    """Category of a protocol entity reference."""

    PUBLIC_KEY = "npub"
    PROFILE_REF = "nprofile"
    NOTE = "note"
    EVENT_REF = "nevent"
    ADDRESS_REF = "naddr"

    @property
    def prefix(self) -> str:
        return f"{self.value}1"


@dataclass(frozen=True)
class Text:
    text: str

    kind = "text"

    @property
    def raw(self) -> str:
        return self.text


@dataclass(frozen=True)
class Newline:
    count: int = 1

    kind = "newline"

    @property
    def raw(self) -> str:
        return "\n" * self.count


@dataclass(frozen=True)
class Url:
    url: str

    kind = "url"

    @property
    def raw(self) -> str:
        return self.url


@dataclass(frozen=True)
class Image:
    url: str

    kind = "image"

    @property
    def raw(self) -> str:
        return self.url


@dataclass(frozen=True)
class Video:
    url: str

    kind = "video"

    @property
    def raw(self) -> str:
        return self.url


@dataclass(frozen=True)
class YouTube:
    url: str
    video_id: str

    kind = "youtube"

    @property
    def raw(self) -> str:
        return self.url


@dataclass(frozen=True)
class MarkdownLink:
    text: str
    url: str

    kind = "markdown_link"

    @property
    def raw(self) -> str:
        return f"[{self.text}]({self.url})"


@dataclass(frozen=True)
class Mention:
    """Reference to a protocol entity (`nostr:npub1...` and friends).

    ``identifier`` is the bech32 string without the ``nostr:`` scheme. The
    decoded fields are only set when the caller passes a decoder to ``parse``.
    """

    entity_kind: EntityKind
    identifier: str
    decoded_pubkey: str | None = None
    decoded_event_id: str | None = None

    kind = "mention"

    @property
    def raw(self) -> str:
        return f"nostr:{self.identifier}"

    @property
    def short_display(self) -> str:
        if len(self.identifier) <= 16:
            return self.identifier
        return f"{self.identifier[:8]}...{self.identifier[-4:]}"


@dataclass(frozen=True)
class LegacyMention:
    index: int

    kind = "legacy_mention"

    @property
    def raw(self) -> str:
        return f"#[{self.index}]"


@dataclass(frozen=True)
class Hashtag:
    tag: str

    kind = "hashtag"

    @property
    def raw(self) -> str:
        return f"#{self.tag}"


@dataclass(frozen=True)
class Cashtag:
    symbol: str

    kind = "cashtag"

    @property
    def raw(self) -> str:
        return f"${self.symbol}"


@dataclass(frozen=True)
class InlineCode:
    code: str

    kind = "inline_code"

    @property
    def raw(self) -> str:
        return f"`{self.code}`"


@dataclass(frozen=True)
class CodeBlock:
    """Fenced block. ``code`` is everything after the opening fence line."""

    code: str
    language: str | None = None

    kind = "code_block"

    @property
    def raw(self) -> str:
        return f"```{self.language or ''}\n{self.code}```"


@dataclass(frozen=True)
class CustomEmoji:
    name: str
    image_url: str | None = None

    kind = "custom_emoji"

    @property
    def raw(self) -> str:
        return f":{self.name}:"


@dataclass(frozen=True)
class LightningInvoice:
    invoice: str

    kind = "lightning_invoice"

    @property
    def raw(self) -> str:
        return self.invoice


ContentSegment = (
    Text
    | Newline
    | Url
    | Image
    | Video
    | YouTube
    | MarkdownLink
    | Mention
    | LegacyMention
    | Hashtag
    | Cashtag
    | InlineCode
    | CodeBlock
    | CustomEmoji
    | LightningInvoice
)


def raw_text(segments: list[ContentSegment]) -> str:
    """Concatenate the raw projection of every segment."""
    return "".join(segment.raw for segment in segments)


def segment_to_dict(segment: ContentSegment) -> dict[str, Any]:
    """JSON-safe representation used by the CLI and the web API."""
    data: dict[str, Any] = {"type": segment.kind}
    match segment:
        case Text(text=text):
            data["text"] = text
        case Newline(count=count):
            data["count"] = count
        case Url(url=url) | Image(url=url) | Video(url=url):
            data["url"] = url
        case YouTube(url=url, video_id=video_id):
            data["url"] = url
            data["video_id"] = video_id
        case MarkdownLink(text=text, url=url):
            data["text"] = text
            data["url"] = url
        case Mention():
            data["entity_kind"] = segment.entity_kind.value
            data["identifier"] = segment.identifier
            data["short_display"] = segment.short_display
            data["decoded_pubkey"] = segment.decoded_pubkey
            data["decoded_event_id"] = segment.decoded_event_id
        case LegacyMention(index=index):
            data["index"] = index
        case Hashtag(tag=tag):
            data["tag"] = tag
        case Cashtag(symbol=symbol):
            data["symbol"] = symbol
        case InlineCode(code=code):
            data["code"] = code
        case CodeBlock(code=code, language=language):
            data["code"] = code
            data["language"] = language
        case CustomEmoji(name=name, image_url=image_url):
            data["name"] = name
            data["image_url"] = image_url
        case LightningInvoice(invoice=invoice):
            data["invoice"] = invoice
        case _:
            assert_never(segment)
    return data
