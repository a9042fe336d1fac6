"""Content segmentation API routes."""

from fastapi import APIRouter, Request

from ...models import (
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
from ...parser import parse
from ...segments import segment_to_dict
from ...tags import emoji_table_from_tags, hashtags_from_tags, resolve_legacy_mention
from ...views import (
    extract_cashtags,
    extract_hashtags,
    extract_images,
    extract_legacy_mentions,
    extract_links,
    extract_mentions,
    to_plain_text,
)

router = APIRouter(tags=["content"])


def _emoji_names(request: Request, explicit: dict[str, str] | None, tags: list[list[str]]) -> dict[str, str]:
    if explicit is not None:
        return explicit
    names = dict(request.app.state.emoji_names)
    names.update(emoji_table_from_tags(tags))
    return names


@router.post("/parse", response_model=ParseResponse)
async def parse_content(request: Request, body: ParseRequest) -> ParseResponse:
    """Split note content into typed segments."""
    segments = parse(body.content, _emoji_names(request, body.emoji, body.tags))
    return ParseResponse(segments=[segment_to_dict(segment) for segment in segments])


@router.post("/plain-text", response_model=PlainTextResponse)
async def plain_text(request: Request, body: PlainTextRequest) -> PlainTextResponse:
    keep_link_text = body.keep_link_text
    if keep_link_text is None:
        keep_link_text = request.app.state.settings.display.plain_text_markdown_links
    return PlainTextResponse(text=to_plain_text(body.content, keep_link_text=keep_link_text))


@router.post("/extract", response_model=ExtractResponse)
async def extract(body: ExtractRequest) -> ExtractResponse:
    """Pull images, tags, mentions and links out of note content."""
    segments = parse(body.content)

    legacy: list[LegacyMentionOut] = []
    for mention in extract_legacy_mentions(segments):
        ref = resolve_legacy_mention(mention, body.tags)
        legacy.append(
            LegacyMentionOut(
                index=mention.index,
                entity_kind=ref.entity_kind.value if ref else None,
                value=ref.value if ref else None,
            )
        )

    return ExtractResponse(
        images=extract_images(segments),
        hashtags=extract_hashtags(segments),
        tag_hashtags=hashtags_from_tags(body.tags),
        cashtags=extract_cashtags(segments),
        mentions=[
            MentionOut(
                entity_kind=mention.entity_kind.value,
                identifier=mention.identifier,
                short_display=mention.short_display,
            )
            for mention in extract_mentions(segments)
        ],
        legacy_mentions=legacy,
        links=[LinkOut(**link) for link in extract_links(segments)],
    )
