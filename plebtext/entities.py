"""Classification of `nostr:` entity identifiers into mention segments."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .segments import EntityKind, Mention

log = logging.getLogger(__name__)

# Longest prefix first so `nprofile1` is never shadowed by a shorter one.
_PREFIXES: tuple[tuple[str, EntityKind], ...] = tuple(
    sorted(((kind.prefix, kind) for kind in EntityKind), key=lambda item: len(item[0]), reverse=True)
)


@dataclass(frozen=True)
class DecodedEntity:
    """What a bech32 decoder managed to recover from an identifier."""

    pubkey: str | None = None
    event_id: str | None = None


EntityDecoder = Callable[[str], DecodedEntity | None]


def entity_kind_for(identifier: str) -> EntityKind:
    """Map an identifier to its entity kind by literal prefix.

    Unknown prefixes fall back to ``EntityKind.PUBLIC_KEY``.
    """
    lowered = identifier.lower()
    for prefix, kind in _PREFIXES:
        if lowered.startswith(prefix):
            return kind
    log.debug("Unrecognized entity prefix in %r, treating as public key", identifier[:12])
    return EntityKind.PUBLIC_KEY


def _decode(identifier: str, decoder: EntityDecoder | None) -> DecodedEntity | None:
    if decoder is None:
        return None
    try:
        return decoder(identifier)
    except Exception as exc:
        # A broken decoder must not fail the parse; the mention stays undecoded.
        log.debug("Decoder failed for %s: %s", identifier[:12], exc)
        return None


def classify_entity(identifier: str, decoder: EntityDecoder | None = None) -> Mention:
    """Build a mention segment for a bech32 identifier (without the `nostr:` scheme)."""
    kind = entity_kind_for(identifier)
    decoded = _decode(identifier, decoder)
    if decoded is None:
        return Mention(entity_kind=kind, identifier=identifier)
    return Mention(
        entity_kind=kind,
        identifier=identifier,
        decoded_pubkey=decoded.pubkey,
        decoded_event_id=decoded.event_id,
    )
