"""Tests for protocol entity classification."""

import pytest

from plebtext.entities import DecodedEntity, classify_entity, entity_kind_for
from plebtext.segments import EntityKind, Mention


@pytest.mark.parametrize(
    ("identifier", "kind"),
    [
        ("npub1abc", EntityKind.PUBLIC_KEY),
        ("nprofile1qqsabc", EntityKind.PROFILE_REF),
        ("note1xyz", EntityKind.NOTE),
        ("nevent1qqsxyz", EntityKind.EVENT_REF),
        ("naddr1qqxyz", EntityKind.ADDRESS_REF),
        ("NPROFILE1QQSABC", EntityKind.PROFILE_REF),
    ],
)
def test_entity_kind_for_prefixes(identifier, kind):
    assert entity_kind_for(identifier) == kind


def test_unknown_prefix_falls_back_to_public_key():
    assert entity_kind_for("nrelay1abc") == EntityKind.PUBLIC_KEY
    assert classify_entity("nsec1abc") == Mention(entity_kind=EntityKind.PUBLIC_KEY, identifier="nsec1abc")


def test_classify_entity_without_decoder_leaves_decoded_fields_empty(npub):
    mention = classify_entity(npub)
    assert mention.entity_kind == EntityKind.PUBLIC_KEY
    assert mention.identifier == npub
    assert mention.decoded_pubkey is None
    assert mention.decoded_event_id is None


def test_classify_entity_uses_decoder(note_id):
    seen: list[str] = []

    def _decoder(identifier: str) -> DecodedEntity:
        seen.append(identifier)
        return DecodedEntity(event_id="ab" * 32)

    mention = classify_entity(note_id, _decoder)

    assert seen == [note_id]
    assert mention.entity_kind == EntityKind.NOTE
    assert mention.decoded_event_id == "ab" * 32
    assert mention.decoded_pubkey is None


def test_classify_entity_survives_failing_decoder(npub):
    def _decoder(identifier: str) -> DecodedEntity:
        raise ValueError("invalid checksum")

    mention = classify_entity(npub, _decoder)

    assert mention == Mention(entity_kind=EntityKind.PUBLIC_KEY, identifier=npub)


def test_short_display(npub):
    assert Mention(EntityKind.PUBLIC_KEY, npub).short_display == "npub1qpz...khce"
    assert Mention(EntityKind.PUBLIC_KEY, "npub1short").short_display == "npub1short"
    assert Mention(EntityKind.PUBLIC_KEY, npub).raw == f"nostr:{npub}"
