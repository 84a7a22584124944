"""Tests for choosing the effective capture key across transports."""

from __future__ import annotations

from packages.readdo_shared.idempotency import (
    CaptureKeySource,
    derive_capture_key,
    resolve_capture_key,
)

_URL = "https://example.com/article"
_INTENT = "compare rollout plans"


def test_header_key_wins_over_body_key() -> None:
    """A non-empty header key takes precedence."""
    resolved = resolve_capture_key(
        url=_URL,
        intent_text=_INTENT,
        header_value=["", "hdr-key, later"],
        body_value="body-key",
    )

    assert resolved.key == "hdr-key"
    assert resolved.source is CaptureKeySource.HEADER


def test_body_key_used_when_header_blank() -> None:
    """Blank header material falls through to the body field."""
    resolved = resolve_capture_key(
        url=_URL,
        intent_text=_INTENT,
        header_value=" , ",
        body_value=[None, " body-key "],
    )

    assert resolved.key == "body-key"
    assert resolved.source is CaptureKeySource.BODY


def test_derived_key_used_when_no_key_supplied() -> None:
    """Without client keys the content-derived key is used."""
    resolved = resolve_capture_key(url=_URL, intent_text=f"  {_INTENT}\n")

    assert resolved.key == derive_capture_key(_URL, _INTENT)
    assert resolved.source is CaptureKeySource.DERIVED


def test_client_supplied_derived_key_matches_server_derivation() -> None:
    """An uppercased client-derived key collapses onto the server-derived key."""
    derived = derive_capture_key(_URL, _INTENT)

    resolved = resolve_capture_key(
        url=_URL,
        intent_text=_INTENT,
        header_value=derived.upper(),
    )

    assert resolved.key == derived
