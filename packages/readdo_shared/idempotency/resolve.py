"""Pick the effective capture key for one submission."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from packages.readdo_shared.logging import fields, get_logger, log_context

from .capture_key import derive_capture_key
from .normalize import normalize_capture_key

_LOGGER = get_logger(__name__)


class CaptureKeySource(str, Enum):
    """Where the effective capture key came from."""

    HEADER = "header"
    BODY = "body"
    DERIVED = "derived"


@dataclass(frozen=True)
class ResolvedCaptureKey:
    """Canonical capture key and the transport it was taken from."""

    key: str
    source: CaptureKeySource


def resolve_capture_key(
    *,
    url: str,
    intent_text: str | None,
    header_value: object = None,
    body_value: object = None,
) -> ResolvedCaptureKey:
    """Resolve the capture key: header, then body field, then derived."""
    key = normalize_capture_key(header_value, from_header=True)
    source = CaptureKeySource.HEADER
    if not key:
        key = normalize_capture_key(body_value)
        source = CaptureKeySource.BODY
    if not key:
        key = derive_capture_key(url, intent_text)
        source = CaptureKeySource.DERIVED

    with log_context(
        {
            fields.EVENT: fields.CAPTURE_KEY_RESOLVED_EVENT,
            fields.CAPTURE_KEY_SOURCE: source,
        }
    ):
        _LOGGER.debug("Resolved capture idempotency key")
    return ResolvedCaptureKey(key=key, source=source)
