"""Capture ingestion boundary: validate the body and resolve its key.

This module stops at the contract layer. It does not store the capture or
decide what a repeated key means; callers own both.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from fastapi import Request

from packages.readdo_contracts import SchemaName, SchemaRegistry, ensure
from packages.readdo_shared.capture_urls import canonicalize_url_for_capture
from packages.readdo_shared.config import IdempotencySettings, ReaddoSettings
from packages.readdo_shared.idempotency import CaptureKeySource, resolve_capture_key

from .errors import InvalidBodyError
from .server import get_header_values, read_json_body

ITEM_CAPTURE_ID_FIELD = "capture_id"


@dataclass(frozen=True)
class CaptureSubmission:
    """One accepted capture payload and its effective idempotency key."""

    payload: Mapping[str, Any]
    capture_key: str
    key_source: CaptureKeySource


def accept_capture(
    body: Any,
    *,
    header_values: list[str] | None = None,
    registry: SchemaRegistry | None = None,
    idempotency: IdempotencySettings | None = None,
) -> CaptureSubmission:
    """Validate one decoded capture body and resolve its capture key.

    A ``body_field`` other than the item contract's own ``capture_id`` is
    lifted out of the body before validation and is absent from the returned
    payload. The derived-key fallback hashes the canonicalized URL, so links
    that differ only by tracking parameters or default ports share one key.
    """
    if not isinstance(body, dict):
        raise InvalidBodyError(message="Capture body must be a JSON object")

    names = idempotency if idempotency is not None else IdempotencySettings()
    payload = dict(body)
    body_value = payload.get(names.body_field)
    if names.body_field != ITEM_CAPTURE_ID_FIELD:
        payload.pop(names.body_field, None)
    ensure(SchemaName.ITEM, payload, registry=registry)

    resolved = resolve_capture_key(
        url=canonicalize_url_for_capture(payload["url"]),
        intent_text=payload["intent_text"],
        header_value=header_values or None,
        body_value=body_value,
    )
    return CaptureSubmission(
        payload=payload,
        capture_key=resolved.key,
        key_source=resolved.source,
    )


async def read_capture_submission(
    request: Request,
    *,
    registry: SchemaRegistry | None = None,
    settings: ReaddoSettings | None = None,
) -> CaptureSubmission:
    """Read, validate, and key one capture request."""
    idempotency = settings.idempotency if settings is not None else IdempotencySettings()
    body = await read_json_body(request)
    return accept_capture(
        body,
        header_values=get_header_values(request, idempotency.header_name),
        registry=registry,
        idempotency=idempotency,
    )
