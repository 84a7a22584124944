"""Capture idempotency key derivation and normalization."""

from packages.readdo_shared.idempotency.capture_key import (
    CAPTURE_KEY_DIGEST_LENGTH,
    CAPTURE_KEY_PREFIX,
    derive_capture_key,
    is_derived_capture_key,
    normalize_intent,
)
from packages.readdo_shared.idempotency.normalize import (
    RawKeyKind,
    RawKeyMaterial,
    classify_raw_key,
    normalize_capture_key,
    normalize_from_header_value,
    normalize_from_value,
)
from packages.readdo_shared.idempotency.resolve import (
    CaptureKeySource,
    ResolvedCaptureKey,
    resolve_capture_key,
)

__all__ = [
    "CAPTURE_KEY_DIGEST_LENGTH",
    "CAPTURE_KEY_PREFIX",
    "CaptureKeySource",
    "RawKeyKind",
    "RawKeyMaterial",
    "ResolvedCaptureKey",
    "classify_raw_key",
    "derive_capture_key",
    "is_derived_capture_key",
    "normalize_capture_key",
    "normalize_from_header_value",
    "normalize_from_value",
    "normalize_intent",
    "resolve_capture_key",
]
