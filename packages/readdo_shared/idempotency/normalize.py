"""Reduce untrusted idempotency key material to one canonical token.

Raw key material arrives in three shapes: absent, a single scalar, or a
sequence of candidates (a multi-valued body field or repeated header lines).
``classify_raw_key`` tags the shape once so each normalizer dispatches on the
tag instead of inspecting types inline.

The empty string is the "no key supplied" signal; callers fall back to
``derive_capture_key`` when they receive it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .capture_key import CAPTURE_KEY_PREFIX, match_derived_capture_key

HEADER_VALUE_SEPARATOR = ","


class RawKeyKind(str, Enum):
    """Shape of raw idempotency key material."""

    ABSENT = "absent"
    SCALAR = "scalar"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class RawKeyMaterial:
    """Raw key material tagged with its shape."""

    kind: RawKeyKind
    values: tuple[object, ...] = ()


def classify_raw_key(raw: object) -> RawKeyMaterial:
    """Tag ``raw`` as absent, scalar, or sequence material."""
    if raw is None:
        return RawKeyMaterial(kind=RawKeyKind.ABSENT)
    if isinstance(raw, (str, bytes, bytearray)):
        return RawKeyMaterial(kind=RawKeyKind.SCALAR, values=(raw,))
    if isinstance(raw, Sequence):
        return RawKeyMaterial(kind=RawKeyKind.SEQUENCE, values=tuple(raw))
    return RawKeyMaterial(kind=RawKeyKind.SCALAR, values=(raw,))


def normalize_from_value(raw: object) -> str:
    """Return the first non-blank trimmed candidate from a body-field value."""
    material = classify_raw_key(raw)
    if material.kind is RawKeyKind.ABSENT:
        return ""
    if material.kind is RawKeyKind.SCALAR:
        return _coerce_text(material.values[0]).strip()

    for entry in material.values:
        candidate = _coerce_text(entry).strip()
        if candidate:
            return candidate
    return ""


def normalize_from_header_value(raw: object) -> str:
    """Return the first non-blank comma-separated token from header material.

    Sequences are scanned entry by entry; the first token found in any entry
    wins.
    """
    material = classify_raw_key(raw)
    if material.kind is RawKeyKind.ABSENT:
        return ""

    for entry in material.values:
        if entry is None:
            continue
        token = _first_header_token(_coerce_text(entry))
        if token:
            return token
    return ""


def normalize_capture_key(raw: object, from_header: bool = False) -> str:
    """Normalize raw key material into a canonical capture key.

    Keys matching the derived-key grammar are re-emitted with a lowercase
    prefix and digest. Any other non-empty value is an opaque custom key and is
    returned trimmed but otherwise unchanged.
    """
    key = normalize_from_header_value(raw) if from_header else normalize_from_value(raw)
    if not key:
        return ""

    match = match_derived_capture_key(key)
    if match is None:
        return key
    return f"{CAPTURE_KEY_PREFIX}{match.group(1).lower()}"


def _first_header_token(line: str) -> str:
    """Return the first non-empty trimmed segment of one header line."""
    for segment in line.split(HEADER_VALUE_SEPARATOR):
        token = segment.strip()
        if token:
            return token
    return ""


def _coerce_text(value: object) -> str:
    """Coerce one raw candidate to text; ``None`` becomes empty."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        # HTTP header bytes are latin-1 per RFC 9110.
        return bytes(value).decode("latin-1")
    return str(value)
