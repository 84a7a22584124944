"""Derived capture keys.

A derived key is ``extcap_`` followed by the first 32 lowercase hex characters
of a SHA-256 digest over ``url + "\\n" + normalized intent``. Truncation to 128
bits is sized for a per-user capture namespace, not global uniqueness.
"""

from __future__ import annotations

import hashlib
import re

CAPTURE_KEY_PREFIX = "extcap_"
CAPTURE_KEY_DIGEST_LENGTH = 32

# ECMAScript WhiteSpace and LineTerminator; keys must match across producers.
_WHITESPACE_RUN_RE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)
_DERIVED_KEY_RE = re.compile(
    rf"{CAPTURE_KEY_PREFIX}([0-9a-f]{{{CAPTURE_KEY_DIGEST_LENGTH}}})",
    re.IGNORECASE | re.ASCII,
)


def normalize_intent(text: str | None) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    if text is None:
        return ""
    return _WHITESPACE_RUN_RE.sub(" ", text).strip(" ")


def derive_capture_key(url: str, intent_text: str | None) -> str:
    """Return the deterministic capture key for one URL and intent."""
    material = f"{url}\n{normalize_intent(intent_text)}".encode("utf-8")
    digest = hashlib.sha256(material).hexdigest()[:CAPTURE_KEY_DIGEST_LENGTH]
    return f"{CAPTURE_KEY_PREFIX}{digest}"


def match_derived_capture_key(value: str) -> re.Match[str] | None:
    """Full-match ``value`` against the derived-key grammar, ignoring case."""
    return _DERIVED_KEY_RE.fullmatch(value)


def is_derived_capture_key(value: str) -> bool:
    """Return whether ``value`` has the exact derived-key shape.

    Prefix-only matches with a wrong digest length are not derived keys.
    """
    return match_derived_capture_key(value) is not None
