"""Factory helpers for ingestion error details."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from . import codes
from .types import ErrorCategory, ErrorDetail


def validation_error(
    message: str,
    *,
    code: str = codes.VALIDATION_ERROR,
    metadata: Mapping[str, str] | None = None,
    details: Iterable[Mapping[str, Any]] = (),
) -> ErrorDetail:
    """Create a producer-fixable error; ``details`` keeps violation order."""
    return _detail(ErrorCategory.VALIDATION, code, message, metadata, details)


def internal_error(
    message: str,
    *,
    code: str = codes.UNEXPECTED_EXCEPTION,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create a deployment-side error the producer cannot fix."""
    return _detail(ErrorCategory.INTERNAL, code, message, metadata, ())


def _detail(
    category: ErrorCategory,
    code: str,
    message: str,
    metadata: Mapping[str, str] | None,
    details: Iterable[Mapping[str, Any]],
) -> ErrorDetail:
    return ErrorDetail(
        code=code,
        message=message,
        category=category,
        metadata=dict(metadata or {}),
        details=tuple(dict(item) for item in details),
    )
