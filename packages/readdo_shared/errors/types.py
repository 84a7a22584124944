"""Shared error types for Readdo capture ingestion.

Every failure surfaced to a producer is either something the producer can fix
(a rejected payload) or a deployment defect on the ingestion side.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ErrorCategory(str, Enum):
    """Who can act on an error: the producer or the deployment."""

    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object used in error response bodies."""

    code: str
    message: str
    category: ErrorCategory
    metadata: Mapping[str, str] = field(default_factory=dict)
    details: tuple[Mapping[str, Any], ...] = ()
