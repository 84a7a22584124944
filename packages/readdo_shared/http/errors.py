"""Typed errors for inbound HTTP parsing helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpServerError(Exception):
    """Base error type for inbound HTTP parsing/validation helpers."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(frozen=True)
class InvalidBodyError(HttpServerError):
    """Inbound HTTP body is invalid for the expected shape."""


@dataclass(frozen=True)
class InvalidJsonBodyError(InvalidBodyError):
    """Inbound HTTP body is not valid JSON."""
