"""Typed errors raised by the schema contract registry and validator."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ContractError(Exception):
    """Base error type for schema contract failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(frozen=True)
class RepoRootNotFound(ContractError):
    """No ancestor directory contains the schema storage folder."""

    start_dir: Path | None = None


@dataclass(frozen=True)
class SchemaLoadError(ContractError):
    """Schema document is unknown, missing, or not valid JSON."""

    schema_name: str = ""
    path: Path | None = None


@dataclass(frozen=True)
class SchemaCompileError(ContractError):
    """Schema document parsed but is not itself a valid JSON Schema."""

    schema_name: str = ""


@dataclass(frozen=True)
class Violation:
    """One violated constraint at a payload location."""

    path: str
    message: str

    def as_dict(self) -> dict[str, str]:
        """Return the wire shape ``{"path": ..., "message": ...}``."""
        return {"path": self.path, "message": self.message}


@dataclass(frozen=True)
class ContractViolation(ContractError):
    """Payload failed validation against a schema contract."""

    schema_name: str = ""
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    def as_dicts(self) -> list[dict[str, str]]:
        """Return the ordered violation list in wire shape."""
        return [violation.as_dict() for violation in self.violations]


def contract_violation(schema_name: str, violations: tuple[Violation, ...]) -> ContractViolation:
    """Build a ``ContractViolation`` whose message carries the serialized list."""
    serialized: list[dict[str, Any]] = [item.as_dict() for item in violations]
    return ContractViolation(
        message=f"Schema validation failed for {schema_name}: {json.dumps(serialized)}",
        schema_name=schema_name,
        violations=violations,
    )
