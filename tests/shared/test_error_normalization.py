"""Tests for mapping exceptions onto the shared error taxonomy."""

from __future__ import annotations

from pathlib import Path

from packages.readdo_contracts import (
    RepoRootNotFound,
    SchemaCompileError,
    SchemaLoadError,
    Violation,
)
from packages.readdo_contracts.errors import contract_violation
from packages.readdo_shared.errors import ErrorCategory, codes, exception_to_error


def test_contract_violation_maps_to_validation_error_with_details() -> None:
    """Payload rejections keep their ordered violation list."""
    error = contract_violation(
        "item",
        (
            Violation(path="/url", message="'url' is a required property"),
            Violation(path="/source_type", message="'podcast' is not one of [...]"),
        ),
    )

    detail = exception_to_error(error)

    assert detail.category is ErrorCategory.VALIDATION
    assert detail.code == codes.CONTRACT_VIOLATION
    assert detail.metadata["schema_name"] == "item"
    assert detail.metadata["violation_count"] == "2"
    assert [item["path"] for item in detail.details] == ["/url", "/source_type"]


def test_schema_deployment_errors_map_to_internal_errors(tmp_path: Path) -> None:
    """Missing or broken schema assets are not the producer's fault."""
    errors = [
        RepoRootNotFound(message="Unable to locate repo root", start_dir=tmp_path),
        SchemaLoadError(message="missing", schema_name="item", path=tmp_path / "item.schema.json"),
        SchemaCompileError(message="bad schema", schema_name="card"),
    ]

    for error in errors:
        detail = exception_to_error(error)
        assert detail.category is ErrorCategory.INTERNAL
        assert detail.code == codes.SCHEMA_UNAVAILABLE
        assert detail.metadata["exception_type"] == type(error).__name__


def test_other_exceptions_map_to_unexpected_internal_errors() -> None:
    """Anything outside the contract hierarchy is an unexpected server fault."""
    for error in (ValueError("bad"), KeyError("gone"), TimeoutError()):
        detail = exception_to_error(error)
        assert detail.category is ErrorCategory.INTERNAL
        assert detail.code == codes.UNEXPECTED_EXCEPTION
        assert detail.details == ()

    assert exception_to_error(TimeoutError()).message == "unexpected exception"
    assert exception_to_error(RuntimeError("boom")).message == "boom"
