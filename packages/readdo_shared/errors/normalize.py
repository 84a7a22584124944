"""Map exceptions raised during capture ingestion onto ``ErrorDetail``."""

from __future__ import annotations

from packages.readdo_contracts.errors import ContractError, ContractViolation

from . import codes
from .factories import internal_error, validation_error
from .types import ErrorDetail


def exception_to_error(exc: Exception) -> ErrorDetail:
    """Normalize one exception into a shared ``ErrorDetail``.

    A ``ContractViolation`` is a payload rejection the producer can fix. Every
    other ``ContractError`` means the schema assets are unusable in this
    deployment. Anything else is an unexpected internal failure.
    """
    metadata = {"exception_type": type(exc).__name__}

    if isinstance(exc, ContractViolation):
        metadata.update(
            {
                "schema_name": exc.schema_name,
                "violation_count": str(len(exc.violations)),
            }
        )
        return validation_error(
            f"Payload does not satisfy the {exc.schema_name} contract",
            code=codes.CONTRACT_VIOLATION,
            metadata=metadata,
            details=exc.as_dicts(),
        )

    if isinstance(exc, ContractError):
        return internal_error(str(exc), code=codes.SCHEMA_UNAVAILABLE, metadata=metadata)

    return internal_error(str(exc) or "unexpected exception", metadata=metadata)
