"""Apply cached schema validators to payloads.

``validate`` never raises for a payload that merely fails its contract; it
returns ``Invalid`` with every violation in validator order. ``ensure`` is the
fail-fast wrapper used at the ingestion boundary. Registry and source errors
propagate from both, since they mean the deployment is broken.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Union

from jsonschema.exceptions import ValidationError

from packages.readdo_shared.logging import fields, get_logger, log_context

from .errors import Violation, contract_violation
from .names import SchemaName
from .registry import SchemaRegistry, coerce_schema_name, get_registry

_LOGGER = get_logger(__name__)

DEFAULT_VIOLATION_MESSAGE = "Invalid value"


@dataclass(frozen=True)
class Valid:
    """Payload satisfies its schema contract."""

    @property
    def ok(self) -> bool:
        """Always ``True``; lets callers branch without ``isinstance``."""
        return True


@dataclass(frozen=True)
class Invalid:
    """Payload violates its schema contract at one or more locations."""

    violations: tuple[Violation, ...]

    @property
    def ok(self) -> bool:
        """Always ``False``; ``violations`` holds at least one entry."""
        return False

    def as_dicts(self) -> list[dict[str, str]]:
        """Return the ordered violation list in wire shape."""
        return [violation.as_dict() for violation in self.violations]


ValidationResult = Union[Valid, Invalid]


def validate(
    name: SchemaName | str,
    payload: Any,
    *,
    registry: SchemaRegistry | None = None,
) -> ValidationResult:
    """Validate ``payload`` against the contract ``name``."""
    active = registry if registry is not None else get_registry()
    validator = active.get(name)
    violations = tuple(_to_violations(validator.iter_errors(payload)))
    if not violations:
        return Valid()
    return Invalid(violations=violations)


def ensure(
    name: SchemaName | str,
    payload: Any,
    *,
    registry: SchemaRegistry | None = None,
) -> None:
    """Raise ``ContractViolation`` when ``payload`` does not satisfy ``name``."""
    result = validate(name, payload, registry=registry)
    if isinstance(result, Valid):
        return

    schema_name = coerce_schema_name(name)
    with log_context(
        {
            fields.EVENT: fields.CONTRACT_REJECTED_EVENT,
            fields.SCHEMA_NAME: schema_name,
            fields.VIOLATION_COUNT: len(result.violations),
        }
    ):
        _LOGGER.warning("Payload rejected by schema contract")
    raise contract_violation(schema_name.value, result.violations)


def _to_violations(errors: Iterable[ValidationError]) -> Iterable[Violation]:
    """Map jsonschema errors to ``Violation`` values, preserving order."""
    for error in errors:
        yield Violation(
            path=_violation_path(error),
            message=error.message or DEFAULT_VIOLATION_MESSAGE,
        )


def _violation_path(error: ValidationError) -> str:
    """Prefer the instance location; fall back to the violated schema location.

    A missing required property is reported at the property itself rather than
    at its parent object.
    """
    location: list[Any] = list(error.absolute_path)
    if error.validator == "required":
        missing = _missing_property(error)
        if missing is not None:
            location.append(missing)

    if location:
        return _json_pointer(location)
    return "#" + _json_pointer(list(error.absolute_schema_path))


def _missing_property(error: ValidationError) -> str | None:
    """Return the property name a ``required`` error refers to, if derivable."""
    required = error.validator_value
    instance = error.instance
    if not isinstance(required, list) or not isinstance(instance, dict):
        return None
    for candidate in required:
        if candidate in instance:
            continue
        if error.message == f"{candidate!r} is a required property":
            return str(candidate)
    return None


def _json_pointer(parts: list[Any]) -> str:
    """Render location parts as an RFC 6901 JSON pointer."""
    return "".join(
        "/" + str(part).replace("~", "~0").replace("/", "~1") for part in parts
    )
