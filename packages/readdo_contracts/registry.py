"""Process-scoped registry of compiled JSON Schema validators.

A ``SchemaRegistry`` owns one validator cache keyed by ``SchemaName``. The
cache starts empty, fills lazily on first use of each name, and is never
cleared; tests construct a fresh registry instead of mutating the default one.

Concurrent first use of one name may compile twice. Only the first stored
validator is ever returned, so the observable cached value is stable.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from packages.readdo_shared.config import ReaddoSettings
from packages.readdo_shared.logging import fields, get_logger, log_context

from .errors import SchemaCompileError, SchemaLoadError
from .names import SchemaName
from .source import DirectorySchemaSource, RepoSchemaSource, SchemaSource

_LOGGER = get_logger(__name__)

CompiledValidator = Validator


def coerce_schema_name(name: SchemaName | str) -> SchemaName:
    """Return ``name`` as a ``SchemaName``; unknown names are a load failure."""
    if isinstance(name, SchemaName):
        return name
    try:
        return SchemaName(name)
    except ValueError:
        raise SchemaLoadError(
            message=f"Unknown schema name: {name!r}",
            schema_name=str(name),
        ) from None


class SchemaRegistry:
    """Compile schema documents and cache validators per schema name."""

    def __init__(self, *, source: SchemaSource | None = None) -> None:
        self._source: SchemaSource = source if source is not None else RepoSchemaSource()
        self._validators: dict[SchemaName, CompiledValidator] = {}

    @property
    def source(self) -> SchemaSource:
        """Return the schema source this registry reads documents from."""
        return self._source

    def compile(self, name: SchemaName | str) -> CompiledValidator:
        """Load, parse, and compile the schema for ``name`` without caching.

        Unknown keywords are ignored and format assertions (``date-time``,
        ``email``, ``uri`` ...) are enabled.
        """
        schema_name = coerce_schema_name(name)
        path = self._source.path_for(schema_name)
        schema = _load_schema_document(schema_name, path)
        if not isinstance(schema, (dict, bool)):
            raise SchemaCompileError(
                message=f"Schema document for {schema_name.value} must be an object or boolean",
                schema_name=schema_name.value,
            )

        validator_cls = validator_for(schema, default=Draft202012Validator)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as exc:
            raise SchemaCompileError(
                message=f"Invalid schema document for {schema_name.value}: {exc.message}",
                schema_name=schema_name.value,
            ) from exc

        validator = validator_cls(schema, format_checker=validator_cls.FORMAT_CHECKER)
        with log_context(
            {
                fields.EVENT: fields.SCHEMA_COMPILED_EVENT,
                fields.SCHEMA_NAME: schema_name,
                fields.SCHEMA_PATH: path,
            }
        ):
            _LOGGER.info("Compiled schema contract")
        return validator

    def get(self, name: SchemaName | str) -> CompiledValidator:
        """Return the cached validator for ``name``, compiling on first use."""
        schema_name = coerce_schema_name(name)
        cached = self._validators.get(schema_name)
        if cached is not None:
            return cached
        return self._validators.setdefault(schema_name, self.compile(schema_name))

    def cached_names(self) -> tuple[SchemaName, ...]:
        """Return names with a cached validator, in first-use order."""
        return tuple(self._validators)


def _load_schema_document(name: SchemaName, path: Path) -> Any:
    """Read and parse one schema document as JSON."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(
            message=f"Unable to read schema document for {name.value}: {path}",
            schema_name=name.value,
            path=path,
        ) from exc

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(
            message=f"Schema document for {name.value} is not valid JSON: {path}",
            schema_name=name.value,
            path=path,
        ) from exc


def registry_from_settings(settings: ReaddoSettings) -> SchemaRegistry:
    """Build a registry whose source follows ``settings.contracts``."""
    contracts = settings.contracts
    if contracts.schema_dir is not None:
        return SchemaRegistry(source=DirectorySchemaSource(contracts.schema_dir))
    return SchemaRegistry(source=RepoSchemaSource(marker_dir=contracts.marker_dir))


_DEFAULT_REGISTRY = SchemaRegistry()


def get_registry() -> SchemaRegistry:
    """Return the process-local default schema registry."""
    return _DEFAULT_REGISTRY
