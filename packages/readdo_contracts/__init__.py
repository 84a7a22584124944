"""Public schema contract API for Readdo capture ingestion."""

from .errors import (
    ContractError,
    ContractViolation,
    RepoRootNotFound,
    SchemaCompileError,
    SchemaLoadError,
    Violation,
)
from .names import (
    ArtifactType,
    ItemStatus,
    Priority,
    SchemaName,
    SourceType,
    schema_for_artifact_type,
)
from .registry import (
    CompiledValidator,
    SchemaRegistry,
    get_registry,
    registry_from_settings,
)
from .source import DirectorySchemaSource, RepoSchemaSource, SchemaSource, find_repo_root
from .validation import Invalid, Valid, ValidationResult, ensure, validate

__all__ = [
    "ArtifactType",
    "CompiledValidator",
    "ContractError",
    "ContractViolation",
    "DirectorySchemaSource",
    "Invalid",
    "ItemStatus",
    "Priority",
    "RepoRootNotFound",
    "RepoSchemaSource",
    "SchemaCompileError",
    "SchemaLoadError",
    "SchemaName",
    "SchemaRegistry",
    "SchemaSource",
    "SourceType",
    "Valid",
    "ValidationResult",
    "Violation",
    "ensure",
    "find_repo_root",
    "get_registry",
    "registry_from_settings",
    "schema_for_artifact_type",
    "validate",
]
