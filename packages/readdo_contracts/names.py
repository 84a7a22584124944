"""Closed set of logical schema contract names and capture domain enums."""

from __future__ import annotations

from enum import Enum

SCHEMA_FILE_SUFFIX = ".schema.json"


class SchemaName(str, Enum):
    """Logical contract names; each maps 1:1 to one schema document."""

    ITEM = "item"
    ARTIFACT_ENVELOPE = "artifact-envelope"
    EXTRACTION = "extraction"
    SUMMARY = "summary"
    SCORE = "score"
    TODOS = "todos"
    CARD = "card"
    EXPORT = "export"

    @property
    def filename(self) -> str:
        """Return the on-disk schema document filename for this contract."""
        return f"{self.value}{SCHEMA_FILE_SUFFIX}"


class SourceType(str, Enum):
    """Source classification attached to a captured item."""

    WEB = "web"
    YOUTUBE = "youtube"
    NEWSLETTER = "newsletter"
    OTHER = "other"


class ItemStatus(str, Enum):
    """Lifecycle states of a captured item in the downstream pipeline."""

    CAPTURED = "CAPTURED"
    QUEUED = "QUEUED"
    PROCESSING = "PROCESSING"
    READY = "READY"
    FAILED_EXTRACTION = "FAILED_EXTRACTION"
    FAILED_AI = "FAILED_AI"
    FAILED_EXPORT = "FAILED_EXPORT"
    SHIPPED = "SHIPPED"
    ARCHIVED = "ARCHIVED"


class Priority(str, Enum):
    """Reading priority assigned by the scoring step."""

    READ_NEXT = "READ_NEXT"
    WORTH_IT = "WORTH_IT"
    IF_TIME = "IF_TIME"
    SKIP = "SKIP"


class ArtifactType(str, Enum):
    """Artifact kinds produced for one item."""

    EXTRACTION = "extraction"
    SUMMARY = "summary"
    SCORE = "score"
    TODOS = "todos"
    CARD = "card"
    EXPORT = "export"


_ARTIFACT_SCHEMAS: dict[str, SchemaName] = {
    ArtifactType.EXTRACTION.value: SchemaName.EXTRACTION,
    ArtifactType.SUMMARY.value: SchemaName.SUMMARY,
    ArtifactType.SCORE.value: SchemaName.SCORE,
    ArtifactType.TODOS.value: SchemaName.TODOS,
    ArtifactType.CARD.value: SchemaName.CARD,
}


def schema_for_artifact_type(artifact_type: str | ArtifactType) -> SchemaName:
    """Return the payload schema for one artifact type.

    Unrecognized artifact types fall through to the export contract.
    """
    key = artifact_type.value if isinstance(artifact_type, ArtifactType) else str(artifact_type)
    return _ARTIFACT_SCHEMAS.get(key, SchemaName.EXPORT)
