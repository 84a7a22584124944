"""Typed configuration models for Readdo capture ingestion settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "readdo" / "readdo.yaml"
DEFAULT_SCHEMA_MARKER_DIR = "docs/contracts/schemas"


class LoggingSettings(BaseModel):
    """Structured logging configuration shared by ingestion processes."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "readdo"
    environment: str = "dev"


class ContractsSettings(BaseModel):
    """Where the schema contract registry reads schema documents from."""

    model_config = ConfigDict(frozen=True)

    schema_dir: Path | None = None
    marker_dir: str = DEFAULT_SCHEMA_MARKER_DIR

    @field_validator("marker_dir", mode="before")
    @classmethod
    def _validate_marker_dir(cls, value: object) -> object:
        """Reject blank marker directories used by the upward repo-root walk."""
        if isinstance(value, str):
            normalized = value.strip().strip("/")
            if normalized == "":
                raise ValueError("marker_dir must be non-empty")
            return normalized
        return value


class IdempotencySettings(BaseModel):
    """Transport names carrying client-supplied capture idempotency keys."""

    model_config = ConfigDict(frozen=True)

    header_name: str = Field(default="Idempotency-Key", min_length=1)
    body_field: str = Field(default="capture_id", min_length=1)


class ReaddoSettings(BaseSettings):
    """Root runtime settings resolved from init/env sources.

    Constructing the model directly reads the real process environment.
    ``load_settings`` validates its own merged cascade instead, so an injected
    environment mapping is the only environment layer it sees.
    """

    model_config = SettingsConfigDict(
        env_prefix="READDO_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    contracts: ContractsSettings = Field(default_factory=ContractsSettings)
    idempotency: IdempotencySettings = Field(default_factory=IdempotencySettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply Readdo precedence: init > env > model defaults."""
        return (init_settings, env_settings)
