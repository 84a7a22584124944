"""Public API for shared Readdo configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_SCHEMA_MARKER_DIR,
    ContractsSettings,
    IdempotencySettings,
    LoggingSettings,
    ReaddoSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_SCHEMA_MARKER_DIR",
    "ContractsSettings",
    "IdempotencySettings",
    "LoggingSettings",
    "ReaddoSettings",
    "load_settings",
]
