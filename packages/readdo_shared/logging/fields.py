"""Canonical logging field names for structured ingestion logs.

These constants define a stable key set for structured logs and context
propagation so contract and idempotency events stay queryable.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"
EVENT = "event"

# Contract registry fields.
SCHEMA_NAME = "schema_name"
SCHEMA_PATH = "schema_path"
SCHEMA_DIR = "schema_dir"
VIOLATION_COUNT = "violation_count"

# Idempotency fields. Key values themselves are never logged.
CAPTURE_KEY_SOURCE = "capture_key_source"

# Event names.
SCHEMA_COMPILED_EVENT = "schema_compiled"
SCHEMA_DIR_RESOLVED_EVENT = "schema_dir_resolved"
CONTRACT_REJECTED_EVENT = "contract_rejected"
CAPTURE_KEY_RESOLVED_EVENT = "capture_key_resolved"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
