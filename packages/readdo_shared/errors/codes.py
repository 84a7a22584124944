"""Machine-readable error codes carried in ingestion error bodies."""

# Producer-fixable
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_JSON_BODY = "INVALID_JSON_BODY"
CONTRACT_VIOLATION = "CONTRACT_VIOLATION"

# Deployment-side
SCHEMA_UNAVAILABLE = "SCHEMA_UNAVAILABLE"
UNEXPECTED_EXCEPTION = "UNEXPECTED_EXCEPTION"
