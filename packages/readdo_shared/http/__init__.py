"""Public HTTP boundary helpers for capture ingestion."""

from .errors import HttpServerError, InvalidBodyError, InvalidJsonBodyError
from .ingest import CaptureSubmission, accept_capture, read_capture_submission
from .server import (
    create_app,
    error_response,
    get_header_values,
    read_json_body,
    read_raw_body,
    register_error_handlers,
)

__all__ = [
    "CaptureSubmission",
    "HttpServerError",
    "InvalidBodyError",
    "InvalidJsonBodyError",
    "accept_capture",
    "create_app",
    "error_response",
    "get_header_values",
    "read_capture_submission",
    "read_json_body",
    "read_raw_body",
    "register_error_handlers",
]
