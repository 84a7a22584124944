"""Public shared error API for Readdo capture ingestion."""

from . import codes
from .factories import internal_error, validation_error
from .normalize import exception_to_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "codes",
    "exception_to_error",
    "internal_error",
    "validation_error",
]
