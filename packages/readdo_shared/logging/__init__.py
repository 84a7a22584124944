"""Public logging API for Readdo capture ingestion.

This package wraps Python's ``logging`` module with stdout emission and
structured context for contract and idempotency events.
"""

from .config import configure_logging, configure_logging_from_settings, get_logger
from .context import bind_context, clear_context, get_context, log_context, render_context_value

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_settings",
    "get_context",
    "get_logger",
    "log_context",
    "render_context_value",
]
