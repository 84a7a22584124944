"""Structured logging context for contract and capture events.

Values are rendered to strings when they are bound: enum members by value and
paths in POSIX form, so ``SchemaName.ITEM`` logs as ``item`` and a schema path
reads the same on every platform. Callers pass domain values straight in.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from pathlib import PurePath
from typing import Iterator, Mapping

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar("readdo_log_context", default={})


def render_context_value(value: object) -> str:
    """Render one context value the way it appears in log output."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, PurePath):
        return value.as_posix()
    return str(value)


def get_context() -> dict[str, str]:
    """Return a shallow copy of the current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind rendered values into the current context; ``None`` is skipped."""
    rendered = {
        key: render_context_value(value) for key, value in values.items() if value is not None
    }
    if rendered:
        _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **rendered})


def clear_context() -> None:
    """Drop every bound field, including seeded service fields."""
    _LOG_CONTEXT.set({})


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of a block, then restore the previous context."""
    token = _LOG_CONTEXT.set(_LOG_CONTEXT.get())
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)
