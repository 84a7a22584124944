"""Minimal FastAPI helpers for raw request handling and error responses."""

from __future__ import annotations

import json
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from packages.readdo_contracts.errors import ContractError
from packages.readdo_shared.config import ReaddoSettings
from packages.readdo_shared.errors import (
    ErrorCategory,
    ErrorDetail,
    codes,
    exception_to_error,
    validation_error,
)
from packages.readdo_shared.logging import configure_logging_from_settings

from .errors import HttpServerError, InvalidBodyError, InvalidJsonBodyError

_STATUS_BY_CATEGORY = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.INTERNAL: 500,
}


def create_app(
    *,
    title: str = "readdo",
    version: str = "0.0.0",
    settings: ReaddoSettings | None = None,
) -> FastAPI:
    """Create a FastAPI app with contract error handlers installed.

    When ``settings`` is given, its ``logging`` section configures logging.
    """
    if settings is not None:
        configure_logging_from_settings(settings.logging)
    app = FastAPI(title=title, version=version)
    register_error_handlers(app)
    return app


def register_error_handlers(app: FastAPI) -> None:
    """Render contract and request-shape errors as JSON error bodies."""

    async def _handle(_: Request, exc: Exception) -> JSONResponse:
        return error_response(exc)

    app.add_exception_handler(ContractError, _handle)
    app.add_exception_handler(HttpServerError, _handle)


def error_response(exc: Exception) -> JSONResponse:
    """Map one exception to ``{"error": {"code", "message", "details"}}``."""
    detail = _error_detail(exc)
    body: dict[str, Any] = {"code": detail.code, "message": detail.message}
    if detail.details:
        body["details"] = [dict(item) for item in detail.details]
    return JSONResponse(
        status_code=_STATUS_BY_CATEGORY[detail.category],
        content={"error": body},
    )


def get_header_values(request: Request, name: str) -> list[str]:
    """Return every value of a possibly repeated header, in arrival order."""
    return request.headers.getlist(name)


async def read_raw_body(request: Request) -> bytes:
    """Read raw request body bytes without interpretation."""
    return await request.body()


async def read_json_body(request: Request) -> Any:
    """Read and decode one request body as JSON."""
    body = await read_raw_body(request)
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonBodyError(message="Body is not valid JSON") from exc


def _error_detail(exc: Exception) -> ErrorDetail:
    if isinstance(exc, InvalidJsonBodyError):
        return validation_error(exc.message, code=codes.INVALID_JSON_BODY)
    if isinstance(exc, InvalidBodyError):
        return validation_error(exc.message)
    return exception_to_error(exc)
