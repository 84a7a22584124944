"""Tests for the FastAPI capture ingestion boundary helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from packages.readdo_contracts import ContractViolation, DirectorySchemaSource, SchemaRegistry
from packages.readdo_shared.capture_urls import canonicalize_url_for_capture
from packages.readdo_shared.config import IdempotencySettings, load_settings
from packages.readdo_shared.http import (
    InvalidBodyError,
    accept_capture,
    create_app,
    read_capture_submission,
)
from packages.readdo_shared.idempotency import CaptureKeySource, derive_capture_key

_SCHEMA_DIR = Path(__file__).resolve().parents[2] / "docs" / "contracts" / "schemas"
_DIGEST = "0123456789ABCDEF0123456789ABCDEF"


def _item(**overrides: Any) -> dict[str, Any]:
    """Return a minimal valid capture body."""
    payload: dict[str, Any] = {
        "url": "https://Example.com:443/article?utm_source=mail&a=1",
        "title": "Example article",
        "domain": "example.com",
        "source_type": "web",
        "intent_text": "pick a rollout checklist",
    }
    payload.update(overrides)
    return payload


def _client(schema_dir: Path = _SCHEMA_DIR, **settings_overrides: Any) -> TestClient:
    """Build an app exposing one capture route over a fresh registry."""
    registry = SchemaRegistry(source=DirectorySchemaSource(schema_dir))
    settings = load_settings(
        cli_params=settings_overrides,
        environ={},
        config_path=schema_dir / "absent-readdo.yaml",
    )
    app: FastAPI = create_app(title="readdo-test")

    @app.post("/api/capture")
    async def capture(request: Request) -> dict[str, str]:
        submission = await read_capture_submission(request, registry=registry, settings=settings)
        return {
            "capture_key": submission.capture_key,
            "key_source": submission.key_source.value,
        }

    return TestClient(app)


def test_header_key_is_canonicalized() -> None:
    """A derived-looking header key is lowercased."""
    response = _client().post(
        "/api/capture",
        json=_item(),
        headers={"Idempotency-Key": f"EXTCAP_{_DIGEST}"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "capture_key": f"extcap_{_DIGEST.lower()}",
        "key_source": "header",
    }


def test_repeated_header_lines_use_first_token() -> None:
    """Repeated header lines are scanned in arrival order."""
    response = _client().post(
        "/api/capture",
        json=_item(),
        headers=[("Idempotency-Key", " , "), ("Idempotency-Key", "retry-7, retry-8")],
    )

    assert response.json()["capture_key"] == "retry-7"


def test_body_capture_id_used_without_header() -> None:
    """The body field supplies the key when no header is sent."""
    response = _client().post("/api/capture", json=_item(capture_id=["", " client-key "]))

    assert response.json() == {"capture_key": "client-key", "key_source": "body"}


def test_configured_header_name_is_honoured() -> None:
    """The idempotency header name comes from settings."""
    client = _client(idempotency={"header_name": "X-Capture-Key"})

    response = client.post(
        "/api/capture",
        json=_item(),
        headers={"X-Capture-Key": "custom", "Idempotency-Key": "ignored"},
    )

    assert response.json()["capture_key"] == "custom"


def test_key_is_derived_from_canonical_url_when_absent() -> None:
    """Without client keys the canonical URL and intent derive the key."""
    body = _item()

    response = _client().post("/api/capture", json=body)

    expected = derive_capture_key(canonicalize_url_for_capture(body["url"]), body["intent_text"])
    assert response.json() == {"capture_key": expected, "key_source": "derived"}


def test_contract_violation_renders_400_with_details() -> None:
    """Invalid bodies are rejected with the ordered violation list."""
    body = _item()
    del body["url"]

    response = _client().post("/api/capture", json=body)

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "CONTRACT_VIOLATION"
    assert error["details"][0]["path"] == "/url"


def test_non_json_body_renders_400() -> None:
    """Unparseable bodies are request-shape errors."""
    response = _client().post(
        "/api/capture",
        content=b"url=https://example.com",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_JSON_BODY"


def test_non_object_body_renders_400() -> None:
    """A JSON array is not a capture body."""
    response = _client().post("/api/capture", json=[_item()])

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "VALIDATION_ERROR",
        "message": "Capture body must be a JSON object",
    }


def test_missing_schema_renders_500(tmp_path: Path) -> None:
    """A registry without schema documents is a server-side defect."""
    response = _client(schema_dir=tmp_path).post("/api/capture", json=_item())

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "SCHEMA_UNAVAILABLE"


def test_accept_capture_without_http_transport() -> None:
    """The boundary logic works on already-decoded bodies."""
    registry = SchemaRegistry(source=DirectorySchemaSource(_SCHEMA_DIR))

    submission = accept_capture(
        _item(capture_id="body-key"),
        header_values=[],
        registry=registry,
        idempotency=IdempotencySettings(),
    )

    assert submission.capture_key == "body-key"
    assert submission.key_source is CaptureKeySource.BODY
    assert submission.payload["title"] == "Example article"


def test_accept_capture_rejects_invalid_bodies() -> None:
    """Non-object and contract-violating bodies raise typed errors."""
    registry = SchemaRegistry(source=DirectorySchemaSource(_SCHEMA_DIR))

    with pytest.raises(InvalidBodyError):
        accept_capture("https://example.com", registry=registry)
    with pytest.raises(ContractViolation):
        accept_capture(_item(source_type="podcast"), registry=registry)


def test_configured_body_field_supplies_key_and_is_lifted_out() -> None:
    """A non-default body field is read as the key and kept out of the payload."""
    registry = SchemaRegistry(source=DirectorySchemaSource(_SCHEMA_DIR))

    submission = accept_capture(
        _item(client_key=" my-key "),
        registry=registry,
        idempotency=IdempotencySettings(body_field="client_key"),
    )

    assert submission.capture_key == "my-key"
    assert submission.key_source is CaptureKeySource.BODY
    assert "client_key" not in submission.payload


def test_configured_body_field_over_http() -> None:
    """The body field name comes from settings; ``capture_id`` is then not a key."""
    client = _client(idempotency={"body_field": "client_key"})

    keyed = client.post("/api/capture", json=_item(client_key="custom"))
    unkeyed = client.post("/api/capture", json=_item(capture_id="ignored"))

    assert keyed.json() == {"capture_key": "custom", "key_source": "body"}
    assert unkeyed.json()["key_source"] == "derived"


def test_default_body_field_stays_under_contract_validation() -> None:
    """``capture_id`` is part of the item contract and is validated with it."""
    registry = SchemaRegistry(source=DirectorySchemaSource(_SCHEMA_DIR))

    with pytest.raises(ContractViolation):
        accept_capture(_item(capture_id=42), registry=registry)
