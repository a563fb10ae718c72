"""Tests for the application factory, middleware and error handlers."""

import logging
import uuid

import pytest
from fastapi.exceptions import RequestValidationError
from httpx import ASGITransport, AsyncClient

from facts_api.core.errors import _validation_message
from facts_api.core.logging import RequestIdFilter
from facts_api.core.request_context import set_request_id
from facts_api.features.facts.routes.dependencies import (
    get_completion_client,
    get_fact_repository,
)
from facts_api.main import create_app


@pytest.fixture
def build_client(settings_env, fact_repository, completion_client):
    """Build an app from current settings and return a client factory."""

    def build(**env: str) -> AsyncClient:
        settings_env(**env)
        app = create_app()
        app.dependency_overrides[get_fact_repository] = lambda: fact_repository
        app.dependency_overrides[get_completion_client] = lambda: completion_client
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return build


@pytest.mark.asyncio
async def test_health_check_sets_request_id(build_client):
    async with build_client() as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert uuid.UUID(response.headers["X-Request-Id"])


@pytest.mark.asyncio
async def test_router_is_mounted_under_api_prefix(build_client):
    async with build_client(API_PREFIX="/api/v1") as client:
        mounted = await client.post(
            "/api/v1/parse", json={"text": "Some text", "context": "Worm"}
        )
        unmounted = await client.post(
            "/parse", json={"text": "Some text", "context": "Worm"}
        )

    assert mounted.status_code == 200
    assert mounted.json() == {"facts": ["fact one", "fact two"]}
    assert unmounted.status_code == 404
    assert unmounted.json() == {"error": "Not Found"}


@pytest.mark.asyncio
async def test_unhandled_error_returns_500_with_request_id(settings_env):
    settings_env()
    app = create_app()

    async def broken() -> dict[str, str]:
        raise RuntimeError("database password is hunter2")

    app.add_api_route("/broken", broken)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/broken")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert uuid.UUID(response.headers["X-Request-Id"])


class TestValidationMessage:
    def test_text_errors_win_over_context_errors(self):
        exc = RequestValidationError(
            [
                {"loc": ("body", "context"), "msg": "bad", "type": "string_type"},
                {"loc": ("body", "text"), "msg": "bad", "type": "string_type"},
            ]
        )

        assert _validation_message(exc) == "Invalid text parameter"

    def test_context_error(self):
        exc = RequestValidationError(
            [{"loc": ("body", "context"), "msg": "bad", "type": "string_type"}]
        )

        assert _validation_message(exc) == "Invalid context parameter"

    def test_body_level_error(self):
        exc = RequestValidationError(
            [{"loc": ("body", 0), "msg": "bad", "type": "json_invalid"}]
        )

        assert _validation_message(exc) == "Invalid request body"


def test_request_id_filter_tags_records():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    request_id = uuid.uuid4()

    set_request_id(request_id)
    try:
        RequestIdFilter().filter(record)
    finally:
        set_request_id(None)

    assert record.request_id == str(request_id)


def test_request_id_filter_without_request():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    RequestIdFilter().filter(record)

    assert record.request_id == "-"
