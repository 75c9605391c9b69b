"""Tests for clickup_mcp.client module."""

import asyncio
import json

import httpx
import pytest

from clickup_mcp.client import ClickUpClient, ClickUpError
from clickup_mcp.config import Settings

SETTINGS = Settings(api_key="pk_test")


def _run(handler, call):
    """Run call(client) against a ClickUp client backed by handler."""

    async def go():
        async with ClickUpClient(SETTINGS, transport=httpx.MockTransport(handler)) as client:
            return await call(client)

    return asyncio.run(go())


class TestRequests:
    """Tests for the outgoing HTTP requests."""

    def test_get_tasks_request(self) -> None:
        """get_tasks should GET the list's task endpoint with auth headers."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"tasks": []})

        _run(handler, lambda c: c.get_tasks("901"))

        (request,) = seen
        assert request.method == "GET"
        assert str(request.url) == "https://api.clickup.com/api/v2/list/901/task"
        assert request.headers["Authorization"] == "pk_test"
        assert request.headers["Content-Type"] == "application/json"

    def test_create_task_request(self) -> None:
        """create_task should POST the payload as JSON."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": "abc", "name": "A"})

        result = _run(handler, lambda c: c.create_task("901", {"name": "A"}))

        (request,) = seen
        assert request.method == "POST"
        assert request.url.path == "/api/v2/list/901/task"
        assert json.loads(request.content) == {"name": "A"}
        assert result == {"id": "abc", "name": "A"}


class TestErrors:
    """Tests for ClickUpError mapping."""

    def test_prefers_remote_err_field(self) -> None:
        """A non-2xx body with `err` should become the error message."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"err": "List not found", "ECODE": "X"})

        with pytest.raises(ClickUpError) as exc_info:
            _run(handler, lambda c: c.get_tasks("missing"))
        assert exc_info.value.message == "List not found"
        assert exc_info.value.status_code == 404

    def test_falls_back_to_status_message(self) -> None:
        """A non-2xx body without `err` should use the httpx message."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="oops")

        with pytest.raises(ClickUpError) as exc_info:
            _run(handler, lambda c: c.get_tasks("901"))
        assert "500" in exc_info.value.message
        assert exc_info.value.status_code == 500

    def test_transport_error(self) -> None:
        """Network failures should become ClickUpError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused")

        with pytest.raises(ClickUpError, match="connection refused"):
            _run(handler, lambda c: c.get_tasks("901"))

    def test_invalid_json(self) -> None:
        """A 2xx body that is not JSON should become ClickUpError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with pytest.raises(ClickUpError, match="Invalid JSON"):
            _run(handler, lambda c: c.get_tasks("901"))

    def test_missing_tasks_array(self) -> None:
        """A listing without a tasks array should become ClickUpError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"items": []})

        with pytest.raises(ClickUpError, match="tasks"):
            _run(handler, lambda c: c.get_tasks("901"))
