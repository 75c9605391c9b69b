"""Async client for the ClickUp REST API."""

import logging
from types import TracebackType
from typing import Any

import httpx

from .config import Settings

logger = logging.getLogger(__name__)


class ClickUpError(Exception):
    """A ClickUp API call failed (transport, HTTP status, or response shape)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(exc: httpx.HTTPError) -> str:
    """Prefer ClickUp's `err` field, fall back to the httpx message."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("err"), str) and body["err"]:
            return body["err"]
    return str(exc) or type(exc).__name__


class ClickUpClient:
    """Thin wrapper around one httpx.AsyncClient bound to the ClickUp API.

    Use as an async context manager; the underlying connection pool lives
    until the context exits.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=settings.base_url,
            headers={
                "Authorization": settings.api_key,
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def __aenter__(self) -> "ClickUpClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self._http.__aexit__(exc_type, exc, tb)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ClickUpError(_error_message(e), e.response.status_code) from e
        except httpx.HTTPError as e:
            raise ClickUpError(_error_message(e)) from e
        except httpx.InvalidURL as e:
            raise ClickUpError(str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            raise ClickUpError(
                f"Invalid JSON in response from {method} {path}",
                response.status_code,
            ) from e

    async def get_tasks(self, list_id: str) -> list[Any]:
        """
        Fetch the tasks of a list.

        Only the first page ClickUp returns is read.

        Args:
            list_id: ClickUp list ID

        Returns:
            The `tasks` array from the response
        """
        logger.debug("Listing tasks for list %s", list_id)
        data = await self._request("GET", f"/list/{list_id}/task")
        tasks = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(tasks, list):
            raise ClickUpError("Response did not contain a 'tasks' array")
        return tasks

    async def create_task(self, list_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Create a task in a list.

        Args:
            list_id: ClickUp list ID
            payload: Request body (name, optional description and assignees)

        Returns:
            The created task object
        """
        logger.debug("Creating task in list %s", list_id)
        data = await self._request("POST", f"/list/{list_id}/task", json=payload)
        if not isinstance(data, dict):
            raise ClickUpError("Response was not a task object")
        return data
