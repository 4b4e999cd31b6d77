"""Async client for the admin API.

Every call returns the ``data`` member of the response envelope or raises
one of the errors from :mod:`siteadmin.core.errors`. Transport failures and
timeouts surface as ``NetworkError``; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from siteadmin.config import settings
from siteadmin.core.errors import (
    AdminError,
    ConflictError,
    FieldProblem,
    NetworkError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_from_response(status_code: int, payload: dict[str, Any]) -> AdminError:
    """Rebuild the server-side error from an error envelope."""
    message = payload.get("message") or f"HTTP {status_code}"
    if status_code in (400, 422):
        problems = [
            FieldProblem(item.get("field", ""), item.get("message", "Invalid value"))
            for item in payload.get("errors") or []
        ]
        return ValidationError(problems, message)
    if status_code == 404:
        return NotFoundError(message=message)
    if status_code == 409:
        return ConflictError(message)
    if status_code >= 500:
        return StoreError(message)
    error = AdminError(message)
    error.status_code = status_code
    return error


class AdminApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        prefix: str = settings.API_PREFIX,
        timeout: float = settings.CLIENT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.prefix = prefix.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> AdminApiClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        resource: str,
        *,
        path: str = "",
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        client = await self._get_client()
        url = f"{self.prefix}/{resource}{path}"
        try:
            resp = await client.request(method, url, params=params, json=json)
        except httpx.TransportError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise NetworkError() from exc

        try:
            payload = resp.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {"data": payload}

        if resp.is_success:
            return payload.get("data")
        raise error_from_response(resp.status_code, payload)

    # ------------------------------------------------------------------
    # Resource contract
    # ------------------------------------------------------------------

    async def list(self, resource: str, scope: dict[str, Any] | None = None) -> list[dict]:
        params = {k: ("null" if v is None else v) for k, v in (scope or {}).items()}
        return await self.request("GET", resource, params=params or None)

    async def get(self, resource: str, record_id: int) -> dict:
        return await self.request("GET", resource, path=f"/{record_id}")

    async def create(self, resource: str, data: dict[str, Any]) -> dict:
        return await self.request("POST", resource, json=data)

    async def update(self, resource: str, data: dict[str, Any]) -> dict:
        return await self.request("PUT", resource, json=data)

    async def delete(self, resource: str, record_id: int) -> None:
        await self.request("DELETE", resource, params={"id": record_id})

    async def reorder(self, resource: str, ids: list[int], scope: dict[str, Any] | None = None) -> list[dict]:
        return await self.request("PUT", resource, path="/reorder", json={"ids": list(ids), **(scope or {})})
