"""Base classes for client-bound endpoints."""
from __future__ import annotations

from typing import Any

import httpx


class _ResourceBase:
    def __init__(self, client: Any):
        if client is None:
            raise ValueError("endpoint requires a client")
        self._client = client

    @property
    def client(self) -> Any:
        return self._client

    def _get_json(self, resp: httpx.Response) -> Any:
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    @staticmethod
    def _require(value: str, name: str) -> str:
        if not value or not str(value).strip():
            raise ValueError(f"{name} must not be blank")
        return str(value).strip()


class BaseResource(_ResourceBase):
    """Sync endpoint: every call opens and closes its own transport handle."""

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        with self._client.create_base_client() as t:
            resp = t.request(method, path, **kwargs)
            return self._get_json(resp)


class BaseAsyncResource(_ResourceBase):
    """Async endpoint: every call opens and closes its own transport handle."""

    async def _arequest(self, method: str, path: str, **kwargs: Any) -> Any:
        async with self._client.create_base_client() as t:
            resp = await t.arequest(method, path, **kwargs)
            return self._get_json(resp)
