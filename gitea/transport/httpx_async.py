from __future__ import annotations

from typing import Any, Mapping

import httpx

from .base import Transport


class HttpxAsyncTransport(Transport):
    """Async handle around ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        base_url: str,
        default_headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(base_url=base_url, default_headers=default_headers, timeout=timeout)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=self._headers,
            timeout=timeout,
            transport=transport,
            event_hooks={"request": [self._aorder_headers]},
        )

    async def _aorder_headers(self, request: httpx.Request) -> None:
        self._order_headers(request)

    async def arequest(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        resp = await self._client.request(method, url, **kwargs)
        return self._handle_response(resp)

    async def aclose(self) -> None:
        if not self.closed:
            await self._client.aclose()
            self.closed = True

    async def __aenter__(self) -> "HttpxAsyncTransport":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
