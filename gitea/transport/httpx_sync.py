from __future__ import annotations

from typing import Any, Mapping

import httpx

from .base import Transport


class HttpxSyncTransport(Transport):
    """Blocking handle around ``httpx.Client``."""

    def __init__(
        self,
        *,
        base_url: str,
        default_headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(base_url=base_url, default_headers=default_headers, timeout=timeout)
        self._client = httpx.Client(
            base_url=base_url,
            headers=self._headers,
            timeout=timeout,
            transport=transport,
            event_hooks={"request": [self._order_headers]},
        )

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        resp = self._client.request(method, url, **kwargs)
        return self._handle_response(resp)

    def close(self) -> None:
        if not self.closed:
            self._client.close()
            self.closed = True

    def __enter__(self) -> "HttpxSyncTransport":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
