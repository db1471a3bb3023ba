"""Shared plumbing for the httpx-backed transport handles."""
from __future__ import annotations

from typing import Mapping

import httpx

from gitea.errors import error_for_response
from gitea.utils.logging import logger


class Transport:
    """One short-lived HTTP handle.

    ``default_headers`` is kept in insertion order and sent ahead of every
    header httpx adds on its own; the client relies on this to put the
    ``Authorization`` header first.
    """

    def __init__(
        self,
        *,
        base_url: str,
        default_headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._headers = httpx.Headers(dict(default_headers or {}))
        self._rank = {name.lower(): i for i, name in enumerate(self._headers.keys())}
        self.closed = False

    @property
    def headers(self) -> httpx.Headers:
        """Default headers, in the order they go on the wire."""
        return httpx.Headers(self._headers)

    def _order_headers(self, request: httpx.Request) -> None:
        last = len(self._rank)
        raw = sorted(
            request.headers.raw,
            key=lambda item: self._rank.get(item[0].decode("latin-1").lower(), last),
        )
        request.headers = httpx.Headers(raw)

    def _handle_response(self, resp: httpx.Response) -> httpx.Response:
        logger.debug(f"{resp.request.method} {resp.request.url} -> {resp.status_code}")
        if resp.is_success:
            return resp
        err = error_for_response(resp)
        logger.warning(f"{resp.request.method} {resp.request.url} failed: {err}")
        raise err
