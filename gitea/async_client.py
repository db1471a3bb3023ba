"""Async Client façade."""
from __future__ import annotations

from .client_core import _ClientCore
from .models.version import Version
from .transport.httpx_async import HttpxAsyncTransport
from .resources.users import AsyncUsers
from .resources.repositories import AsyncRepositories


class AsyncClient(_ClientCore):
    """Async variant (uses httpx.AsyncClient under the hood).

    Concurrent calls on one instance are fine: each opens its own handle.
    """
    users: AsyncUsers
    repositories: AsyncRepositories

    def _setup_endpoints(self) -> None:
        self.users = AsyncUsers(self)
        self.repositories = AsyncRepositories(self)

    def create_base_client(self) -> HttpxAsyncTransport:
        """Return a fresh async transport handle bound to :attr:`base_url`."""
        return HttpxAsyncTransport(
            base_url=self.base_url,
            default_headers=self._default_headers(),
            timeout=self.config.timeout,
            transport=self._custom_transport(),
        )

    async def get_version(self) -> Version:
        """Get the server version."""
        async with self.create_base_client() as rest:
            resp = await rest.arequest("GET", "version")
            return Version.model_validate(resp.json()).bind(self)

    async def aclose(self) -> None:
        self._mark_closed()

    # ---------------- context mgr ------------------- #
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
