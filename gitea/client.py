"""Sync Client façade."""
from __future__ import annotations

from .client_core import _ClientCore
from .models.version import Version
from .transport.httpx_sync import HttpxSyncTransport
# Add resources here
from .resources.users import Users
from .resources.repositories import Repositories


class Client(_ClientCore):
    """
    Single public entry-point (sync) for the Gitea API v1.

    Example usage::

        with gitea.Client.with_basic_auth("user", "pass", "git.example.com", 443, secure=True) as client:
            print(client.get_version().version)
            me = client.users.get_current()
            me.repositories.create().name("demo").make_private().create()
    """

    # -------------- resources -------------- #
    users: Users
    repositories: Repositories

    def _setup_endpoints(self) -> None:
        self.users = Users(self)
        self.repositories = Repositories(self)

    def create_base_client(self) -> HttpxSyncTransport:
        """Return a fresh transport handle bound to :attr:`base_url`.

        The caller owns the handle; use it as a context manager.
        """
        return HttpxSyncTransport(
            base_url=self.base_url,
            default_headers=self._default_headers(),
            timeout=self.config.timeout,
            transport=self._custom_transport(),
        )

    def get_version(self) -> Version:
        """Get the server version."""
        with self.create_base_client() as rest:
            resp = rest.request("GET", "version")
            return Version.model_validate(resp.json()).bind(self)

    def close(self) -> None:
        # Every call closes its own handle, nothing else is held.
        self._mark_closed()

    # -------------- context mgr -------------- #
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
