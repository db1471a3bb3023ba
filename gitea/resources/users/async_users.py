from __future__ import annotations

from gitea.builders.users import AsyncNewUserBuilder, AsyncUpdateUserBuilder
from gitea.models.user import User
from gitea.resources.base import BaseAsyncResource
from gitea.resources.users.users_core import _UsersCore


class AsyncUsers(BaseAsyncResource, _UsersCore):
    """Async users resource."""

    async def get_current(self) -> User:
        """Get the authenticated user."""
        data = await self._arequest("GET", self.CURRENT_ENDPOINT)
        return self.parse_one(data).mark_authenticated()

    async def get_by_username(self, username: str) -> User:
        """Get a user by name.

        Raises:
            NotFoundError: No such user.
        """
        return self.parse_one(await self._arequest("GET", self._user_url(username)))

    async def search(self, query: str, limit: int | None = None) -> list[User]:
        data = await self._arequest("GET", f"{self.ENDPOINT}/search", params=self._search_params(query, limit))
        return self._parse_search(data)

    def create(self) -> AsyncNewUserBuilder:
        return AsyncNewUserBuilder(self)

    new = create

    def update(self, username: str, **fields) -> AsyncUpdateUserBuilder:
        return AsyncUpdateUserBuilder(self, self._require(username, "username"), **fields)

    async def delete(self, username: str) -> None:
        await self._arequest("DELETE", self._admin_user_url(username))
