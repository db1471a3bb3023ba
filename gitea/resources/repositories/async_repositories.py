from __future__ import annotations

from gitea.builders.repositories import AsyncNewRepositoryBuilder
from gitea.models.repository import Repository
from gitea.resources.base import BaseAsyncResource
from gitea.resources.repositories.repositories_core import _RepositoriesCore


class AsyncRepositories(BaseAsyncResource, _RepositoriesCore):
    """Async repositories resource."""

    async def get(self, owner: str, name: str) -> Repository:
        return self.parse_one(await self._arequest("GET", self._repo_url(owner, name)))

    async def list_for_user(self, username: str) -> list[Repository]:
        """List the repositories owned by ``username``."""
        return self.parse_many(await self._arequest("GET", self._user_repos_url(username)))

    async def list_mine(self) -> list[Repository]:
        return self.parse_many(await self._arequest("GET", self.USER_ENDPOINT))

    def create(self, owner: str | None = None) -> AsyncNewRepositoryBuilder:
        return AsyncNewRepositoryBuilder(self, self._create_url(owner))

    async def delete(self, owner: str, name: str) -> None:
        await self._arequest("DELETE", self._repo_url(owner, name))
