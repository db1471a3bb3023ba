"""/repos endpoints."""
from __future__ import annotations

from gitea.builders.repositories import NewRepositoryBuilder
from gitea.models.repository import Repository
from gitea.resources.base import BaseResource
from gitea.resources.repositories.repositories_core import _RepositoriesCore


class Repositories(BaseResource, _RepositoriesCore):
    """
    Resources to manage repositories.

    Example usage::

        with gitea.Client.with_token(TOKEN) as client:
            repo = client.repositories.create().name("demo").make_private().create()
            repo.delete()
    """

    def get(self, owner: str, name: str) -> Repository:
        """
        Get a repository.

        :param owner: Login of the owning user or organization.
        :type owner: str
        :param name: Repository name.
        :type name: str
        :return: The repository.
        :rtype: Repository
        """
        return self.parse_one(self._request("GET", self._repo_url(owner, name)))

    def list_for_user(self, username: str) -> list[Repository]:
        """List the repositories owned by ``username``."""
        return self.parse_many(self._request("GET", self._user_repos_url(username)))

    def list_mine(self) -> list[Repository]:
        """List the repositories of the authenticated user."""
        return self.parse_many(self._request("GET", self.USER_ENDPOINT))

    def create(self, owner: str | None = None) -> NewRepositoryBuilder:
        """
        Start building a new repository.

        :param owner: Create on behalf of this user (admin only). Defaults to
            the authenticated user.
        :type owner: str or None
        """
        return NewRepositoryBuilder(self, self._create_url(owner))

    def delete(self, owner: str, name: str) -> None:
        """Delete a repository."""
        self._request("DELETE", self._repo_url(owner, name))
