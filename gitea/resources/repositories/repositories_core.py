from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from gitea.models.repository import Repository

if TYPE_CHECKING:
    from gitea.models.user import User


class _RepositoriesCore:
    ENDPOINT = "repos"
    USER_ENDPOINT = "user/repos"
    ADMIN_USERS_ENDPOINT = "admin/users"

    def _repo_url(self, owner: str, name: str) -> str:
        owner = quote(self._require(owner, "owner"), safe="")
        name = quote(self._require(name, "name"), safe="")
        return f"{self.ENDPOINT}/{owner}/{name}"

    def _user_repos_url(self, username: str) -> str:
        return f"users/{quote(self._require(username, 'username'), safe='')}/repos"

    def _create_url(self, owner: str | None) -> str:
        # Creating on behalf of another user goes through the admin API.
        if owner is None:
            return self.USER_ENDPOINT
        return f"{self.ADMIN_USERS_ENDPOINT}/{quote(self._require(owner, 'owner'), safe='')}/repos"

    def parse_one(self, data: dict[str, Any]) -> Repository:
        return Repository.model_validate(data).bind(self._client)

    def parse_many(self, data: list[dict[str, Any]] | None) -> list[Repository]:
        return [self.parse_one(r) for r in data or []]

    def for_user(self, user: "User") -> "UserRepositories":
        return UserRepositories(self, user)


class UserRepositories:
    """Repositories seen from one user (``user.repositories``).

    Works for both client flavours: whatever the underlying endpoint returns
    (a value or a coroutine) is handed back unchanged.
    """

    def __init__(self, endpoint: Any, user: "User"):
        self._endpoint = endpoint
        self.user = user

    @property
    def client(self) -> Any:
        return self._endpoint.client

    def create(self):
        """Start building a repository owned by this user."""
        if self.user.is_authenticated_user:
            return self._endpoint.create()
        return self._endpoint.create(owner=self.user.login)

    def list(self):
        return self._endpoint.list_for_user(self.user.login)

    def get(self, name: str):
        return self._endpoint.get(self.user.login, name)
