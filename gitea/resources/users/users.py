"""/users endpoints."""
from __future__ import annotations

from gitea.builders.users import NewUserBuilder, UpdateUserBuilder
from gitea.models.user import User
from gitea.resources.base import BaseResource
from gitea.resources.users.users_core import _UsersCore


class Users(BaseResource, _UsersCore):
    """
    Resources to manage users.

    Example usage::

        with gitea.Client.with_basic_auth("admin", "secret") as client:
            me = client.users.get_current()
            client.users.create().user_name("alice").email("a@example.com").password("pw").create()
    """

    def get_current(self) -> User:
        """
        Get the authenticated user.

        :return: The user the client's credentials belong to.
        :rtype: User
        """
        data = self._request("GET", self.CURRENT_ENDPOINT)
        return self.parse_one(data).mark_authenticated()

    def get_by_username(self, username: str) -> User:
        """
        Get a user by name.

        :param username: The login name of the user.
        :type username: str
        :return: The user.
        :rtype: User
        :raises NotFoundError: No such user.
        """
        return self.parse_one(self._request("GET", self._user_url(username)))

    def search(self, query: str, limit: int | None = None) -> list[User]:
        """Search users by login or full name."""
        data = self._request("GET", f"{self.ENDPOINT}/search", params=self._search_params(query, limit))
        return self._parse_search(data)

    def create(self) -> NewUserBuilder:
        """Start building a new user (admin only)."""
        return NewUserBuilder(self)

    new = create

    def update(self, username: str, **fields) -> UpdateUserBuilder:
        """Start building an update for ``username`` (admin only).

        Keyword arguments seed the builder, e.g. ``email=...``.
        """
        return UpdateUserBuilder(self, self._require(username, "username"), **fields)

    def delete(self, username: str) -> None:
        """Delete a user (admin only)."""
        self._request("DELETE", self._admin_user_url(username))
