from __future__ import annotations

from typing import Any
from urllib.parse import quote

from gitea.builders.base import AsyncBuilder, Builder, _BuilderBase
from gitea.models.user import User


class _NewUserFields(_BuilderBase):
    REQUIRED = ("username", "email", "password")

    def __init__(self, endpoint: Any, **fields: Any):
        super().__init__(endpoint, endpoint.ADMIN_ENDPOINT, **fields)

    def user_name(self, value: str):
        return self._set("username", value)

    def email(self, value: str):
        return self._set("email", value)

    def password(self, value: str):
        return self._set("password", value)

    def full_name(self, value: str):
        return self._set("full_name", value)

    def login_name(self, value: str):
        return self._set("login_name", value)

    def source_id(self, value: int):
        return self._set("source_id", value)

    def send_notification(self, value: bool = True):
        return self._set("send_notify", value)

    def must_change_password(self, value: bool = True):
        return self._set("must_change_password", value)

    def visibility(self, value: str):
        """``public``, ``limited`` or ``private``."""
        return self._set("visibility", value)


class _UpdateUserFields(_BuilderBase):
    REQUIRED = ("email",)
    METHOD = "PATCH"

    def __init__(self, endpoint: Any, username: str, **fields: Any):
        super().__init__(endpoint, f"{endpoint.ADMIN_ENDPOINT}/{quote(username, safe='')}", **fields)
        self.username = username

    def email(self, value: str):
        return self._set("email", value)

    def full_name(self, value: str):
        return self._set("full_name", value)

    def password(self, value: str):
        return self._set("password", value)

    def login_name(self, value: str):
        return self._set("login_name", value)

    def source_id(self, value: int):
        return self._set("source_id", value)

    def is_active(self, value: bool = True):
        return self._set("active", value)

    def make_admin(self, value: bool = True):
        return self._set("admin", value)

    def location(self, value: str):
        return self._set("location", value)

    def website(self, value: str):
        return self._set("website", value)

    def description(self, value: str):
        return self._set("description", value)

    def max_repo_creation(self, value: int):
        return self._set("max_repo_creation", value)

    def no_repository_creation_limit(self):
        # -1 means "use the global default", i.e. no per-user limit.
        return self._set("max_repo_creation", -1)

    def allow_git_hook(self, value: bool = True):
        return self._set("allow_git_hook", value)

    def allow_import_local(self, value: bool = True):
        return self._set("allow_import_local", value)

    def allow_create_organization(self, value: bool = True):
        return self._set("allow_create_organization", value)

    def prohibit_login(self, value: bool = True):
        return self._set("prohibit_login", value)

    def visibility(self, value: str):
        return self._set("visibility", value)


class NewUserBuilder(Builder, _NewUserFields):
    """
    Builds ``POST /admin/users``.

    Example usage::

        user = (
            client.users.create()
            .user_name("kloubi")
            .email("kloubi@example.com")
            .password("s3cret!")
            .send_notification()
            .create()
        )
    """

    def create(self) -> User:
        return self.submit()


class UpdateUserBuilder(Builder, _UpdateUserFields):
    """Builds ``PATCH /admin/users/{username}``."""

    def save(self) -> User:
        return self.submit()


class AsyncNewUserBuilder(AsyncBuilder, _NewUserFields):
    async def create(self) -> User:
        return await self.submit()


class AsyncUpdateUserBuilder(AsyncBuilder, _UpdateUserFields):
    async def save(self) -> User:
        return await self.submit()
