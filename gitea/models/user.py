from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from pydantic import AliasChoices, Field, PrivateAttr

from .base import GiteaModel

if TYPE_CHECKING:
    from gitea.resources.repositories.repositories_core import UserRepositories


class User(GiteaModel):
    id: int
    login: str = Field(validation_alias=AliasChoices("login", "username"))
    full_name: str = ""
    email: str = ""
    avatar_url: str = ""
    language: str = ""
    is_admin: bool = False
    last_login: Optional[datetime] = None
    created: Optional[datetime] = None
    active: bool = True
    prohibit_login: bool = False
    location: str = ""
    website: str = ""
    description: str = ""
    visibility: str = ""
    followers_count: int = 0
    following_count: int = 0
    starred_repos_count: int = 0

    # Set when the record came from ``GET /user``.
    _authenticated: bool = PrivateAttr(default=False)

    @property
    def username(self) -> str:
        return self.login

    @property
    def is_authenticated_user(self) -> bool:
        return self._authenticated

    def mark_authenticated(self) -> "User":
        self._authenticated = True
        return self

    @property
    def repositories(self) -> "UserRepositories":
        """Repositories of this user, through the bound client."""
        return self._require_client().repositories.for_user(self)

    def update(self) -> Any:
        """Start an update builder pre-filled with this user's email.

        An empty email (hidden from the viewer) is left unset.
        """
        return self._require_client().users.update(self.login, email=self.email or None)

    def delete(self) -> Any:
        """Delete this user (admin only). Returns a coroutine on async clients."""
        return self._require_client().users.delete(self.login)
