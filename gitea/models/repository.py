from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from .base import GiteaModel
from .user import User


class Repository(GiteaModel):
    id: int
    owner: Optional[User] = None
    name: str
    full_name: str = ""
    description: str = ""
    empty: bool = False
    private: bool = False
    fork: bool = False
    template: bool = False
    mirror: bool = False
    size: int = 0
    html_url: str = ""
    ssh_url: str = ""
    clone_url: str = ""
    website: str = ""
    stars_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    default_branch: str = ""
    archived: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def owner_login(self) -> str:
        if self.owner is not None:
            return self.owner.login
        return self.full_name.split("/", 1)[0]

    def delete(self) -> Any:
        """Delete this repository. Returns a coroutine on async clients."""
        return self._require_client().repositories.delete(self.owner_login, self.name)
