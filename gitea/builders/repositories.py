from __future__ import annotations

from gitea.builders.base import AsyncBuilder, Builder, _BuilderBase
from gitea.models.repository import Repository


class _NewRepositoryFields(_BuilderBase):
    REQUIRED = ("name",)

    def name(self, value: str):
        return self._set("name", value)

    def description(self, value: str):
        return self._set("description", value)

    def make_private(self, value: bool = True):
        return self._set("private", value)

    def make_auto_init(self, value: bool = True):
        """Initialise the repository with README, license and .gitignore."""
        return self._set("auto_init", value)

    def gitignores(self, value: str):
        return self._set("gitignores", value)

    def license(self, value: str):
        return self._set("license", value)

    def readme(self, value: str):
        return self._set("readme", value)

    def default_branch(self, value: str):
        return self._set("default_branch", value)

    def make_template(self, value: bool = True):
        return self._set("template", value)

    def issue_labels(self, value: str):
        return self._set("issue_labels", value)


class NewRepositoryBuilder(Builder, _NewRepositoryFields):
    """Builds ``POST /user/repos`` or ``POST /admin/users/{owner}/repos``."""

    def create(self) -> Repository:
        return self.submit()


class AsyncNewRepositoryBuilder(AsyncBuilder, _NewRepositoryFields):
    async def create(self) -> Repository:
        return await self.submit()
