from typing import Any
from urllib.parse import quote

from gitea.models.user import User


class _UsersCore:
    CURRENT_ENDPOINT = "user"
    ENDPOINT = "users"
    ADMIN_ENDPOINT = "admin/users"

    def _user_url(self, username: str) -> str:
        return f"{self.ENDPOINT}/{quote(self._require(username, 'username'), safe='')}"

    def _admin_user_url(self, username: str) -> str:
        return f"{self.ADMIN_ENDPOINT}/{quote(self._require(username, 'username'), safe='')}"

    def _search_params(self, query: str, limit: int | None) -> dict[str, Any]:
        params: dict[str, Any] = {"q": query}
        if limit is not None:
            params["limit"] = limit
        return params

    def parse_one(self, data: dict[str, Any]) -> User:
        return User.model_validate(data).bind(self._client)

    def parse_many(self, data: list[dict[str, Any]] | None) -> list[User]:
        return [self.parse_one(r) for r in data or []]

    def _parse_search(self, data: dict[str, Any] | None) -> list[User]:
        # users/search wraps its results: {"ok": true, "data": [...]}
        return self.parse_many((data or {}).get("data"))
