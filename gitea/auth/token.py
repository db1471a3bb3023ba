from __future__ import annotations

from typing import MutableMapping

from .base import Authorizer


class TokenAuth(Authorizer):
    """Access token authentication.

    Gitea accepts ``Authorization: token <value>``; pass ``scheme="Bearer"``
    for OAuth2 access tokens.
    """

    def __init__(self, token: str, scheme: str = "token"):
        self.token = token
        self.scheme = scheme

    def prepare_request(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = f"{self.scheme} {self.token}"

    def __repr__(self) -> str:
        return f"TokenAuth(scheme={self.scheme!r}, token='***')"
