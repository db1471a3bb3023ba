from __future__ import annotations

import base64
from typing import MutableMapping

from .base import Authorizer


class BasicAuth(Authorizer):
    """HTTP basic authentication with username and password."""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    @property
    def header_value(self) -> str:
        raw = f"{self.username or ''}:{self.password or ''}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    def prepare_request(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = self.header_value

    def __repr__(self) -> str:
        return f"BasicAuth(username={self.username!r}, password='***')"
