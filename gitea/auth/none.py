from __future__ import annotations

from typing import MutableMapping

from .base import Authorizer


class NoAuth(Authorizer):
    """Anonymous access, leaves the request untouched."""

    def prepare_request(self, headers: MutableMapping[str, str]) -> None:
        return None

    def __repr__(self) -> str:
        return "NoAuth()"
