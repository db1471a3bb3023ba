from __future__ import annotations

from abc import ABC, abstractmethod
from typing import MutableMapping


class Authorizer(ABC):
    """Prepares an outgoing request for authentication.

    Implementations only touch the header map they are given; the client
    calls :meth:`prepare_request` on an empty map so that whatever is set
    here becomes the first header of the request.
    """

    @abstractmethod
    def prepare_request(self, headers: MutableMapping[str, str]) -> None:
        ...

    def headers(self) -> dict[str, str]:
        """Return this authorizer's contribution as a fresh dict."""
        out: dict[str, str] = {}
        self.prepare_request(out)
        return out
