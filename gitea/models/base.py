from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr

from gitea.errors import GiteaError


class GiteaModel(BaseModel):
    """Base for every record returned by the server.

    Holds a non-owning back-reference to the client that produced it, so
    follow-up calls (``user.update()``, ``repo.delete()``...) do not need the
    client passed again.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    _client: Any = PrivateAttr(default=None)

    @property
    def client(self) -> Any:
        return self._client

    def bind(self, client: Any) -> "GiteaModel":
        """Attach ``client`` to this record and every nested record."""
        self._client = client
        for name in type(self).model_fields:
            value = getattr(self, name, None)
            if isinstance(value, GiteaModel):
                value.bind(client)
        return self

    def _require_client(self) -> Any:
        if self._client is None:
            raise GiteaError(f"{type(self).__name__} is not bound to a client")
        return self._client
