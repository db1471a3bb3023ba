"""Fluent request builders.

A builder collects fields through chained setters and sends exactly one
request when its terminal method runs. After that it is spent: any further
call raises :class:`~gitea.errors.StaleBuilderError`.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from gitea.errors import StaleBuilderError, ValidationError
from gitea.utils.logging import logger


class BuilderState(str, Enum):
    COLLECTING = "collecting"
    SENT = "sent"


class _BuilderBase:
    # Fields the server rejects the request without, in wire names.
    REQUIRED: tuple[str, ...] = ()
    METHOD = "POST"

    def __init__(self, endpoint: Any, path: str, **fields: Any):
        self._endpoint = endpoint
        self._path = path
        self._fields: dict[str, Any] = {k: v for k, v in fields.items() if v is not None}
        self._state = BuilderState.COLLECTING

    @property
    def client(self) -> Any:
        return self._endpoint.client

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    @property
    def missing(self) -> list[str]:
        return [name for name in self.REQUIRED if self._fields.get(name) is None]

    def _check_open(self) -> None:
        if self._state is BuilderState.SENT:
            raise StaleBuilderError(f"{type(self).__name__} was already submitted; start a new builder")

    def _set(self, name: str, value: Any):
        self._check_open()
        self._fields[name] = value
        return self

    def _take_payload(self) -> dict[str, Any]:
        self._check_open()
        missing = self.missing
        if missing:
            raise ValidationError(missing, builder=type(self).__name__)
        self._state = BuilderState.SENT
        logger.debug(f"{type(self).__name__}: {self.METHOD} {self._path}")
        return dict(self._fields)


class Builder(_BuilderBase):
    def submit(self) -> Any:
        """Validate, send the single request and return the parsed record."""
        payload = self._take_payload()
        data = self._endpoint._request(self.METHOD, self._path, json=payload)
        return self._endpoint.parse_one(data)


class AsyncBuilder(_BuilderBase):
    async def submit(self) -> Any:
        """Validate, send the single request and return the parsed record."""
        payload = self._take_payload()
        data = await self._endpoint._arequest(self.METHOD, self._path, json=payload)
        return self._endpoint.parse_one(data)
