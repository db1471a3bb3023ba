"""Exception hierarchy raised by the SDK.

Transport failures (connection refused, timeouts, TLS) are *not* wrapped:
they surface as the ``httpx`` exceptions raised by the transport.
"""
from __future__ import annotations

from typing import Any

import httpx


class GiteaError(Exception):
    """Base exception for the whole SDK."""


class ConfigurationError(GiteaError, ValueError):
    """The client was given settings it cannot work with (bad port, bad authorizer...)."""


class ValidationError(GiteaError, ValueError):
    """A builder was submitted while fields the server requires were never set."""

    def __init__(self, missing: list[str], builder: str | None = None):
        self.missing = list(missing)
        self.builder = builder
        prefix = f"{builder}: " if builder else ""
        super().__init__(f"{prefix}missing required field(s): {', '.join(self.missing)}")


class StaleBuilderError(GiteaError, RuntimeError):
    """A builder was used again after its request was already sent."""


class APIError(GiteaError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int, message: str, response: httpx.Response | None = None):
        self.status_code = status_code
        self.message = message
        self.response = response
        super().__init__(f"API error {status_code}: {message}")


class AuthenticationError(APIError):
    pass


class ForbiddenError(APIError):
    pass


class NotFoundError(APIError):
    pass


class UnprocessableError(APIError):
    pass


class RateLimitError(APIError):
    pass


class ServerError(APIError):
    pass


_STATUS_ERRORS: dict[int, type[APIError]] = {
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableError,
    429: RateLimitError,
}


def error_message(resp: httpx.Response) -> str:
    """Best-effort extraction of the server's error message."""
    try:
        body: Any = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    if resp.text:
        return resp.text
    return resp.reason_phrase or "unknown error"


def error_for_response(resp: httpx.Response) -> APIError:
    """Map a failed response to the matching :class:`APIError` subclass."""
    code = resp.status_code
    if code in _STATUS_ERRORS:
        cls = _STATUS_ERRORS[code]
    elif 500 <= code < 600:
        cls = ServerError
    else:
        cls = APIError
    return cls(code, error_message(resp), response=resp)
