"""Client settings, optionally loaded from the environment / a ``.env`` file."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .auth import Authorizer, BasicAuth, NoAuth, TokenAuth
from .errors import ConfigurationError

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3000
DEFAULT_TIMEOUT = 30.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    secure: bool = False
    timeout: float = DEFAULT_TIMEOUT
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load config from env vars (``GITEA_*``), reading ``.env`` first."""
        load_dotenv()

        port_raw = os.getenv("GITEA_PORT")
        try:
            port = int(port_raw) if port_raw else DEFAULT_PORT
        except ValueError:
            raise ConfigurationError(f"GITEA_PORT must be an integer, got {port_raw!r}") from None

        timeout_raw = os.getenv("GITEA_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"GITEA_TIMEOUT must be a number, got {timeout_raw!r}") from None

        return cls(
            host=os.getenv("GITEA_HOST") or DEFAULT_HOST,
            port=port,
            secure=os.getenv("GITEA_SECURE", "").strip().lower() in _TRUTHY,
            timeout=timeout,
            username=os.getenv("GITEA_USERNAME") or None,
            password=os.getenv("GITEA_PASSWORD") or None,
            token=os.getenv("GITEA_TOKEN") or None,
        )

    def authorizer(self) -> Authorizer:
        """Token wins over basic credentials; neither means anonymous."""
        if self.token:
            return TokenAuth(self.token)
        if self.username:
            return BasicAuth(self.username, self.password or "")
        return NoAuth()
