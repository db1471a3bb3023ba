"""Entrypoint for the Gitea SDK.

Will expose Client, AsyncClient, the authorizers and __version__
"""

from .client import Client
from .async_client import AsyncClient
from .auth import Authorizer, BasicAuth, NoAuth, TokenAuth
from .config import Config
from .errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ForbiddenError,
    GiteaError,
    NotFoundError,
    RateLimitError,
    ServerError,
    StaleBuilderError,
    UnprocessableError,
    ValidationError,
)
from .models import Repository, User, Version
from .version import VERSION as __version__


__all__ = [
    "Client",
    "AsyncClient",
    "Authorizer",
    "BasicAuth",
    "NoAuth",
    "TokenAuth",
    "Config",
    "GiteaError",
    "ConfigurationError",
    "ValidationError",
    "StaleBuilderError",
    "APIError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "UnprocessableError",
    "RateLimitError",
    "ServerError",
    "User",
    "Repository",
    "Version",
    "__version__",
]
