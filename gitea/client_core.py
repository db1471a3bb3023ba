"""Construction logic shared by :class:`Client` and :class:`AsyncClient`."""
from __future__ import annotations

from typing import Any, Callable, Optional
import httpx

from .auth import Authorizer, BasicAuth, NoAuth, TokenAuth
from .config import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TIMEOUT, Config
from .errors import ConfigurationError
from .utils.logging import logger
from .version import VERSION

API_PATH = "api/v1/"
MIN_PORT = 1
MAX_PORT = 65535
USER_AGENT = f"gitea-sdk/{VERSION}"


def validate_port(port: Any) -> int:
    if isinstance(port, bool) or not isinstance(port, int):
        raise ConfigurationError(f"port must be an integer, got {port!r}")
    if port < MIN_PORT or port > MAX_PORT:
        raise ConfigurationError(f"port must be between {MIN_PORT} and {MAX_PORT}, got {port}")
    return port


def _format_host(host: str) -> str:
    if ":" in host and not host.startswith("["):
        return f"[{host}]"
    return host


def build_base_url(host: str | None, port: int, secure: bool) -> str:
    """``http(s)://host:port/api/v1/``; a blank host means ``localhost``."""
    validate_port(port)
    if host is not None and not isinstance(host, str):
        raise ConfigurationError(f"host must be a string, got {type(host).__name__}")
    if not host or not host.strip():
        host = DEFAULT_HOST
    scheme = "https" if secure else "http"
    return f"{scheme}://{_format_host(host.strip())}:{port}/{API_PATH}"


def base_url_from_uri(uri: str | httpx.URL) -> tuple[str, str, int, bool]:
    """Resolve ``api/v1/`` against an absolute URI.

    Returns ``(base_url, host, port, secure)``. The port comes from the URI,
    or the scheme's default when the URI has none.
    """
    try:
        url = httpx.URL(str(uri))
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"invalid URI {uri!r}: {e}") from None
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"expected an absolute http(s) URI, got {str(uri)!r}")
    secure = url.scheme == "https"
    port = validate_port(url.port if url.port is not None else (443 if secure else 80))
    # httpx drops default ports from URLs, so only the path is taken from join().
    path = url.join(API_PATH).path
    return f"{url.scheme}://{_format_host(url.host)}:{port}{path}", url.host, port, secure


class _ClientCore:
    DEFAULT_HOST = DEFAULT_HOST
    DEFAULT_PORT = DEFAULT_PORT

    #: Called with the client; returns the httpx transport each handle is built on.
    transport_factory: Optional[Callable[[Any], Any]]
    #: Free slot for caller data.
    tag: Any

    def __init__(
        self,
        authorizer: Authorizer | None = None,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        secure: bool = False,
        *,
        timeout: float | None = None,
        transport_factory: Optional[Callable[[Any], Any]] = None,
        tag: Any = None,
    ):
        if authorizer is None:
            authorizer = NoAuth()
        if not isinstance(authorizer, Authorizer):
            raise ConfigurationError(f"authorizer must be an Authorizer, got {type(authorizer).__name__}")

        # -------------- core plumbing -------------- #
        self._base_url = build_base_url(host, port, secure)
        self._authorizer = authorizer
        self._config = Config(
            host=(host or "").strip() or DEFAULT_HOST,
            port=port,
            secure=secure,
            timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        )
        self.transport_factory = transport_factory
        self.tag = tag
        self._closed = False

        self._setup_endpoints()
        logger.debug(f"{type(self).__name__} ready for {self._base_url} ({self._authorizer!r})")

    # -------------- alternative constructors -------------- #
    @classmethod
    def with_basic_auth(cls, username: str, password: str, host: str = DEFAULT_HOST,
                        port: int = DEFAULT_PORT, secure: bool = False, **kwargs):
        return cls(BasicAuth(username, password), host, port, secure, **kwargs)

    @classmethod
    def with_token(cls, token: str, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                   secure: bool = False, *, scheme: str = "token", **kwargs):
        return cls(TokenAuth(token, scheme=scheme), host, port, secure, **kwargs)

    @classmethod
    def from_url(cls, url: str | httpx.URL, username: str | None = None,
                 password: str | None = None, *, token: str | None = None, **kwargs):
        """Build a client for an absolute URI such as ``https://git.example.com/``."""
        base_url, host, port, secure = base_url_from_uri(url)
        if token:
            authorizer: Authorizer = TokenAuth(token)
        elif username:
            authorizer = BasicAuth(username, password or "")
        else:
            authorizer = NoAuth()
        client = cls(authorizer, host, port, secure, **kwargs)
        # Keep any sub-path of the URI (e.g. a Gitea served under /git/).
        client._base_url = base_url
        return client

    @classmethod
    def from_env(cls, **kwargs):
        """Build a client from ``GITEA_*`` environment variables."""
        config = Config.from_env()
        return cls(config.authorizer(), config.host, config.port, config.secure,
                   timeout=config.timeout, **kwargs)

    # -------------- properties -------------- #
    @property
    def authorizer(self) -> Authorizer:
        return self._authorizer

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def config(self) -> Config:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    # ============================================== #
    # Helpers
    # ============================================== #
    def _default_headers(self) -> dict[str, str]:
        # Authorization must stay the first header: some servers reject the
        # request otherwise.
        headers: dict[str, str] = {}
        self._authorizer.prepare_request(headers)
        headers["Accept"] = "application/json"
        headers["User-Agent"] = USER_AGENT
        return headers

    def _custom_transport(self) -> Any:
        factory = self.transport_factory
        if factory is None:
            return None
        return factory(self)

    def _setup_endpoints(self) -> None:
        raise NotImplementedError

    def _mark_closed(self) -> None:
        if not self._closed:
            logger.debug(f"{type(self).__name__} for {self._base_url} closed")
            self._closed = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r}, authorizer={self._authorizer!r})"
