from .base import Transport
from .httpx_sync import HttpxSyncTransport
from .httpx_async import HttpxAsyncTransport

__all__ = ["Transport", "HttpxSyncTransport", "HttpxAsyncTransport"]
