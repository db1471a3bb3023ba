from .users import Users
from .async_users import AsyncUsers

__all__ = ["Users", "AsyncUsers"]
