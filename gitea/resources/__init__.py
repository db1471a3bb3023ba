from .base import BaseResource, BaseAsyncResource
from .users import Users, AsyncUsers
from .repositories import Repositories, AsyncRepositories, UserRepositories

__all__ = [
    "BaseResource",
    "BaseAsyncResource",
    "Users",
    "AsyncUsers",
    "Repositories",
    "AsyncRepositories",
    "UserRepositories",
]
