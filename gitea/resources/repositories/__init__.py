from .repositories import Repositories
from .async_repositories import AsyncRepositories
from .repositories_core import UserRepositories

__all__ = ["Repositories", "AsyncRepositories", "UserRepositories"]
