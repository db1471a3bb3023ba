from .base import AsyncBuilder, Builder, BuilderState
from .users import AsyncNewUserBuilder, AsyncUpdateUserBuilder, NewUserBuilder, UpdateUserBuilder
from .repositories import AsyncNewRepositoryBuilder, NewRepositoryBuilder

__all__ = [
    "Builder",
    "AsyncBuilder",
    "BuilderState",
    "NewUserBuilder",
    "UpdateUserBuilder",
    "AsyncNewUserBuilder",
    "AsyncUpdateUserBuilder",
    "NewRepositoryBuilder",
    "AsyncNewRepositoryBuilder",
]
