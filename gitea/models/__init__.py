from .base import GiteaModel
from .version import Version
from .user import User
from .repository import Repository

__all__ = ["GiteaModel", "Version", "User", "Repository"]
