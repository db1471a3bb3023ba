from .base import Authorizer
from .none import NoAuth
from .basic import BasicAuth
from .token import TokenAuth

__all__ = ["Authorizer", "NoAuth", "BasicAuth", "TokenAuth"]
