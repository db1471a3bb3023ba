from .base import GiteaModel


class Version(GiteaModel):
    version: str
