from .remote import DEFAULT_LAYOUT, DEFAULT_REMOTE_URL, RemoteRepository
from .transport import HttpArtifactFetcher

__all__ = ["DEFAULT_LAYOUT", "DEFAULT_REMOTE_URL", "RemoteRepository", "HttpArtifactFetcher"]
