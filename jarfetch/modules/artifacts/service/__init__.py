from .manager import ArtifactRepositoryService, OperationResult
from .resolver import ArtifactFetcher, ArtifactResolver, FetchCallback

__all__ = [
    "ArtifactRepositoryService",
    "OperationResult",
    "ArtifactFetcher",
    "ArtifactResolver",
    "FetchCallback",
]
