"""Artifact resolution module exports."""

from .domain import Coordinate
from .exceptions import (
    InvalidCoordinateError,
    ManifestParseError,
    NetworkError,
    RepositoryOperationError,
    StorageError,
)
from .fileget import HttpArtifactFetcher, RemoteRepository
from .manifest import dependencies
from .repositories import LocalRepository
from .service import ArtifactRepositoryService, ArtifactResolver, OperationResult
from .controller import router as artifacts_router

__all__ = [
    "Coordinate",
    "InvalidCoordinateError",
    "ManifestParseError",
    "NetworkError",
    "RepositoryOperationError",
    "StorageError",
    "HttpArtifactFetcher",
    "RemoteRepository",
    "dependencies",
    "LocalRepository",
    "ArtifactRepositoryService",
    "ArtifactResolver",
    "OperationResult",
    "artifacts_router",
]
