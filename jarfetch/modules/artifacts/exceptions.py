"""Errors raised while resolving artifacts into the local repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from jarfetch.modules.artifacts.domain import Coordinate


class RepositoryOperationError(RuntimeError):
    """Base error for any failed operation against the local or remote repository."""

    def __init__(self, message: str, coordinate: Optional["Coordinate"] = None) -> None:
        super().__init__(message)
        self.coordinate = coordinate


class NetworkError(RepositoryOperationError):
    """The remote repository could not be reached or answered with an error status."""

    def __init__(
        self,
        message: str,
        url: str,
        coordinate: Optional["Coordinate"] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, coordinate)
        self.url = url
        self.status_code = status_code


class InvalidCoordinateError(RepositoryOperationError):
    """A coordinate (or the remote base URL) cannot be turned into a valid URL."""


class StorageError(RepositoryOperationError):
    """Creating, writing or reading a file of the local repository failed."""

    def __init__(self, message: str, path: str, coordinate: Optional["Coordinate"] = None) -> None:
        super().__init__(message, coordinate)
        self.path = path


class ManifestParseError(RepositoryOperationError):
    """The manifest is not well-formed or has no usable dependency list."""
