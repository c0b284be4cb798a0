"""Artifact repository service used by the HTTP layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jarfetch.modules.artifacts.domain import Coordinate
from jarfetch.modules.artifacts.exceptions import (
    InvalidCoordinateError,
    NetworkError,
    RepositoryOperationError,
)
from jarfetch.modules.artifacts.fileget import HttpArtifactFetcher, RemoteRepository
from jarfetch.modules.artifacts.repositories import LocalRepository
from jarfetch.modules.artifacts.service.resolver import ArtifactFetcher, ArtifactResolver
from jarfetch.settings import Settings

log = logging.getLogger(__name__)


@dataclass
class OperationResult:
    ok: bool
    message: str
    data: Any = None
    status_code: int = 200

    def as_dict(self) -> Dict[str, Any]:
        payload = {"status": "true" if self.ok else "false", "msg": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


def _failure(exc: RepositoryOperationError) -> OperationResult:
    if isinstance(exc, InvalidCoordinateError):
        status = 400
    elif isinstance(exc, NetworkError):
        status = 502
    else:
        status = 500
    return OperationResult(False, str(exc), status_code=status)


class ArtifactRepositoryService:
    """Wires settings, the local and remote repositories and the resolver."""

    def __init__(
        self,
        settings: Settings,
        fetcher: Optional[ArtifactFetcher] = None,
    ) -> None:
        self.settings = settings
        self.local = LocalRepository.from_settings(settings)
        self.remote = RemoteRepository.from_settings(settings)
        # Only a fetcher built here is closed by close(); injected ones belong to the caller.
        self._owned_fetcher = None if fetcher else HttpArtifactFetcher.from_settings(settings)
        self.resolver = ArtifactResolver(self.local, fetcher or self._owned_fetcher)

    def close(self) -> None:
        if self._owned_fetcher is not None:
            self._owned_fetcher.close()

    def _describe(self, coordinate: Coordinate) -> Dict[str, str]:
        return {
            "coordinate": str(coordinate),
            "binaryPath": str(self.local.binary_path(coordinate)),
            "manifestPath": str(self.local.manifest_path(coordinate)),
        }

    def fetch(self, coordinate_text: str) -> OperationResult:
        try:
            coordinate = Coordinate.parse(coordinate_text)
            self.resolver.fetch_one(coordinate, self.remote, self._log_download)
        except RepositoryOperationError as exc:
            log.error("fetch %s failed: %s", coordinate_text, exc)
            return _failure(exc)
        return OperationResult(True, "ok", self._describe(coordinate))

    def resolve(self, coordinate_text: str) -> OperationResult:
        try:
            coordinate = Coordinate.parse(coordinate_text)
            fetched: List[Coordinate] = self.resolver.resolve_recursive(
                coordinate, self.remote, self._log_download
            )
        except RepositoryOperationError as exc:
            log.error("resolve %s failed: %s", coordinate_text, exc)
            return _failure(exc)
        return OperationResult(True, "ok", {"root": str(coordinate), "fetched": [str(c) for c in fetched]})

    def available_versions(self, group: str, name: str) -> OperationResult:
        versions = self.local.available_versions(Coordinate(group=group, name=name, version=""))
        if versions is None:
            return OperationResult(False, f"{group}:{name} not in local repository", status_code=404)
        return OperationResult(True, "ok", {"versions": sorted(versions)})

    def exists(self, coordinate_text: str) -> OperationResult:
        try:
            coordinate = Coordinate.parse(coordinate_text)
        except InvalidCoordinateError as exc:
            return _failure(exc)
        return OperationResult(True, "ok", {"exists": self.local.exists(coordinate)})

    @staticmethod
    def _log_download(manifest_url: str, binary_url: str) -> None:
        log.info("Downloading %s (manifest) and %s (binary)", manifest_url, binary_url)
