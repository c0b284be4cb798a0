"""Recursive retrieval of an artifact and its declared dependencies."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol

from jarfetch.modules.artifacts.domain import Coordinate
from jarfetch.modules.artifacts.exceptions import ManifestParseError
from jarfetch.modules.artifacts.fileget import RemoteRepository
from jarfetch.modules.artifacts.manifest import dependencies
from jarfetch.modules.artifacts.repositories import LocalRepository

log = logging.getLogger(__name__)

# Called with (manifest_url, binary_url) right before both are downloaded.
FetchCallback = Callable[[str, str], None]


class ArtifactFetcher(Protocol):
    def fetch(self, url: str, coordinate: Optional[Coordinate] = None) -> bytes:
        ...


class ArtifactResolver:
    """Populates a local repository from a remote one.

    Every error (network, storage, invalid coordinate, manifest) aborts the run
    and propagates unchanged. Files saved before the failure stay on disk.
    """

    def __init__(self, local: LocalRepository, fetcher: ArtifactFetcher) -> None:
        self.local = local
        self.fetcher = fetcher

    def fetch_one(
        self,
        coordinate: Coordinate,
        remote: RemoteRepository,
        on_fetch: Optional[FetchCallback] = None,
    ) -> Coordinate:
        """Download one artifact's manifest and binary into the local repository.

        The artifact is downloaded even when it is already present locally.
        """
        manifest_url = remote.manifest_url(coordinate)
        binary_url = remote.binary_url(coordinate)

        if on_fetch is not None:
            self._notify(on_fetch, manifest_url, binary_url)

        log.info("Fetching %s from %s", coordinate, remote.remote_url)
        manifest = self.fetcher.fetch(manifest_url, coordinate)
        binary = self.fetcher.fetch(binary_url, coordinate)

        # Manifest last: its presence marks the artifact as complete.
        self.local.save_binary(coordinate, binary)
        self.local.save_manifest(coordinate, manifest)
        return coordinate

    def resolve_recursive(
        self,
        coordinate: Coordinate,
        remote: RemoteRepository,
        on_fetch: Optional[FetchCallback] = None,
    ) -> List[Coordinate]:
        """Fetch ``coordinate`` and, transitively, every dependency not yet stored.

        Returns the fetched coordinates in fetch order.
        """
        frontier: List[Coordinate] = [coordinate]
        fetched: List[Coordinate] = []

        while frontier:
            current = frontier.pop()
            self.fetch_one(current, remote, on_fetch)
            fetched.append(current)

            try:
                declared = dependencies(self.local.read_manifest(current))
            except ManifestParseError as exc:
                exc.coordinate = exc.coordinate or current
                raise
            log.debug("%s declares %d dependencies", current, len(declared))
            frontier.extend(declared)
            # Entries queued by several manifests drop out once any copy is stored.
            frontier = [pending for pending in frontier if not self.local.exists(pending)]

        log.info("Resolved %s: %d artifacts fetched", coordinate, len(fetched))
        return fetched

    @staticmethod
    def _notify(on_fetch: FetchCallback, manifest_url: str, binary_url: str) -> None:
        try:
            on_fetch(manifest_url, binary_url)
        except Exception as exc:  # noqa: BLE001
            log.warning("on_fetch callback failed for %s: %s", manifest_url, exc)
