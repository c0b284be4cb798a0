"""Filesystem-backed local repository keyed by artifact coordinate."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set, Union

from jarfetch.modules.artifacts.domain import Coordinate
from jarfetch.modules.artifacts.exceptions import StorageError
from jarfetch.settings import Settings

log = logging.getLogger(__name__)

Payload = Union[bytes, bytearray, memoryview]


class LocalRepository:
    """Mirror of the coordinate hierarchy on disk.

    Layout: ``<root>/<group segments...>/<name>/<version>.<ext>``. The manifest
    file is the only witness that an artifact is present; the binary is never
    checked on its own. Nothing is ever deleted here.
    """

    def __init__(
        self,
        base_path: Union[str, Path],
        *,
        binary_extension: str = "jar",
        manifest_extension: str = "pom",
    ) -> None:
        self._base_path = Path(base_path)
        self.binary_extension = binary_extension.lstrip(".")
        self.manifest_extension = manifest_extension.lstrip(".")

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocalRepository":
        return cls(
            Path(settings.local_repository_path).expanduser(),
            binary_extension=settings.binary_extension,
            manifest_extension=settings.manifest_extension,
        )

    @property
    def base_path(self) -> Path:
        return self._base_path

    # ------------------------------------------------------------------ paths
    def directory_path(self, coordinate: Coordinate) -> Path:
        return self._base_path.joinpath(*coordinate.group_segments, coordinate.name)

    def binary_path(self, coordinate: Coordinate) -> Path:
        # The suffix is appended, so a version such as "1.0.0" keeps its dots.
        return self.directory_path(coordinate) / f"{coordinate.version}.{self.binary_extension}"

    def manifest_path(self, coordinate: Coordinate) -> Path:
        return self.directory_path(coordinate) / f"{coordinate.version}.{self.manifest_extension}"

    # ------------------------------------------------------------------ queries
    def exists(self, coordinate: Coordinate) -> bool:
        try:
            present = self.manifest_path(coordinate).is_file()
        except OSError as exc:
            log.debug("Treating %s as absent: %s", coordinate, exc)
            return False
        return present

    def available_versions(self, coordinate: Coordinate) -> Optional[Set[str]]:
        """Versions stored for the coordinate's group and name, or None when unknown."""
        directory = self.directory_path(coordinate)
        try:
            return {entry.stem for entry in directory.iterdir() if entry.is_file()}
        except OSError:
            return None

    def read_manifest(self, coordinate: Coordinate) -> str:
        path = self.manifest_path(coordinate)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(
                f"cannot read manifest of {coordinate}: {exc}", str(path), coordinate
            ) from exc

    # ------------------------------------------------------------------ writes
    def save_binary(self, coordinate: Coordinate, content: Payload) -> Path:
        return self._write(coordinate, self.binary_path(coordinate), content)

    def save_manifest(self, coordinate: Coordinate, content: Payload) -> Path:
        return self._write(coordinate, self.manifest_path(coordinate), content)

    def _write(self, coordinate: Coordinate, target: Path, content: Payload) -> Path:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(bytes(content))
        except OSError as exc:
            raise StorageError(
                f"cannot write {target} for {coordinate}: {exc}", str(target), coordinate
            ) from exc
        log.info("Saved %s -> %s (%d bytes)", coordinate, target, len(content))
        return target
