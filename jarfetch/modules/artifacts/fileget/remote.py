"""URL construction for artifacts hosted in a remote Maven-layout repository."""

from __future__ import annotations

import re
from typing import List
from urllib.parse import urlsplit

from jarfetch.modules.artifacts.domain import Coordinate
from jarfetch.modules.artifacts.exceptions import InvalidCoordinateError
from jarfetch.settings import Settings

DEFAULT_REMOTE_URL = "https://repo1.maven.org/"
DEFAULT_LAYOUT = "maven2"

# Characters allowed verbatim in a URL path segment (RFC 3986 pchar minus pct-encoded).
_SEGMENT_RE = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=:@]+")


class RemoteRepository:
    """Pure mapping from (base URL, coordinate) to binary and manifest URLs."""

    def __init__(
        self,
        remote_url: str = DEFAULT_REMOTE_URL,
        *,
        layout: str = DEFAULT_LAYOUT,
        binary_extension: str = "jar",
        manifest_extension: str = "pom",
    ) -> None:
        parts = urlsplit(remote_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidCoordinateError(f"remote url must be absolute http(s): {remote_url!r}")
        if parts.query or parts.fragment:
            raise InvalidCoordinateError(f"remote url must not carry a query or fragment: {remote_url!r}")
        self.remote_url = remote_url
        self.layout = layout.strip("/")
        self.binary_extension = binary_extension.lstrip(".")
        self.manifest_extension = manifest_extension.lstrip(".")

    @classmethod
    def from_settings(cls, settings: Settings) -> "RemoteRepository":
        return cls(
            settings.remote_base_url,
            layout=settings.remote_layout,
            binary_extension=settings.binary_extension,
            manifest_extension=settings.manifest_extension,
        )

    def artifact_url(self, coordinate: Coordinate) -> str:
        """URL of the artifact without its file extension."""
        segments: List[str] = [
            *coordinate.group_segments,
            coordinate.name,
            coordinate.version,
            f"{coordinate.name}-{coordinate.version}",
        ]
        for segment in segments:
            if segment in ("", ".", "..") or not _SEGMENT_RE.fullmatch(segment):
                raise InvalidCoordinateError(
                    f"{coordinate} cannot be expressed as a URL: bad path segment {segment!r}",
                    coordinate,
                )
        base = self.remote_url.rstrip("/")
        prefix = f"{base}/{self.layout}" if self.layout else base
        return f"{prefix}/{'/'.join(segments)}"

    def binary_url(self, coordinate: Coordinate) -> str:
        return f"{self.artifact_url(coordinate)}.{self.binary_extension}"

    def manifest_url(self, coordinate: Coordinate) -> str:
        return f"{self.artifact_url(coordinate)}.{self.manifest_extension}"

    def __repr__(self) -> str:
        return f"RemoteRepository({self.remote_url!r}, layout={self.layout!r})"
