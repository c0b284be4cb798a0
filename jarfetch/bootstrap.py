"""Service wiring for the HTTP application."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from jarfetch.modules.artifacts import ArtifactRepositoryService
from jarfetch.modules.artifacts.service import ArtifactFetcher
from jarfetch.settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    fetcher: Optional[ArtifactFetcher] = None
    artifact_service: ArtifactRepositoryService = field(init=False)

    def __post_init__(self) -> None:
        self.artifact_service = ArtifactRepositoryService(self.settings, fetcher=self.fetcher)
        log.info(
            "Local repository %s, remote %s",
            self.artifact_service.local.base_path,
            self.artifact_service.remote.remote_url,
        )

    def close(self) -> None:
        self.artifact_service.close()
