"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .modules.artifacts import artifacts_router
from .modules.artifacts.service import ArtifactFetcher
from .settings import Settings, get_settings


def create_app(settings: Optional[Settings] = None, fetcher: Optional[ArtifactFetcher] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    container = ServiceContainer(settings, fetcher=fetcher)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            container.close()

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.include_router(health_router)
    app.include_router(artifacts_router)
    app.state.container = container
    return app
