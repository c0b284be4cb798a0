"""Service-level routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe with the configured repositories")
def health(request: Request) -> dict[str, str]:
    service = request.app.state.container.artifact_service
    return {
        "status": "ok",
        "version": request.app.version,
        "localRepository": str(service.local.base_path),
        "remote": service.remote.remote_url,
    }
