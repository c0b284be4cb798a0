"""FastAPI routes for artifact retrieval."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from jarfetch.modules.artifacts.service import ArtifactRepositoryService, OperationResult

router = APIRouter(prefix="/artifacts", tags=["artifacts"])


class CoordinateRequest(BaseModel):
    coordinate: str


def get_service(request: Request) -> ArtifactRepositoryService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "artifact_service", None):
        raise HTTPException(status_code=500, detail="Artifact service not initialized.")
    return container.artifact_service


def _respond(result: OperationResult):
    if not result.ok:
        raise HTTPException(status_code=result.status_code, detail=result.message)
    return result.as_dict()


@router.post("/fetch")
def fetch(payload: CoordinateRequest, svc: ArtifactRepositoryService = Depends(get_service)):
    return _respond(svc.fetch(payload.coordinate))


@router.post("/resolve")
def resolve(payload: CoordinateRequest, svc: ArtifactRepositoryService = Depends(get_service)):
    return _respond(svc.resolve(payload.coordinate))


@router.get("/{group}/{name}/versions")
def versions(group: str, name: str, svc: ArtifactRepositoryService = Depends(get_service)):
    return _respond(svc.available_versions(group, name))


@router.get("/{group}/{name}/{version}/exists")
def exists(group: str, name: str, version: str, svc: ArtifactRepositoryService = Depends(get_service)):
    return _respond(svc.exists(f"{group}:{name}:{version}"))
