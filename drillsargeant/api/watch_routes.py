from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from drillsargeant.core.containers import watch_service

router = APIRouter(prefix="/api/watch", tags=["watch"])


# ── Request / Response schemas ────────────────────────────────────
class WatchRequest(BaseModel):
    """Directory to start or stop monitoring."""

    path: str = Field(..., json_schema_extra={"examples": ["/home/me/projects/my-app"]})


class WatchResponse(BaseModel):
    message: str


class WatchListResponse(BaseModel):
    paths: list[str]
    count: int


# ── Endpoints ─────────────────────────────────────────────────────
@router.post(
    "",
    response_model=WatchResponse,
    summary="Start monitoring a directory",
    response_description="Acknowledgment message",
)
def watch(req: WatchRequest) -> dict[str, str]:
    """Register a directory for monitoring."""
    return {"message": watch_service.watch(req.path)}


@router.delete(
    "",
    response_model=WatchResponse,
    summary="Stop monitoring a directory",
    response_description="Acknowledgment message",
)
def unwatch(req: WatchRequest) -> dict[str, str]:
    """Remove a directory from monitoring."""
    return {"message": watch_service.unwatch(req.path)}


@router.get(
    "",
    response_model=WatchListResponse,
    summary="List monitored directories",
    response_description="Currently monitored paths",
)
def list_watched() -> dict[str, Any]:
    paths = watch_service.list()
    return {"paths": paths, "count": len(paths)}
