from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from drillsargeant.services.system_service import SystemService

router = APIRouter(prefix="/api/system", tags=["system"])


class SystemInfoResponse(BaseModel):
    info: str


@router.get(
    "/info",
    response_model=SystemInfoResponse,
    summary="Get system info",
    response_description="Application name, host OS and CPU architecture",
)
def get_system_info() -> dict[str, str]:
    """Describe the host the backend runs on."""
    return {"info": SystemService.get_system_info()}
