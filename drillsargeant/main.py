from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from drillsargeant.api.analysis_routes import router as analysis_router
from drillsargeant.api.command_routes import router as command_router
from drillsargeant.api.system_routes import router as system_router
from drillsargeant.api.watch_routes import router as watch_router
from drillsargeant.core.config import settings
from drillsargeant.core.logging import setup_logging

setup_logging()

tags_metadata = [
    {
        "name": "commands",
        "description": "Generic command surface: list registered commands and invoke them by name.",
    },
    {
        "name": "analysis",
        "description": "Analyze a project directory and export the result as JSON, CSV or HTML.",
    },
    {
        "name": "system",
        "description": "Information about the host running the backend.",
    },
    {
        "name": "watch",
        "description": "Register, unregister and list directories the front-end monitors.",
    },
    {
        "name": "health",
        "description": "Liveness probe used by the desktop shell.",
    },
]

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Backend commands for the DrillSargeant code analysis desktop app.",
    openapi_tags=tags_metadata,
)

app.include_router(command_router)
app.include_router(analysis_router)
app.include_router(system_router)
app.include_router(watch_router)


@app.get(
    "/health",
    tags=["health"],
    summary="Health check",
    response_description="Service status",
)
def health() -> dict[str, str]:
    return {"status": "healthy", "version": settings.APP_VERSION}


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
