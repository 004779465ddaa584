from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel, Field, ValidationError

from drillsargeant.commands.registry import UnknownCommandError
from drillsargeant.core.containers import build_command_registry

router = APIRouter(prefix="/api", tags=["commands"])

# Build once at module level
_registry = build_command_registry()


# ── Response schemas ──────────────────────────────────────────────
class CommandResponse(BaseModel):
    """Outcome of a command: `value` when `ok`, otherwise `error`."""

    ok: bool
    value: Any = None
    error: str | None = Field(None, description="Failure message when `ok` is false.")


# ── Endpoints ─────────────────────────────────────────────────────
@router.get(
    "/commands",
    summary="List commands",
    response_description="Names of registered commands",
)
def list_commands() -> list[str]:
    """Return the names of all commands the front-end can invoke."""
    return _registry.list()


@router.post(
    "/invoke/{name}",
    response_model=CommandResponse,
    summary="Invoke a command",
    response_description="The command result",
)
def invoke(name: str, args: dict[str, Any] | None = Body(None)) -> dict[str, Any]:
    """Invoke a registered command by name.

    The request body is a JSON object holding the command arguments,
    e.g. `{"path": "/home/me/project"}` for `analyze_directory`.
    Commands without arguments accept an empty body.
    """
    try:
        return _registry.invoke(name, args).to_dict()
    except UnknownCommandError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
