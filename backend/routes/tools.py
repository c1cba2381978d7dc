"""Tool routes — list tools, call a tool, relay artifact messages."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, HTTPException

from backend.models.tools import ArtifactMessageRequest, HostReaction, ToolResult
from backend.services.host_bridge import host_bridge
from backend.services.record_tools import call_tool
from backend.services.tool_defs import TOOLS
from recordui.kernel.bridge import decode_message
from recordui.kernel.errors import MessageError

router = APIRouter(prefix="/api", tags=["tools"])


@router.get("/tools", status_code=200)
async def list_tools() -> list[dict[str, Any]]:
    """Tool definitions a host advertises to its model."""
    return TOOLS


@router.post("/tools/{name}", status_code=200, response_model_by_alias=True)
async def run_tool(name: str, arguments: dict[str, Any] | None = Body(default=None)) -> ToolResult:
    """Run one tool. Failures come back as results with isError set."""
    return call_tool(name, arguments)


@router.post("/artifacts/messages", status_code=200)
async def relay_message(req: ArtifactMessageRequest) -> HostReaction:
    """Decode a message posted by an artifact and return the host's reaction."""
    try:
        message = decode_message(req.message)
    except MessageError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return host_bridge.handle(req.uri, message)
