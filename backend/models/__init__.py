"""
Pydantic models for recordui.

All boundary data shapes defined here. No imports from routes or services.
"""

from backend.models.tools import (
    ArtifactMessageRequest,
    EditRecordArgs,
    HostReaction,
    QueryResultArgs,
    ResourceContent,
    TextContent,
    ToolResult,
    ViewRecordDetailArgs,
    ViewRecordsTableArgs,
)

__all__ = [
    # Tool arguments
    "EditRecordArgs",
    "ViewRecordsTableArgs",
    "ViewRecordDetailArgs",
    "QueryResultArgs",
    # Tool results
    "TextContent",
    "ResourceContent",
    "ToolResult",
    # Artifact messages
    "ArtifactMessageRequest",
    "HostReaction",
]
