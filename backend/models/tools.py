"""Tool call models: arguments in, content items out, host messages."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Tool arguments
# ---------------------------------------------------------------------------


class EditRecordArgs(BaseModel):
    """Arguments for record_edit."""

    model_config = {"extra": "forbid"}

    text: str = Field(description="Record text: name line, then '* Label: value' bullets")


class ViewRecordsTableArgs(BaseModel):
    """Arguments for record_view_table."""

    model_config = {"extra": "forbid"}

    records: list[str]
    object_type: str = Field(min_length=1)


class ViewRecordDetailArgs(BaseModel):
    """Arguments for record_view_detail."""

    model_config = {"extra": "forbid"}

    text: str
    object_type: str | None = None


class QueryResultArgs(BaseModel):
    """Arguments for record_view_query_result. Rows come from an external query."""

    model_config = {"extra": "forbid"}

    object_name: str = Field(min_length=1)
    rows: list[dict[str, Any]] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Tool results
# ---------------------------------------------------------------------------


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ResourceContent(BaseModel):
    """An HTML artifact addressed by a ui:// URI."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["resource"] = "resource"
    uri: str
    mime_type: str = Field(default="text/html", alias="mimeType")
    text: str


class ToolResult(BaseModel):
    """What every tool returns. Errors are results, not exceptions."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent | ResourceContent]
    is_error: bool = Field(default=False, alias="isError")

    @property
    def text(self) -> str:
        """The text summary (first text item)."""
        for item in self.content:
            if isinstance(item, TextContent):
                return item.text
        return ""

    @property
    def resource(self) -> ResourceContent | None:
        for item in self.content:
            if isinstance(item, ResourceContent):
                return item
        return None


# ---------------------------------------------------------------------------
# Artifact → host messages
# ---------------------------------------------------------------------------


class ArtifactMessageRequest(BaseModel):
    """What the host posts to /api/artifacts/messages."""

    model_config = {"extra": "forbid"}

    uri: str = Field(min_length=1)
    message: dict[str, Any]


class HostReaction(BaseModel):
    """What the host should do in response to an artifact message."""

    kind: Literal["resize", "prompt", "dismiss", "ignored"]
    uri: str
    height: float | None = None
    prompt: str | None = None
    record_data: dict[str, str] | None = None
