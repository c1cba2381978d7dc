"""
Record tool handlers.

Each tool takes validated arguments, runs the kernel, and returns a
ToolResult: a text summary plus the HTML artifact as a resource. Parse
failures come back as error results carrying the expected input format;
nothing the kernel raises escapes `call_tool`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from backend.config import settings
from backend.models.tools import (
    EditRecordArgs,
    QueryResultArgs,
    ResourceContent,
    TextContent,
    ToolResult,
    ViewRecordDetailArgs,
    ViewRecordsTableArgs,
)
from recordui.kernel.errors import BatchParseError, RecordParseError
from recordui.kernel.parser import (
    DEFAULT_SECTION,
    parse_record_sections,
    parse_record_text,
    parse_record_texts,
    record_from_row,
)
from recordui.kernel.renderer import detail_card_artifact, edit_form_artifact, records_table_artifact
from recordui.kernel.types import RecordSection, RenderOptions, RenderResult

logger = logging.getLogger(__name__)

EXPECTED_FORMAT = (
    "Expected format:\n"
    "```\n"
    "Object Name\n"
    "\n"
    "* Id: record-id\n"
    "* Name: record-name\n"
    "* AnyField: value\n"
    "* AnotherField: value\n"
    "```"
)


# ---------------------------------------------------------------------------
# Result helpers
# ---------------------------------------------------------------------------


def artifact_result(rendered: RenderResult) -> ToolResult:
    artifact = rendered.artifact
    return ToolResult(
        content=[
            TextContent(text=rendered.summary),
            ResourceContent(uri=artifact.uri, mime_type=artifact.mime_type, text=artifact.html),
        ]
    )


def error_result(message: str) -> ToolResult:
    return ToolResult(content=[TextContent(text=message)], is_error=True)


def parse_error_result(error: RecordParseError) -> ToolResult:
    """Error parsing object text: {cause} followed by the expected format."""
    subject = "records" if isinstance(error, BatchParseError) else "object text"
    return error_result(f"Error parsing {subject}: {error}\n\n{EXPECTED_FORMAT}")


def _render_options() -> RenderOptions:
    return RenderOptions(size_padding=settings.SIZE_PADDING)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def edit_record(args: EditRecordArgs) -> ToolResult:
    """One record → editable form."""
    try:
        record = parse_record_text(args.text)
    except RecordParseError as e:
        logger.info("record_edit: rejected input: %s", e)
        return parse_error_result(e)
    return artifact_result(edit_form_artifact(record, _render_options()))


def view_records_table(args: ViewRecordsTableArgs) -> ToolResult:
    """Many records of one type → table."""
    if len(args.records) > settings.MAX_TABLE_RECORDS:
        return error_result(
            f"Too many records: {len(args.records)} given, at most "
            f"{settings.MAX_TABLE_RECORDS} can be shown in one table."
        )
    try:
        records = parse_record_texts(args.records)
    except RecordParseError as e:
        logger.info("record_view_table: rejected batch: %s", e)
        return parse_error_result(e)
    return artifact_result(records_table_artifact(records, args.object_type, _render_options()))


def view_record_detail(args: ViewRecordDetailArgs) -> ToolResult:
    """One record → read-only detail card, sectioned by any headers in the text."""
    try:
        record, sections = parse_record_sections(args.text)
    except RecordParseError as e:
        logger.info("record_view_detail: rejected input: %s", e)
        return parse_error_result(e)
    return artifact_result(
        detail_card_artifact(record, sections or None, args.object_type, _render_options())
    )


def view_query_result(args: QueryResultArgs) -> ToolResult:
    """
    Rows from an external query. One row → detail card with a single
    Details section, several → table, none → text only.
    """
    if not args.rows:
        return ToolResult(content=[TextContent(text=f"No {args.object_name} records found.")])
    if len(args.rows) > settings.MAX_TABLE_RECORDS:
        return error_result(
            f"Too many rows: {len(args.rows)} returned, at most "
            f"{settings.MAX_TABLE_RECORDS} can be shown in one table."
        )

    records = [record_from_row(row) for row in args.rows]
    options = _render_options()
    if len(records) == 1:
        record = records[0]
        sections = [RecordSection(DEFAULT_SECTION, record)]
        return artifact_result(detail_card_artifact(record, sections, args.object_name, options))
    return artifact_result(records_table_artifact(records, args.object_name, options))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

HANDLERS: dict[str, tuple[type[BaseModel], Callable[[Any], ToolResult]]] = {
    "record_edit": (EditRecordArgs, edit_record),
    "record_view_table": (ViewRecordsTableArgs, view_records_table),
    "record_view_detail": (ViewRecordDetailArgs, view_record_detail),
    "record_view_query_result": (QueryResultArgs, view_query_result),
}


def call_tool(name: str, arguments: dict[str, Any] | None) -> ToolResult:
    """Validate `arguments` for tool `name` and run it. Always returns a result."""
    entry = HANDLERS.get(name)
    if entry is None:
        logger.warning("call_tool: unknown tool %r", name)
        return error_result(f"Unknown tool: {name}")

    model, handler = entry
    try:
        args = model.model_validate(arguments or {})
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        logger.info("call_tool: invalid arguments for %s: %s", name, problems)
        return error_result(f"Invalid arguments for {name}: {problems}")

    logger.debug("call_tool: %s", name)
    return handler(args)
