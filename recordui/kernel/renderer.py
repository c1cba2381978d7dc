"""
recordui Kernel — Component Renderer

Pure functions: Record(s) → self-contained HTML artifact.
No IO. Deterministic: same input → same output, always.

Three presentation modes, chosen by the caller:
- render_edit_form     one record, one input per field, Save / Cancel
- render_records_table many records, one row each, row-level re-edit
- render_detail_card   one record, sectioned and linkified, read-only

Every artifact embeds:
- a JSON config block (mode, padding, message names)
- the source record(s), verbatim, for later comparison
- the bridge runtime (assets/bridge.js)

Embedded JSON has `<`, `>` and `&` written as \\u escapes, so no value can
close its <script> block or open an HTML comment.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from html import escape as _html_escape
from typing import Any
from urllib.parse import quote

import chevron

from recordui.kernel.bridge import bridge_config, load_bridge_script
from recordui.kernel.classifier import (
    EMAIL_RE,
    PHONE_RE,
    URL_RE,
    classify_field,
    field_kind,
    group_fields,
    is_phone_text,
)
from recordui.kernel.parser import summarize_record
from recordui.kernel.templates import (
    BASE_CSS,
    DATA_BLOCKS_TEMPLATE,
    DETAIL_CARD_TEMPLATE,
    DETAIL_CSS,
    EDIT_FORM_TEMPLATE,
    FORM_CSS,
    RECORDS_TABLE_TEMPLATE,
    TABLE_CSS,
)
from recordui.kernel.types import (
    Record,
    RecordSection,
    RenderedArtifact,
    RenderOptions,
    RenderResult,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_edit_form(record: Record, options: RenderOptions | None = None) -> str:
    """
    Render an editable form for one record.
    Returns a UTF-8 HTML string.
    Pure function. No side effects. No IO.
    """
    opts = options or RenderOptions()

    fields = []
    for index, label in enumerate(form_labels(record), start=1):
        info = classify_field(label, record[label])
        fields.append(
            {
                "label": label,
                "kind": info.kind,
                "input_id": f"field-{index}",
                "input_type": info.input_type,
                "edit_value": info.edit_value,
                "readonly": info.readonly,
                "suffix": info.suffix,
                "has_suffix": bool(info.suffix),
            }
        )

    context = {
        "title": record.name or "Object",
        "css": BASE_CSS + FORM_CSS,
        "fields": fields,
        "data_blocks": _render_data_blocks("form", opts, original=record.to_dict()),
    }
    return chevron.render(EDIT_FORM_TEMPLATE, context)


def render_records_table(
    records: Sequence[Record],
    object_type: str,
    options: RenderOptions | None = None,
) -> str:
    """
    Render a read-only table, one row per record.
    Each row carries its own record as JSON and an Edit control.
    No records → an explicit empty-state message instead of a table.
    """
    opts = options or RenderOptions()
    columns = table_columns(records)

    rows = []
    for record in records:
        cells = []
        for column in columns:
            value = record.get(column, "")
            cells.append({"kind": field_kind(column, value), "value": value})
        rows.append(
            {
                "record_id": record.record_id,
                "record_json": json.dumps(record.to_dict(), ensure_ascii=False),
                "cells": cells,
            }
        )

    count = len(records)
    context = {
        "object_type": object_type,
        "count_label": f"{count} record{'' if count == 1 else 's'}",
        "css": BASE_CSS + TABLE_CSS,
        "has_records": count > 0,
        "columns": [{"label": column} for column in columns],
        "rows": rows,
        "empty_message": f"No {object_type} records to display.",
        "data_blocks": _render_data_blocks("table", opts, object_type=object_type),
    }
    return chevron.render(RECORDS_TABLE_TEMPLATE, context)


def render_detail_card(
    record: Record,
    sections: Sequence[RecordSection] | None = None,
    object_type: str | None = None,
    options: RenderOptions | None = None,
) -> str:
    """
    Render a read-only card with fields grouped into sections.
    Emails, phone numbers and URLs inside values become links.
    Without explicit sections, fields are grouped by kind.
    """
    opts = options or RenderOptions()
    groups = list(sections) if sections else group_fields(record)

    section_ctx = []
    for section in groups:
        fields = [
            {
                "label": label,
                "kind": field_kind(label, value),
                "value_html": linkify(value) if value else '<span class="empty">&mdash;</span>',
            }
            for label, value in section.fields.items()
        ]
        if fields:
            section_ctx.append({"header": section.header, "fields": fields})

    context = {
        "title": record.name or record.record_id or "Record",
        "record_id": record.record_id,
        "object_type": object_type or "",
        "has_object_type": bool(object_type),
        "css": BASE_CSS + DETAIL_CSS,
        "sections": section_ctx,
        "data_blocks": _render_data_blocks(
            "detail", opts, original=record.to_dict(), object_type=object_type
        ),
    }
    return chevron.render(DETAIL_CARD_TEMPLATE, context)


# ---------------------------------------------------------------------------
# Artifacts (HTML + routing URI + text fallback)
# ---------------------------------------------------------------------------


def artifact_uri(*segments: str) -> str:
    """ui://a/b/c with every segment percent-encoded."""
    return "ui://" + "/".join(quote(segment, safe="") for segment in segments)


def edit_form_artifact(record: Record, options: RenderOptions | None = None) -> RenderResult:
    uri = artifact_uri("record", "edit", record.record_id or "new")
    return RenderResult(
        summary=summarize_record(record),
        artifact=RenderedArtifact(uri=uri, html=render_edit_form(record, options)),
    )


def records_table_artifact(
    records: Sequence[Record],
    object_type: str,
    options: RenderOptions | None = None,
) -> RenderResult:
    first_id = records[0].record_id if records else ""
    uri = artifact_uri("records", "table", object_type, first_id or "table")
    return RenderResult(
        summary=summarize_records(records, object_type),
        artifact=RenderedArtifact(uri=uri, html=render_records_table(records, object_type, options)),
    )


def detail_card_artifact(
    record: Record,
    sections: Sequence[RecordSection] | None = None,
    object_type: str | None = None,
    options: RenderOptions | None = None,
) -> RenderResult:
    uri = artifact_uri("record", "detail", record.record_id or "unknown")
    return RenderResult(
        summary=summarize_record(record),
        artifact=RenderedArtifact(uri=uri, html=render_detail_card(record, sections, object_type, options)),
    )


def summarize_records(records: Sequence[Record], object_type: str) -> str:
    count = len(records)
    header = f"Found {count} {object_type} record{'' if count == 1 else 's'}"
    return "\n\n".join([header, *(summarize_record(record) for record in records)])


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def form_labels(record: Mapping[str, str]) -> list[str]:
    """Alphabetical (case-insensitive), identifier always last."""
    return sorted(record, key=lambda label: (label.lower() == "id", label.lower(), label))


def table_columns(records: Sequence[Mapping[str, str]]) -> list[str]:
    """
    Union of every record's fields (case-insensitive, first casing kept):
    Name first, Id last, everything else alphabetical in between.
    """
    seen: dict[str, str] = {}
    for record in records:
        for label in record:
            seen.setdefault(label.lower(), label)

    def rank(lower: str) -> tuple[int, str]:
        if lower == "name":
            return (0, lower)
        if lower == "id":
            return (2, lower)
        return (1, lower)

    return [seen[lower] for lower in sorted(seen, key=rank)]


# ---------------------------------------------------------------------------
# Embedding
# ---------------------------------------------------------------------------

_SCRIPT_SAFE = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


def embed_json(data: Any) -> str:
    """JSON that can sit inside <script> without ending it early."""
    return json.dumps(data, ensure_ascii=False).translate(_SCRIPT_SAFE)


def _render_data_blocks(
    mode: str,
    opts: RenderOptions,
    original: dict[str, str] | None = None,
    object_type: str | None = None,
) -> str:
    config = bridge_config(mode, object_type=object_type, size_padding=opts.size_padding)
    context = {
        "config_json": embed_json(config),
        "original_json": embed_json(original) if original is not None else "",
        "has_original": original is not None,
        "bridge_js": load_bridge_script() if opts.include_bridge else "",
        "has_bridge": opts.include_bridge,
    }
    return chevron.render(DATA_BLOCKS_TEMPLATE, context)


# ---------------------------------------------------------------------------
# Inline formatting helpers
# ---------------------------------------------------------------------------

_LINK_RE = re.compile(
    f"(?P<email>{EMAIL_RE.pattern})|(?P<url>{URL_RE.pattern})|(?P<phone>{PHONE_RE.pattern})"
)
_PHONE_STRIP_RE = re.compile(r"[^\d+]")


def escape(text: str) -> str:
    """HTML-escape user content."""
    return _html_escape(str(text), quote=True)


def linkify(text: str) -> str:
    """
    Escape `text`, turning email addresses, URLs and phone numbers into
    links. Date-shaped digit runs are never treated as phone numbers.
    """
    parts: list[str] = []
    pos = 0
    for match in _LINK_RE.finditer(text):
        found = match.group()
        if match.group("email"):
            anchor = f'<a href="{escape("mailto:" + found)}">{escape(found)}</a>'
        elif match.group("url"):
            href = found if found.lower().startswith(("http://", "https://")) else "https://" + found
            anchor = f'<a href="{escape(href)}" target="_blank" rel="noopener noreferrer">{escape(found)}</a>'
        elif is_phone_text(found):
            anchor = f'<a href="{escape("tel:" + _PHONE_STRIP_RE.sub("", found))}">{escape(found)}</a>'
        else:
            continue
        parts.append(escape(text[pos : match.start()]))
        parts.append(anchor)
        pos = match.end()
    parts.append(escape(text[pos:]))
    return "".join(parts)
