"""
recordui Kernel — the pure engine.

Five components:
  parser      — raw record text → Record  (single, batch, sectioned)
  classifier  — (label, value) → kind + edit encoding
  renderer    — Record(s) → self-contained HTML artifact
  diff        — original vs edited values → change sentence
  bridge      — artifact → host message protocol
"""

from recordui.kernel.bridge import decode_message, edit_prompt
from recordui.kernel.classifier import classify_field, group_fields, is_date_value
from recordui.kernel.diff import build_change_prompt, compute_changes, describe_changes
from recordui.kernel.errors import (
    BatchParseError,
    MessageError,
    MissingFieldsError,
    MissingNameError,
    RecordParseError,
)
from recordui.kernel.parser import (
    parse_record_sections,
    parse_record_text,
    parse_record_texts,
    record_from_row,
    summarize_record,
)
from recordui.kernel.renderer import (
    detail_card_artifact,
    edit_form_artifact,
    records_table_artifact,
    render_detail_card,
    render_edit_form,
    render_records_table,
)
from recordui.kernel.types import Record, RecordSection, RenderOptions, RenderResult

__all__ = [
    "parse_record_text",
    "parse_record_texts",
    "parse_record_sections",
    "record_from_row",
    "summarize_record",
    "classify_field",
    "group_fields",
    "is_date_value",
    "render_edit_form",
    "render_records_table",
    "render_detail_card",
    "edit_form_artifact",
    "records_table_artifact",
    "detail_card_artifact",
    "compute_changes",
    "describe_changes",
    "build_change_prompt",
    "decode_message",
    "edit_prompt",
    "Record",
    "RecordSection",
    "RenderOptions",
    "RenderResult",
    "RecordParseError",
    "MissingNameError",
    "MissingFieldsError",
    "BatchParseError",
    "MessageError",
]
