"""
recordui Kernel — Text Record Parser

Pure functions: raw text → Record.

Input shape:

    Acme Corporation

    * Id: 001xx000003DGb2AAG
    * Name: Acme Corporation
    * Annual Revenue: $4,500,000

The first non-bullet line is the record's name. Every bullet line is tried
against `* Label: value`; lines that don't fit are skipped, never fatal.
A record without `Name` and `Id` bullets is rejected as a whole.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from recordui.kernel.errors import BatchParseError, MissingFieldsError, MissingNameError, RecordParseError
from recordui.kernel.types import (
    BULLET_MARKER,
    REQUIRED_FIELDS,
    Ignored,
    ParsedLine,
    Recognized,
    Record,
    RecordSection,
)

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_FIELD_LINE_RE = re.compile(r"^\*\s*([^:]+):\s*(.+)$")
_WORD_SPLIT_RE = re.compile(r"[\s_]+")

DEFAULT_SECTION = "Details"


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


def split_lines(raw: str) -> list[str]:
    """Trimmed, non-empty lines of `raw`."""
    lines = (line.strip() for line in _LINE_SPLIT_RE.split(raw.strip()))
    return [line for line in lines if line]


def parse_line(line: str) -> ParsedLine:
    """
    Classify one line as a `Recognized` field or an `Ignored` line.
    Never raises.
    """
    if not line.startswith(BULLET_MARKER):
        return Ignored(line, "not a bullet")
    match = _FIELD_LINE_RE.match(line)
    if match is None:
        return Ignored(line, "no 'label: value' pair")
    label = match.group(1).strip()
    if not label:
        return Ignored(line, "empty label")
    return Recognized(label, match.group(2).strip())


def title_case_label(label: str) -> str:
    """'annual_revenue' → 'Annual Revenue', 'CLOSE date' → 'Close Date'."""
    words = [w for w in _WORD_SPLIT_RE.split(label) if w]
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def _is_bullet(line: str) -> bool:
    return line.startswith(BULLET_MARKER)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def parse_record_text(raw: str) -> Record:
    """
    Parse one text block into a Record.

    Raises MissingNameError when no non-bullet line exists and
    MissingFieldsError when a required label has no bullet line.
    """
    lines = split_lines(raw)
    name_line = next((line for line in lines if not _is_bullet(line)), None)
    if name_line is None:
        raise MissingNameError()

    # lower-cased label → first-seen label / last-seen value
    first_labels: dict[str, str] = {}
    last_values: dict[str, str] = {}

    for line in lines:
        if not _is_bullet(line):
            continue
        parsed = parse_line(line)
        if isinstance(parsed, Ignored):
            logger.debug("parser: skipping line %r (%s)", parsed.line[:200], parsed.reason)
            continue
        lower = parsed.label.lower()
        first_labels.setdefault(lower, parsed.label)
        last_values[lower] = parsed.value

    missing = [name for name in REQUIRED_FIELDS if name.lower() not in first_labels]
    if missing:
        raise MissingFieldsError(missing)

    items = [("Name", name_line)]
    items.extend((title_case_label(first_labels[lower]), value) for lower, value in last_values.items())
    return Record(items)


def parse_record_texts(texts: Iterable[str]) -> list[Record]:
    """
    Parse a batch. Each text is parsed on its own; if any fails, the batch
    is rejected with a BatchParseError naming every failing position.
    """
    records: list[Record] = []
    failures: list[tuple[int, RecordParseError]] = []
    total = 0
    for position, text in enumerate(texts, start=1):
        total = position
        try:
            records.append(parse_record_text(text))
        except RecordParseError as e:
            failures.append((position, e))

    if failures:
        raise BatchParseError(failures, total)
    return records


def _clean_header(line: str) -> str:
    return line.lstrip("#").strip().rstrip(":").strip()


def parse_record_sections(raw: str) -> tuple[Record, list[RecordSection]]:
    """
    Parse a record plus the section headers written between its bullets.

        Acme Corporation
        * Id: 001
        * Name: Acme Corporation
        ## Contact
        * Email: info@acme.test

    Non-bullet lines after the name line start a new section. Bullets seen
    before any header fall under "Details". Returns an empty section list
    when the text has no headers at all.
    """
    record = parse_record_text(raw)
    lines = split_lines(raw)
    if sum(1 for line in lines if not _is_bullet(line)) < 2:
        return record, []

    headers: list[str] = []
    members: dict[str, list[str]] = {}
    placed: set[str] = set()
    current = DEFAULT_SECTION
    seen_name = False

    for line in lines:
        if not _is_bullet(line):
            if not seen_name:
                seen_name = True
                continue
            header = _clean_header(line)
            if header:
                current = header
                if header not in members:
                    headers.append(header)
                    members[header] = []
            continue

        parsed = parse_line(line)
        if isinstance(parsed, Ignored):
            continue
        label = record.label_for(title_case_label(parsed.label))
        if label is None or label.lower() in placed:
            continue
        placed.add(label.lower())
        if current not in members:
            headers.insert(0, current)
            members[current] = []
        members[current].append(label)

    sections = [
        RecordSection(header, Record((label, record[label]) for label in members[header]))
        for header in headers
        if members[header]
    ]
    return record, sections


def record_from_row(row: Mapping[str, Any]) -> Record:
    """
    Convert a data-source result row into a Record.

    Keys are kept verbatim. `attributes` metadata is dropped, nulls become
    empty strings, a related object with a Name collapses to that name, and
    any other nested value is kept as JSON.
    """
    items: list[tuple[str, str]] = []
    for key, value in row.items():
        if key == "attributes":
            continue
        if value is None:
            items.append((key, ""))
        elif isinstance(value, Mapping):
            if "Name" in value:
                items.append((key, str(value["Name"])))
            else:
                items.append((key, json.dumps(value, ensure_ascii=False)))
        elif isinstance(value, list):
            items.append((key, json.dumps(value, ensure_ascii=False)))
        elif isinstance(value, bool):
            items.append((key, "true" if value else "false"))
        else:
            items.append((key, str(value)))
    return Record(items)


# ---------------------------------------------------------------------------
# Serializers
# ---------------------------------------------------------------------------


def record_to_text(record: Mapping[str, str]) -> str:
    """
    The text form `parse_record_text` accepts: name line, blank line, then
    one bullet per field. Newlines inside values are flattened.
    """
    name = record.get("Name") or record.get("Id") or "Record"
    lines = [_one_line(name), ""]
    for label, value in record.items():
        lines.append(f"{BULLET_MARKER} {label}: {_one_line(value)}")
    return "\n".join(lines)


def _one_line(value: str) -> str:
    return " ".join(value.split())


def summarize_record(record: Mapping[str, str]) -> str:
    """Plain-text fallback: one `**Label:** value` line per field."""
    return "\n".join(f"**{label}:** {value}" for label, value in record.items())
