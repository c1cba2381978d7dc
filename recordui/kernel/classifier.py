"""
recordui Kernel — Field Type Classifier

Pure function: (label, value) → FieldClassification
No IO. Deterministic: same input → same output, always.

Precedence is an ordered rule list, first match wins:

    identifier > percentage > currency > date > contact > plain

Identifier, percentage and currency fields are never rendered as dates,
whatever their values look like.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from datetime import date, datetime

from recordui.kernel.types import (
    KIND_CONTACT,
    KIND_CURRENCY,
    KIND_DATE,
    KIND_IDENTIFIER,
    KIND_PERCENTAGE,
    KIND_PLAIN,
    FieldClassification,
    Record,
    RecordSection,
)

# ---------------------------------------------------------------------------
# Date detection
# ---------------------------------------------------------------------------

MIN_YEAR = 1900
MAX_YEAR = 2100

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DIGITS_RE = re.compile(r"^\d+$")
_PERCENT_SUFFIX_RE = re.compile(r"%\s*$")

# Human-typed forms accepted by the general parse, tried in order
DATE_FORMATS: tuple[str, ...] = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%d.%m.%Y",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%a %b %d %Y",
)


def parse_date_value(value: str) -> date | None:
    """General parse: ISO 8601 date-times first, then DATE_FORMATS."""
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def is_date_value(value: str) -> bool:
    """
    True if `value` should be edited with a date input.

    Percentages, money, bare numbers and anything with a comma are never
    dates. Strict YYYY-MM-DD is range-checked only (2024-02-30 passes);
    other forms must actually parse, inside [MIN_YEAR, MAX_YEAR].
    """
    text = value.strip()

    if text.endswith("%") or text.startswith("$"):
        return False
    if _DIGITS_RE.match(text):
        return False
    if "$" in text or "%" in text or "," in text:
        return False

    if _ISO_DATE_RE.match(text):
        year, month, day = (int(part) for part in text.split("-"))
        return MIN_YEAR <= year <= MAX_YEAR and 1 <= month <= 12 and 1 <= day <= 31

    parsed = parse_date_value(text)
    if parsed is None:
        return False
    return MIN_YEAR <= parsed.year <= MAX_YEAR


# ---------------------------------------------------------------------------
# Contact-like values
# ---------------------------------------------------------------------------

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
URL_RE = re.compile(r"(?:https?://|www\.)[^\s<>\"']+[^\s<>\"'.,;:!?)\]]")
PHONE_RE = re.compile(r"(?<![\w/])\+?(?:\(\d{1,4}\)\s?|\d{1,4}[\s.-])(?:\d{2,4}[\s.-]){1,3}\d{2,5}(?![\w/-])")

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15


def is_phone_text(text: str) -> bool:
    """A PHONE_RE match that is not really a date or a short number."""
    digits = sum(ch.isdigit() for ch in text)
    if not MIN_PHONE_DIGITS <= digits <= MAX_PHONE_DIGITS:
        return False
    return not is_date_value(text)


def is_contact_value(value: str) -> bool:
    text = value.strip()
    if EMAIL_RE.fullmatch(text) or URL_RE.fullmatch(text):
        return True
    return bool(PHONE_RE.fullmatch(text)) and is_phone_text(text)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _is_identifier(label: str, value: str) -> bool:
    return label.strip().lower() == "id"


def _is_percentage(label: str, value: str) -> bool:
    return "probability" in label.lower()


def _is_currency(label: str, value: str) -> bool:
    lower = label.lower()
    return "amount" in lower or "revenue" in lower


def _is_date(label: str, value: str) -> bool:
    return "date" in label.lower() and is_date_value(value)


def _is_contact(label: str, value: str) -> bool:
    return is_contact_value(value)


KIND_RULES: list[tuple[Callable[[str, str], bool], str]] = [
    (_is_identifier, KIND_IDENTIFIER),
    (_is_percentage, KIND_PERCENTAGE),
    (_is_currency, KIND_CURRENCY),
    (_is_date, KIND_DATE),
    (_is_contact, KIND_CONTACT),
]


def field_kind(label: str, value: str) -> str:
    for predicate, kind in KIND_RULES:
        if predicate(label, value):
            return kind
    return KIND_PLAIN


def classify_field(label: str, value: str) -> FieldClassification:
    """Decide kind plus edit encoding for one field."""
    kind = field_kind(label, value)

    if kind == KIND_IDENTIFIER:
        return FieldClassification(label, value, kind, edit_value=value, readonly=True)

    if kind == KIND_PERCENTAGE:
        if _PERCENT_SUFFIX_RE.search(value):
            stripped = _PERCENT_SUFFIX_RE.sub("", value).strip()
            return FieldClassification(label, value, kind, edit_value=stripped, suffix="%")
        return FieldClassification(label, value, kind, edit_value=value)

    if kind == KIND_DATE:
        return FieldClassification(label, value, kind, input_type="date", edit_value=to_iso_date(value))

    return FieldClassification(label, value, kind, edit_value=value)


def to_iso_date(value: str) -> str:
    """YYYY-MM-DD form of a date value; strict ISO input is kept as-is."""
    text = value.strip()
    if _ISO_DATE_RE.match(text):
        return text
    parsed = parse_date_value(text)
    return parsed.isoformat() if parsed is not None else value


# ---------------------------------------------------------------------------
# Default detail-card grouping
# ---------------------------------------------------------------------------

_SECTION_FOR_KIND: dict[str, str] = {
    KIND_PLAIN: "Details",
    KIND_CONTACT: "Contact",
    KIND_PERCENTAGE: "Financials",
    KIND_CURRENCY: "Financials",
    KIND_DATE: "Dates",
    KIND_IDENTIFIER: "System",
}

SECTION_ORDER: tuple[str, ...] = ("Details", "Contact", "Financials", "Dates", "System")


def group_fields(record: Mapping[str, str]) -> list[RecordSection]:
    """Group fields into sections by kind. Name always leads Details."""
    grouped: dict[str, list[tuple[str, str]]] = {header: [] for header in SECTION_ORDER}
    for label, value in record.items():
        if label.lower() == "name":
            grouped["Details"].insert(0, (label, value))
            continue
        grouped[_SECTION_FOR_KIND[field_kind(label, value)]].append((label, value))
    return [RecordSection(header, Record(fields)) for header, fields in grouped.items() if fields]
