"""
recordui Kernel — Shared Types

Data classes used across parser, classifier, renderer, diff, and bridge.
These are the contracts that bind the kernel together.

- `Record` is an immutable label → value mapping with case-insensitive lookup
- `FieldClassification` is derived per field at render time, never stored
- `Recognized` / `Ignored` tag every bullet line the parser looks at
- `RenderedArtifact` is the self-contained HTML unit handed back to callers
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

REQUIRED_FIELDS: tuple[str, ...] = ("Name", "Id")

BULLET_MARKER = "*"

# Added to the observed content height before it is reported to the host
SIZE_PADDING = 16

KIND_IDENTIFIER = "identifier"
KIND_PERCENTAGE = "percentage"
KIND_CURRENCY = "currency"
KIND_DATE = "date"
KIND_CONTACT = "contact"
KIND_PLAIN = "plain"

RENDER_MODES: set[str] = {"form", "table", "detail"}


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


class Record(Mapping[str, str]):
    """
    One business entity: display label → string value.

    Keys keep the casing they were first given; lookups ignore case, so
    `record["id"]` and `record["Id"]` are the same field. A later key that
    collides case-insensitively overwrites the value but not the label.
    Immutable once built.
    """

    __slots__ = ("_data", "_index")

    def __init__(self, data: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        items = data.items() if isinstance(data, Mapping) else data
        values: dict[str, str] = {}
        index: dict[str, str] = {}
        for key, value in items:
            lower = key.lower()
            label = index.setdefault(lower, key)
            values[label] = value
        self._data = values
        self._index = index

    def __getitem__(self, key: str) -> str:
        if key in self._data:
            return self._data[key]
        label = self._index.get(key.lower()) if isinstance(key, str) else None
        if label is None:
            raise KeyError(key)
        return self._data[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Record({self._data!r})"

    def label_for(self, key: str) -> str | None:
        """Return the stored display label matching `key`, ignoring case."""
        return self._index.get(key.lower())

    @property
    def name(self) -> str:
        return self.get("Name", "")

    @property
    def record_id(self) -> str:
        return self.get("Id", "")

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Recognized:
    """A bullet line that matched `* Label: value`."""

    label: str
    value: str


@dataclass(frozen=True)
class Ignored:
    """A line the parser skipped. Never an error."""

    line: str
    reason: str


ParsedLine = Recognized | Ignored


@dataclass
class RecordSection:
    """A named group of fields shown together on a detail card."""

    header: str
    fields: Record

    def to_dict(self) -> dict[str, object]:
        return {"header": self.header, "fields": self.fields.to_dict()}


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldClassification:
    """How one field is shown and edited."""

    label: str
    value: str
    kind: str
    input_type: str = "text"  # "text" or "date"
    edit_value: str = ""
    readonly: bool = False
    suffix: str = ""  # re-appended to non-empty edits on save


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@dataclass
class RenderOptions:
    """Options controlling what the renderer includes in output."""

    size_padding: int = SIZE_PADDING
    include_bridge: bool = True


@dataclass(frozen=True)
class RenderedArtifact:
    """Self-contained HTML unit addressed by a routing URI."""

    uri: str
    html: str
    mime_type: str = "text/html"


@dataclass(frozen=True)
class RenderResult:
    """What every render call hands back: text fallback plus the artifact."""

    summary: str
    artifact: RenderedArtifact


@dataclass(frozen=True)
class FieldChange:
    """One entry of a change set, holding normalized old and new values."""

    label: str
    old: str
    new: str
