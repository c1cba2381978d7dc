"""
recordui Kernel — Change-Diff Engine

Pure functions: (original, current, baseline?) → change set → sentence.

This is the reference implementation of the logic bundled into every
editable artifact (assets/bridge.js, `buildPrompt`). Both must produce the
same text for the same inputs; tests pin the wording here.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from recordui.kernel.types import FieldChange

NO_CHANGES = "No changes detected."

# ISO date followed by a time-of-day part
DATE_TIME_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})T")


def normalize_value(label: str, value: str) -> str:
    """Date-labelled ISO date-times compare on their date part only."""
    if "date" in label.lower():
        match = DATE_TIME_PATTERN.match(value)
        if match:
            return match.group(1)
    return value


def compute_changes(
    original: Mapping[str, str],
    current: Mapping[str, str],
    baseline: Mapping[str, str] | None = None,
) -> list[FieldChange]:
    """
    Compare every original field against the current form value.

    A missing current value counts as "". When `baseline` (the values the
    form was pre-filled with) is given, a field still holding its baseline
    value is unchanged even if its encoding differs from the original,
    e.g. a date shown as 03/15/2024 but edited as 2024-03-15.
    """
    changes: list[FieldChange] = []
    for label, old in original.items():
        new = current.get(label, "")
        if old == new:
            continue
        if baseline is not None and label in baseline and baseline[label] == new:
            continue
        norm_old = normalize_value(label, old)
        norm_new = normalize_value(label, new)
        if norm_old != norm_new:
            changes.append(FieldChange(label, norm_old, norm_new))
    return changes


def format_change(change: FieldChange) -> str:
    return f'{change.label} from "{change.old}" to "{change.new}"'


def describe_changes(changes: list[FieldChange]) -> str:
    """
    'No changes detected.' or one sentence:
    'Update this field: A from "x" to "y".'
    'Update these fields: A from "x" to "y"; B from "1" to "2".'
    """
    if not changes:
        return NO_CHANGES
    noun = "these fields" if len(changes) > 1 else "this field"
    return f"Update {noun}: {'; '.join(format_change(c) for c in changes)}."


def build_change_prompt(
    original: Mapping[str, str],
    current: Mapping[str, str],
    baseline: Mapping[str, str] | None = None,
) -> str:
    return describe_changes(compute_changes(original, current, baseline))


def apply_suffix(value: str, suffix: str) -> str:
    """Re-append a stripped suffix (e.g. '%') to a non-empty edited value."""
    value = value.strip()
    if suffix and value:
        return value + suffix
    return value
