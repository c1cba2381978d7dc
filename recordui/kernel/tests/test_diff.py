"""
recordui Change-Diff Tests

The change sentence sent back when a form is saved. Wording here is the
same wording the artifact runtime produces.
"""

from recordui.kernel.bridge import load_bridge_script
from recordui.kernel.classifier import classify_field
from recordui.kernel.diff import (
    NO_CHANGES,
    apply_suffix,
    build_change_prompt,
    compute_changes,
    describe_changes,
    normalize_value,
)
from recordui.kernel.types import FieldChange


class TestComputeChanges:
    def test_identical_values(self):
        original = {"Name": "Acme", "Amount": "$5,000"}
        assert compute_changes(original, dict(original)) == []

    def test_single_change(self):
        changes = compute_changes({"Name": "Acme", "Amount": "$5,000"}, {"Name": "Acme", "Amount": "$6,000"})
        assert changes == [FieldChange("Amount", "$5,000", "$6,000")]

    def test_changes_follow_original_order(self):
        original = {"Name": "Acme", "Industry": "Retail", "Amount": "1"}
        current = {"Amount": "2", "Industry": "Energy", "Name": "Acme"}
        assert [c.label for c in compute_changes(original, current)] == ["Industry", "Amount"]

    def test_missing_current_value_counts_as_empty(self):
        changes = compute_changes({"Name": "Acme", "Industry": "Retail"}, {"Name": "Acme"})
        assert changes == [FieldChange("Industry", "Retail", "")]

    def test_fields_only_in_current_are_ignored(self):
        assert compute_changes({"Name": "Acme"}, {"Name": "Acme", "Extra": "x"}) == []

    def test_date_time_compares_on_date_part(self):
        original = {"Close Date": "2024-03-15T00:00:00.000Z"}
        assert compute_changes(original, {"Close Date": "2024-03-15"}) == []

    def test_changed_date_reports_normalized_values(self):
        original = {"Close Date": "2024-03-15T00:00:00.000Z"}
        changes = compute_changes(original, {"Close Date": "2024-04-01"})
        assert changes == [FieldChange("Close Date", "2024-03-15", "2024-04-01")]

    def test_baseline_hides_encoding_differences(self):
        original = {"Close Date": "03/15/2024"}
        baseline = {"Close Date": "2024-03-15"}
        assert compute_changes(original, {"Close Date": "2024-03-15"}, baseline) == []

    def test_without_baseline_encoding_difference_is_a_change(self):
        changes = compute_changes({"Close Date": "03/15/2024"}, {"Close Date": "2024-03-15"})
        assert changes == [FieldChange("Close Date", "03/15/2024", "2024-03-15")]

    def test_baseline_does_not_hide_real_edits(self):
        original = {"Close Date": "03/15/2024"}
        baseline = {"Close Date": "2024-03-15"}
        changes = compute_changes(original, {"Close Date": "2024-04-01"}, baseline)
        assert changes == [FieldChange("Close Date", "03/15/2024", "2024-04-01")]


class TestDescribeChanges:
    def test_no_changes(self):
        assert describe_changes([]) == NO_CHANGES == "No changes detected."

    def test_one_change(self):
        text = describe_changes([FieldChange("Amount", "$5,000", "$6,000")])
        assert text == 'Update this field: Amount from "$5,000" to "$6,000".'

    def test_amount_change_sentence(self):
        assert build_change_prompt({"Amount": "$100"}, {"Amount": "$200"}) == (
            'Update this field: Amount from "$100" to "$200".'
        )

    def test_several_changes(self):
        text = describe_changes(
            [FieldChange("Industry", "Retail", "Energy"), FieldChange("Amount", "1", "2")]
        )
        assert text == 'Update these fields: Industry from "Retail" to "Energy"; Amount from "1" to "2".'


class TestRoundTrip:
    """Saving an untouched form must report no changes."""

    def test_percentage_suffix_round_trip(self):
        original = {"Probability": "75%"}
        info = classify_field("Probability", "75%")
        current = {"Probability": apply_suffix(info.edit_value, info.suffix)}
        assert build_change_prompt(original, current) == NO_CHANGES

    def test_percentage_without_suffix_round_trip(self):
        original = {"Probability": "75"}
        info = classify_field("Probability", "75")
        current = {"Probability": apply_suffix(info.edit_value, info.suffix)}
        assert build_change_prompt(original, current) == NO_CHANGES

    def test_edited_percentage_keeps_suffix(self):
        info = classify_field("Probability", "75%")
        current = {"Probability": apply_suffix("90", info.suffix)}
        assert build_change_prompt({"Probability": "75%"}, current) == (
            'Update this field: Probability from "75%" to "90%".'
        )

    def test_cleared_percentage_has_no_suffix(self):
        assert apply_suffix("  ", "%") == ""


def test_normalize_value_only_touches_date_labels():
    assert normalize_value("Close Date", "2024-03-15T10:00:00Z") == "2024-03-15"
    assert normalize_value("Notes", "Tuesday") == "Tuesday"


class TestDateLikeLabels:
    """Labels that merely contain "date" keep their full value."""

    def test_last_updated_by_edit_is_reported(self):
        assert build_change_prompt({"Last Updated By": "Tom Tan"}, {"Last Updated By": "Tom Tim"}) == (
            'Update this field: Last Updated By from "Tom Tan" to "Tom Tim".'
        )

    def test_update_notes_edit_is_reported(self):
        changes = compute_changes({"Update Notes": "Call Tuesday"}, {"Update Notes": "Call Thursday"})
        assert changes == [FieldChange("Update Notes", "Call Tuesday", "Call Thursday")]

    def test_only_iso_date_times_are_cut(self):
        assert normalize_value("Last Updated By", "Tom Tan") == "Tom Tan"
        assert normalize_value("Close Date", "Tomorrow") == "Tomorrow"
        assert normalize_value("Close Date", "2024-03-15T00:00:00.000Z") == "2024-03-15"


class TestRuntimeNormalization:
    def test_runtime_strips_only_a_time_of_day_suffix(self):
        script = load_bridge_script()
        assert r"/^(\d{4}-\d{2}-\d{2})T/" in script
        assert 'split("T")' not in script
