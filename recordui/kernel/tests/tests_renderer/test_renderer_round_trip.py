"""
recordui Renderer -- Save Round Trip

Render a form, read back every pre-filled input the way the artifact
runtime does, and diff it against the embedded original. An untouched
form must report no changes; a single edit must report only that field.
"""

import html as html_lib
import json
import re

from recordui.kernel.diff import NO_CHANGES, apply_suffix, build_change_prompt
from recordui.kernel.parser import parse_record_text
from recordui.kernel.renderer import render_edit_form

MIXED = """\
Acme Renewal

* Id: 006xx000001a2b3AAA
* Name: Acme Renewal
* Amount: $120,000
* Probability: 75 %
* Close Date: 03/15/2024
* Last Modified Date: 2024-03-15T10:30:00.000Z
* Last Updated By: Tom Tan
* Stage Name: Negotiation
* Notes: "Renewal" <priority> & 'fast'
"""

FIELD_RE = re.compile(
    r'data-label="([^"]*)" data-kind="[^"]*" data-suffix="([^"]*)">.*?<input [^>]*value="([^"]*)"',
    re.S,
)


def original_of(html):
    match = re.search(r'<script type="application/json" id="recordui-original">(.*?)</script>', html, re.S)
    assert match, "no #recordui-original block"
    return json.loads(match.group(1))


def read_form(html):
    """Input values as the runtime collects them on save."""
    data = {}
    for label, suffix, value in FIELD_RE.findall(html):
        data[html_lib.unescape(label)] = apply_suffix(html_lib.unescape(value), html_lib.unescape(suffix))
    return data


class TestUntouchedForm:
    def test_every_field_is_read_back(self):
        html = render_edit_form(parse_record_text(MIXED))
        assert set(read_form(html)) == set(original_of(html))

    def test_save_reports_no_changes(self):
        html = render_edit_form(parse_record_text(MIXED))
        baseline = read_form(html)
        current = read_form(html)
        assert build_change_prompt(original_of(html), current, baseline) == NO_CHANGES

    def test_reencoded_dates_need_the_baseline(self):
        html = render_edit_form(parse_record_text(MIXED))
        current = read_form(html)
        assert current["Close Date"] == "2024-03-15"
        assert current["Probability"] == "75%"
        prompt = build_change_prompt(original_of(html), current)
        assert "Close Date" in prompt
        assert "Last Modified Date" not in prompt


class TestSingleEdit:
    def test_only_the_edited_field_is_reported(self):
        html = render_edit_form(parse_record_text(MIXED))
        baseline = read_form(html)
        current = dict(baseline, **{"Last Updated By": "Tom Tim"})
        assert build_change_prompt(original_of(html), current, baseline) == (
            'Update this field: Last Updated By from "Tom Tan" to "Tom Tim".'
        )

    def test_edited_date_is_reported_against_the_original(self):
        html = render_edit_form(parse_record_text(MIXED))
        baseline = read_form(html)
        current = dict(baseline, **{"Close Date": "2024-04-01"})
        assert build_change_prompt(original_of(html), current, baseline) == (
            'Update this field: Close Date from "03/15/2024" to "2024-04-01".'
        )
