"""Tests for response post-processing."""

import pytest

from agent.sanitizer import filter_out_meta_commentary, normalize_line_breaks


@pytest.mark.parametrize("response", [
    "I do not have the exact counts | but here is a table",
    "# Hotspots\nplease provide data",
    "Location: unknown. Please provide the raw data.",
])
def test_substantive_answers_pass_through(response):
    assert filter_out_meta_commentary(response, "Gujarat") == response


def test_meta_commentary_is_replaced_with_redirect():
    result = filter_out_meta_commentary("I do not have the exact counts for Gujarat.", "Gujarat")
    assert result != "I do not have the exact counts for Gujarat."
    assert "more specific Gujarat accident data" in result
    assert "top hotspots in Gujarat" in result


def test_meta_phrase_match_is_case_insensitive():
    result = filter_out_meta_commentary("Step By Step guide to collect data.", "Kerala")
    assert "Kerala" in result


@pytest.mark.parametrize("response", [
    "I do not have the data, but NH-48 is risky.",
    "Please provide more detail about each hotspot.",
])
def test_meta_commentary_naming_specifics_is_kept(response):
    assert filter_out_meta_commentary(response, "Gujarat") == response


def test_plain_answer_is_kept():
    answer = "Install rumble strips and improve lighting."
    assert filter_out_meta_commentary(answer, "Delhi") == answer


@pytest.mark.parametrize("raw", [
    "a<br>b",
    "a<br/>b",
    "a<br />b",
    "a&lt;br&gt;b",
    "a&lt;br/&gt;b",
])
def test_normalize_line_breaks(raw):
    assert normalize_line_breaks(raw) == "a\nb"
