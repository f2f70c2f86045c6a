"""Tests for the callout vocabulary lookup."""

from __future__ import annotations

import pytest

from swiftmarkup.parser.callout import CalloutDelimiter, lookup


def test_vocabulary_is_fixed() -> None:
    assert len(CalloutDelimiter) == 20
    assert CalloutDelimiter.SEE_ALSO.value == "See Also"
    assert CalloutDelimiter.TODO.value == "To Do"


@pytest.mark.parametrize("delimiter", list(CalloutDelimiter))
def test_every_display_name_resolves_to_itself(delimiter: CalloutDelimiter) -> None:
    assert lookup(delimiter.value) is delimiter


@pytest.mark.parametrize(
    "label, expected",
    [
        ("note", CalloutDelimiter.NOTE),
        ("WARNING", CalloutDelimiter.WARNING),
        ("SeeAlso", CalloutDelimiter.SEE_ALSO),
        ("see  also", CalloutDelimiter.SEE_ALSO),
        ("ToDo", CalloutDelimiter.TODO),
        (" to\tdo ", CalloutDelimiter.TODO),
        ("Pre condition", CalloutDelimiter.PRECONDITION),
    ],
)
def test_lookup_ignores_case_and_whitespace(label: str, expected: CalloutDelimiter) -> None:
    assert lookup(label) is expected
    assert CalloutDelimiter.lookup(label) is expected


@pytest.mark.parametrize("label", ["", "Returns", "Parameters", "Custom", "Notes"])
def test_unknown_labels(label: str) -> None:
    assert lookup(label) is None
