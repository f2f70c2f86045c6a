"""Tests for bullet field extraction."""

from __future__ import annotations

from swiftmarkup.parser.base import ListBlock, ListItem, Paragraph
from swiftmarkup.parser.fields import FieldMatch, interpret, normalize, split_field


def _item(text: str) -> ListItem:
    return ListItem(text=text, children=(Paragraph(text.lstrip("-+* ")),))


# ---------------------------------------------------------------------------
# Single-line fields
# ---------------------------------------------------------------------------

def test_simple_field() -> None:
    assert interpret(_item("- Author: Mattt")) == FieldMatch(False, "Author", "Mattt")


def test_parameter_prefix_is_captured() -> None:
    match = interpret(_item("- Parameter style: The style of the bicycle"))
    assert match == FieldMatch(True, "style", "The style of the bicycle")


def test_parameter_prefix_is_case_insensitive() -> None:
    match = interpret(_item("- parameter frameSize: Size"))
    assert match is not None
    assert match.is_parameter_prefixed
    assert match.name == "frameSize"


def test_parameters_word_is_a_name_not_a_prefix() -> None:
    assert interpret(_item("- Parameters:")) == FieldMatch(False, "Parameters", "")
    assert interpret(_item("- Parameter: x: y")) == FieldMatch(False, "Parameter", "x: y")


def test_multi_word_name_and_surrounding_space() -> None:
    match = interpret(_item("- See Also : [Reference](https://example.com)"))
    assert match == FieldMatch(False, "See Also", "[Reference](https://example.com)")


def test_description_lines_are_joined() -> None:
    match = interpret(_item("- Returns: A beautiful, brand-new bicycle,\n           custom-built just for you."))
    assert match is not None
    assert match.description == "A beautiful, brand-new bicycle, custom-built just for you."
    assert not match.has_multi_block_description


def test_other_markers_and_no_marker() -> None:
    assert split_field("+ Note: plus") == FieldMatch(False, "Note", "plus")
    assert split_field("* Note: star") == FieldMatch(False, "Note", "star")
    assert split_field("Note: bare") == FieldMatch(False, "Note", "bare")


# ---------------------------------------------------------------------------
# Non-matching items
# ---------------------------------------------------------------------------

def test_items_without_field_shape() -> None:
    assert interpret(_item("- utility bicycles")) is None
    assert interpret(_item("- `Error.invalid`: bad input")) is None
    assert interpret(_item("- name on\n  two lines: text")) is None
    assert interpret(_item("- : empty name")) is None


# ---------------------------------------------------------------------------
# Multi-block descriptions
# ---------------------------------------------------------------------------

def test_nested_blocks_form_the_description() -> None:
    nested = ListBlock(
        list_kind="bullet",
        items=(
            ListItem("- `Error.a` if bad", (Paragraph("`Error.a` if bad"),)),
            ListItem("- `Error.b` if worse", (Paragraph("`Error.b` if worse"),)),
        ),
    )
    item = ListItem(
        text="- Throws:\n  - `Error.a` if bad\n  - `Error.b` if worse",
        children=(Paragraph("Throws:"), nested),
    )

    match = interpret(item)
    assert match is not None
    assert match.name == "Throws"
    assert match.description == "- `Error.a` if bad\n- `Error.b` if worse"
    assert match.has_multi_block_description


def test_normalize() -> None:
    assert normalize("  a\n\n   b  \n c") == "a b c"
    assert normalize("") == ""


def test_sibling_paragraphs_stay_separate_blocks() -> None:
    item = ListItem(
        text="- Returns:\n\n  First paragraph.\n\n  Second paragraph.",
        children=(Paragraph("Returns:"), Paragraph("First paragraph."), Paragraph("Second paragraph.")),
    )

    match = interpret(item)
    assert match is not None
    assert match.description == "First paragraph.\n\nSecond paragraph."
