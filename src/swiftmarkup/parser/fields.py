"""Field extraction for ``- Name: description`` bullet items."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .base import ListItem, to_markup

_LIST_MARKERS = "-+*"
_PARAMETER_TOKEN = "parameter"
_LINE_BREAKS = "\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"


@dataclass(frozen=True, slots=True)
class FieldMatch:
    is_parameter_prefixed: bool
    name: str
    description: str
    has_multi_block_description: bool = False


def interpret(item: ListItem) -> FieldMatch | None:
    """Extract the ``name: description`` field of a bullet item.

    Returns ``None`` when the item text does not have the field shape, in
    which case the caller treats the item as plain list content.

    When the item holds more than one block (``- Throws:`` followed by a
    nested list, say), the description is the Markdown of every block after
    the first. Otherwise it is the text after the colon with its lines
    joined by single spaces.
    """
    field = split_field(item.text)
    if field is None:
        return None

    if len(item.children) > 1:
        description = "\n\n".join(to_markup(child) for child in item.children[1:])
        return replace(field, description=description, has_multi_block_description=True)

    return field


def split_field(text: str) -> FieldMatch | None:
    """Scan ``[marker] [Parameter ]name: rest`` at the start of *text*."""
    pos = _skip_whitespace(text, 0)
    if pos < len(text) and text[pos] in _LIST_MARKERS:
        pos = _skip_whitespace(text, pos + 1)

    after_token = _match_parameter_token(text, pos)
    if after_token is not None:
        scanned = _scan_name(text, after_token)
        if scanned is not None:
            name, rest = scanned
            return FieldMatch(True, name, normalize(rest))

    # Without a usable name after it, "Parameter" is part of the name itself.
    scanned = _scan_name(text, pos)
    if scanned is None:
        return None
    name, rest = scanned
    return FieldMatch(False, name, normalize(rest))


def normalize(text: str) -> str:
    """Trim each line and join the non-empty ones with single spaces."""
    lines = [line.strip() for line in text.splitlines()]
    return " ".join(line for line in lines if line)


# ---------------------------------------------------------------------------
# Scanner helpers
# ---------------------------------------------------------------------------

def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _match_parameter_token(text: str, pos: int) -> int | None:
    end = pos + len(_PARAMETER_TOKEN)
    if text[pos:end].lower() != _PARAMETER_TOKEN:
        return None
    if end >= len(text) or not text[end].isspace():
        return None
    return _skip_whitespace(text, end)


def _scan_name(text: str, pos: int) -> tuple[str, str] | None:
    end = pos
    while end < len(text) and (_is_word_char(text[end]) or _is_horizontal_space(text[end])):
        end += 1

    if end >= len(text) or text[end] != ":":
        return None

    name = normalize(text[pos:end])
    if not name:
        return None
    return name, text[end + 1:]


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _is_horizontal_space(ch: str) -> bool:
    return ch.isspace() and ch not in _LINE_BREAKS
