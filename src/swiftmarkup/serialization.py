"""JSON-compatible encoding of documentation records.

Every value is encoded as a dict tagged with its ``"type"``; tuples become
lists and callout delimiters their display names. ``from_dict(to_dict(x))``
returns a value equal to ``x``.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import Any

from .parser.base import (
    BlockQuote,
    Callout,
    CodeBlock,
    Document,
    Documentation,
    Heading,
    HTMLBlock,
    ListBlock,
    ListItem,
    Paragraph,
    Parameter,
    ThematicBreak,
)
from .parser.callout import CalloutDelimiter

_TYPES: dict[str, type] = {
    cls.kind: cls
    for cls in (
        BlockQuote,
        Callout,
        CodeBlock,
        Document,
        Documentation,
        Heading,
        HTMLBlock,
        ListBlock,
        ListItem,
        Paragraph,
        Parameter,
        ThematicBreak,
    )
}


def to_dict(value: Any) -> dict[str, Any]:
    """Encode a record, block, callout or parameter."""
    if not is_dataclass(value) or getattr(value, "kind", None) not in _TYPES:
        raise ValueError(f"Cannot encode {type(value).__name__}")

    data: dict[str, Any] = {"type": value.kind}
    for f in fields(value):
        data[f.name] = _encode(getattr(value, f.name))
    return data


def from_dict(data: dict[str, Any]) -> Any:
    """Decode a value produced by :func:`to_dict`."""
    if not isinstance(data, dict):
        raise ValueError(f"Expected an object, got {type(data).__name__}")

    tag = data.get("type")
    cls = _TYPES.get(tag)
    if cls is None:
        raise ValueError(f"Unknown type tag: {tag!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in data:
            kwargs[f.name] = _decode_field(cls, f.name, data[f.name])

    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ValueError(f"Malformed {tag!r} payload: {exc}") from exc


def dumps(documentation: Documentation, indent: int | None = None) -> str:
    return json.dumps(to_dict(documentation), ensure_ascii=False, indent=indent)


def loads(text: str) -> Documentation:
    value = from_dict(json.loads(text))
    if not isinstance(value, Documentation):
        raise ValueError(f"Expected a documentation payload, got {value.kind!r}")
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, CalloutDelimiter):
        return value.value
    if isinstance(value, tuple):
        return [_encode(v) for v in value]
    if is_dataclass(value):
        return to_dict(value)
    return value


def _decode_field(cls: type, name: str, value: Any) -> Any:
    if cls is Callout and name == "delimiter":
        try:
            return CalloutDelimiter(value)
        except ValueError as exc:
            raise ValueError(f"Unknown callout delimiter: {value!r}") from exc
    return _decode(value)


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_decode(v) for v in value)
    if isinstance(value, dict):
        return from_dict(value)
    return value
