"""Core intermediate representation (IR) for parsed documentation comments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol

from .callout import CalloutDelimiter


# ---------------------------------------------------------------------------
# Block tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Paragraph:
    kind: ClassVar[str] = "paragraph"

    text: str


@dataclass(frozen=True, slots=True)
class Heading:
    kind: ClassVar[str] = "heading"

    level: int
    text: str


@dataclass(frozen=True, slots=True)
class CodeBlock:
    kind: ClassVar[str] = "code_block"

    info: str
    literal: str

    @property
    def text(self) -> str:
        return self.literal


@dataclass(frozen=True, slots=True)
class HTMLBlock:
    kind: ClassVar[str] = "html_block"

    literal: str

    @property
    def text(self) -> str:
        return self.literal


@dataclass(frozen=True, slots=True)
class ThematicBreak:
    kind: ClassVar[str] = "thematic_break"

    markup: str = "---"

    @property
    def text(self) -> str:
        return self.markup


@dataclass(frozen=True, slots=True)
class BlockQuote:
    kind: ClassVar[str] = "block_quote"

    text: str
    children: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem:
    """One list item. ``text`` is the item's source, marker included."""

    kind: ClassVar[str] = "list_item"

    text: str
    children: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class ListBlock:
    kind: ClassVar[str] = "list"

    list_kind: str  # "bullet" | "ordered"
    items: tuple[ListItem, ...] = ()
    marker: str = "-"
    start: int | None = None

    @property
    def is_bullet(self) -> bool:
        return self.list_kind == "bullet"

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.items)


Block = Paragraph | Heading | CodeBlock | HTMLBlock | BlockQuote | ThematicBreak | ListBlock


@dataclass(frozen=True, slots=True)
class Document:
    """Root of one Markdown parse: the source text and its top-level blocks."""

    kind: ClassVar[str] = "document"

    text: str
    children: tuple[Block, ...] = ()


# ---------------------------------------------------------------------------
# Documentation record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Callout:
    """A labelled annotation such as ``- Note: ...`` or ``- Warning: ...``."""

    kind: ClassVar[str] = "callout"

    delimiter: CalloutDelimiter
    content: str

    def __str__(self) -> str:
        return f"- {self.delimiter.value}: {self.content}"


DiscussionPart = BlockQuote | Callout | CodeBlock | Heading | HTMLBlock | ListBlock | Paragraph | ThematicBreak


@dataclass(frozen=True, slots=True)
class Parameter:
    """A named parameter for a function, initializer, method, or subscript."""

    kind: ClassVar[str] = "parameter"

    name: str
    content: Document

    def __str__(self) -> str:
        return f"- {self.name}: {self.content.text}"


@dataclass(frozen=True, slots=True)
class Documentation:
    """Documentation for a single declaration."""

    kind: ClassVar[str] = "documentation"

    summary: Paragraph | None = None
    discussion: tuple[DiscussionPart, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    returns: Document | None = None
    throws: Document | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.summary is None
            and not self.discussion
            and not self.parameters
            and self.returns is None
            and self.throws is None
        )


def to_markup(part: Block | Callout) -> str:
    """Render a block (or callout) back to Markdown source."""
    if isinstance(part, Heading):
        return f"{'#' * part.level} {part.text}"
    if isinstance(part, CodeBlock):
        fence = "```"
        while fence in part.literal:
            fence += "`"
        literal = part.literal if part.literal.endswith("\n") or not part.literal else part.literal + "\n"
        return f"{fence}{part.info}\n{literal}{fence}"
    if isinstance(part, HTMLBlock):
        return part.literal.rstrip("\n")
    if isinstance(part, Callout):
        return str(part)
    return part.text


class BlockParser(Protocol):
    def parse(self, text: str) -> Document:  # pragma: no cover - structural protocol
        """Parse Markdown text into a block tree."""
