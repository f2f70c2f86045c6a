"""Markdown parser adapter: CommonMark text into the block tree IR.

Tokenizing is delegated to ``markdown-it-py``; this module only walks its
syntax tree and converts each node into the closed set of block types in
:mod:`swiftmarkup.parser.base`.
"""

from __future__ import annotations

import logging
import textwrap

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from ..errors import MarkdownSyntaxError
from .base import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HTMLBlock,
    ListBlock,
    ListItem,
    Paragraph,
    ThematicBreak,
)

logger = logging.getLogger(__name__)


class MarkdownParser:
    """Parse CommonMark text into a :class:`Document`."""

    def __init__(self, max_nesting: int = 20) -> None:
        self.max_nesting = max_nesting
        self._md = MarkdownIt("commonmark", {"maxNesting": max_nesting})

    def parse(self, text: str) -> Document:
        if not isinstance(text, str):
            raise MarkdownSyntaxError(f"Markdown input must be text, not {type(text).__name__}")

        source = _normalize_newlines(text)
        try:
            tokens = self._md.parse(source)
        except Exception as exc:
            raise MarkdownSyntaxError(f"Unable to parse Markdown: {exc}") from exc

        lines = source.split("\n")
        return Document(text=source, children=_convert_children(SyntaxTreeNode(tokens), lines))


def parse_markdown(text: str) -> Document:
    """Parse *text* with a default :class:`MarkdownParser`."""
    return MarkdownParser().parse(text)


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


# ---------------------------------------------------------------------------
# Syntax tree conversion
# ---------------------------------------------------------------------------

def _convert_children(node: SyntaxTreeNode, lines: list[str]) -> tuple[Block, ...]:
    blocks: list[Block] = []
    for child in node.children:
        block = _convert_block(child, lines)
        if block is not None:
            blocks.append(block)
    return tuple(blocks)


def _convert_block(node: SyntaxTreeNode, lines: list[str]) -> Block | None:
    kind = node.type

    if kind == "paragraph":
        return Paragraph(text=_inline_text(node))

    if kind == "heading":
        # Both ATX (``## Title``) and setext headings open with an ``hN`` tag.
        return Heading(level=int(node.tag[1:]), text=_inline_text(node))

    if kind == "fence":
        return CodeBlock(info=node.info.strip(), literal=node.content)

    if kind == "code_block":
        return CodeBlock(info="", literal=node.content)

    if kind == "html_block":
        return HTMLBlock(literal=node.content)

    if kind == "hr":
        return ThematicBreak(markup=node.markup or "---")

    if kind == "blockquote":
        return BlockQuote(text=_source_text(node, lines), children=_convert_children(node, lines))

    if kind in ("bullet_list", "ordered_list"):
        start = node.attrs.get("start")
        items = tuple(
            ListItem(text=_source_text(item, lines), children=_convert_children(item, lines))
            for item in node.children
            if item.type == "list_item"
        )
        return ListBlock(
            list_kind="bullet" if kind == "bullet_list" else "ordered",
            items=items,
            marker=node.markup,
            start=int(start) if start is not None else None,
        )

    logger.debug("Skipping unsupported Markdown node %r", kind)
    return None


def _inline_text(node: SyntaxTreeNode) -> str:
    for child in node.children:
        if child.type == "inline":
            return child.content
    return ""


def _source_text(node: SyntaxTreeNode, lines: list[str]) -> str:
    """Return the dedented source lines spanned by *node*, without trailing blank lines."""
    if node.map is None:
        return ""
    begin, end = node.map
    return textwrap.dedent("\n".join(lines[begin:end])).rstrip()
