"""Parser package."""

from .base import (
    Block,
    BlockQuote,
    Callout,
    CodeBlock,
    DiscussionPart,
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
from .callout import CalloutDelimiter, lookup
from .documentation import DocumentationParser, parse_documentation
from .fields import FieldMatch, interpret
from .md_parser import MarkdownParser, parse_markdown

__all__ = [
    "Block",
    "BlockQuote",
    "Callout",
    "CalloutDelimiter",
    "CodeBlock",
    "DiscussionPart",
    "Document",
    "Documentation",
    "DocumentationParser",
    "FieldMatch",
    "Heading",
    "HTMLBlock",
    "ListBlock",
    "ListItem",
    "MarkdownParser",
    "Paragraph",
    "Parameter",
    "ThematicBreak",
    "interpret",
    "lookup",
    "parse_documentation",
    "parse_markdown",
]
