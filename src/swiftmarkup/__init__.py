"""Parse Swift Markup documentation comments into structured records."""

from .errors import InternalStateError, MarkdownSyntaxError, SwiftMarkupError
from .parser import (
    Callout,
    CalloutDelimiter,
    Document,
    Documentation,
    DocumentationParser,
    MarkdownParser,
    Parameter,
    parse_documentation,
)
from .serialization import dumps, from_dict, loads, to_dict

__version__ = "0.1.0"

__all__ = [
    "Callout",
    "CalloutDelimiter",
    "Document",
    "Documentation",
    "DocumentationParser",
    "InternalStateError",
    "MarkdownParser",
    "MarkdownSyntaxError",
    "Parameter",
    "SwiftMarkupError",
    "dumps",
    "from_dict",
    "loads",
    "parse_documentation",
    "to_dict",
]
