"""Section state machine: a parsed comment's block tree into a Documentation record."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from ..errors import InternalStateError
from .base import (
    Block,
    BlockParser,
    Callout,
    DiscussionPart,
    Document,
    Documentation,
    ListBlock,
    ListItem,
    Paragraph,
    Parameter,
)
from .callout import lookup
from .fields import FieldMatch, interpret, split_field
from .md_parser import MarkdownParser

logger = logging.getLogger(__name__)


class _State(Enum):
    INITIAL = "initial"
    SUMMARY = "summary"
    DISCUSSION = "discussion"
    PARAMETERS = "parameters"


@dataclass(slots=True)
class _Builder:
    """Output accumulated over one parse call."""

    summary: Paragraph | None = None
    discussion: list[DiscussionPart] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)
    returns: Document | None = None
    throws: Document | None = None

    def append_list_item(self, item: ListItem, parent: ListBlock) -> None:
        """Fold an unstructured item into the trailing list of the discussion."""
        if self.discussion and isinstance(self.discussion[-1], ListBlock):
            last = self.discussion[-1]
            self.discussion[-1] = replace(last, items=last.items + (item,))
        else:
            self.discussion.append(ListBlock(list_kind=parent.list_kind, items=(item,), marker=parent.marker))

    def build(self) -> Documentation:
        return Documentation(
            summary=self.summary,
            discussion=tuple(self.discussion),
            parameters=tuple(self.parameters),
            returns=self.returns,
            throws=self.throws,
        )


class DocumentationParser:
    """Parse Swift Markup documentation comments into :class:`Documentation`.

    The parser keeps only configuration, so one instance can serve any
    number of calls (including concurrent ones).

    *max_depth* bounds how many nested ``- Parameters:`` sections may be
    entered. Items inside a section are always read as parameters, so in
    practice only ``max_depth=0`` keeps a section out.
    """

    def __init__(self, markdown: BlockParser | None = None, max_depth: int = 8) -> None:
        self.markdown = markdown if markdown is not None else MarkdownParser()
        self.max_depth = max_depth

    def parse(self, text: str | None) -> Documentation:
        if text is None:
            return Documentation()

        document = self.markdown.parse(text)
        builder = _Builder()
        state = _State.INITIAL
        for block in document.children:
            state = self._visit_block(block, state, builder)

        documentation = builder.build()
        logger.debug(
            "Parsed documentation: %d discussion part(s), %d parameter(s)",
            len(documentation.discussion),
            len(documentation.parameters),
        )
        return documentation

    # ------------------------------------------------------------------
    # Visitors
    # ------------------------------------------------------------------

    def _visit_block(self, block: Block, state: _State, builder: _Builder) -> _State:
        if state is _State.INITIAL:
            state = _State.SUMMARY if isinstance(block, Paragraph) else _State.DISCUSSION

        if state is _State.SUMMARY:
            builder.summary = block
            return _State.DISCUSSION

        if state is not _State.DISCUSSION:
            raise InternalStateError(f"unexpected state for a top-level block: {state.value}")

        if isinstance(block, ListBlock) and block.is_bullet:
            return self._visit_bullet_list(block, state, builder, depth=0)

        builder.discussion.append(block)
        return state

    def _visit_bullet_list(self, node: ListBlock, state: _State, builder: _Builder, depth: int) -> _State:
        for item in node.items:
            state = self._visit_bullet_list_item(item, node, state, builder, depth)
        return _State.DISCUSSION

    def _visit_bullet_list_item(
        self,
        item: ListItem,
        parent: ListBlock,
        state: _State,
        builder: _Builder,
        depth: int,
    ) -> _State:
        if state not in (_State.DISCUSSION, _State.PARAMETERS):
            raise InternalStateError(f"unexpected state for a list item: {state.value}")

        match = interpret(item)
        if match is None:
            builder.append_list_item(item, parent)
            return state

        if state is _State.PARAMETERS or match.is_parameter_prefixed:
            builder.parameters.append(self._make_parameter(match.name, match.description))
            return state

        name = match.name.lower()

        if name == "parameters":
            if depth >= self.max_depth:
                logger.warning("Parameters nested deeper than %d levels; keeping item as discussion", self.max_depth)
                builder.append_list_item(item, parent)
                return state
            for child in item.children:
                if isinstance(child, ListBlock) and child.is_bullet:
                    self._visit_bullet_list(child, _State.PARAMETERS, builder, depth + 1)
            return _State.DISCUSSION

        if name == "parameter":
            builder.parameters.append(self._make_single_parameter(match))
        elif name == "returns":
            builder.returns = self.markdown.parse(match.description)
        elif name == "throws":
            builder.throws = self.markdown.parse(match.description)
        else:
            delimiter = lookup(match.name)
            if delimiter is None:
                logger.debug("Unrecognized field %r; keeping item as discussion", match.name)
                builder.append_list_item(item, parent)
            else:
                builder.discussion.append(Callout(delimiter=delimiter, content=match.description))

        return state

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _make_parameter(self, name: str, description: str) -> Parameter:
        return Parameter(name=name, content=self.markdown.parse(description))

    def _make_single_parameter(self, match: FieldMatch) -> Parameter:
        # ``- Parameter: name: description`` carries the real name in its description.
        if not match.has_multi_block_description:
            named = split_field(match.description)
            if named is not None:
                return self._make_parameter(named.name, named.description)
        return self._make_parameter(match.name, match.description)


def parse_documentation(text: str | None) -> Documentation:
    """Parse *text* with a default :class:`DocumentationParser`."""
    return DocumentationParser().parse(text)
