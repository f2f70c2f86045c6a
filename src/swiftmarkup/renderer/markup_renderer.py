"""Render a Documentation record back into normalized Swift Markup text."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from swiftmarkup.parser.base import Callout, DiscussionPart, Document, Documentation, Parameter, to_markup


class MarkupRenderer:
    """Render parsed documentation through the comment template.

    The output puts the summary and discussion first, then the
    ``- Parameters:``, ``- Throws:`` and ``- Returns:`` fields, so that
    parsing it again yields the same parameters, callouts and fields.
    """

    def __init__(self, template_path: Path | None = None) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "documentation.md.j2"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)
        self._template_name = template_path.name

    def render(self, documentation: Documentation) -> str:
        template = self._env.get_template(self._template_name)
        rendered = template.render(
            summary=documentation.summary.text if documentation.summary is not None else None,
            discussion=[self._render_part(part) for part in documentation.discussion],
            parameters=[self._render_parameter(parameter) for parameter in documentation.parameters],
            throws=self._render_document(documentation.throws),
            returns=self._render_document(documentation.returns),
        )
        rendered = rendered.strip()
        return rendered + "\n" if rendered else ""

    def _render_part(self, part: DiscussionPart) -> str:
        if isinstance(part, Callout):
            return f"- {part.delimiter.value}:{_field_body(part.content, indent=2)}"
        return to_markup(part)

    def _render_parameter(self, parameter: Parameter) -> str:
        return f"{parameter.name}:{_field_body(parameter.content.text, indent=4)}"

    def _render_document(self, document: Document | None) -> str | None:
        if document is None:
            return None
        return _field_body(document.text, indent=2)


def _field_body(text: str, *, indent: int) -> str:
    """Return *text* as it follows ``Name:`` in a bullet field.

    Single lines stay on the bullet line. Multi-line text becomes nested
    block content after a blank line, indented to the bullet's content
    column, so its first block is not read as part of ``Name:``.
    """
    text = text.strip("\n")
    if not text:
        return ""
    if "\n" not in text:
        return f" {text}"

    pad = " " * indent
    return "\n\n" + "\n".join(pad + line if line.strip() else "" for line in text.split("\n"))
