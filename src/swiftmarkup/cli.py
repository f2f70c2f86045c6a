"""swiftmarkup CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from swiftmarkup.errors import MarkdownSyntaxError
from swiftmarkup.parser.documentation import DocumentationParser
from swiftmarkup.parser.md_parser import MarkdownParser
from swiftmarkup.renderer.markup_renderer import MarkupRenderer
from swiftmarkup.serialization import dumps


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Write to a file instead of stdout")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "markup"], case_sensitive=False),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@click.option("--max-nesting", type=int, default=20, show_default=True, help="Maximum Markdown block nesting")
@click.option("--verbose", "-v", is_flag=True, help="Log parser decisions to stderr")
def main(
    input_path: Path,
    output: Path | None,
    output_format: str,
    indent: int,
    max_nesting: int,
    verbose: bool,
) -> None:
    """Parse a Swift Markup documentation comment into structured documentation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    parser = DocumentationParser(markdown=MarkdownParser(max_nesting=max_nesting))
    text = input_path.read_text(encoding="utf-8")
    try:
        documentation = parser.parse(text)
    except MarkdownSyntaxError as exc:
        raise click.ClickException(f"{input_path.name}: {exc}") from exc

    if output_format.lower() == "markup":
        result = MarkupRenderer().render(documentation)
    else:
        result = dumps(documentation, indent=indent) + "\n"

    if output is None:
        click.echo(result, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"Written: {output}")


if __name__ == "__main__":  # pragma: no cover
    main()
