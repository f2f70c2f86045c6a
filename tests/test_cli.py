from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from swiftmarkup.cli import main


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "comment.md"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_prints_json(tmp_path: Path, bicycle_markdown: str) -> None:
    path = _write(tmp_path, bicycle_markdown)

    result = CliRunner().invoke(main, [str(path)])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["type"] == "documentation"
    assert [p["name"] for p in data["parameters"]] == ["style", "gearing", "handlebar", "frameSize"]


def test_cli_markup_to_file(tmp_path: Path, bicycle_markdown: str) -> None:
    path = _write(tmp_path, bicycle_markdown)
    output = tmp_path / "out" / "comment.md"

    result = CliRunner().invoke(main, [str(path), "--format", "markup", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Written:" in result.stdout
    rendered = output.read_text(encoding="utf-8")
    assert rendered.startswith("Creates a new bicycle with the provided parts and specifications.\n")
    assert "- Returns: A beautiful, brand-new bicycle, custom-built just for you.\n" in rendered


def test_cli_rejects_missing_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(main, [str(tmp_path / "missing.md")])
    assert result.exit_code == 2
