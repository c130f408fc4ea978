from pathlib import Path

import pytest
from click.testing import CliRunner

from selectorkit.cli import cli

CATALOG_YAML = """
nav_link:
  left:
    element: nav
  combinator: ">"
  right:
    element: a
    classes:
      - active
heading:
  element: h1
  id: title
"""


@pytest.fixture()
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "selectors.yaml"
    path.write_text(CATALOG_YAML, encoding="utf-8")
    return path


@pytest.mark.unit
class TestRenderCommand:
    def test_renders_every_selector(self, catalog_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(catalog_file)])
        assert result.exit_code == 0
        assert "nav_link: nav > a.active" in result.output
        assert "heading: h1#title" in result.output

    def test_renders_selected_names(self, catalog_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(catalog_file), "--name", "heading"])
        assert result.exit_code == 0
        assert "heading: h1#title" in result.output
        assert "nav_link" not in result.output

    def test_unknown_name_fails(self, catalog_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(catalog_file), "--name", "footer"])
        assert result.exit_code == 1
        assert "unknown selector(s): footer" in result.output

    def test_invalid_catalog_fails(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("broken:\n  tag: div\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "WARNING", "render", str(path)])
        assert result.exit_code == 1
        assert "Invalid selector definitions" in result.output

    def test_missing_file_is_usage_error(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 2
