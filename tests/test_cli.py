"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dtk.cli import cli

MAPS_YAML = """
name: contacts
maps:
  - name: contact
    mappings:
      - destination: displayName
        template: "{first} {last}"
      - destination: email
"""


@pytest.fixture
def files(tmp_path: Path) -> dict[str, Path]:
    maps = tmp_path / "maps.yml"
    maps.write_text(MAPS_YAML, encoding="utf-8")
    source = tmp_path / "source.json"
    source.write_text(
        json.dumps({"first": "Ada", "last": "Lovelace", "email": "ada@example.com"}),
        encoding="utf-8",
    )
    return {"maps": maps, "source": source, "dir": tmp_path}


class TestCli:
    """Integration tests for the dtk command."""

    def test_map_prints_json(self, files: dict[str, Path]) -> None:
        """Test mapping a document to stdout."""
        runner = CliRunner()

        result = runner.invoke(
            cli, ["map", "-p", str(files["maps"]), "-m", "contact", "-s", str(files["source"])]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "displayName": "Ada Lovelace",
            "email": "ada@example.com",
        }

    def test_verbose_map(self, files: dict[str, Path]) -> None:
        """Test that debug logging leaves the JSON on stdout intact."""
        runner = CliRunner()

        result = runner.invoke(
            cli,
            ["-v", "map", "-p", str(files["maps"]), "-m", "contact", "-s", str(files["source"])],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["email"] == "ada@example.com"

    def test_map_writes_output(self, files: dict[str, Path]) -> None:
        """Test mapping onto a destination document and writing the result."""
        destination = files["dir"] / "destination.json"
        destination.write_text(json.dumps({"id": 1}), encoding="utf-8")
        output = files["dir"] / "out" / "result.json"
        runner = CliRunner()

        result = runner.invoke(
            cli,
            [
                "map",
                "-p", str(files["maps"]),
                "-m", "contact",
                "-s", str(files["source"]),
                "-d", str(destination),
                "-o", str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text(encoding="utf-8")) == {
            "id": 1,
            "displayName": "Ada Lovelace",
            "email": "ada@example.com",
        }
        assert json.loads(destination.read_text(encoding="utf-8")) == {"id": 1}

    def test_map_failure_aborts(self, files: dict[str, Path]) -> None:
        """Test that a missing source field aborts with exit code 1."""
        files["source"].write_text(json.dumps({"first": "Ada"}), encoding="utf-8")
        runner = CliRunner()

        result = runner.invoke(
            cli, ["map", "-p", str(files["maps"]), "-m", "contact", "-s", str(files["source"])]
        )

        assert result.exit_code == 1

    def test_unknown_map_aborts(self, files: dict[str, Path]) -> None:
        """Test that an unknown map name aborts."""
        runner = CliRunner()

        result = runner.invoke(
            cli, ["map", "-p", str(files["maps"]), "-m", "nope", "-s", str(files["source"])]
        )

        assert result.exit_code == 1

    def test_show_lists_maps(self, files: dict[str, Path]) -> None:
        """Test the map summary table."""
        runner = CliRunner()

        result = runner.invoke(cli, ["show", "-p", str(files["maps"])])

        assert result.exit_code == 0, result.output
        assert "contact" in result.output
        assert "array" in result.output

    def test_version(self) -> None:
        """Test the version option."""
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
