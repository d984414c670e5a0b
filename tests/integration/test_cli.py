"""Integration tests for the cutlist, schematic and positions CLI commands."""

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cabinetmaker.cli.main import app, cutlist, parse_door

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

SCENARIO_ARGS = [
    "-w", "24", "-h", "30", "-d", "12",
    "--shelves", "2",
    "--shelf-mount", "adjustable",
    "--door", "left-2/3:solid",
    "--door", "right-1/3",
]


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestParseDoor:
    """Tests for the --door option parser."""

    def test_position_and_type(self) -> None:
        assert parse_door("left-half:glass") == {"position": "left-half", "type": "glass"}

    def test_type_defaults_to_solid(self) -> None:
        assert parse_door("full") == {"position": "full", "type": "solid"}


class TestCutlistCommand:
    """Tests for the cutlist command."""

    def test_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cutlist", *SCENARIO_ARGS])

        assert result.exit_code == 0, result.output
        assert "CUT LIST" in result.output
        assert '23.13"' in result.output
        assert "Solid Door (left-2/3)" in result.output
        assert "Solid Door (right-1/3)" in result.output
        assert "JOINERY" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cutlist", *SCENARIO_ARGS, "--format", "json"])

        assert result.exit_code == 0, result.output
        pieces = json.loads(result.output)["cut_list"]
        back = pieces[4]
        assert (back["width"], back["length"]) == (22.5, 28.5)
        door = pieces[6]
        assert door["name"] == "Solid Door (left-2/3)"
        assert (door["width"], door["length"]) == (17.5, 31.5)

    def test_docstring_door_example_runs(self, runner: CliRunner) -> None:
        example = next(
            line.split()
            for line in cutlist.__doc__.splitlines()
            if "--door" in line
        )
        assert example[:2] == ["cabinetmaker", "cutlist"]

        result = runner.invoke(app, example[1:])

        assert result.exit_code == 0, result.output
        assert "Solid Door (left-half)" in result.output
        assert "Glass Door (right-half)" in result.output

    def test_help_lists_valid_door_example_and_thickness_presets(
        self, runner: CliRunner
    ) -> None:
        result = runner.invoke(app, ["cutlist", "--help"])

        assert result.exit_code == 0
        assert "left-half:solid" in result.output
        assert "left-1/2" not in result.output
        assert "0.75" in result.output

    def test_requires_dimensions_without_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cutlist", "--width", "24"])

        assert result.exit_code == 1
        assert "--width, --height, and --depth are required" in result.output

    def test_config_with_override(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_full.json"
        result = runner.invoke(
            app, ["cutlist", "--config", str(config_path), "--width", "30", "-f", "json"]
        )

        assert result.exit_code == 0, result.output
        pieces = json.loads(result.output)["cut_list"]
        assert pieces[0]["width"] == 30
        assert pieces[-1]["name"] == "Glass Door (right-1/3)"

    def test_screwless_option(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "cutlist", "-w", "24", "-h", "30", "-d", "12",
                "--side-joint", "screwless", "--joint-depth", "0.5",
                "-f", "json",
            ],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["cut_list"][2]["length"] == 29.25

    def test_unknown_door_position(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["cutlist", "-w", "24", "-h", "30", "-d", "12", "--door", "top-half"]
        )

        assert result.exit_code == 1
        assert "cabinet.doors[0].position" in result.output

    def test_negative_width(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cutlist", "--width=-1", "-h", "30", "-d", "12"])

        assert result.exit_code == 1
        assert "cabinet.width" in result.output

    def test_invalid_json_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["cutlist", "--config", str(FIXTURES_PATH / "invalid_json.json")]
        )

        assert result.exit_code == 1
        assert "Error: Invalid JSON" in result.output

    def test_missing_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["cutlist", "--config", str(FIXTURES_PATH / "nonexistent.json")]
        )

        assert result.exit_code == 1
        assert "not found" in result.output


class TestSchematicCommand:
    """Tests for the schematic command."""

    def test_front_view_is_svg(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["schematic", *SCENARIO_ARGS])

        assert result.exit_code == 0, result.output
        root = ET.fromstring(result.output)
        assert root.tag.endswith("svg")

    def test_scale_option(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["schematic", *SCENARIO_ARGS, "--scale", "2"])

        assert result.exit_code == 0, result.output
        assert ET.fromstring(result.output).get("width") == "88"

    def test_side_view_screwless(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "schematic", "--config", str(FIXTURES_PATH / "valid_full.json"),
                "--view", "side",
            ],
        )

        assert result.exit_code == 0, result.output
        assert '+0.375"' in result.output

    def test_doors_view(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["schematic", *SCENARIO_ARGS, "--view", "doors"])

        assert result.exit_code == 0, result.output
        assert "door_layout view" in result.output

    def test_legend_needs_no_cabinet(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["schematic", "--view", "legend"])

        assert result.exit_code == 0, result.output
        assert "Joint Extension" in result.output

    def test_all_views(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["schematic", *SCENARIO_ARGS, "--view", "all"])

        assert result.exit_code == 0, result.output
        for name in ("front", "side", "door_layout", "legend"):
            assert f"<!-- view: {name} -->" in result.output

    def test_unknown_view(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["schematic", *SCENARIO_ARGS, "--view", "top"])

        assert result.exit_code != 0


class TestPositionsCommand:
    """Tests for the positions command."""

    def test_lists_all_tokens(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["positions"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 13
        assert lines[0].split() == ["full", "full"]
        assert any(
            line.startswith("middle-vert-1/3") and line.endswith("middle vertical 1 of 3")
            for line in lines
        )
