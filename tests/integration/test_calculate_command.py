"""Integration tests for the calculate CLI command.

These tests verify the calculate command end-to-end, including:
- Dimensions given as options, with and without margins
- Configuration files with CLI overrides
- Text and JSON output
- Error reporting and exit codes
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sheetfit.cli.main import app

pytestmark = pytest.mark.integration

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestCalculateFromOptions:
    """Tests for dimensions given as CLI options."""

    def test_text_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-L", "5", "-W", "4", "-l", "3", "-w", "2"])

        assert result.exit_code == 0
        assert "PACKING SUMMARY" in result.output
        assert "Max Pieces: 3" in result.output
        assert "Sheet Scraps: 2.00" in result.output
        assert "Layout: split at (2, 0)" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["calculate", "-L", "100", "-W", "100", "-l", "30", "-w", "20", "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["max_fit"] == 16
        assert data["baseline_fit"] == 15
        assert data["residue"] == 400

    def test_margins(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "--sheet-length", "100",
                "--sheet-width", "100",
                "--piece-length", "28",
                "--piece-width", "18",
                "--margin-length", "1",
                "--margin-width", "1",
                "-f", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["piece"] == {"length": 30, "width": 20}
        assert data["max_fit"] == 16

    def test_portrait_sheet_is_turned(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "-L", "4", "-W", "5", "-l", "2", "-w", "3", "-f", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["sheet"] == {"length": 5, "width": 4}
        assert data["piece"] == {"length": 3, "width": 2}
        assert data["max_fit"] == 3

    def test_piece_does_not_fit(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-L", "10", "-W", "10", "-l", "20", "-w", "20"])

        assert result.exit_code == 0
        assert "Max Pieces: 0" in result.output
        assert "Sheet Scraps: 100.00" in result.output
        assert "Layout: whole sheet, no split" in result.output

    def test_split_step(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["calculate", "-L", "5", "-W", "4", "-l", "3", "-w", "2", "--split-step", "0.5", "-f", "json"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["max_fit"] == 3


class TestCalculateErrors:
    """Tests for invalid input."""

    def test_missing_dimensions(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-L", "5", "-W", "4"])

        assert result.exit_code == 1
        assert "Please enter valid positive numbers for all dimensions." in result.output
        assert "Piece length is required" in result.output
        assert "Piece width is required" in result.output

    def test_non_numeric_dimension(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-L", "abc", "-W", "4", "-l", "3", "-w", "2"])

        assert result.exit_code == 1
        assert "Sheet length must be a number" in result.output

    def test_negative_dimension(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-L", "5", "-W", "-4", "-l", "3", "-w", "2"])

        assert result.exit_code == 1
        assert "Sheet width must be positive" in result.output

    def test_negative_margin(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["calculate", "-L", "5", "-W", "4", "-l", "3", "-w", "2", "--margin-width", "-1"],
        )

        assert result.exit_code == 1
        assert "Margin width must be non-negative" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "-L", "5", "-W", "4", "-l", "3", "-w", "2", "-f", "xml"]
        )

        assert result.exit_code == 1
        assert "Unknown format 'xml'" in result.output

    @pytest.mark.parametrize("option", ["--timeout", "--split-step"])
    def test_non_positive_search_options(self, runner: CliRunner, option: str) -> None:
        result = runner.invoke(
            app, ["calculate", "-L", "5", "-W", "4", "-l", "3", "-w", "2", option, "0"]
        )

        assert result.exit_code == 1
        assert "must be positive" in result.output


class TestCalculateFromConfig:
    """Tests for --config with and without overrides."""

    def test_config_file(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "--config", str(FIXTURES_PATH / "valid_minimal.json")]
        )

        assert result.exit_code == 0
        assert "Max Pieces: 3" in result.output

    def test_config_output_settings(self, runner: CliRunner) -> None:
        """valid_full.json asks for JSON with one decimal place."""
        result = runner.invoke(
            app, ["calculate", "-c", str(FIXTURES_PATH / "valid_full.json")]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["sheet"] == {"length": 100, "width": 70}
        assert data["piece"] == {"length": 30, "width": 20}

    def test_cli_overrides_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "-c", str(FIXTURES_PATH / "valid_minimal.json"),
                "--sheet-length", "6",
                "--sheet-width", "6",
                "-f", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["sheet"] == {"length": 6, "width": 6}
        assert data["max_fit"] == 6
        assert data["simple_mode"] is True

    def test_invalid_override(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["calculate", "-c", str(FIXTURES_PATH / "valid_minimal.json"), "--piece-width", "0"],
        )

        assert result.exit_code == 1
        assert "Piece width must be positive" in result.output

    def test_missing_config_file(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "-c", str(FIXTURES_PATH / "nonexistent.json")]
        )

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_config_file(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "-c", str(FIXTURES_PATH / "invalid_dimensions.json")]
        )

        assert result.exit_code == 1
        assert "sheet.length" in result.output


class TestVerbose:
    """Tests for --verbose logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_verbose_configures_debug_logging(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "-L", "5", "-W", "4", "-l", "3", "-w", "2", "--verbose"]
        )

        assert result.exit_code == 0
        assert "Max Pieces: 3" in result.output
        assert logging.getLogger().level == logging.DEBUG
