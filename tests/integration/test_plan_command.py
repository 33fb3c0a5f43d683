"""Integration tests for the plan CLI command.

These tests verify the plan command end-to-end, including:
- Planning from command line values and from config files
- CLI values overriding config values
- Text and JSON output, written to stdout or a file
- Exit codes for invalid input and unfulfilled demand
"""

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from lumbercut.cli.main import app, parse_length_quantity

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestParseLengthQuantity:
    """Tests for LENGTHxQUANTITY parsing."""

    def test_length_and_quantity(self) -> None:
        row = parse_length_quantity("600x4")
        assert (row.length, row.quantity) == (600, 4)

    def test_bare_length(self) -> None:
        assert parse_length_quantity("2400.5").quantity == 1

    def test_upper_case_separator(self) -> None:
        assert parse_length_quantity("600X2").quantity == 2

    @pytest.mark.parametrize("value", ["abc", "600x", "600x1.5", "0x2", "600x0"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(typer.BadParameter):
            parse_length_quantity(value)


@pytest.mark.integration
class TestPlanCommand:
    """Tests for the plan command."""

    def test_plan_from_options(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["plan", "--cut", "100x2", "--cut", "50x1", "--stock", "300x1"]
        )

        assert result.exit_code == 0
        assert "CUT PLAN" in result.output
        assert "100 (x2), 50 (x1)" in result.output
        assert "Length used:     250" in result.output

    def test_plan_from_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["plan", "--config", str(FIXTURES_PATH / "valid_full.json")]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_length_used"] == 400
        assert [entry["quantity"] for entry in data["cuts"]] == [2, 1]

    def test_cli_overrides_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "plan",
                "--config",
                str(FIXTURES_PATH / "valid_full.json"),
                "--format",
                "text",
                "--flat",
                "--kerf",
                "0",
                "--margin",
                "0",
            ],
        )

        assert result.exit_code == 0
        assert "CUT PLAN" in result.output
        # Without kerf and margin 100 + 100 fits a 200 board
        assert "100 (x2)" in result.output

    def test_json_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output_path = tmp_path / "plan.json"
        result = runner.invoke(
            app,
            ["plan", "--cut", "33x3", "--stock", "100x2", "-f", "json", "-o", str(output_path)],
        )

        assert result.exit_code == 0
        assert "written to" in result.output
        data = json.loads(output_path.read_text(encoding="utf-8"))
        assert [entry["cuts"] for entry in data["cuts"]] == [[33, 33], [33]]

    def test_scale_option(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "plan", "--cut", "10.5x2", "--stock", "25", "--kerf", "0",
                "--margin", "0", "--scale", "10", "--format", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["cuts"][0]["cuts"] == [10.5, 10.5]
        assert data["total_length_trashed"] == 4

    def test_chain_option(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "plan", "--cut", "100", "--cut", "60", "--stock", "300",
                "--kerf", "0", "--margin", "0", "--chain", "--format", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data["cuts"]) == 1
        assert data["cuts"][0]["reuse_hops"] == 1


@pytest.mark.integration
class TestPlanCommandExitCodes:
    """Tests for plan command failures and exit codes."""

    def test_requires_config_or_cuts(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan"])

        assert result.exit_code == 1
        assert "--config" in result.output

    def test_bad_cut_value(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "--cut", "long"])

        assert result.exit_code == 1
        assert "LENGTHxQUANTITY" in result.output

    def test_missing_config_file(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "--config", str(FIXTURES_PATH / "nope.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_override(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "--cut", "100", "--format", "xml"])

        assert result.exit_code == 1
        assert "output.format" in result.output

    def test_board_above_limit(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["plan", "--config", str(FIXTURES_PATH / "board_too_long.json")]
        )

        assert result.exit_code == 1
        assert "available_stock[0].length" in result.output

    def test_unfulfilled_is_success_by_default(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "--cut", "5000"])

        assert result.exit_code == 0
        assert "UNFULFILLED" in result.output

    def test_unfulfilled_with_strict(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "--cut", "5000", "--strict"])

        assert result.exit_code == 2
        assert "could not be fulfilled" in result.output

    def test_verbose_logs_planner(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "--cut", "100x2", "--verbose"])

        assert result.exit_code == 0
