"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Cutting advisories are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from lumbercut.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.mark.integration
class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_minimal_config(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_minimal.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_full_config(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_full.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0

    def test_file_not_found(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "nonexistent.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "invalid_json.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "unknown_field.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "blade" in result.output

    def test_valid_config_with_warnings(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_with_warnings.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "desired_cuts[0].length" in result.output
        assert "available_stock[0].length" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_board_limit_error(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "board_too_long.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Validation failed: 1 error(s), 0 warning(s)" in result.output
