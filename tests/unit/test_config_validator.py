"""Unit tests for configuration validation and cutting advisories."""

import pytest

from lumbercut.application.config import (
    PlanConfiguration,
    ValidationResult,
    validate_config,
)
from lumbercut.application.config.validator import (
    check_board_limits,
    check_cutting_advisories,
)


def _config(**overrides) -> PlanConfiguration:
    data = {
        "schema_version": "1.0",
        "desired_cuts": [{"length": 100, "quantity": 2}],
        "available_stock": [{"length": 300, "quantity": 1}],
    }
    data.update(overrides)
    return PlanConfiguration.model_validate(data)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "warn").exit_code == 2
        assert ValidationResult().add_warning("a", "warn").add_error("b", "err").exit_code == 1

    def test_chaining_collects_entries(self) -> None:
        result = ValidationResult().add_error("x", "bad", 5).add_warning("y", "meh", "fix")

        assert not result.is_valid
        assert result.has_warnings
        assert result.errors[0].value == 5
        assert result.warnings[0].suggestion == "fix"


class TestBoardLimits:
    """Tests for check_board_limits."""

    def test_within_limits(self) -> None:
        assert check_board_limits(_config()).is_valid

    def test_stock_above_limit(self) -> None:
        result = check_board_limits(
            _config(available_stock=[{"length": 2_000_000, "quantity": 1}])
        )

        assert result.errors[0].path == "available_stock[0].length"

    def test_scaled_default_above_limit(self) -> None:
        result = check_board_limits(_config(settings={"unit_scale": 1000}))

        assert [error.path for error in result.errors] == ["settings.default_stock_length"]


class TestCuttingAdvisories:
    """Tests for check_cutting_advisories."""

    def test_clean_config(self) -> None:
        assert check_cutting_advisories(_config()).warnings == []

    def test_cut_longer_than_every_board(self) -> None:
        result = check_cutting_advisories(
            _config(desired_cuts=[{"length": 5000}, {"length": 100}])
        )

        assert [w.path for w in result.warnings] == ["desired_cuts[0].length"]
        assert "unfulfilled" in result.warnings[0].message

    def test_long_stock_avoids_cut_warning(self) -> None:
        result = check_cutting_advisories(
            _config(
                desired_cuts=[{"length": 5000}],
                available_stock=[{"length": 6000}],
            )
        )

        assert result.warnings == []

    def test_stock_shorter_than_every_cut(self) -> None:
        result = check_cutting_advisories(
            _config(available_stock=[{"length": 300}, {"length": 90}])
        )

        assert [w.path for w in result.warnings] == ["available_stock[1].length"]
        assert "will not be used" in result.warnings[0].message

    def test_fractional_stock_at_scale(self) -> None:
        result = check_cutting_advisories(
            _config(available_stock=[{"length": 300.25}])
        )

        assert len(result.warnings) == 1
        assert result.warnings[0].suggestion == "Increase settings.unit_scale"

    def test_fractional_stock_fits_finer_scale(self) -> None:
        result = check_cutting_advisories(
            _config(available_stock=[{"length": 300.25}], settings={"unit_scale": 100})
        )

        assert result.warnings == []


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid(self) -> None:
        result = validate_config(_config())
        assert result.is_valid
        assert result.exit_code == 0

    def test_warnings_only(self) -> None:
        result = validate_config(_config(desired_cuts=[{"length": 5000}]))
        assert result.is_valid
        assert result.exit_code == 2

    @pytest.mark.parametrize("length", [2_000_000, 1_500_000])
    def test_limit_errors_stop_advisories(self, length: float) -> None:
        result = validate_config(_config(available_stock=[{"length": length}]))

        assert result.exit_code == 1
        assert result.warnings == []
