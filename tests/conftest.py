"""Pytest configuration and shared fixtures for lumbercut tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from lumbercut.domain import CuttingConfig, CuttingPlanner

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that drive the CLI or HTTP API")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for planners
# =============================================================================


@pytest.fixture
def planner() -> CuttingPlanner:
    """Planner with the default kerf (3), margin (1%) and board length (3962)."""
    return CuttingPlanner(CuttingConfig())


@pytest.fixture
def exact_planner() -> CuttingPlanner:
    """Planner with no kerf and no error margin, so cost equals length."""
    return CuttingPlanner(CuttingConfig(kerf_width=0, error_margin=0))


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON configuration fixtures."""
    return FIXTURES_PATH
