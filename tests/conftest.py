"""Pytest configuration and shared fixtures for sheet packing tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sheetfit.domain import Dimensions

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that run the CLI end-to-end")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def small_sheet() -> Dimensions:
    """5 x 4 sheet on which a split beats the whole-sheet layout."""
    return Dimensions(length=5, width=4)


@pytest.fixture
def small_piece() -> Dimensions:
    """3 x 2 piece."""
    return Dimensions(length=3, width=2)
