"""Shared pytest fixtures for starbar tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from starbar.core.rating import RatingChangeEvent, RatingConfig, StarRatingWidget

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def band_colors() -> dict[str, str]:
    """Distinct colors for each band, keyed by host property name."""
    return {
        "colorDefault": "#a2a4a7",
        "colorNegative": "#7f0404",
        "colorOk": "#f00",
        "colorPositive": "#00f",
    }


@pytest.fixture
def half_star_config() -> RatingConfig:
    """3.63 of 5 stars with half stars shown."""
    return RatingConfig(rating=3.63, number_of_stars=5, show_half_stars=True)


# ============================================================================
# Widget Fixtures
# ============================================================================


@pytest.fixture
def received() -> list[RatingChangeEvent]:
    """Collects change notifications."""
    return []


@pytest.fixture
def make_widget(received: list[RatingChangeEvent]):
    """Factory fixture building a widget with a recording listener attached."""

    def _make(**config: object) -> StarRatingWidget:
        widget = StarRatingWidget(RatingConfig.model_validate(config))
        widget.add_listener(received.append)
        return widget

    return _make
