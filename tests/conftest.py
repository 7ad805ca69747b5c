"""Shared test fixtures for road geometry tests."""
import pytest
from shared.types import Rect
from roads.profile import DIRECTIONS, resolve_profile
from roads.layout import compute_layout


@pytest.fixture(scope="session")
def lot():
    """100 x 150 lot with its front-left corner at the origin."""
    return Rect(0.0, 100.0, 0.0, 150.0)


@pytest.fixture(scope="session")
def s1_record():
    """Host record for the corner scenario: 6' sidewalk + 7' verge toward the lot."""
    return {"type": "S1", "rightOfWay": 50, "roadWidth": 24, "rightSidewalk": 6, "rightVerge": 7}


@pytest.fixture(scope="session")
def street_roads(s1_record):
    """Four S1 streets with the scenario record."""
    return {d: resolve_profile(d, s1_record) for d in DIRECTIONS}


@pytest.fixture(scope="session")
def preset_roads():
    """Main streets on three sides, alley at the rear."""
    return {d: resolve_profile(d) for d in DIRECTIONS}


@pytest.fixture(scope="session")
def styles():
    """Partial host style table; unlisted keys fall back to defaults."""
    return {
        "rightSidewalk": {"fillColor": "#cccccc", "fillOpacity": 0.9, "lineColor": "#222222",
                          "lineWidth": 2.0, "lineDashed": False, "lineOpacity": 1.0},
        "verge": {"fillColor": "#88aa66"},
        "roadWidth": {"fillColor": "#555555", "fillOpacity": 1.0},
    }


@pytest.fixture(scope="session")
def street_layout(lot, street_roads, styles):
    return compute_layout(lot, street_roads, styles)


@pytest.fixture(scope="session")
def preset_layout(lot, preset_roads):
    return compute_layout(lot, preset_roads)
