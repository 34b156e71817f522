"""
Pytest fixtures for the XP progression test suite.

Provides reusable fixtures for curve breakpoints, status snapshots and
progress bar styles.
"""

import pytest

from src.advancement import (
    HIGH_TIER_LEVEL,
    MID_TIER_LEVEL,
    ProgressBarStyle,
    get_xp_status,
)


# =============================================================================
# CURVE FIXTURES
# =============================================================================


@pytest.fixture
def tier_boundaries():
    """Levels at which the cost formula switches, with their neighbours."""
    return [
        MID_TIER_LEVEL - 1,
        MID_TIER_LEVEL,
        MID_TIER_LEVEL + 1,
        HIGH_TIER_LEVEL - 1,
        HIGH_TIER_LEVEL,
        HIGH_TIER_LEVEL + 1,
    ]


# =============================================================================
# STATUS FIXTURES
# =============================================================================


@pytest.fixture
def level_30_status():
    """Snapshot for 1500 XP: level 30, seven XP short of level 31."""
    return get_xp_status(1500)


@pytest.fixture
def fresh_status():
    """Snapshot for a player with no XP."""
    return get_xp_status(0)


# =============================================================================
# BAR STYLE FIXTURES
# =============================================================================


@pytest.fixture
def arrow_style():
    """A four-cell bar drawn with '=' and spaces."""
    return ProgressBarStyle(width=4, filled_char="=", empty_char=" ")
