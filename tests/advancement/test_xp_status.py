"""
Tests for XP status snapshots and the convenience queries built on them.
"""

from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from src.advancement.xp_curve import (
    DegenerateProgressError,
    total_xp_for_level,
    xp_for_next_level,
)
from src.advancement.xp_status import (
    XPStatus,
    get_next_level_xp,
    get_percentage_complete,
    get_xp_status,
)


class TestGetXPStatus:
    """Tests for get_xp_status()."""

    def test_level_30_snapshot(self, level_30_status):
        """1500 XP is 105 of 112 XP into level 30."""
        assert level_30_status.total_xp == 1500
        assert level_30_status.level == 30
        assert level_30_status.xp_at_level_start == 1395
        assert level_30_status.xp_in_level == 105
        assert level_30_status.xp_for_level_up == 112
        assert level_30_status.xp_needed == 7
        assert level_30_status.progress_ratio == 0.9375
        assert level_30_status.progress_bar == "[###################-]"

    def test_fresh_snapshot(self, fresh_status):
        """No XP means level 0 with an empty bar."""
        assert fresh_status.level == 0
        assert fresh_status.xp_at_level_start == 0
        assert fresh_status.xp_in_level == 0
        assert fresh_status.xp_for_level_up == 7
        assert fresh_status.xp_needed == 7
        assert fresh_status.progress_ratio == 0.0
        assert fresh_status.progress_bar == "[--------------------]"

    def test_exactly_at_breakpoint(self):
        """Reaching level 16 starts it with nothing earned yet."""
        status = get_xp_status(352)
        assert status.level == 16
        assert status.xp_in_level == 0
        assert status.xp_for_level_up == 42

    def test_fields_are_consistent(self):
        """Every field follows from the level and the curve."""
        for xp in range(0, 5000, 37):
            status = get_xp_status(xp)
            assert status.xp_at_level_start == total_xp_for_level(status.level)
            assert status.xp_in_level == xp - status.xp_at_level_start
            assert status.xp_for_level_up == xp_for_next_level(status.level)
            assert status.xp_needed == status.xp_for_level_up - status.xp_in_level
            assert 0.0 <= status.progress_ratio < 1.0
            assert status.xp_needed > 0

    def test_is_idempotent(self):
        """Repeated calls produce equal snapshots."""
        assert get_xp_status(1500) == get_xp_status(1500)
        assert get_xp_status(98765) == get_xp_status(98765)

    def test_custom_bar_width(self):
        """The bar width flows through to the snapshot's bar."""
        status = get_xp_status(1500, bar_width=8)
        assert status.progress_bar == "[########]"
        assert len(status.progress_bar) == 10

    def test_custom_style(self, arrow_style):
        """The bar style flows through to the snapshot's bar."""
        status = get_xp_status(1500, style=arrow_style)
        assert status.progress_bar == "[====]"

    def test_snapshot_is_frozen(self, level_30_status):
        """Snapshots cannot be mutated."""
        with pytest.raises(FrozenInstanceError):
            level_30_status.level = 31

    def test_non_positive_cost_raises(self):
        """A zero level-up cost is reported instead of dividing by zero."""
        with patch("src.advancement.xp_status.xp_for_next_level", return_value=0):
            with pytest.raises(DegenerateProgressError):
                get_xp_status(10)


class TestXPStatusFields:
    """Tests for derived XPStatus values."""

    def test_percent_complete(self, level_30_status):
        """93.75% is reported as 93."""
        assert level_30_status.percent_complete == 93

    def test_percent_complete_is_exact(self):
        """Percentages are floored without float drift."""
        status = XPStatus(
            total_xp=29,
            level=0,
            xp_at_level_start=0,
            xp_in_level=29,
            xp_for_level_up=100,
            xp_needed=71,
            progress_ratio=0.29,
            progress_bar="",
        )
        assert status.percent_complete == 29

    def test_to_dict(self, level_30_status):
        """Snapshots serialize every field plus the percentage."""
        data = level_30_status.to_dict()
        assert data == {
            "total_xp": 1500,
            "level": 30,
            "xp_at_level_start": 1395,
            "xp_in_level": 105,
            "xp_for_level_up": 112,
            "xp_needed": 7,
            "progress_ratio": 0.9375,
            "progress_bar": "[###################-]",
            "percent_complete": 93,
        }


class TestConvenienceQueries:
    """Tests for get_next_level_xp() and get_percentage_complete()."""

    def test_next_level_xp(self):
        """1500 XP is 7 short of level 31."""
        assert get_next_level_xp(1500) == 7

    def test_next_level_xp_at_zero(self):
        """Level 0 needs its full cost."""
        assert get_next_level_xp(0) == 7

    def test_next_level_xp_at_threshold(self):
        """On a threshold the whole next cost remains."""
        assert get_next_level_xp(total_xp_for_level(31)) == 121

    @pytest.mark.parametrize("xp,expected", [
        (0, 0),
        (6, 85),
        (1500, 93),
        (1506, 99),
        (1507, 0),
    ])
    def test_percentage_complete(self, xp, expected):
        """Percent complete is floored and restarts at each level."""
        assert get_percentage_complete(xp) == expected

    def test_percentage_bounds(self):
        """Percent complete stays within 0-100."""
        for xp in range(0, 3000, 11):
            assert 0 <= get_percentage_complete(xp) <= 100
