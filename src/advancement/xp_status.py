"""
XP status snapshots.

Combines the XP curve and the progress bar renderer into a single immutable
record describing where a total XP value sits on the curve.
"""

from dataclasses import dataclass
from typing import Any, Optional
import logging

from src.advancement.progress_bar import ProgressBarStyle, render_progress_bar
from src.advancement.xp_curve import (
    DegenerateProgressError,
    level_from_xp,
    total_xp_for_level,
    xp_for_next_level,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XPStatus:
    """Progress snapshot for a total XP value."""

    total_xp: int
    level: int
    xp_at_level_start: int      # Cumulative XP at which the level was reached
    xp_in_level: int            # XP earned since reaching the level
    xp_for_level_up: int        # Cost of the next level
    xp_needed: int              # XP still missing for the next level
    progress_ratio: float       # xp_in_level / xp_for_level_up
    progress_bar: str

    @property
    def percent_complete(self) -> int:
        """Whole percent of the current level completed (rounded down)."""
        return (self.xp_in_level * 100) // self.xp_for_level_up

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_xp": self.total_xp,
            "level": self.level,
            "xp_at_level_start": self.xp_at_level_start,
            "xp_in_level": self.xp_in_level,
            "xp_for_level_up": self.xp_for_level_up,
            "xp_needed": self.xp_needed,
            "progress_ratio": self.progress_ratio,
            "progress_bar": self.progress_bar,
            "percent_complete": self.percent_complete,
        }


def get_xp_status(
    total_xp: int,
    bar_width: Optional[int] = None,
    style: Optional[ProgressBarStyle] = None,
) -> XPStatus:
    """
    Build the progress snapshot for ``total_xp``.

    Args:
        total_xp: Total XP accumulated
        bar_width: Progress bar width (default: 20)
        style: Progress bar style; bar_width overrides its width when given

    Returns:
        XPStatus with every field derived from the XP curve

    Raises:
        DegenerateProgressError: If the level-up cost is not positive
    """
    level = level_from_xp(total_xp)
    xp_at_level_start = total_xp_for_level(level)
    xp_in_level = total_xp - xp_at_level_start
    xp_for_level_up = xp_for_next_level(level)
    if xp_for_level_up <= 0:
        logger.warning(f"Level {level} has non-positive level-up cost {xp_for_level_up}")
        raise DegenerateProgressError(
            f"Level-up cost for level {level} must be positive, got {xp_for_level_up}"
        )

    status = XPStatus(
        total_xp=total_xp,
        level=level,
        xp_at_level_start=xp_at_level_start,
        xp_in_level=xp_in_level,
        xp_for_level_up=xp_for_level_up,
        xp_needed=xp_for_level_up - xp_in_level,
        progress_ratio=xp_in_level / xp_for_level_up,
        progress_bar=render_progress_bar(xp_in_level, xp_for_level_up, bar_width, style),
    )
    logger.debug(
        f"XP status for {total_xp}: level {level}, "
        f"{xp_in_level}/{xp_for_level_up} into level"
    )
    return status


def get_next_level_xp(total_xp: int) -> int:
    """Get the XP still needed to reach the next level."""
    return get_xp_status(total_xp).xp_needed


def get_percentage_complete(total_xp: int) -> int:
    """Get the whole percent (0-100) of the current level completed."""
    return get_xp_status(total_xp).percent_complete
