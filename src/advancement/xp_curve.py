"""
XP curve for the progression calculator.

Implements the three-piece level-up cost model and its closed-form cumulative
totals:

Level-up cost (XP to go from level L to L+1):
- Levels 0-15: 2L + 7
- Levels 16-30: 5L - 38
- Levels 31+: 9L - 158

Cumulative XP to reach level L:
- L <= 16: L^2 + 6L
- 16 < L <= 31: (5L^2 - 81L + 720) / 2
- L > 31: (9L^2 - 325L + 4440) / 2

All arithmetic is integer-exact. The halved numerators are always even, so
floor division never drops a remainder, even for very large levels.

Negative levels and negative XP are outside the supported domain; they are
neither validated nor clamped.
"""

from dataclasses import dataclass
from math import floor, isqrt, copysign
from typing import Any
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# CURVE BREAKPOINTS
# =============================================================================


# First level priced by the middle formula
MID_TIER_LEVEL = 16
# First level priced by the steep formula
HIGH_TIER_LEVEL = 31


# =============================================================================
# ERRORS
# =============================================================================


class ProgressionError(Exception):
    """Base class for errors raised by the progression calculator."""

    pass


class InvalidRangeError(ProgressionError, ValueError):
    """Raised when a level range is given with its start above its end."""

    def __init__(self, start_level: int, end_level: int):
        self.start_level = start_level
        self.end_level = end_level
        super().__init__(
            f"start_level ({start_level}) cannot be greater than "
            f"end_level ({end_level})"
        )


class DegenerateProgressError(ProgressionError, ZeroDivisionError):
    """Raised when a progress ratio would be computed against a non-positive total."""

    pass


# =============================================================================
# LEVEL THRESHOLDS
# =============================================================================


@dataclass(frozen=True)
class LevelThreshold:
    """Cumulative XP required to reach a level."""

    level: int
    total_xp: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "level": self.level,
            "total_xp": self.total_xp,
        }


# =============================================================================
# COST MODEL
# =============================================================================


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, resolving ties away from zero.

    The builtin round() rounds ties to even (round(0.5) == 0), which would
    under-fill progress bars at exact midpoints.
    """
    return int(copysign(floor(abs(value) + 0.5), value))


def xp_for_next_level(level: int) -> int:
    """
    Get the XP required to advance from ``level`` to ``level + 1``.

    Args:
        level: Current level

    Returns:
        Level-up cost in XP
    """
    if level < MID_TIER_LEVEL:
        return 2 * level + 7
    elif level < HIGH_TIER_LEVEL:
        return 5 * level - 38
    else:
        return 9 * level - 158


def total_xp_for_level(level: int) -> int:
    """
    Get the cumulative XP required to reach ``level`` from level 0.

    Equal to the sum of xp_for_next_level() over every level below, but
    evaluated in closed form.

    Args:
        level: Target level

    Returns:
        Total XP needed to have just reached the level
    """
    if level <= 0:
        return 0
    if level <= MID_TIER_LEVEL:
        return level * level + 6 * level
    elif level <= HIGH_TIER_LEVEL:
        return (5 * level * level - 81 * level + 720) // 2
    else:
        return (9 * level * level - 325 * level + 4440) // 2


# Cumulative XP at each breakpoint
_MID_TIER_XP = total_xp_for_level(MID_TIER_LEVEL)
_HIGH_TIER_XP = total_xp_for_level(HIGH_TIER_LEVEL)


def level_from_xp(total_xp: int) -> int:
    """
    Determine the level reached with ``total_xp`` cumulative XP.

    Inverts total_xp_for_level() by solving the quadratic for the tier the
    XP falls in, using integer square roots so the result stays exact at any
    magnitude.

    Args:
        total_xp: Total XP accumulated

    Returns:
        The level L with total_xp_for_level(L) <= total_xp < total_xp_for_level(L + 1)
    """
    if total_xp <= 0:
        return 0

    if total_xp < _MID_TIER_XP:
        # (L + 3)^2 <= X + 9
        level = isqrt(total_xp + 9) - 3
    elif total_xp < _HIGH_TIER_XP:
        # 5L^2 - 81L + 720 - 2X <= 0
        level = (81 + isqrt(40 * total_xp - 7839)) // 10
    else:
        # 9L^2 - 325L + 4440 - 2X <= 0
        level = (325 + isqrt(72 * total_xp - 54215)) // 18

    # Guard the tier edges against an off-by-one from the root
    while total_xp_for_level(level + 1) <= total_xp:
        level += 1
    while level > 0 and total_xp_for_level(level) > total_xp:
        level -= 1
    return level


# =============================================================================
# RANGE HELPERS
# =============================================================================


def xp_between_levels(start_level: int, end_level: int) -> int:
    """
    Get the XP needed to climb from ``start_level`` to ``end_level``.

    Args:
        start_level: Starting level
        end_level: Target level

    Returns:
        XP difference between the two cumulative thresholds

    Raises:
        InvalidRangeError: If start_level is greater than end_level
    """
    if start_level > end_level:
        logger.warning(
            f"Rejected XP range: start level {start_level} above end level {end_level}"
        )
        raise InvalidRangeError(start_level, end_level)
    return total_xp_for_level(end_level) - total_xp_for_level(start_level)


def xp_at_percent(level: int, percent: float) -> int:
    """
    Get the XP corresponding to a fraction of a level's level-up cost.

    Args:
        level: Current level
        percent: Fraction of the level, normally between 0 and 1

    Returns:
        XP amount, rounded half away from zero
    """
    return round_half_away(percent * xp_for_next_level(level))


def level_thresholds(up_to_level: int) -> list[LevelThreshold]:
    """
    List the cumulative XP thresholds for levels 0 through ``up_to_level``.

    Args:
        up_to_level: Highest level to include

    Returns:
        Thresholds ordered by level
    """
    return [
        LevelThreshold(level=level, total_xp=total_xp_for_level(level))
        for level in range(up_to_level + 1)
    ]
