"""
Advancement system for the XP progression calculator.

Maps cumulative XP to levels on a three-tier curve, reports progress within
the current level, and renders it as text.
"""

from src.advancement.xp_curve import (
    MID_TIER_LEVEL,
    HIGH_TIER_LEVEL,
    ProgressionError,
    InvalidRangeError,
    DegenerateProgressError,
    LevelThreshold,
    round_half_away,
    xp_for_next_level,
    total_xp_for_level,
    level_from_xp,
    xp_between_levels,
    xp_at_percent,
    level_thresholds,
)
from src.advancement.progress_bar import (
    DEFAULT_BAR_WIDTH,
    DEFAULT_BAR_STYLE,
    ProgressBarStyle,
    render_progress_bar,
)
from src.advancement.xp_status import (
    XPStatus,
    get_xp_status,
    get_next_level_xp,
    get_percentage_complete,
)
from src.advancement.xp_display import (
    format_xp_status,
    display_xp_status,
)
from src.advancement.xp_simulation import (
    XPSimulation,
    simulate_xp_gain,
)

__all__ = [
    "MID_TIER_LEVEL",
    "HIGH_TIER_LEVEL",
    "ProgressionError",
    "InvalidRangeError",
    "DegenerateProgressError",
    "LevelThreshold",
    "round_half_away",
    "xp_for_next_level",
    "total_xp_for_level",
    "level_from_xp",
    "xp_between_levels",
    "xp_at_percent",
    "level_thresholds",
    "DEFAULT_BAR_WIDTH",
    "DEFAULT_BAR_STYLE",
    "ProgressBarStyle",
    "render_progress_bar",
    "XPStatus",
    "get_xp_status",
    "get_next_level_xp",
    "get_percentage_complete",
    "format_xp_status",
    "display_xp_status",
    "XPSimulation",
    "simulate_xp_gain",
]
