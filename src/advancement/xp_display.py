"""
Text presentation of XP status snapshots.
"""

from typing import Optional

from src.advancement.progress_bar import ProgressBarStyle
from src.advancement.xp_status import XPStatus, get_xp_status


def format_status_lines(status: XPStatus) -> list[str]:
    """Build the display lines for an existing snapshot."""
    return [
        f"Total XP: {status.total_xp}",
        f"Current Level: {status.level}",
        f"XP at start of current level: {status.xp_at_level_start}",
        f"XP in current level: {status.xp_in_level} / {status.xp_for_level_up}",
        f"XP needed to reach next level: {status.xp_needed}",
        f"Progress: {status.progress_bar} ({status.percent_complete}%)",
    ]


def format_xp_status(
    total_xp: int,
    bar_width: Optional[int] = None,
    style: Optional[ProgressBarStyle] = None,
) -> str:
    """
    Format the XP status for ``total_xp`` as a multi-line text block.

    Args:
        total_xp: Total XP accumulated
        bar_width: Progress bar width (default: 20)
        style: Progress bar style; bar_width overrides its width when given

    Returns:
        Six lines: total XP, level, level start XP, XP within the level,
        XP still needed, and the progress bar with its percentage
    """
    status = get_xp_status(total_xp, bar_width, style)
    return "\n".join(format_status_lines(status))


def display_xp_status(
    total_xp: int,
    bar_width: Optional[int] = None,
    style: Optional[ProgressBarStyle] = None,
) -> None:
    """Print the XP status for ``total_xp`` to standard output."""
    print(format_xp_status(total_xp, bar_width, style))
