"""
ASCII progress bars for level progress.

Bars are bracketed, fixed-width strings such as ``[#####---------------]``.
The look of a bar is configured with a ProgressBarStyle.
"""

from dataclasses import dataclass, replace
from typing import Optional
import logging

from src.advancement.xp_curve import DegenerateProgressError, round_half_away

logger = logging.getLogger(__name__)


DEFAULT_BAR_WIDTH = 20


@dataclass(frozen=True)
class ProgressBarStyle:
    """Configuration for rendering progress bars."""

    width: int = DEFAULT_BAR_WIDTH
    filled_char: str = "#"
    empty_char: str = "-"

    def __post_init__(self):
        """Validate width and markers."""
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError(f"Bar width must be an integer, got {self.width!r}")
        if self.width <= 0:
            raise ValueError(f"Bar width must be positive, got {self.width}")
        for marker in (self.filled_char, self.empty_char):
            if not isinstance(marker, str) or len(marker) != 1:
                raise ValueError(f"Bar markers must be single characters, got {marker!r}")
        if self.filled_char == self.empty_char:
            raise ValueError("Filled and empty bar markers must differ")


DEFAULT_BAR_STYLE = ProgressBarStyle()


def resolve_bar_style(
    bar_width: Optional[int] = None,
    style: Optional[ProgressBarStyle] = None,
) -> ProgressBarStyle:
    """
    Combine an optional width override with an optional style.

    Args:
        bar_width: Width override; takes precedence over the style's width
        style: Base style (default: DEFAULT_BAR_STYLE)

    Returns:
        The style to render with
    """
    style = style or DEFAULT_BAR_STYLE
    if bar_width is not None and bar_width != style.width:
        style = replace(style, width=bar_width)
    return style


def render_progress_bar(
    current: float,
    total: float,
    bar_width: Optional[int] = None,
    style: Optional[ProgressBarStyle] = None,
) -> str:
    """
    Render an ASCII progress bar for ``current`` out of ``total``.

    The filled share is min(current / total, 1) of the width, rounded half
    away from zero. Progress below zero renders as an empty bar.

    Args:
        current: Progress made (e.g., XP earned in the current level)
        total: Progress needed (e.g., the level-up cost)
        bar_width: Number of cells between the brackets (default: 20)
        style: Bar style; bar_width overrides its width when given

    Returns:
        Bar string, always bar width + 2 characters long

    Raises:
        DegenerateProgressError: If total is zero or negative
        ValueError: If the width is not a positive integer
    """
    style = resolve_bar_style(bar_width, style)
    if total <= 0:
        logger.warning(f"Cannot render progress bar against total {total}")
        raise DegenerateProgressError(
            f"Progress bar total must be positive, got {total}"
        )

    ratio = min(max(current / total, 0.0), 1.0)
    filled = round_half_away(ratio * style.width)
    empty = style.width - filled
    return f"[{style.filled_char * filled}{style.empty_char * empty}]"
