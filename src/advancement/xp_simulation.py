"""
XP gain simulation.

Replays a sequence of XP gains and records a status snapshot after each one,
so callers can inspect any step of a progression (e.g., when each level-up
happened).
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional
import logging

from src.advancement.progress_bar import ProgressBarStyle
from src.advancement.xp_curve import level_from_xp
from src.advancement.xp_status import XPStatus, get_xp_status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XPSimulation:
    """Result of replaying a sequence of XP gains."""

    initial_xp: int
    final_xp: int
    steps: tuple[XPStatus, ...] = field(default_factory=tuple)

    @property
    def initial_level(self) -> int:
        """Level before any gain was applied."""
        return level_from_xp(self.initial_xp)

    @property
    def final_level(self) -> int:
        """Level after the last gain."""
        return self.steps[-1].level if self.steps else self.initial_level

    @property
    def levels_gained(self) -> int:
        """Net change in level over the simulation."""
        return self.final_level - self.initial_level

    @property
    def level_ups(self) -> list[int]:
        """Indices of the steps at which the level rose."""
        indices = []
        previous = self.initial_level
        for i, step in enumerate(self.steps):
            if step.level > previous:
                indices.append(i)
            previous = step.level
        return indices

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "initial_xp": self.initial_xp,
            "final_xp": self.final_xp,
            "steps": [step.to_dict() for step in self.steps],
            "level_ups": self.level_ups,
        }


def simulate_xp_gain(
    initial_xp: int,
    gains: Iterable[int],
    bar_width: Optional[int] = None,
    style: Optional[ProgressBarStyle] = None,
) -> XPSimulation:
    """
    Apply XP gains in order, snapshotting the status after each one.

    Gains are not validated; a negative gain lowers the running total.

    Args:
        initial_xp: Starting total XP
        gains: XP amounts to add, in order
        bar_width: Progress bar width for each snapshot (default: 20)
        style: Progress bar style; bar_width overrides its width when given

    Returns:
        XPSimulation with the final total and one snapshot per gain
    """
    xp = initial_xp
    level = level_from_xp(initial_xp)
    steps: list[XPStatus] = []
    for gain in gains:
        xp += gain
        step = get_xp_status(xp, bar_width, style)
        if step.level > level:
            logger.debug(f"Reached level {step.level} at {xp} XP")
        level = step.level
        steps.append(step)

    result = XPSimulation(initial_xp=initial_xp, final_xp=xp, steps=tuple(steps))
    logger.debug(
        f"Simulated {len(steps)} XP gains: {initial_xp} -> {xp} XP, "
        f"{result.levels_gained} levels gained"
    )
    return result
