"""Repaint sub-state: whether the player may act or a reveal wave is running."""
from dataclasses import dataclass
from enum import Enum, auto

from floodit.constants import NO_COLOR


class PaintPhase(Enum):
    CONTROLLABLE = auto()
    PAINTING = auto()


@dataclass(slots=True)
class PaintAnimation:
    """Reveal wave progress.

    ``last_color``, ``sweep_index`` and ``wait_counter`` only carry meaning while
    the phase is PAINTING. ``sweep_index`` is the anti-diagonal (row + col)
    revealed on the next work tick; ``wait_counter`` counts frames to skip first.
    """
    phase: PaintPhase = PaintPhase.CONTROLLABLE
    last_color: int = NO_COLOR
    sweep_index: int = 0
    wait_counter: int = 0

    def begin(self, color: int) -> None:
        if self.phase is not PaintPhase.CONTROLLABLE:
            raise RuntimeError(f"cannot start painting from {self.phase.name}")
        self.phase = PaintPhase.PAINTING
        self.last_color = color
        self.sweep_index = 0
        self.wait_counter = 0

    def finish(self) -> None:
        if self.phase is not PaintPhase.PAINTING:
            raise RuntimeError(f"cannot finish painting from {self.phase.name}")
        self.phase = PaintPhase.CONTROLLABLE
