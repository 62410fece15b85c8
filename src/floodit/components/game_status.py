from dataclasses import dataclass

from floodit.constants import ALLOWED_STEP_COUNT, NO_COLOR

@dataclass(slots=True)
class GameStatus:
    """Per-session counters and terminal flags.

    is_clear and is_over are mutually exclusive and never reset; a new session
    gets a new world.
    """
    seed: int
    painted_count: int = 0
    is_clear: bool = False
    is_over: bool = False
    frame: int = -1
    hover_color: int = NO_COLOR

    @property
    def moves_remaining(self) -> int:
        return ALLOWED_STEP_COUNT - self.painted_count

    @property
    def is_terminal(self) -> bool:
        return self.is_clear or self.is_over
