"""Per-frame input handed from the shell to ``GameState.update``."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from floodit.constants import COLOR_COUNT


def is_color_index(value) -> bool:
    """True for a plain int in [0, COLOR_COUNT); bools and floats are not colors."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < COLOR_COUNT


class CommandKind(Enum):
    NONE = auto()
    PAINT = auto()


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind = CommandKind.NONE
    color: int | None = None

    def __post_init__(self) -> None:
        if self.kind is CommandKind.PAINT:
            if not is_color_index(self.color):
                raise ValueError(f"invalid paint color: {self.color}")
        elif self.color is not None:
            raise ValueError("a none command carries no color")

    @classmethod
    def none(cls) -> Command:
        return cls()

    @classmethod
    def paint(cls, color: int) -> Command:
        return cls(CommandKind.PAINT, color)

    @property
    def is_paint(self) -> bool:
        return self.kind is CommandKind.PAINT
