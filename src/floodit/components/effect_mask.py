from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class EffectMask:
    """Cells highlighted by the reveal wave on the current tick."""
    width: int
    height: int
    cells: List[List[bool]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.clear()

    def clear(self) -> None:
        self.cells = [[False] * self.width for _ in range(self.height)]
