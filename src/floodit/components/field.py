from dataclasses import dataclass
from typing import List

@dataclass(slots=True)
class Field:
    """Color indices of the play grid, indexed ``cells[row][col]``."""
    width: int
    height: int
    cells: List[List[int]]

    def color_at(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width
