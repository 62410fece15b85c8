"""Screen geometry of the window, in top-left origin pixel coordinates.

Arcade reports pointer positions from the bottom-left corner; convert with
``to_top_left`` before hit-testing.
"""
from typing import List, Tuple

from floodit.constants import CELL_SIZE, COLOR_COUNT, FIELD_H, FIELD_W, NO_COLOR

WINDOW_TITLE = "flood-it"
BUTTON_WIDTH = 60
BUTTON_HEIGHT = 60
MARGIN_X = 25
INFO_WIDTH = BUTTON_WIDTH * 2 + MARGIN_X * 3
SCREEN_WIDTH = FIELD_W * CELL_SIZE + INFO_WIDTH
SCREEN_HEIGHT = FIELD_H * CELL_SIZE
INFO_X = SCREEN_WIDTH - INFO_WIDTH

MESSAGE_Y = 160
MOVES_Y = 230
HOVER_BORDER = 4

# Palette buttons, two per row, one per color index.
BUTTON_ROWS_Y = (300, 380, 460)
BUTTONS: List[Tuple[int, int]] = [
    (INFO_X + MARGIN_X + column * (BUTTON_WIDTH + MARGIN_X), y)
    for y in BUTTON_ROWS_Y
    for column in (0, 1)
][:COLOR_COUNT]


def to_top_left(x: float, y: float, screen_height: int = SCREEN_HEIGHT) -> Tuple[int, int]:
    return int(x), int(screen_height - y)


def get_selected_color(x: int, y: int) -> int:
    """Color index of the palette button under (x, y), or NO_COLOR."""
    for color_num, (left, top) in enumerate(BUTTONS):
        if left <= x < left + BUTTON_WIDTH and top <= y < top + BUTTON_HEIGHT:
            return color_num
    return NO_COLOR


def cell_rect(row: int, col: int) -> Tuple[int, int, int, int]:
    """(left, top, width, height) of a field cell."""
    return col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE
