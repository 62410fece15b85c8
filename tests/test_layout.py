from floodit.constants import CELL_SIZE, COLOR_COUNT, FIELD_H, FIELD_W, NO_COLOR
from floodit.ui.layout import (BUTTON_HEIGHT, BUTTON_WIDTH, BUTTONS, INFO_WIDTH, INFO_X, SCREEN_HEIGHT,
                               SCREEN_WIDTH, cell_rect, get_selected_color, to_top_left)


def test_screen_geometry():
    assert INFO_WIDTH == 195
    assert SCREEN_WIDTH == FIELD_W * CELL_SIZE + INFO_WIDTH
    assert SCREEN_HEIGHT == FIELD_H * CELL_SIZE
    assert INFO_X == FIELD_W * CELL_SIZE


def test_palette_has_one_button_per_color():
    assert len(BUTTONS) == COLOR_COUNT
    assert BUTTONS[0] == (585, 300)
    assert BUTTONS[1] == (670, 300)
    assert BUTTONS[5] == (670, 460)


def test_selected_color_inside_buttons():
    for color_num, (left, top) in enumerate(BUTTONS):
        assert get_selected_color(left, top) == color_num
        assert get_selected_color(left + BUTTON_WIDTH - 1, top + BUTTON_HEIGHT - 1) == color_num


def test_selected_color_outside_buttons():
    left, top = BUTTONS[0]
    assert get_selected_color(0, 0) == NO_COLOR
    assert get_selected_color(left + BUTTON_WIDTH, top) == NO_COLOR
    assert get_selected_color(left, top - 1) == NO_COLOR
    assert get_selected_color(left, top + BUTTON_HEIGHT) == NO_COLOR


def test_to_top_left_flips_vertical_axis():
    assert to_top_left(10.0, SCREEN_HEIGHT - 10.0) == (10, 10)
    assert to_top_left(0, 0) == (0, SCREEN_HEIGHT)


def test_cell_rect():
    assert cell_rect(0, 0) == (0, 0, CELL_SIZE, CELL_SIZE)
    assert cell_rect(2, 3) == (3 * CELL_SIZE, 2 * CELL_SIZE, CELL_SIZE, CELL_SIZE)
