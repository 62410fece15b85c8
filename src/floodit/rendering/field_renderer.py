from __future__ import annotations

from typing import TYPE_CHECKING

from floodit.constants import COLOR_COUNT
from floodit.components.paint_animation import PaintPhase
from floodit.rendering.context import FrameLayout
from floodit.rendering.palette import (CLEAR_COLOR, EFFECT_OVERLAY, FONT_COLOR, HOVER_COLOR, OVER_COLOR,
                                       get_block_color)
from floodit.ui.layout import (BUTTON_HEIGHT, BUTTON_WIDTH, BUTTONS, HOVER_BORDER, INFO_X, MARGIN_X,
                               MESSAGE_Y, MOVES_Y, SCREEN_HEIGHT, cell_rect)

if TYPE_CHECKING:
    from floodit.game import GameState

FONT_SIZE = 20


class FieldRenderer:
    def __init__(self, screen_height: int = SCREEN_HEIGHT):
        self._screen_height = screen_height
        self.last_frame: FrameLayout | None = None

    def build_frame(self, game: GameState) -> FrameLayout:
        frame = FrameLayout()
        cells = game.cells
        for row in range(game.height):
            for col in range(game.width):
                frame.add_rect(cell_rect(row, col), get_block_color(cells[row][col]))

        # The mask only holds the current diagonal while a wave is running.
        if game.phase is PaintPhase.PAINTING:
            mask = game.effect_mask
            for row in range(game.height):
                for col in range(game.width):
                    if mask[row][col]:
                        frame.add_rect(cell_rect(row, col), EFFECT_OVERLAY)

        frame.add_text(f"MOVES {game.moves_remaining:2}", INFO_X + MARGIN_X, MOVES_Y, FONT_COLOR)

        for color_num in range(COLOR_COUNT):
            left, top = BUTTONS[color_num]
            if color_num == game.hover_color:
                frame.add_rect(
                    (left - HOVER_BORDER, top - HOVER_BORDER,
                     BUTTON_WIDTH + HOVER_BORDER * 2, BUTTON_HEIGHT + HOVER_BORDER * 2),
                    HOVER_COLOR,
                )
            frame.add_rect((left, top, BUTTON_WIDTH, BUTTON_HEIGHT), get_block_color(color_num))

        if game.is_clear:
            frame.add_text("EXCELLENT!", INFO_X + MARGIN_X, MESSAGE_Y, CLEAR_COLOR)
        if game.is_over:
            frame.add_text("GAME OVER", INFO_X + MARGIN_X, MESSAGE_Y, OVER_COLOR)
        return frame

    def render(self, arcade, game: GameState, headless: bool) -> FrameLayout:
        frame = self.build_frame(game)
        self.last_frame = frame
        if headless:
            return frame
        height = self._screen_height
        for (left, top, width, rect_height), color in frame.rects:
            arcade.draw_lrbt_rectangle_filled(left, left + width, height - top - rect_height, height - top, color)
        for text in frame.texts:
            arcade.draw_text(text.text, text.x, height - text.y, text.color, FONT_SIZE, anchor_y="top")
        return frame
