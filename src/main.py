"""Entry point for the Flood-It puzzle.

Sets up the game engine, sound bank, and Arcade window.
"""
import logging
from pathlib import Path

import arcade
from arcade import Window, run, set_background_color, color

from floodit.commands import Command
from floodit.constants import FPS, NO_COLOR
from floodit.game import GameState
from floodit.audio.sound_bank import SoundBank, find_sound_dir
from floodit.rendering.field_renderer import FieldRenderer
from floodit.ui.layout import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE, get_selected_color, to_top_left

# A source checkout keeps resources beside src/; an installed copy looks in the working directory.
SOUND_DIRS = (
    Path(__file__).resolve().parents[1] / "resources" / "sound",
    Path.cwd() / "resources" / "sound",
)
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class FloodItWindow(Window):
    def __init__(self):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1 / FPS)
        self.game = GameState.new()
        self.pending_command = Command.none()
        self.field_renderer = FieldRenderer(SCREEN_HEIGHT)
        self.sound_bank = SoundBank(find_sound_dir(SOUND_DIRS), arcade.load_sound, arcade.play_sound)
        self.sound_bank.load()
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.field_renderer.render(arcade, self.game, headless=False)

    def on_update(self, delta_time: float):
        command, self.pending_command = self.pending_command, Command.none()
        self.game.update(command)
        self.sound_bank.play(self.game.drain_sounds())

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.game.hover_color = get_selected_color(*to_top_left(x, y))

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if button != arcade.MOUSE_BUTTON_LEFT:
            return
        if self.game.is_terminal:
            self.game = GameState.new()
            self.pending_command = Command.none()
            return
        color_num = get_selected_color(*to_top_left(x, y))
        if color_num != NO_COLOR:
            self.pending_command = Command.paint(color_num)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    window = FloodItWindow()
    run()

if __name__ == "__main__":
    main()
