from typing import Tuple

Color = Tuple[int, int, int]

BLOCK_COLORS: Tuple[Color, ...] = (
    (255, 128, 128),
    (255, 255, 128),
    (128, 255, 128),
    (128, 255, 255),
    (128, 128, 255),
    (255, 128, 255),
)

BACKGROUND = (0, 0, 0)
FONT_COLOR = (224, 224, 224)
CLEAR_COLOR = (255, 255, 128)
OVER_COLOR = (255, 128, 128)
HOVER_COLOR = (255, 255, 255)
EFFECT_OVERLAY = (255, 255, 255, 128)


def get_block_color(color_num: int) -> Color:
    if not 0 <= color_num < len(BLOCK_COLORS):
        raise ValueError(f"invalid color: {color_num}")
    return BLOCK_COLORS[color_num]
