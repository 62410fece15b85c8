import logging
import random
from typing import Sequence

from esper import World
from floodit.components.effect_mask import EffectMask
from floodit.components.field import Field
from floodit.components.game_status import GameStatus
from floodit.components.game_tag import FloodGame
from floodit.components.paint_animation import PaintAnimation
from floodit.components.sound_queue import SoundQueue
from floodit.constants import FIELD_H, FIELD_W
from floodit.systems.field_ops import random_cells, validate_cells

logger = logging.getLogger(__name__)


def create_world(
    seed: int,
    *,
    cells: Sequence[Sequence[int]] | None = None,
) -> World:
    """Build the world for one game session.

    The field is drawn from ``random.Random(seed)`` unless ``cells`` is given,
    in which case the grid takes the shape of ``cells``.
    """
    world = World()
    rng = random.Random(seed)
    setattr(world, "random", rng)
    logger.info("random seed = %d", seed)

    if cells is None:
        grid = random_cells(rng, FIELD_W, FIELD_H)
    else:
        grid = validate_cells(cells)
    height = len(grid)
    width = len(grid[0])

    world.create_entity(
        FloodGame(),
        Field(width=width, height=height, cells=grid),
        EffectMask(width=width, height=height),
        PaintAnimation(),
        GameStatus(seed=seed),
        SoundQueue(),
    )
    return world
