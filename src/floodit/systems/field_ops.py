from __future__ import annotations

import random
from typing import Iterable, List, Sequence, Tuple

from esper import World

from floodit.commands import is_color_index
from floodit.components.effect_mask import EffectMask
from floodit.components.field import Field
from floodit.components.game_status import GameStatus
from floodit.components.game_tag import FloodGame
from floodit.components.paint_animation import PaintAnimation
from floodit.components.sound_queue import SoundQueue
from floodit.constants import ANCHOR, COLOR_COUNT

Position = Tuple[int, int]

_NEIGHBOR_OFFSETS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def get_game_entity(world: World) -> int:
    for entity, _ in world.get_component(FloodGame):
        return entity
    raise RuntimeError("FloodGame entity not found")


def get_field(world: World) -> Field:
    return world.component_for_entity(get_game_entity(world), Field)


def get_effect_mask(world: World) -> EffectMask:
    return world.component_for_entity(get_game_entity(world), EffectMask)


def get_animation(world: World) -> PaintAnimation:
    return world.component_for_entity(get_game_entity(world), PaintAnimation)


def get_status(world: World) -> GameStatus:
    return world.component_for_entity(get_game_entity(world), GameStatus)


def get_sound_queue(world: World) -> SoundQueue:
    return world.component_for_entity(get_game_entity(world), SoundQueue)


def validate_cells(cells: Sequence[Sequence[int]]) -> List[List[int]]:
    """Return a copy of ``cells`` after checking shape and color range."""
    rows = [list(row) for row in cells]
    if not rows or not rows[0]:
        raise ValueError("field must have at least one cell")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise ValueError("field rows must all have the same length")
        for color in row:
            if not is_color_index(color):
                raise ValueError(f"invalid color: {color}")
    return rows


def random_cells(rng: random.Random, width: int, height: int) -> List[List[int]]:
    return [[rng.randrange(COLOR_COUNT) for _ in range(width)] for _ in range(height)]


def anchor_color(field: Field) -> int:
    return field.color_at(*ANCHOR)


def neighbors(field: Field, row: int, col: int) -> Iterable[Position]:
    for dr, dc in _NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if field.in_bounds(nr, nc):
            yield nr, nc


def flood_fill(field: Field, to_color: int, start: Position = ANCHOR) -> List[Position]:
    """Repaint the 4-connected region around ``start`` sharing its color.

    A cell stops matching as soon as it is repainted, so the worklist never
    revisits it. Returns repainted positions in visiting order.
    """
    from_color = field.color_at(*start)
    if from_color == to_color:
        return []
    painted: List[Position] = []
    pending: List[Position] = [start]
    while pending:
        row, col = pending.pop()
        if field.cells[row][col] != from_color:
            continue
        field.cells[row][col] = to_color
        painted.append((row, col))
        for nr, nc in neighbors(field, row, col):
            if field.cells[nr][nc] == from_color:
                pending.append((nr, nc))
    return painted


def is_uniform(field: Field) -> bool:
    color = anchor_color(field)
    return all(cell == color for row in field.cells for cell in row)
