"""Frame-stepped Flood-It engine.

``GameState`` is what the shell talks to: one ``update(command)`` per frame,
then read-only queries for rendering and ``drain_sounds()`` for audio. Internally
it is an esper world whose systems talk over the event bus.
"""
from __future__ import annotations

import time
from typing import List, Sequence

from floodit.commands import Command
from floodit.components.paint_animation import PaintPhase
from floodit.events.bus import EventBus, EVENT_PAINT_REQUEST, EVENT_TICK
from floodit.systems.field_ops import (get_animation, get_effect_mask, get_field, get_sound_queue,
                                       get_status)
from floodit.systems.paint import PaintSystem
from floodit.systems.reveal import RevealSystem
from floodit.systems.sound import SoundSystem
from floodit.world import create_world


def timestamp_seed() -> int:
    return int(time.time())


class GameState:
    def __init__(
        self,
        seed: int,
        *,
        cells: Sequence[Sequence[int]] | None = None,
        event_bus: EventBus | None = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(seed, cells=cells)
        self.paint_system = PaintSystem(self.world, self.event_bus)
        self.reveal_system = RevealSystem(self.world, self.event_bus)
        self.sound_system = SoundSystem(self.world, self.event_bus)

    @classmethod
    def new(cls, seed: int | None = None, *, event_bus: EventBus | None = None) -> GameState:
        """Start a session with a random field; the seed defaults to the current time."""
        if seed is None:
            seed = timestamp_seed()
        return cls(seed, event_bus=event_bus)

    def update(self, command: Command) -> None:
        """Advance one frame. Does nothing once the game is won or lost."""
        status = get_status(self.world)
        if status.is_terminal:
            return
        status.frame += 1
        if self.phase is PaintPhase.CONTROLLABLE:
            if command.is_paint:
                self.event_bus.emit(EVENT_PAINT_REQUEST, color=command.color, frame=status.frame)
        else:
            self.event_bus.emit(EVENT_TICK, frame=status.frame)

    def drain_sounds(self) -> List[str]:
        """Return the queued sound keys and empty the queue."""
        return get_sound_queue(self.world).drain()

    @property
    def requested_sounds(self) -> List[str]:
        return list(get_sound_queue(self.world).requested)

    @property
    def cells(self) -> List[List[int]]:
        return [list(row) for row in get_field(self.world).cells]

    def color_at(self, row: int, col: int) -> int:
        return get_field(self.world).color_at(row, col)

    @property
    def effect_mask(self) -> List[List[bool]]:
        return [list(row) for row in get_effect_mask(self.world).cells]

    @property
    def width(self) -> int:
        return get_field(self.world).width

    @property
    def height(self) -> int:
        return get_field(self.world).height

    @property
    def phase(self) -> PaintPhase:
        return get_animation(self.world).phase

    @property
    def seed(self) -> int:
        return get_status(self.world).seed

    @property
    def frame(self) -> int:
        return get_status(self.world).frame

    @property
    def painted_count(self) -> int:
        return get_status(self.world).painted_count

    @property
    def moves_remaining(self) -> int:
        return get_status(self.world).moves_remaining

    @property
    def is_clear(self) -> bool:
        return get_status(self.world).is_clear

    @property
    def is_over(self) -> bool:
        return get_status(self.world).is_over

    @property
    def is_terminal(self) -> bool:
        return get_status(self.world).is_terminal

    @property
    def hover_color(self) -> int:
        return get_status(self.world).hover_color

    @hover_color.setter
    def hover_color(self, value: int) -> None:
        get_status(self.world).hover_color = value
