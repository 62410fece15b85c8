from __future__ import annotations

from typing import Any

from floodit.commands import Command
from floodit.components.paint_animation import PaintPhase
from floodit.events.bus import EventBus
from floodit.game import GameState


def record_events(bus: EventBus, name: str) -> list[dict[str, Any]]:
    """Subscribe to ``name`` and collect every payload it carries."""

    received: list[dict[str, Any]] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received


def settle(game: GameState, max_frames: int = 500) -> int:
    """Step idle frames until the reveal wave ends; return how many were needed."""

    frames = 0
    while game.phase is PaintPhase.PAINTING:
        if frames >= max_frames:
            raise AssertionError("reveal wave did not finish")
        game.update(Command.none())
        frames += 1
    return frames


def paint_and_settle(game: GameState, color: int) -> int:
    game.update(Command.paint(color))
    return settle(game)


def max_diagonal(positions) -> int:
    """Deepest anti-diagonal (row + col) among positions, -1 when empty."""

    return max((row + col for row, col in positions), default=-1)
