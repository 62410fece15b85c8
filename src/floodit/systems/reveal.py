import logging

from esper import World

from floodit.constants import PAINT_WAIT
from floodit.events.bus import (EventBus, EVENT_TICK, EVENT_REVEAL_STEP, EVENT_REVEAL_COMPLETE,
                                EVENT_GAME_CLEARED, EVENT_GAME_OVER)
from floodit.components.paint_animation import PaintPhase
from floodit.systems.field_ops import get_animation, get_effect_mask, get_field, get_status, is_uniform

logger = logging.getLogger(__name__)


class RevealSystem:
    """Steps the anti-diagonal reveal wave and settles the game once it runs out.

    One diagonal is lit per work tick; ``PAINT_WAIT`` idle frames separate work
    ticks. The first diagonal with no cell of the painted color ends the wave.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        animation = get_animation(self.world)
        if animation.phase is not PaintPhase.PAINTING:
            return
        if animation.wait_counter > 0:
            animation.wait_counter -= 1
            return
        if animation.wait_counter < 0:
            return
        field = get_field(self.world)
        mask = get_effect_mask(self.world)
        lit = []
        for row in range(field.height):
            for col in range(field.width):
                hit = row + col == animation.sweep_index and field.cells[row][col] == animation.last_color
                mask.cells[row][col] = hit
                if hit:
                    lit.append((row, col))
        animation.sweep_index += 1
        if lit:
            self.event_bus.emit(EVENT_REVEAL_STEP, sweep_index=animation.sweep_index - 1, positions=lit)
        else:
            self._settle(animation.sweep_index)
            animation.finish()
        animation.wait_counter = PAINT_WAIT

    def _settle(self, sweeps: int) -> None:
        logger.debug("reveal wave finished after %d sweeps", sweeps)
        self.event_bus.emit(EVENT_REVEAL_COMPLETE, sweeps=sweeps)
        status = get_status(self.world)
        if is_uniform(get_field(self.world)):
            status.is_clear = True
            logger.info("field cleared in %d moves", status.painted_count)
            self.event_bus.emit(EVENT_GAME_CLEARED, painted_count=status.painted_count)
        elif status.moves_remaining == 0:
            status.is_over = True
            logger.info("out of moves after %d paints", status.painted_count)
            self.event_bus.emit(EVENT_GAME_OVER, painted_count=status.painted_count)
