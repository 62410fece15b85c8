import logging

from esper import World

from floodit.events.bus import EventBus, EVENT_PAINT_REQUEST, EVENT_PAINT_REJECTED, EVENT_PAINT_APPLIED
from floodit.systems.field_ops import anchor_color, flood_fill, get_animation, get_field, get_status

logger = logging.getLogger(__name__)


class PaintSystem:
    """Applies a paint request to the anchor region and starts the reveal wave.

    The grid is repainted in full here; the wave only paces its presentation.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PAINT_REQUEST, self.on_paint_request)

    def on_paint_request(self, sender, **kwargs):
        color = kwargs.get('color')
        if color is None:
            return
        field = get_field(self.world)
        from_color = anchor_color(field)
        if color == from_color:
            logger.debug("paint %d rejected: already the anchor color", color)
            self.event_bus.emit(EVENT_PAINT_REJECTED, color=color, reason='same_color')
            return
        status = get_status(self.world)
        status.painted_count += 1
        get_animation(self.world).begin(color)
        positions = flood_fill(field, color)
        self.event_bus.emit(
            EVENT_PAINT_APPLIED,
            from_color=from_color,
            to_color=color,
            positions=positions,
            painted_count=status.painted_count,
        )
