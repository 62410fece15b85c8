from esper import World

from floodit.constants import SOUND_BRAVO, SOUND_CRASH, SOUND_NG
from floodit.events.bus import EventBus, EVENT_PAINT_REJECTED, EVENT_GAME_CLEARED, EVENT_GAME_OVER
from floodit.systems.field_ops import get_sound_queue


class SoundSystem:
    """Queues one sound key per game event for the shell to play."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PAINT_REJECTED, self._queue(SOUND_NG))
        self.event_bus.subscribe(EVENT_GAME_CLEARED, self._queue(SOUND_BRAVO))
        self.event_bus.subscribe(EVENT_GAME_OVER, self._queue(SOUND_CRASH))

    def _queue(self, key: str):
        def handler(sender, **kwargs):
            get_sound_queue(self.world).push(key)
        return handler
