from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps lambdas and bound methods of unreferenced systems alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: frame=int


# ============================================================================
# INPUT
# ============================================================================
EVENT_PAINT_REQUEST = "paint_request"      # payload: color=int, frame=int


# ============================================================================
# PAINTING
# ============================================================================
EVENT_PAINT_REJECTED = "paint_rejected"    # payload: color=int, reason=str
EVENT_PAINT_APPLIED = "paint_applied"      # payload: from_color=int, to_color=int, positions=[(r,c),...], painted_count=int


# ============================================================================
# REVEAL WAVE
# ============================================================================
EVENT_REVEAL_STEP = "reveal_step"          # payload: sweep_index=int, positions=[(r,c),...]
EVENT_REVEAL_COMPLETE = "reveal_complete"  # payload: sweeps=int


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_CLEARED = "game_cleared"        # payload: painted_count=int
EVENT_GAME_OVER = "game_over"              # payload: painted_count=int
