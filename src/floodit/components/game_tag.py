from dataclasses import dataclass

@dataclass(slots=True)
class FloodGame:
    """Tag marking the single entity that carries the game components."""
