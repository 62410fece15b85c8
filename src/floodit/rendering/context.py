from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

Rect = Tuple[int, int, int, int]
RGBA = Tuple[int, ...]


@dataclass(slots=True)
class TextCommand:
    text: str
    x: int
    y: int
    color: RGBA


@dataclass(slots=True)
class FrameLayout:
    """Frame-scoped draw list in top-left origin coordinates.

    Built headless so the layout can be checked without an arcade window.
    """

    rects: List[Tuple[Rect, RGBA]] = field(default_factory=list)
    texts: List[TextCommand] = field(default_factory=list)

    def add_rect(self, rect: Rect, color: RGBA) -> None:
        self.rects.append((rect, color))

    def add_text(self, text: str, x: int, y: int, color: RGBA) -> None:
        self.texts.append(TextCommand(text=text, x=x, y=y, color=color))
