from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class SoundQueue:
    """Sound keys waiting to be played by the shell, oldest first."""
    requested: List[str] = field(default_factory=list)

    def push(self, key: str) -> None:
        self.requested.append(key)

    def drain(self) -> List[str]:
        drained = self.requested
        self.requested = []
        return drained
