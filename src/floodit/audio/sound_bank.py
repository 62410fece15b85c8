from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Sequence

logger = logging.getLogger(__name__)


def find_sound_dir(candidates: Sequence[Path]) -> Path:
    """First existing directory among ``candidates``, else the first candidate."""
    for candidate in candidates:
        if candidate.is_dir():
            return candidate
    return candidates[0]


class SoundBank:
    """Sound effects keyed by file basename, loaded once per window."""

    def __init__(self, sound_dir: Path, loader: Callable[[str], Any], player: Callable[[Any], Any]):
        self._sound_dir = sound_dir
        self._loader = loader
        self._player = player
        self.sounds: Dict[str, Any] = {}

    def load(self) -> None:
        if not self._sound_dir.is_dir():
            logger.warning("sound directory not found: %s", self._sound_dir)
            return
        for path in sorted(self._sound_dir.glob("*.wav")):
            self.sounds[path.name] = self._loader(str(path))
        logger.debug("loaded %d sounds from %s", len(self.sounds), self._sound_dir)

    def play(self, keys: Iterable[str]) -> None:
        for key in keys:
            sound = self.sounds.get(key)
            if sound is None:
                logger.warning("cannot get sound: %s", key)
                continue
            self._player(sound)
