"""Console context shared by the built-in commands and front-ends."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from .history import HistoryStore
from .targets import SceneObjectSpace

LOGGER = logging.getLogger("commander.context")

MIN_TIME_SCALE = 0.0
MAX_TIME_SCALE = 10.0


@dataclass
class ConsoleContext:
    """Holds shared console state."""

    json_output: bool = False
    strict: bool = False
    history_path: Optional[Path] = None
    history_limit: int = 50
    objects: SceneObjectSpace = field(default_factory=SceneObjectSpace)
    time_scale: float = 1.0
    quit_requested: bool = False
    clear_screen: Optional[Callable[[], None]] = field(default=None, repr=False)
    history: Optional[HistoryStore] = field(default=None, repr=False)

    def load_scene(self, path: Optional[str]) -> None:
        if not path:
            return
        self.objects = SceneObjectSpace.from_file(path)
        LOGGER.info("loaded %d objects from %s", len(self.objects), path)

    def open_history(self) -> HistoryStore:
        if self.history is None:
            self.history = HistoryStore(self.history_path, limit=self.history_limit)
        return self.history

    def set_time_scale(self, value: float) -> float:
        self.time_scale = max(MIN_TIME_SCALE, min(MAX_TIME_SCALE, float(value)))
        return self.time_scale

    def request_quit(self) -> None:
        self.quit_requested = True

    def clear(self) -> bool:
        if self.clear_screen is None:
            return False
        self.clear_screen()
        return True
