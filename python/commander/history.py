"""Persistent command history for the console."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

LOGGER = logging.getLogger("commander.history")

DEFAULT_LIMIT = 50


class HistoryStore:
    """File-backed list of executed command lines, newest last."""

    def __init__(self, path: Optional[str | Path], *, limit: int = DEFAULT_LIMIT) -> None:
        self.limit = max(1, int(limit or 1))
        self.path = Path(path).expanduser() if path else None
        self.entries: List[str] = []
        if self.path:
            self._load()

    def _load(self) -> None:
        try:
            data = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        except OSError as exc:
            LOGGER.warning("cannot read history %s: %s", self.path, exc)
            return
        lines = [line.strip() for line in data.splitlines() if line.strip()]
        self.entries = lines[-self.limit :]

    def append(self, line: str) -> bool:
        """Record *line*; blank lines and repeats of the last entry are ignored."""
        text = line.strip()
        if not text or (self.entries and self.entries[-1] == text):
            return False
        self.entries.append(text)
        del self.entries[: -self.limit]
        self._persist()
        return True

    def extend(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.append(line)

    def clear(self) -> None:
        self.entries = []
        self._persist()

    def _persist(self) -> None:
        if not self.path:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            body = "\n".join(self.entries)
            self.path.write_text(body + "\n" if body else "", encoding="utf-8")
        except OSError as exc:
            LOGGER.warning("cannot write history %s: %s", self.path, exc)

    def snapshot(self) -> List[str]:
        return list(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
