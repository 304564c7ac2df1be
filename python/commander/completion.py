"""Autocomplete for command names and target names."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from .commands import CommandRegistry
from .targets import ObjectSpace

LOGGER = logging.getLogger("commander.completion")

DEFAULT_LIMIT = 5


class AutoComplete:
    """Suggests completions for a partially typed command line.

    ``"he"`` completes command names; ``"move Cu"`` completes visible target
    names and yields whole lines such as ``"move Cube"``.  Anything longer is
    not completed.
    """

    def __init__(self, registry: CommandRegistry, object_space: Optional[ObjectSpace] = None) -> None:
        self.registry = registry
        self.object_space = object_space

    def suggestions(self, text: Optional[str], limit: int = DEFAULT_LIMIT) -> List[str]:
        if not text:
            return []
        parts = text.split(" ")
        if len(parts) == 1:
            return self.registry.suggestions(parts[0])[:limit]
        if len(parts) == 2:
            return self._target_suggestions(parts[0], parts[1], limit)
        return []

    def best_suggestion(self, text: Optional[str]) -> str:
        found = self.suggestions(text, 1)
        return found[0] if found else ""

    def _target_suggestions(self, command_name: str, partial: str, limit: int) -> List[str]:
        if self.registry.get(command_name) is None or self.object_space is None:
            return []
        needle = partial.lower()
        results: List[str] = []
        try:
            for handle in self.object_space.visible():
                if len(results) >= limit:
                    break
                if handle.name.lower().startswith(needle):
                    results.append(f"{command_name} {handle.name}")
        except Exception as exc:
            LOGGER.warning("target completion failed: %s", exc)
        return results


class ConsoleCompleter(Completer):
    """prompt_toolkit adapter around :class:`AutoComplete`."""

    def __init__(self, autocomplete: AutoComplete, *, limit: int = 16) -> None:
        self.autocomplete = autocomplete
        self.limit = limit

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor
        if not text:
            for name in sorted(command.name for command in self.autocomplete.registry.all()):
                yield Completion(name, start_position=0)
            return
        for entry in self.autocomplete.suggestions(text, self.limit):
            yield Completion(entry, start_position=-len(text), display=entry.split(" ")[-1])
