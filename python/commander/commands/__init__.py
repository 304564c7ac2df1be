"""Command registry for commander."""

from __future__ import annotations

import difflib
import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from .base import Command, ContextCommand, TargetCommand
from .help import HelpCommand
from .objects import DestroyCommand, FindCommand, ListCommand, MoveCommand, PaintCommand, SpawnCommand
from .system import ClearCommand, EchoCommand, HistoryCommand, QuitCommand, TimeScaleCommand, VersionCommand

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ConsoleContext

LOGGER = logging.getLogger("commander.registry")


class CommandRegistry:
    """Stores the known commands keyed by lowercase name."""

    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {}

    def register(self, command: Optional[Command]) -> None:
        if command is None:
            LOGGER.error("cannot register a null command")
            return
        key = command.name.lower()
        if key in self._commands:
            LOGGER.warning("command '%s' already registered; overwriting", key)
        self._commands[key] = command

    def unregister(self, name: Optional[str]) -> None:
        if name:
            self._commands.pop(name.lower(), None)

    def get(self, name: Optional[str]) -> Optional[Command]:
        if not name:
            return None
        return self._commands.get(name.lower())

    def all(self) -> List[Command]:
        return list(self._commands.values())

    def suggestions(self, partial: Optional[str]) -> List[str]:
        if not partial:
            return []
        needle = partial.lower()
        return sorted(name for name in self._commands if name.startswith(needle))

    def close_matches(self, name: Optional[str], limit: int = 3) -> List[str]:
        """Names similar to *name*, for typos that share no prefix."""
        if not name:
            return []
        return difflib.get_close_matches(name.lower(), sorted(self._commands), n=limit, cutoff=0.6)

    def list_commands(self) -> Iterable[Command]:
        return sorted(self._commands.values(), key=lambda cmd: (cmd.category.lower(), cmd.name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def __len__(self) -> int:
        return len(self._commands)


def build_registry(ctx: "ConsoleContext") -> CommandRegistry:
    registry = CommandRegistry()
    commands = [
        HelpCommand(ctx),
        EchoCommand(ctx),
        ClearCommand(ctx),
        TimeScaleCommand(ctx),
        VersionCommand(ctx),
        HistoryCommand(ctx),
        QuitCommand(ctx),
        ListCommand(ctx),
        FindCommand(ctx),
        SpawnCommand(ctx),
        DestroyCommand(ctx),
        MoveCommand(ctx),
        PaintCommand(ctx),
    ]
    for command in commands:
        registry.register(command)
        bind = getattr(command, "bind", None)
        if callable(bind):
            bind(registry)
    return registry


__all__ = ["Command", "CommandRegistry", "ContextCommand", "TargetCommand", "build_registry"]
