"""Help command."""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING, Any, List, Optional

from .base import Command, ContextCommand
from ..context import ConsoleContext
from ..kinds import TEXT
from ..output import emit_error, emit_lines

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry

SYNTAX_NOTES = (
    "Vectors: move Cube 2 3 4 or move Cube 2,3,4",
    "Decimals: use . or , as the decimal separator",
    "Booleans: true/false, 1/0, on/off, yes/no",
    "Colors: red, #FF0000, (255,0,0)",
    'Text with spaces: "hello world"',
)


class HelpCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(
            ctx,
            "help",
            "Show all commands or help for one command",
            category="System",
            signature=(TEXT,),
            resolves_target=False,
        )
        self._registry: CommandRegistry | None = None

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        registry = self._registry
        if registry is None:
            return False
        name = args[0] if args else ""
        if name:
            command = registry.get(name)
            if command is None:
                emit_error(self.ctx, message=f"command '{name}' not found")
                return False
            self._show_command(command)
            return True
        lines: List[str] = list(SYNTAX_NOTES)
        for category, group in groupby(registry.list_commands(), key=lambda cmd: cmd.category):
            lines.append("")
            lines.append(f"[{category}]")
            lines.extend(f"  {command.format_help()}" for command in group)
        data = {
            "commands": [
                {"name": cmd.name, "category": cmd.category, "usage": cmd.usage(), "description": cmd.description}
                for cmd in registry.list_commands()
            ]
        }
        emit_lines(self.ctx, "=== COMMANDER HELP ===", lines, data=data)
        return True

    def _show_command(self, command: Command) -> None:
        lines = [
            f"Description: {command.description}",
            f"Category: {command.category}",
            f"Usage: {command.usage()}",
        ]
        if command.signature:
            lines.append("Parameters:")
            lines.extend(f"  {idx}. {kind.label} ({kind})" for idx, kind in enumerate(command.signature, 1))
        data = {
            "name": command.name,
            "category": command.category,
            "usage": command.usage(),
            "parameters": [str(kind) for kind in command.signature],
        }
        emit_lines(self.ctx, f"=== HELP: {command.name.upper()} ===", lines, data=data)
