"""Console and runtime commands."""

from __future__ import annotations

from typing import Any, List, Optional

from .base import ContextCommand
from ..context import ConsoleContext
from ..kinds import DECIMAL, TEXT
from ..output import emit_error, emit_lines, emit_result


class EchoCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "echo", "Repeat the given message", category="System", resolves_target=False, signature=(TEXT,))

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        message = args[0] if args else ""
        emit_result(self.ctx, message=f"Echo: {message}", data={"echo": message})
        return True


class ClearCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "clear", "Clear the console", category="System", resolves_target=False)

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        if not self.ctx.clear():
            emit_result(self.ctx, message="Nothing to clear", data={"cleared": False})
        return True


class TimeScaleCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "time", "Set the time scale (0-10)", category="Debug", signature=(DECIMAL,), resolves_target=False)

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        scale = self.ctx.set_time_scale(args[0] if args else 1.0)
        if scale == 0.0:
            state = "paused"
        elif scale < 1.0:
            state = "slow motion"
        elif scale > 1.0:
            state = "fast forward"
        else:
            state = "normal"
        emit_result(self.ctx, message=f"Time scale set to {scale:g} ({state})", data={"time_scale": scale, "state": state})
        return True


class VersionCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "version", "Show the commander version", category="System", resolves_target=False)

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        from .. import __version__

        emit_result(self.ctx, message=f"commander {__version__}", data={"version": __version__})
        return True


class QuitCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "quit", "Leave the console", category="System", resolves_target=False)

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        self.ctx.request_quit()
        emit_result(self.ctx, message="Quitting...", data={"quit": True})
        return True


class HistoryCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "history", "Show recent commands, or 'history clear'", category="System", resolves_target=False, signature=(TEXT,))

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        store = self.ctx.history
        if store is None:
            emit_result(self.ctx, message="History is disabled", data={"history": []})
            return True
        action = (args[0] if args else "").lower()
        if action == "clear":
            store.clear()
            emit_result(self.ctx, message="History cleared", data={"history": []})
            return True
        if action:
            emit_error(self.ctx, message=f"unknown history action '{action}'")
            return False
        entries = store.snapshot()
        lines = [f"{idx:>3}  {entry}" for idx, entry in enumerate(entries, 1)] or ["(empty)"]
        emit_lines(self.ctx, "history:", lines, data={"history": entries})
        return True
