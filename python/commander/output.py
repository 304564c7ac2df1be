"""Output helpers for commander."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from .context import ConsoleContext
from .result import CommandResult, CommandStatus

LOGGER = logging.getLogger("commander.output")

_PREFIXES = {
    CommandStatus.SUCCESS: "",
    CommandStatus.INFO: "",
    CommandStatus.WARNING: "warning: ",
    CommandStatus.ERROR: "error: ",
}


def _json_dump(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True, default=str)


def emit_result(ctx: ConsoleContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit command output."""
    if ctx.json_output:
        payload: Dict[str, Any] = {"status": "ok"}
        if data is not None:
            payload["result"] = data
        else:
            payload["message"] = message
        print(_json_dump(payload))
    else:
        print(message)


def emit_error(ctx: ConsoleContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit an error message respecting JSON mode."""
    payload: Dict[str, Any] = {"status": "error", "error": message}
    if data:
        payload["details"] = dict(data)
    if ctx.json_output:
        print(_json_dump(payload))
    else:
        print(f"error: {message}")


def emit_lines(ctx: ConsoleContext, header: str, lines: Iterable[str], *, data: Optional[Mapping[str, Any]] = None) -> None:
    """Print a header followed by indented lines, or one JSON document."""
    if ctx.json_output:
        emit_result(ctx, message=header, data=data if data is not None else {"lines": list(lines)})
        return
    print(header)
    for line in lines:
        print(f"  {line}")


def format_result(result: CommandResult) -> str:
    prefix = _PREFIXES[result.status]
    text = f"{prefix}{result.message}"
    if result.cause and result.cause not in result.message:
        text += f" ({result.cause})"
    return text


class ResultPrinter:
    """Observer that renders every ``CommandResult`` for the console."""

    def __init__(self, ctx: ConsoleContext, *, show_success: bool = False) -> None:
        self.ctx = ctx
        self.show_success = show_success

    def on_command_executed(self, result: CommandResult) -> None:
        if self.ctx.json_output:
            print(_json_dump(result.to_dict()))
            return
        if result.status is CommandStatus.SUCCESS and not self.show_success:
            LOGGER.debug("%s (%.3f ms)", result.message, result.execution_time.total_seconds() * 1000.0)
            return
        print(format_result(result))


__all__ = [
    "ResultPrinter",
    "emit_error",
    "emit_lines",
    "emit_result",
    "format_result",
]
