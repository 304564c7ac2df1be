"""Command executor: tokenize, look up, resolve, convert, invoke, report."""

from __future__ import annotations

import logging
import time
from datetime import timedelta
from typing import List, Optional

from .commands import CommandRegistry
from .commands.base import Command
from .converter import ConversionError, ParameterConverter
from .parser import split_command
from .result import CommandResult, ErrorKind, Observer, notify
from .targets import ObjectSpace, TargetResolver

LOGGER = logging.getLogger("commander.executor")

MAX_SUGGESTIONS = 3


class CommandExecutor:
    """Runs command lines against a registry and reports the results.

    ``execute`` never raises.  Every call produces exactly one
    :class:`CommandResult`, which is handed to each observer in registration
    order and then returned.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        object_space: Optional[ObjectSpace] = None,
        converter: Optional[ParameterConverter] = None,
        resolver: Optional[TargetResolver] = None,
    ) -> None:
        self.registry = registry
        self.converter = converter or ParameterConverter()
        self.resolver = resolver or TargetResolver(object_space)
        self._observers: List[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        """Register *observer* unless this exact object is already registered.

        Each ``obj.method`` access builds a new bound method, so keep the
        reference you add if you want to add it again or remove it later.
        """
        if observer is None or any(entry is observer for entry in self._observers):
            return
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        self._observers = [entry for entry in self._observers if entry is not observer]

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def execute(self, line: Optional[str]) -> CommandResult:
        started = time.perf_counter()
        try:
            result = self._run(line, started)
        except Exception as exc:
            LOGGER.exception("command pipeline failed")
            result = CommandResult.error(
                f"command failed: {exc}",
                kind=ErrorKind.INVOCATION_FAULT,
                exception=exc,
                execution_time=_elapsed(started),
            )
        self._notify(result)
        return result

    def _run(self, line: Optional[str], started: float) -> CommandResult:
        if not line or not line.strip():
            return CommandResult.error("empty command", kind=ErrorKind.EMPTY_INPUT, execution_time=_elapsed(started))
        tokens = split_command(line)
        if not tokens:
            return CommandResult.error("empty command", kind=ErrorKind.EMPTY_INPUT, execution_time=_elapsed(started))
        name = tokens[0].lower()
        command = self.registry.get(name)
        if command is None:
            return self._unknown(name, started)
        return self._invoke(command, tokens[1:], started)

    def _unknown(self, name: str, started: float) -> CommandResult:
        suggestions = tuple(self.registry.suggestions(name)[:MAX_SUGGESTIONS])
        if not suggestions:
            suggestions = tuple(self.registry.close_matches(name, MAX_SUGGESTIONS))
        message = f"unknown command '{name}'"
        if suggestions:
            message += f". Did you mean: {', '.join(suggestions)}?"
        return CommandResult.error(
            message,
            kind=ErrorKind.UNKNOWN_COMMAND,
            command=name,
            suggestions=suggestions,
            execution_time=_elapsed(started),
        )

    def _invoke(self, command: Command, args: List[str], started: float) -> CommandResult:
        target = self.resolver.resolve(command, args)
        if target is not None:
            args = args[1:]
        try:
            params = self.converter.convert(command.signature, args)
        except ConversionError as exc:
            return CommandResult.error(
                f"invalid argument for '{command.name}': {exc}",
                kind=ErrorKind.CONVERSION,
                exception=exc,
                command=command.name,
                execution_time=_elapsed(started),
            )
        if not command.can_execute(target):
            return CommandResult.error(
                f"command '{command.name}' cannot execute with current target",
                kind=ErrorKind.TARGET_DENIED,
                command=command.name,
                execution_time=_elapsed(started),
            )
        try:
            ok = command.execute(target, params)
        except Exception as exc:
            LOGGER.debug("command '%s' raised", command.name, exc_info=True)
            return CommandResult.error(
                f"error in command '{command.name}': {exc}",
                kind=ErrorKind.INVOCATION_FAULT,
                exception=exc,
                command=command.name,
                execution_time=_elapsed(started),
            )
        if ok:
            return CommandResult.success(
                f"command '{command.name}' executed successfully",
                command=command.name,
                execution_time=_elapsed(started),
            )
        return CommandResult.error(
            f"command '{command.name}' failed",
            command=command.name,
            execution_time=_elapsed(started),
        )

    def _notify(self, result: CommandResult) -> None:
        for observer in list(self._observers):
            try:
                notify(observer, result)
            except Exception:
                LOGGER.exception("observer %r failed", observer)


def _elapsed(started: float) -> timedelta:
    return timedelta(seconds=time.perf_counter() - started)


__all__ = ["CommandExecutor", "MAX_SUGGESTIONS"]
