"""Command results and observer plumbing."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, Union, runtime_checkable


class CommandStatus(enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorKind(enum.Enum):
    EMPTY_INPUT = "empty_input"
    UNKNOWN_COMMAND = "unknown_command"
    TARGET_DENIED = "target_denied"
    INVOCATION_FAULT = "invocation_fault"
    CONVERSION = "conversion"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single ``CommandExecutor.execute`` call."""

    status: CommandStatus
    message: str = ""
    cause: Optional[str] = None
    exception: Optional[BaseException] = field(default=None, compare=False, repr=False)
    kind: Optional[ErrorKind] = None
    command: Optional[str] = None
    suggestions: Tuple[str, ...] = ()
    execution_time: timedelta = timedelta(0)

    @classmethod
    def success(cls, message: str = "", *, command: Optional[str] = None, execution_time: timedelta = timedelta(0)) -> "CommandResult":
        return cls(CommandStatus.SUCCESS, message, command=command, execution_time=execution_time)

    @classmethod
    def error(
        cls,
        message: str,
        *,
        kind: Optional[ErrorKind] = None,
        exception: Optional[BaseException] = None,
        command: Optional[str] = None,
        suggestions: Tuple[str, ...] = (),
        execution_time: timedelta = timedelta(0),
    ) -> "CommandResult":
        cause = str(exception) if exception is not None else None
        return cls(
            CommandStatus.ERROR,
            message,
            cause=cause,
            exception=exception,
            kind=kind,
            command=command,
            suggestions=tuple(suggestions),
            execution_time=execution_time,
        )

    @classmethod
    def warning(cls, message: str) -> "CommandResult":
        return cls(CommandStatus.WARNING, message)

    @classmethod
    def info(cls, message: str) -> "CommandResult":
        return cls(CommandStatus.INFO, message)

    @property
    def ok(self) -> bool:
        return self.status is CommandStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "status": self.status.value,
            "message": self.message,
            "execution_ms": round(self.execution_time.total_seconds() * 1000.0, 3),
        }
        if self.command:
            payload["command"] = self.command
        if self.kind is not None:
            payload["kind"] = self.kind.value
        if self.cause:
            payload["cause"] = self.cause
        if self.suggestions:
            payload["suggestions"] = list(self.suggestions)
        return payload


@runtime_checkable
class CommandObserver(Protocol):
    def on_command_executed(self, result: CommandResult) -> None:
        ...


Observer = Union[CommandObserver, Callable[[CommandResult], None]]


def notify(observer: Observer, result: CommandResult) -> None:
    handler = getattr(observer, "on_command_executed", None)
    if callable(handler):
        handler(result)
    else:
        observer(result)  # type: ignore[operator]


__all__ = [
    "CommandObserver",
    "CommandResult",
    "CommandStatus",
    "ErrorKind",
    "Observer",
    "notify",
]
