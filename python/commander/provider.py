"""Build commands from decorated plain functions.

Functions marked with :func:`command` carry their metadata on a
``__command__`` attribute.  :func:`collect_commands` walks modules or instances and
yields a :class:`FunctionCommand` for every marked callable, so
hosts can register them without subclassing :class:`Command`::

    @command("spawn_cube", "Create a cube", category="Debug")
    def spawn_cube(position: Vector3) -> None:
        ...

    register_all(registry, collect_commands(my_module))

When ``params`` is omitted the signature is inferred from the function's
annotations.  A function that accepts a ``target`` keyword receives the
resolved target; returning ``False`` reports failure, any other return value
counts as success.
"""

from __future__ import annotations

import enum
import inspect
import logging
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from .commands import CommandRegistry
from .commands.base import Command
from .kinds import (
    BOOLEAN,
    COLOR,
    DECIMAL,
    INTEGER,
    TEXT,
    VECTOR2,
    VECTOR3,
    Color,
    ParameterKind,
    Vector2,
    Vector3,
    array_of,
    enum_of,
    list_of,
    map_of,
)

LOGGER = logging.getLogger("commander.provider")

_SIMPLE_KINDS: Dict[Any, ParameterKind] = {
    str: TEXT,
    int: INTEGER,
    float: DECIMAL,
    bool: BOOLEAN,
    Vector2: VECTOR2,
    Vector3: VECTOR3,
    Color: COLOR,
}

TARGET_PARAMETER = "target"


@dataclass(frozen=True)
class CommandSpec:
    name: str
    description: str = ""
    category: str = "General"
    params: Optional[Sequence[ParameterKind]] = None
    requires_target: bool = False


def command(
    name: Optional[str] = None,
    description: str = "",
    *,
    category: str = "General",
    params: Optional[Sequence[ParameterKind]] = None,
    requires_target: bool = False,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Mark a function as a console command."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        func.__command__ = CommandSpec(  # type: ignore[attr-defined]
            name=(name or func.__name__).lower(),
            description=description or inspect.getdoc(func) or "",
            category=category,
            params=tuple(params) if params is not None else None,
            requires_target=requires_target,
        )
        return func

    return decorator


def kind_for_annotation(annotation: Any) -> ParameterKind:
    """Map a Python annotation onto a parameter kind."""
    if annotation in _SIMPLE_KINDS:
        return _SIMPLE_KINDS[annotation]
    if inspect.isclass(annotation) and issubclass(annotation, enum.Enum):
        return enum_of(annotation)
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return array_of(kind_for_annotation(args[0]))
    if origin is list and len(args) == 1:
        return list_of(kind_for_annotation(args[0]))
    if origin is dict and len(args) == 2:
        return map_of(kind_for_annotation(args[0]), kind_for_annotation(args[1]))
    if origin is typing.Union or origin is getattr(types, "UnionType", None):
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1:
            return kind_for_annotation(members[0])
    raise TypeError(f"no parameter kind for annotation {annotation!r}")


def infer_signature(func: Callable[..., Any]) -> List[ParameterKind]:
    hints = typing.get_type_hints(func)
    kinds: List[ParameterKind] = []
    for param in inspect.signature(func).parameters.values():
        if param.name == TARGET_PARAMETER or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.kind is param.KEYWORD_ONLY:
            continue
        kinds.append(kind_for_annotation(hints.get(param.name, str)))
    return kinds


class FunctionCommand(Command):
    """Adapts a plain function to the ``Command`` contract."""

    def __init__(self, func: Callable[..., Any], spec: CommandSpec) -> None:
        signature = spec.params if spec.params is not None else infer_signature(func)
        super().__init__(spec.name, spec.description, category=spec.category, signature=signature)
        self.func = func
        self.requires_target = spec.requires_target
        self.resolves_target = spec.requires_target or _accepts_target(func)
        self._pass_target = _accepts_target(func)

    def can_execute(self, target: Optional[Any]) -> bool:
        return target is not None or not self.requires_target

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        kwargs = {TARGET_PARAMETER: target} if self._pass_target else {}
        outcome = self.func(*args, **kwargs)
        return outcome is not False


def _accepts_target(func: Callable[..., Any]) -> bool:
    try:
        return TARGET_PARAMETER in inspect.signature(func).parameters
    except (TypeError, ValueError):
        return False


def _iter_members(source: Any) -> Iterator[Callable[..., Any]]:
    if callable(source) and hasattr(source, "__command__"):
        yield source
        return
    for attr in dir(source):
        if attr.startswith("__"):
            continue
        try:
            member = getattr(source, attr)
        except Exception as exc:
            LOGGER.debug("skipping %s.%s: %s", source, attr, exc)
            continue
        if callable(member) and isinstance(getattr(member, "__command__", None), CommandSpec):
            yield member


def collect_commands(*sources: Any) -> Iterator[Command]:
    """Yield a command for every marked function found in *sources*."""
    for source in sources:
        for func in _iter_members(source):
            try:
                yield FunctionCommand(func, func.__command__)
            except TypeError as exc:
                LOGGER.warning("cannot build command from %r: %s", func, exc)


def register_all(registry: CommandRegistry, commands: Iterable[Command]) -> int:
    count = 0
    for cmd in commands:
        registry.register(cmd)
        count += 1
    LOGGER.info("registered %d commands", count)
    return count


__all__ = [
    "CommandSpec",
    "FunctionCommand",
    "collect_commands",
    "command",
    "infer_signature",
    "kind_for_annotation",
    "register_all",
]
