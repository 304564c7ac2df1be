"""Command base classes for commander."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from ..kinds import ParameterKind

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ConsoleContext
    from ..targets import TargetHandle


@dataclass
class Command:
    """Abstract command description."""

    name: str
    description: str = ""
    category: str = "General"
    signature: Sequence[ParameterKind] = field(default_factory=tuple)
    resolves_target: bool = True

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("command name must not be empty")
        self.name = self.name.strip().lower()
        self.signature = tuple(self.signature)

    def execute(self, target: Optional["TargetHandle"], args: List[Any]) -> bool:
        raise NotImplementedError("Command must implement execute()")

    def can_execute(self, target: Optional["TargetHandle"]) -> bool:
        return True

    def usage(self) -> str:
        return " ".join([self.name] + [f"<{kind.label}>" for kind in self.signature])

    def format_help(self) -> str:
        return f"{self.usage():<24} {self.description}"


class ContextCommand(Command):
    """Built-in command bound to the console context it reports through."""

    def __init__(
        self,
        ctx: "ConsoleContext",
        name: str,
        description: str,
        *,
        category: str = "General",
        signature: Sequence[ParameterKind] = (),
        resolves_target: bool = False,
    ) -> None:
        super().__init__(name, description, category=category, signature=signature, resolves_target=resolves_target)
        self.ctx = ctx


class TargetCommand(ContextCommand):
    """Built-in command that refuses to run without a resolved target."""

    def __init__(self, ctx: "ConsoleContext", name: str, description: str, **kwargs: Any) -> None:
        kwargs.setdefault("category", "Objects")
        super().__init__(ctx, name, description, resolves_target=True, **kwargs)

    def can_execute(self, target: Optional["TargetHandle"]) -> bool:
        return target is not None
