"""Scene object commands."""

from __future__ import annotations

from typing import Any, List, Optional

from .base import ContextCommand, TargetCommand
from ..context import ConsoleContext
from ..kinds import COLOR, TEXT, VECTOR3
from ..output import emit_error, emit_lines, emit_result
from ..targets import SceneObject

LIST_LIMIT = 20


class ListCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext, name: str = "list", description: str = "List visible scene objects") -> None:
        super().__init__(ctx, name, description, category="Objects", signature=(TEXT,), resolves_target=False)

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        needle = (args[0] if args else "").lower()
        matches = [obj for obj in self.ctx.objects.visible() if needle in obj.name.lower()]
        self._render(matches)
        return True

    def _render(self, matches: List[SceneObject]) -> None:
        shown = matches[:LIST_LIMIT]
        lines = [obj.describe() for obj in shown] or ["(none)"]
        if len(matches) > LIST_LIMIT:
            lines.append(f"... and {len(matches) - LIST_LIMIT} more")
        emit_lines(
            self.ctx,
            "=== AVAILABLE OBJECTS ===",
            lines,
            data={"objects": [obj.to_dict() for obj in shown], "total": len(matches)},
        )


class FindCommand(ListCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "find", "Find objects by name")

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        if not args or not args[0]:
            emit_error(self.ctx, message="usage: find <search_term>")
            return False
        return super().execute(target, args)


class SpawnCommand(ContextCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(
            ctx,
            "spawn",
            "Create an object at a position",
            category="Objects",
            signature=(TEXT, VECTOR3),
            resolves_target=False,
        )

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        name, position = args
        if not name:
            emit_error(self.ctx, message="usage: spawn <name> <x,y,z>")
            return False
        if self.ctx.objects.find_exact(name) is not None:
            emit_error(self.ctx, message=f"object '{name}' already exists")
            return False
        obj = self.ctx.objects.add(SceneObject(name=name, position=position))
        emit_result(self.ctx, message=f"Spawned {obj.describe()}", data={"object": obj.to_dict()})
        return True


class DestroyCommand(TargetCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "destroy", "Remove the target object")

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        if not self.ctx.objects.remove(target):
            emit_error(self.ctx, message=f"object '{target.name}' is not in the scene")
            return False
        emit_result(self.ctx, message=f"Destroyed {target.name}", data={"destroyed": target.name})
        return True


class MoveCommand(TargetCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "move", "Move the target object to a position", signature=(VECTOR3,))

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        target.position = args[0]
        emit_result(self.ctx, message=f"Moved {target.describe()}", data={"object": target.to_dict()})
        return True


class PaintCommand(TargetCommand):
    def __init__(self, ctx: ConsoleContext) -> None:
        super().__init__(ctx, "paint", "Set the color of the target object", signature=(COLOR,))

    def execute(self, target: Optional[Any], args: List[Any]) -> bool:
        target.color = args[0]
        emit_result(
            self.ctx,
            message=f"Painted {target.name} {target.color.to_hex()}",
            data={"object": target.to_dict()},
        )
        return True
