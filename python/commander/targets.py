"""Target handles, object spaces and target resolution."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional, Protocol, Sequence

from .converter import parse_color
from .kinds import Color, Vector3

if TYPE_CHECKING:  # pragma: no cover
    from .commands.base import Command

LOGGER = logging.getLogger("commander.targets")

HIDDEN_KINDS = frozenset({"camera", "console"})


class TargetHandle(Protocol):
    name: str


class ObjectSpace(Protocol):
    """Live collection of objects that commands can act upon."""

    def find_exact(self, name: str) -> Optional[TargetHandle]:
        ...

    def find_matching(self, fragment: str) -> Iterable[TargetHandle]:
        """Handles whose name contains *fragment*, ignoring case."""
        ...

    def visible(self) -> Iterable[TargetHandle]:
        """Handles eligible for listing and autocomplete."""
        ...


@dataclass
class SceneObject:
    name: str
    position: Vector3 = field(default_factory=Vector3)
    color: Color = field(default_factory=Color)
    active: bool = True
    kind: str = "object"

    @property
    def visible(self) -> bool:
        return self.active and not self.name.startswith("UI") and self.kind not in HIDDEN_KINDS

    def describe(self) -> str:
        x, y, z = self.position
        return f"{self.name} [{self.kind}] at ({x:g}, {y:g}, {z:g})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "active": self.active,
            "position": list(self.position),
            "color": self.color.to_hex(),
        }


class SceneObjectSpace:
    """In-memory object space, enumerated in insertion order."""

    def __init__(self, objects: Optional[Iterable[SceneObject]] = None) -> None:
        self._objects: List[SceneObject] = list(objects or [])

    @classmethod
    def from_file(cls, path: str | Path) -> "SceneObjectSpace":
        """Load a scene from a JSON list of ``{"name": ..., "position": [x, y, z]}``."""
        data = json.loads(Path(path).expanduser().read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = data.get("objects", [])
        if not isinstance(data, list):
            raise ValueError(f"{path}: expected a list of objects")
        return cls(_object_from_entry(entry) for entry in data if isinstance(entry, dict))

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(list(self._objects))

    def __len__(self) -> int:
        return len(self._objects)

    def add(self, obj: SceneObject) -> SceneObject:
        self._objects.append(obj)
        return obj

    def remove(self, obj: SceneObject) -> bool:
        for idx, entry in enumerate(self._objects):
            if entry is obj:
                del self._objects[idx]
                return True
        return False

    def find_exact(self, name: str) -> Optional[SceneObject]:
        for obj in self._objects:
            if obj.name == name:
                return obj
        return None

    def find_matching(self, fragment: str) -> List[SceneObject]:
        needle = fragment.lower()
        return [obj for obj in self._objects if needle in obj.name.lower()]

    def visible(self) -> List[SceneObject]:
        return [obj for obj in self._objects if obj.visible]


def _object_from_entry(entry: Dict[str, Any]) -> SceneObject:
    position = entry.get("position") or (0.0, 0.0, 0.0)
    color = entry.get("color")
    obj = SceneObject(
        name=str(entry["name"]),
        position=Vector3(*(float(value) for value in list(position)[:3])),
        active=bool(entry.get("active", True)),
        kind=str(entry.get("kind", "object")),
    )
    if color:
        obj.color = parse_color(str(color))
    return obj


class TargetResolver:
    """Maps the first argument token to a handle in the object space."""

    def __init__(self, object_space: Optional[ObjectSpace] = None) -> None:
        self.object_space = object_space

    def resolve(self, command: "Command", tokens: Sequence[str]) -> Optional[TargetHandle]:
        space = self.object_space
        if not tokens or space is None:
            return None
        if not getattr(command, "resolves_target", True):
            return None
        candidate = tokens[0]
        try:
            target = space.find_exact(candidate)
            if target is None:
                target = next(iter(space.find_matching(candidate)), None)
        except Exception as exc:
            LOGGER.warning("target lookup for %r failed: %s", candidate, exc)
            return None
        if target is not None:
            LOGGER.debug("%s: resolved target %r", command.name, target.name)
        return target


__all__ = [
    "ObjectSpace",
    "SceneObject",
    "SceneObjectSpace",
    "TargetHandle",
    "TargetResolver",
]
