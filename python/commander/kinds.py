"""Parameter kinds and the value types they produce."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional, Tuple, Type


class Vector2(NamedTuple):
    x: float = 0.0
    y: float = 0.0


class Vector3(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Color(NamedTuple):
    """RGBA colour with channels in the 0.0-1.0 range."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def to_hex(self) -> str:
        channels = (self.r, self.g, self.b, self.a)
        return "#" + "".join(f"{round(max(0.0, min(1.0, c)) * 255):02X}" for c in channels)


class Kind(enum.Enum):
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    VECTOR2 = "vector2"
    VECTOR3 = "vector3"
    COLOR = "color"
    ENUM = "enum"
    ARRAY = "array"
    LIST = "list"
    MAP = "map"


_ARITY = {Kind.VECTOR2: 2, Kind.VECTOR3: 3}

_LABELS = {
    Kind.TEXT: "text",
    Kind.INTEGER: "number",
    Kind.DECIMAL: "decimal",
    Kind.BOOLEAN: "true/false",
    Kind.VECTOR2: "x,y",
    Kind.VECTOR3: "x,y,z",
    Kind.COLOR: "color",
}


@dataclass(frozen=True)
class ParameterKind:
    """One slot of a command signature.

    ``element`` is the item kind for arrays and lists and the value kind for
    maps; ``key`` is only set for maps; ``enum_type`` only for enums.
    """

    kind: Kind
    element: Optional["ParameterKind"] = None
    key: Optional["ParameterKind"] = None
    enum_type: Optional[Type[enum.Enum]] = None

    @property
    def arity(self) -> int:
        return _ARITY.get(self.kind, 1)

    @property
    def name(self) -> str:
        if self.kind is Kind.ENUM and self.enum_type is not None:
            return self.enum_type.__name__
        return self.kind.value

    @property
    def label(self) -> str:
        if self.kind in _LABELS:
            return _LABELS[self.kind]
        if self.kind is Kind.ENUM:
            return "|".join(member.name.lower() for member in self.enum_type or ())
        if self.kind is Kind.MAP:
            return f"{self.key.label}:{self.element.label};..."
        return f"{self.element.label},..."

    def zero(self) -> Any:
        """Value a slot receives when its tokens are missing or malformed."""
        kind = self.kind
        if kind is Kind.TEXT:
            return ""
        if kind is Kind.INTEGER:
            return 0
        if kind is Kind.DECIMAL:
            return 0.0
        if kind is Kind.BOOLEAN:
            return False
        if kind is Kind.VECTOR2:
            return Vector2()
        if kind is Kind.VECTOR3:
            return Vector3()
        if kind is Kind.COLOR:
            return Color()
        if kind is Kind.ENUM:
            return next(iter(self.enum_type)) if self.enum_type else None
        if kind is Kind.ARRAY:
            return ()
        if kind is Kind.LIST:
            return []
        return {}

    def __str__(self) -> str:
        if self.kind is Kind.ENUM:
            return f"Enum({self.name})"
        if self.kind is Kind.ARRAY:
            return f"ArrayOf({self.element})"
        if self.kind is Kind.LIST:
            return f"ListOf({self.element})"
        if self.kind is Kind.MAP:
            return f"MapOf({self.key},{self.element})"
        return self.kind.name.title()


TEXT = ParameterKind(Kind.TEXT)
INTEGER = ParameterKind(Kind.INTEGER)
DECIMAL = ParameterKind(Kind.DECIMAL)
BOOLEAN = ParameterKind(Kind.BOOLEAN)
VECTOR2 = ParameterKind(Kind.VECTOR2)
VECTOR3 = ParameterKind(Kind.VECTOR3)
COLOR = ParameterKind(Kind.COLOR)


def enum_of(enum_type: Type[enum.Enum]) -> ParameterKind:
    if not issubclass(enum_type, enum.Enum) or not len(enum_type):
        raise TypeError(f"{enum_type!r} is not a non-empty Enum")
    return ParameterKind(Kind.ENUM, enum_type=enum_type)


def array_of(element: ParameterKind) -> ParameterKind:
    return ParameterKind(Kind.ARRAY, element=element)


def list_of(element: ParameterKind) -> ParameterKind:
    return ParameterKind(Kind.LIST, element=element)


def map_of(key: ParameterKind, value: ParameterKind) -> ParameterKind:
    return ParameterKind(Kind.MAP, element=value, key=key)


Signature = Tuple[ParameterKind, ...]


__all__ = [
    "BOOLEAN",
    "COLOR",
    "Color",
    "DECIMAL",
    "INTEGER",
    "Kind",
    "ParameterKind",
    "Signature",
    "TEXT",
    "VECTOR2",
    "VECTOR3",
    "Vector2",
    "Vector3",
    "array_of",
    "enum_of",
    "list_of",
    "map_of",
]
