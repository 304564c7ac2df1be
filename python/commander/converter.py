"""Token to value conversion driven by a command signature."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .kinds import Color, Kind, ParameterKind, Vector2, Vector3

LOGGER = logging.getLogger("commander.converter")

TRUE_WORDS = frozenset({"true", "1", "on", "yes"})
FALSE_WORDS = frozenset({"false", "0", "off", "no"})

# Unity's named colours.
NAMED_COLORS: Dict[str, Color] = {
    "red": Color(1.0, 0.0, 0.0, 1.0),
    "green": Color(0.0, 1.0, 0.0, 1.0),
    "blue": Color(0.0, 0.0, 1.0, 1.0),
    "white": Color(1.0, 1.0, 1.0, 1.0),
    "black": Color(0.0, 0.0, 0.0, 1.0),
    "yellow": Color(1.0, 0.92156863, 0.015686275, 1.0),
    "cyan": Color(0.0, 1.0, 1.0, 1.0),
    "magenta": Color(1.0, 0.0, 1.0, 1.0),
    "gray": Color(0.5, 0.5, 0.5, 1.0),
}
COLOR_SYNONYMS = {
    "grey": "gray",
    "vermelho": "red",
    "verde": "green",
    "azul": "blue",
    "branco": "white",
    "preto": "black",
    "amarelo": "yellow",
    "ciano": "cyan",
    "cinza": "gray",
}

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_VECTOR_SPLIT_RE = re.compile(r"[,;\s]+")
_ITEM_SPLIT_RE = re.compile(r"[,;]")


class ConversionError(ValueError):
    """Raised when a token cannot be read as the requested kind."""

    def __init__(self, token: str, kind: ParameterKind, reason: str = "") -> None:
        self.token = token
        self.kind = kind
        detail = f": {reason}" if reason else ""
        super().__init__(f"cannot convert {token!r} to {kind}{detail}")


def parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean {text!r}")


def parse_int(text: str) -> int:
    stripped = text.strip()
    if not _INTEGER_RE.match(stripped):
        raise ValueError(f"invalid integer {text!r}")
    return int(stripped)


def parse_decimal(text: str) -> float:
    return float(text.strip().replace(",", "."))


def parse_color(text: str) -> Color:
    lowered = text.strip().lower()
    lowered = COLOR_SYNONYMS.get(lowered, lowered)
    if lowered in NAMED_COLORS:
        return NAMED_COLORS[lowered]
    if lowered.startswith("#"):
        return _parse_hex_color(lowered)
    if lowered.startswith("(") and lowered.endswith(")"):
        return _parse_tuple_color(lowered[1:-1])
    raise ValueError(f"invalid color {text!r}")


def _parse_hex_color(text: str) -> Color:
    match = _HEX_RE.match(text)
    if not match:
        raise ValueError(f"invalid hex color {text!r}")
    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    channels = [int(digits[idx : idx + 2], 16) / 255.0 for idx in range(0, 8, 2)]
    return Color(*channels)


def _parse_tuple_color(body: str) -> Color:
    parts = [part for part in _VECTOR_SPLIT_RE.split(body) if part]
    if len(parts) not in (3, 4):
        raise ValueError(f"color tuple needs 3 or 4 components, got {len(parts)}")
    values = [parse_decimal(part) for part in parts]
    if any(value > 1.0 for value in values):
        values = [value / 255.0 for value in values]
    if len(values) == 3:
        values.append(1.0)
    return Color(*(max(0.0, min(1.0, value)) for value in values))


def _is_decimal(text: str) -> bool:
    try:
        parse_decimal(text)
    except ValueError:
        return False
    return True


def split_vector(text: str) -> List[str]:
    """Split a single-token vector such as ``1,2,3`` or ``(1;2)``."""
    body = text.strip()
    if body.startswith("(") and body.endswith(")"):
        body = body[1:-1]
    return [part for part in _VECTOR_SPLIT_RE.split(body) if part]


class ParameterConverter:
    """Build typed argument lists from tokens.

    The converter is permissive by default: a slot whose tokens are missing
    or malformed receives its kind's zero value.  With ``strict=True`` a
    malformed token raises :class:`ConversionError` instead; missing tokens
    still degrade to zero values.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._scalars: Dict[Kind, Callable[[str, ParameterKind], Any]] = {
            Kind.TEXT: lambda token, _kind: token,
            Kind.INTEGER: lambda token, _kind: parse_int(token),
            Kind.DECIMAL: lambda token, _kind: parse_decimal(token),
            Kind.BOOLEAN: lambda token, _kind: parse_bool(token),
            Kind.COLOR: lambda token, _kind: parse_color(token),
            Kind.VECTOR2: self._convert_vector_token,
            Kind.VECTOR3: self._convert_vector_token,
            Kind.ENUM: self._convert_enum,
            Kind.ARRAY: lambda token, kind: tuple(self._convert_items(token, kind)),
            Kind.LIST: self._convert_items,
            Kind.MAP: self._convert_map,
        }

    def convert(self, signature: Sequence[ParameterKind], tokens: Sequence[str]) -> List[Any]:
        values: List[Any] = []
        index = 0
        for slot, kind in enumerate(signature):
            value, consumed = self._convert_slot(slot, kind, tokens, index)
            values.append(value)
            index += consumed
        return values

    def convert_token(self, token: str, kind: ParameterKind) -> Any:
        """Convert one token; raises ``ConversionError`` on failure."""
        try:
            return self._scalars[kind.kind](token, kind)
        except ConversionError:
            raise
        except (ValueError, TypeError, KeyError) as exc:
            raise ConversionError(token, kind, str(exc)) from exc

    def _convert_slot(
        self,
        slot: int,
        kind: ParameterKind,
        tokens: Sequence[str],
        index: int,
    ) -> Tuple[Any, int]:
        remaining = len(tokens) - index
        if remaining <= 0:
            return kind.zero(), 0
        width = self._slot_width(kind, tokens, index)
        if width > remaining:
            LOGGER.debug("slot %d: %s needs %d values, got %d", slot, kind, width, remaining)
            return kind.zero(), 0
        try:
            if width == 1:
                return self.convert_token(tokens[index], kind), 1
            parts = tokens[index : index + width]
            return self._build_vector(kind, parts, " ".join(parts)), width
        except ConversionError as exc:
            if self.strict:
                raise
            LOGGER.debug("slot %d degraded to zero value: %s", slot, exc)
            return kind.zero(), width

    def _slot_width(self, kind: ParameterKind, tokens: Sequence[str], index: int) -> int:
        """Number of tokens the slot reads: one, or the vector arity.

        ``n`` decimal tokens win, so ``1,5 2,5`` is two comma decimals.  A
        single token that splits into ``n`` components is read on its own.
        """
        arity = kind.arity
        if arity == 1:
            return 1
        window = tokens[index : index + arity]
        if len(window) == arity and all(_is_decimal(token) for token in window):
            return arity
        if len(split_vector(tokens[index])) >= arity:
            return 1
        return arity

    def _convert_vector_token(self, token: str, kind: ParameterKind) -> Any:
        return self._build_vector(kind, split_vector(token), token)

    def _build_vector(self, kind: ParameterKind, parts: Sequence[str], token: str) -> Any:
        if len(parts) < kind.arity:
            raise ConversionError(token, kind, f"expected {kind.arity} components")
        try:
            components = [parse_decimal(part) for part in parts[: kind.arity]]
        except ValueError as exc:
            raise ConversionError(token, kind, str(exc)) from exc
        if kind.kind is Kind.VECTOR2:
            return Vector2(*components)
        return Vector3(*components)

    def _convert_enum(self, token: str, kind: ParameterKind) -> Any:
        enum_type = kind.enum_type
        needle = token.strip().lower()
        for member in enum_type:
            if member.name.lower() == needle:
                return member
        if _INTEGER_RE.match(needle):
            return enum_type(int(needle))
        raise ValueError(f"{token!r} is not a member of {enum_type.__name__}")

    def _convert_items(self, token: str, kind: ParameterKind) -> List[Any]:
        parts = [part.strip() for part in _ITEM_SPLIT_RE.split(token)]
        return [self.convert_token(part, kind.element) for part in parts if part]

    def _convert_map(self, token: str, kind: ParameterKind) -> Dict[Any, Any]:
        result: Dict[Any, Any] = {}
        for pair in token.split(";"):
            pair = pair.strip()
            if not pair or ":" not in pair:
                continue
            raw_key, raw_value = pair.split(":", 1)
            key = self.convert_token(raw_key.strip(), kind.key)
            result[key] = self.convert_token(raw_value.strip(), kind.element)
        return result


def convert(
    signature: Sequence[ParameterKind],
    tokens: Sequence[str],
    *,
    strict: bool = False,
    converter: Optional[ParameterConverter] = None,
) -> List[Any]:
    """Module-level shortcut for :meth:`ParameterConverter.convert`."""
    return (converter or ParameterConverter(strict=strict)).convert(signature, tokens)


__all__ = [
    "ConversionError",
    "NAMED_COLORS",
    "ParameterConverter",
    "convert",
    "parse_bool",
    "parse_color",
    "parse_decimal",
    "parse_int",
    "split_vector",
]
