"""Filters – Operand tagged union.

An operand keeps the raw string the user typed (or that was decoded from a
URL) without validating it, so partial input such as ``"12."`` survives a
round trip.  The variant records how the string is meant to be read.
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, date, datetime
from typing import Any, Callable

from pgrest_filters.schema import ColumnKind


@dataclasses.dataclass(frozen=True)
class Text:
    value: str = ""


@dataclasses.dataclass(frozen=True)
class Int:
    value: str = ""


@dataclasses.dataclass(frozen=True)
class Float:
    value: str = ""


@dataclasses.dataclass(frozen=True)
class Date:
    value: str = ""


@dataclasses.dataclass(frozen=True)
class Time:
    value: str = ""


type Operand = Text | Int | Float | Date | Time

OPERAND_TYPES: tuple[type, ...] = (Text, Int, Float, Date, Time)

_BY_KIND: dict[ColumnKind, Callable[[str], Operand]] = {
    ColumnKind.TEXT: Text,
    ColumnKind.INTEGER: Int,
    ColumnKind.FLOAT: Float,
    ColumnKind.DATE: Date,
    ColumnKind.TIME: Time,
}


def raw_value(operand: Operand) -> str:
    return operand.value


def update_value(operand: Operand, raw: str) -> Operand:
    """Replace the raw string; the operand kind is preserved."""
    return dataclasses.replace(operand, value=raw)


def constructor_of(operand: Operand) -> Callable[[str], Operand]:
    """Return a callable building a same-kind operand from a new raw string."""
    return type(operand)


def operand_for(kind: ColumnKind) -> Callable[[str], Operand] | None:
    """Operand constructor for a column kind (``None`` for boolean/enum)."""
    return _BY_KIND.get(kind)


def coerce(operand: Operand) -> Any | None:
    """Interpret the raw string, or ``None`` when it does not parse."""
    raw = operand.value.strip()
    try:
        match operand:
            case Int():
                return int(raw)
            case Float():
                return float(raw)
            case Date():
                return date.fromisoformat(raw)
            case Time():
                return datetime.fromisoformat(raw)
            case Text():
                return operand.value
    except ValueError:
        return None
    return None


def sort_key(operand: Operand) -> tuple[int, Any]:
    """Semantic ordering key for range bounds.

    Coercible values compare by their typed value and sort before values that
    only compare textually.
    """
    typed = None if isinstance(operand, Text) else coerce(operand)
    if typed is None:
        return (1, operand.value)
    if isinstance(typed, datetime) and typed.tzinfo is not None:
        # keep naive and aware timestamps comparable
        try:
            typed = typed.astimezone(UTC).replace(tzinfo=None)
        except OverflowError:
            return (1, operand.value)
    return (0, typed)


__all__ = [
    "Date",
    "Float",
    "Int",
    "OPERAND_TYPES",
    "Operand",
    "Text",
    "Time",
    "coerce",
    "constructor_of",
    "operand_for",
    "raw_value",
    "sort_key",
    "update_value",
]
