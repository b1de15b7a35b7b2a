"""Filters – the closed Operation taxonomy and the Filter value.

Every variant is a frozen dataclass and ``Operation`` is their union, so
code that consumes operations dispatches with ``match`` over a closed set.

``IsNull``, ``IsInTheFuture`` and ``IsInThePast`` remember the operation
that was selected before the check was switched on; switching it off again
restores that operation instead of falling back to a blank one.
"""
from __future__ import annotations

import dataclasses

from pgrest_filters.filters.choices import ChoiceSet
from pgrest_filters.filters.operand import Date, Operand, operand_for, update_value
from pgrest_filters.schema import Column, ColumnKind


@dataclasses.dataclass(frozen=True)
class Equals:
    operand: Operand


@dataclasses.dataclass(frozen=True)
class Contains:
    operand: Operand


@dataclasses.dataclass(frozen=True)
class StartsWith:
    operand: Operand


@dataclasses.dataclass(frozen=True)
class EndsWith:
    operand: Operand


@dataclasses.dataclass(frozen=True)
class LesserThan:
    operand: Operand


@dataclasses.dataclass(frozen=True)
class GreaterThan:
    operand: Operand


@dataclasses.dataclass(frozen=True)
class LesserOrEqual:
    operand: Operand


@dataclasses.dataclass(frozen=True)
class GreaterOrEqual:
    operand: Operand


@dataclasses.dataclass(frozen=True)
class Between:
    """Inclusive range; the codec always stores the smaller bound first."""

    lower: Operand
    upper: Operand


@dataclasses.dataclass(frozen=True)
class InDate:
    """Any timestamp on the given calendar day."""

    operand: Date


@dataclasses.dataclass(frozen=True)
class IsInTheFuture:
    previous: Operation | None = None


@dataclasses.dataclass(frozen=True)
class IsInThePast:
    previous: Operation | None = None


@dataclasses.dataclass(frozen=True)
class IsTrue:
    pass


@dataclasses.dataclass(frozen=True)
class IsFalse:
    pass


@dataclasses.dataclass(frozen=True)
class IsNull:
    previous: Operation | None = None


@dataclasses.dataclass(frozen=True)
class OneOf:
    choices: ChoiceSet


@dataclasses.dataclass(frozen=True)
class NoneOf:
    choices: ChoiceSet


type Operation = (
    Equals
    | Contains
    | StartsWith
    | EndsWith
    | LesserThan
    | GreaterThan
    | LesserOrEqual
    | GreaterOrEqual
    | Between
    | InDate
    | IsInTheFuture
    | IsInThePast
    | IsTrue
    | IsFalse
    | IsNull
    | OneOf
    | NoneOf
)

SINGLE_OPERAND: tuple[type, ...] = (
    Equals,
    Contains,
    StartsWith,
    EndsWith,
    LesserThan,
    GreaterThan,
    LesserOrEqual,
    GreaterOrEqual,
)
_ORDERED = (LesserThan, GreaterThan, LesserOrEqual, GreaterOrEqual, Between)
_WRAPPERS = (IsNull, IsInTheFuture, IsInThePast)

# First entry of each row is the column's default operation.
LEGAL_OPERATIONS: dict[ColumnKind, tuple[type, ...]] = {
    ColumnKind.TEXT: (Equals, Contains, StartsWith, EndsWith, IsNull),
    ColumnKind.INTEGER: (Equals, *_ORDERED, IsNull),
    ColumnKind.FLOAT: (Equals, *_ORDERED, IsNull),
    ColumnKind.DATE: (Equals, *_ORDERED, IsInTheFuture, IsInThePast, IsNull),
    ColumnKind.TIME: (InDate, *_ORDERED, IsInTheFuture, IsInThePast, IsNull),
    ColumnKind.BOOLEAN: (IsTrue, IsFalse, IsNull),
    ColumnKind.ENUM: (OneOf, NoneOf, IsNull),
}


@dataclasses.dataclass(frozen=True)
class Filter:
    """One ``column <operation>`` predicate of a search."""

    column: str
    operation: Operation

    @classmethod
    def default_for(cls, column: Column) -> "Filter":
        return cls(column.name, default_operation(column))


def legal_operations(column: Column) -> tuple[type, ...]:
    return LEGAL_OPERATIONS[column.kind]


def default_operation(column: Column) -> Operation:
    return _build(column, legal_operations(column)[0], "")


def _build(column: Column, target: type, raw: str) -> Operation:
    make = operand_for(column.kind)
    if target in SINGLE_OPERAND and make is not None:
        return target(make(raw))
    if target is Between and make is not None:
        return Between(make(raw), make(""))
    if target is InDate:
        return InDate(Date(raw.partition("T")[0]))
    if target in (OneOf, NoneOf):
        return target(ChoiceSet(column.choices))
    return target()


def is_legal(column: Column, operation: Operation) -> bool:
    """Whether ``operation`` may be applied to ``column``.

    Checks the variant against the column kind, the operand kinds against
    the column's operand type and, recursively, any remembered operation.
    """
    if type(operation) not in legal_operations(column):
        return False
    expected = operand_for(column.kind)
    match operation:
        case Between(lower=lower, upper=upper):
            return type(lower) is expected and type(upper) is expected
        case InDate(operand=operand):
            return isinstance(operand, Date)
        case IsNull(previous=previous) | IsInTheFuture(previous=previous) | IsInThePast(previous=previous):
            return previous is None or is_legal(column, previous)
        case OneOf(choices=choice_set) | NoneOf(choices=choice_set):
            return choice_set.choices == column.choices
        case IsTrue() | IsFalse():
            return True
        case _:
            return type(operand_of(operation)) is expected


def operand_of(operation: Operation) -> Operand | None:
    """The operand a value editor should show (lower bound for ranges)."""
    match operation:
        case Between(lower=lower):
            return lower
        case InDate(operand=operand):
            return operand
        case _ if isinstance(operation, SINGLE_OPERAND):
            return operation.operand
    return None


def with_operand(operation: Operation, raw: str) -> Operation:
    """Replace the raw value of the operation's (first) operand."""
    match operation:
        case Between(lower=lower, upper=upper):
            return Between(update_value(lower, raw), upper)
        case InDate():
            return InDate(Date(raw))
        case _ if isinstance(operation, SINGLE_OPERAND):
            return dataclasses.replace(operation, operand=update_value(operation.operand, raw))
    return operation


def with_bounds(operation: Operation, lower: str, upper: str) -> Operation:
    if isinstance(operation, Between):
        return Between(update_value(operation.lower, lower), update_value(operation.upper, upper))
    return operation


def check_null(operation: Operation) -> Operation:
    if isinstance(operation, IsNull):
        return operation
    return IsNull(_unwrapped(operation))


def uncheck_null(operation: Operation, default: Operation) -> Operation:
    if isinstance(operation, IsNull):
        return operation.previous if operation.previous is not None else default
    return operation


def _unwrapped(operation: Operation) -> Operation | None:
    return operation.previous if isinstance(operation, _WRAPPERS) else operation


def to_future(operation: Operation) -> Operation:
    if isinstance(operation, IsInTheFuture):
        return operation
    return IsInTheFuture(_unwrapped(operation))


def to_past(operation: Operation) -> Operation:
    if isinstance(operation, IsInThePast):
        return operation
    return IsInThePast(_unwrapped(operation))


def restore(operation: Operation, default: Operation) -> Operation:
    """Undo a null / future / past check, falling back to ``default``."""
    if isinstance(operation, _WRAPPERS):
        return operation.previous if operation.previous is not None else default
    return operation


def change_operator(column: Column, operation: Operation, target: type) -> Operation:
    """Switch ``operation`` to another variant, keeping the typed value.

    Checks (null, future, past) wrap the current operation so they can be
    undone; an operator that is not legal for the column leaves the
    operation unchanged.
    """
    if target not in legal_operations(column) or type(operation) is target:
        return operation
    if target in _WRAPPERS:
        # a check always remembers a plain comparison, never another check
        return target(_unwrapped(operation))

    current = restore(operation, default_operation(column))
    if type(current) is target:
        return current
    if target in (OneOf, NoneOf) and isinstance(current, (OneOf, NoneOf)):
        return target(current.choices)
    operand = operand_of(current)
    return _build(column, target, operand.value if operand is not None else "")


OPERATION_TYPES: tuple[type, ...] = (
    *SINGLE_OPERAND,
    Between,
    InDate,
    IsInTheFuture,
    IsInThePast,
    IsTrue,
    IsFalse,
    IsNull,
    OneOf,
    NoneOf,
)

__all__ = [
    "Between",
    "Contains",
    "EndsWith",
    "Equals",
    "Filter",
    "GreaterOrEqual",
    "GreaterThan",
    "InDate",
    "IsFalse",
    "IsInTheFuture",
    "IsInThePast",
    "IsNull",
    "IsTrue",
    "LEGAL_OPERATIONS",
    "LesserOrEqual",
    "LesserThan",
    "NoneOf",
    "OPERATION_TYPES",
    "OneOf",
    "Operation",
    "SINGLE_OPERAND",
    "StartsWith",
    "change_operator",
    "check_null",
    "default_operation",
    "is_legal",
    "legal_operations",
    "operand_of",
    "restore",
    "to_future",
    "to_past",
    "uncheck_null",
    "with_bounds",
    "with_operand",
]
