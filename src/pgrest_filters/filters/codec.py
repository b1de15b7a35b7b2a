"""Filters – codec between Filter values and PostgREST query fragments.

``parse`` reads one ``key=value`` fragment (``age=gte.18``,
``name=ilike.*ann*``, ``and=(created.gte.A,created.lte.B)``) against a
column and returns ``Some(Filter)`` or ``Nothing``; it never raises.
``serialize`` turns a Filter back into its canonical fragments.

Simple fragments are matched by an ordered list of candidate matchers, the
most specific pattern first: ``ilike.*x*`` must be tried as ``Contains``
before ``StartsWith`` / ``EndsWith`` get a chance to claim it.
"""
from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Callable

from pgrest_filters.filters.choices import ChoiceSet
from pgrest_filters.filters.operand import Date, Operand, operand_for, sort_key
from pgrest_filters.filters.operation import (
    Between,
    Contains,
    EndsWith,
    Equals,
    Filter,
    GreaterOrEqual,
    GreaterThan,
    InDate,
    IsFalse,
    IsInTheFuture,
    IsInThePast,
    IsNull,
    IsTrue,
    LesserOrEqual,
    LesserThan,
    NoneOf,
    OneOf,
    Operation,
    StartsWith,
    is_legal,
)
from pgrest_filters.filters.quoting import (
    decode,
    encode,
    encode_value,
    split_top_level,
    unquote_value,
    unwrap_parens,
)
from pgrest_filters.kernel.types import NOTHING, Option, Some
from pgrest_filters.observability import get_logger
from pgrest_filters.schema import Column, ColumnKind, Table

logger = get_logger(__name__)

AND_KEY = "and"
NOW = "now"
WILDCARD = "*"
DAY_START = "T00:00"

_DAY_START_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})T00:00(?::00(?:\.0+)?)?$")

Matcher = Callable[[Column, str], Operation | None]


# ---------------------------------------------------------------------------
# Simple fragment matchers
# ---------------------------------------------------------------------------


def _operand(column: Column, raw: str) -> Operand | None:
    make = operand_for(column.kind)
    return make(raw) if make is not None else None


def _match_is(column: Column, text: str) -> Operation | None:  # noqa: ARG001
    return {"is.true": IsTrue(), "is.false": IsFalse(), "is.null": IsNull()}.get(text)


def _match_prefixed(prefix: str, variant: type) -> Matcher:
    def match(column: Column, text: str) -> Operation | None:
        if not text.startswith(prefix):
            return None
        operand = _operand(column, unquote_value(text[len(prefix):]))
        return variant(operand) if operand is not None else None

    match.__name__ = f"_match_{prefix.rstrip('.')}"
    return match


def _ilike_body(text: str) -> str | None:
    return text[len("ilike."):] if text.startswith("ilike.") else None


def _match_contains(column: Column, text: str) -> Operation | None:
    body = _ilike_body(text)
    if body is None or len(body) < 2 or not (body.startswith(WILDCARD) and body.endswith(WILDCARD)):
        return None
    operand = _operand(column, body[1:-1])
    return Contains(operand) if operand is not None else None


def _match_starts_with(column: Column, text: str) -> Operation | None:
    body = _ilike_body(text)
    if body is None or not body.endswith(WILDCARD):
        return None
    operand = _operand(column, body[:-1])
    return StartsWith(operand) if operand is not None else None


def _match_ends_with(column: Column, text: str) -> Operation | None:
    body = _ilike_body(text)
    if body is None or not body.startswith(WILDCARD):
        return None
    operand = _operand(column, body[1:])
    return EndsWith(operand) if operand is not None else None


def _match_now(column: Column, text: str) -> Operation | None:  # noqa: ARG001
    return {f"gt.{NOW}": IsInTheFuture(), f"lt.{NOW}": IsInThePast()}.get(text)


def _match_membership(prefix: str, variant: type) -> Matcher:
    def match(column: Column, text: str) -> Operation | None:
        if column.kind is not ColumnKind.ENUM or not text.startswith(prefix):
            return None
        inner = unwrap_parens(text[len(prefix):])
        if inner is None:
            return None
        items = [unquote_value(item) for item in split_top_level(inner)]
        return variant(ChoiceSet.of(column.choices, items))

    match.__name__ = f"_match_{prefix.rstrip('.').replace('.', '_')}"
    return match


# Tried in order; the first matcher returning an operation wins.
MATCHERS: tuple[Matcher, ...] = (
    _match_is,
    _match_prefixed("eq.", Equals),
    _match_contains,
    _match_starts_with,
    _match_ends_with,
    _match_now,
    _match_prefixed("lte.", LesserOrEqual),
    _match_prefixed("gte.", GreaterOrEqual),
    _match_prefixed("lt.", LesserThan),
    _match_prefixed("gt.", GreaterThan),
    _match_membership("not.in.", NoneOf),
    _match_membership("in.", OneOf),
)


# ---------------------------------------------------------------------------
# Composite (and=...) groups
# ---------------------------------------------------------------------------


def _split_legs(text: str) -> list[tuple[str, str, str]] | None:
    """``(c.gte.A,c.lte.B)`` -> ``[("c", "gte", "A"), ("c", "lte", "B")]``."""
    inner = unwrap_parens(text)
    if inner is None:
        return None
    legs: list[tuple[str, str, str]] = []
    for leg in split_top_level(inner):
        name, _, rest = leg.partition(".")
        op, dot, raw = rest.partition(".")
        if not name or not dot:
            return None
        legs.append((name, op, unquote_value(raw)))
    return legs


def _day_of(raw: str) -> date | None:
    found = _DAY_START_RE.match(raw)
    if found is None:
        return None
    try:
        return date.fromisoformat(found.group(1))
    except ValueError:
        return None


def _match_range(column: Column, legs: list[tuple[str, str, str]]) -> Operation | None:
    if len(legs) != 2 or any(name != column.name for name, _, _ in legs):
        return None
    bounds = {op: raw for _, op, raw in legs}

    if bounds.keys() == {"gte", "lte"}:
        lower, upper = _operand(column, bounds["gte"]), _operand(column, bounds["lte"])
        if lower is None or upper is None:
            return None
        lower, upper = sorted((lower, upper), key=sort_key)
        return Between(lower, upper)

    if bounds.keys() == {"gte", "lt"} and column.kind is ColumnKind.TIME:
        start, end = _day_of(bounds["gte"]), _day_of(bounds["lt"])
        if start is None or end is None:
            return None
        if end - start != timedelta(days=1):
            return None
        return InDate(Date(start.isoformat()))

    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def _split_fragment(fragment: str) -> tuple[str, str] | None:
    key, sep, value = fragment.partition("=")
    if not sep or not key:
        return None
    return decode(key), decode(value)


def parse(column: Column, fragment: str) -> Option[Filter]:
    """Parse one query fragment for ``column``.

    Returns ``Nothing`` when the fragment names another column, matches no
    known operator, or yields an operation the column's type does not allow.
    """
    split = _split_fragment(fragment)
    if split is None:
        return NOTHING
    key, text = split

    operation: Operation | None = None
    if key == AND_KEY:
        legs = _split_legs(text)
        if legs is not None:
            operation = _match_range(column, legs)
    elif key == column.name:
        for matcher in MATCHERS:
            operation = matcher(column, text)
            if operation is not None:
                break

    if operation is None or not is_legal(column, operation):
        return NOTHING
    return Some(Filter(column.name, operation))


def fragment_column(fragment: str) -> str | None:
    """Name of the column a fragment filters on, if it can be told."""
    split = _split_fragment(fragment)
    if split is None:
        return None
    key, text = split
    if key != AND_KEY:
        return key
    legs = _split_legs(text)
    return legs[0][0] if legs else None


def parse_fragment(table: Table, fragment: str) -> Option[Filter]:
    """Resolve the fragment's column against ``table`` and parse it."""
    name = fragment_column(fragment)
    column = table.column(name) if name is not None else None
    if column is None:
        return NOTHING
    return parse(column, fragment)


def _simple(column: str, expression: str) -> list[str]:
    return [f"{encode(column)}={expression}"]


def _group(column: str, *legs: tuple[str, str]) -> list[str]:
    name = encode(column)
    body = ",".join(f"{name}.{op}.{encode_value(raw, nested=True)}" for op, raw in legs)
    return [f"{AND_KEY}=({body})"]


def _members(choice_set: ChoiceSet) -> str:
    return "(" + ",".join(encode_value(c, nested=True) for c in choice_set.selected()) + ")"


def serialize(filter_: Filter) -> list[str]:
    """Render a filter as query fragments, in wire (percent-encoded) form."""
    column = filter_.column
    match filter_.operation:
        case Equals(operand=operand):
            return _simple(column, f"eq.{encode_value(operand.value)}")
        case Contains(operand=operand):
            return _simple(column, f"ilike.{WILDCARD}{encode(operand.value)}{WILDCARD}")
        case StartsWith(operand=operand):
            return _simple(column, f"ilike.{encode(operand.value)}{WILDCARD}")
        case EndsWith(operand=operand):
            return _simple(column, f"ilike.{WILDCARD}{encode(operand.value)}")
        case LesserThan(operand=operand):
            return _simple(column, f"lt.{encode_value(operand.value)}")
        case GreaterThan(operand=operand):
            return _simple(column, f"gt.{encode_value(operand.value)}")
        case LesserOrEqual(operand=operand):
            return _simple(column, f"lte.{encode_value(operand.value)}")
        case GreaterOrEqual(operand=operand):
            return _simple(column, f"gte.{encode_value(operand.value)}")
        case Between(lower=lower, upper=upper):
            return _group(column, ("gte", lower.value), ("lte", upper.value))
        case InDate(operand=operand):
            try:
                day = date.fromisoformat(operand.value.strip())
                next_day = day + timedelta(days=1)
            except (ValueError, OverflowError):
                logger.debug("in_date_not_serialized", column=column, value=operand.value)
                return []
            return _group(
                column,
                ("gte", f"{day.isoformat()}{DAY_START}"),
                ("lt", f"{next_day.isoformat()}{DAY_START}"),
            )
        case IsInTheFuture():
            return _simple(column, f"gt.{NOW}")
        case IsInThePast():
            return _simple(column, f"lt.{NOW}")
        case IsTrue():
            return _simple(column, "is.true")
        case IsFalse():
            return _simple(column, "is.false")
        case IsNull():
            return _simple(column, "is.null")
        case OneOf(choices=choice_set):
            return _simple(column, f"in.{_members(choice_set)}")
        case NoneOf(choices=choice_set):
            return _simple(column, f"not.in.{_members(choice_set)}")
    return []


__all__ = [
    "MATCHERS",
    "fragment_column",
    "parse",
    "parse_fragment",
    "serialize",
]
