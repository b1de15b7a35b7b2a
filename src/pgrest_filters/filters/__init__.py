"""Filters – operands, operations and the PostgREST query-fragment codec."""
from pgrest_filters.filters.choices import ChoiceSet
from pgrest_filters.filters.codec import fragment_column, parse, parse_fragment, serialize
from pgrest_filters.filters.operand import (
    Date,
    Float,
    Int,
    Operand,
    Text,
    Time,
    constructor_of,
    operand_for,
    raw_value,
    update_value,
)
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
    change_operator,
    check_null,
    default_operation,
    is_legal,
    legal_operations,
    operand_of,
    restore,
    to_future,
    to_past,
    uncheck_null,
    with_bounds,
    with_operand,
)

__all__ = [
    "Between",
    "ChoiceSet",
    "Contains",
    "Date",
    "EndsWith",
    "Equals",
    "Filter",
    "Float",
    "GreaterOrEqual",
    "GreaterThan",
    "InDate",
    "Int",
    "IsFalse",
    "IsInTheFuture",
    "IsInThePast",
    "IsNull",
    "IsTrue",
    "LesserOrEqual",
    "LesserThan",
    "NoneOf",
    "OneOf",
    "Operand",
    "Operation",
    "StartsWith",
    "Text",
    "Time",
    "change_operator",
    "check_null",
    "constructor_of",
    "default_operation",
    "fragment_column",
    "is_legal",
    "legal_operations",
    "operand_for",
    "operand_of",
    "parse",
    "parse_fragment",
    "raw_value",
    "restore",
    "serialize",
    "to_future",
    "to_past",
    "uncheck_null",
    "update_value",
    "with_bounds",
    "with_operand",
]
