"""Unit tests for operands."""

from __future__ import annotations

from datetime import date, datetime

from pgrest_filters.filters import (
    Date,
    Float,
    Int,
    Text,
    Time,
    constructor_of,
    operand_for,
    raw_value,
    update_value,
)
from pgrest_filters.filters.operand import coerce, sort_key
from pgrest_filters.schema import ColumnKind


class TestOperandAccessors:
    def test_raw_value_is_unvalidated(self) -> None:
        assert raw_value(Float("12.")) == "12."

    def test_update_value_keeps_kind(self) -> None:
        updated = update_value(Int("1"), "abc")
        assert updated == Int("abc")
        assert isinstance(updated, Int)

    def test_constructor_of_builds_same_kind(self) -> None:
        make = constructor_of(Date("2021-01-01"))
        assert make("2022-02-02") == Date("2022-02-02")

    def test_kinds_are_distinct(self) -> None:
        assert Int("1") != Float("1")
        assert Text("x") != Date("x")


class TestOperandFor:
    def test_maps_scalar_kinds(self) -> None:
        assert operand_for(ColumnKind.TEXT) is Text
        assert operand_for(ColumnKind.INTEGER) is Int
        assert operand_for(ColumnKind.FLOAT) is Float
        assert operand_for(ColumnKind.DATE) is Date
        assert operand_for(ColumnKind.TIME) is Time

    def test_boolean_and_enum_have_no_operand(self) -> None:
        assert operand_for(ColumnKind.BOOLEAN) is None
        assert operand_for(ColumnKind.ENUM) is None


class TestCoerce:
    def test_typed_values(self) -> None:
        assert coerce(Int(" 18 ")) == 18
        assert coerce(Float("1.5")) == 1.5
        assert coerce(Date("2021-01-02")) == date(2021, 1, 2)
        assert coerce(Time("2021-01-02T10:30")) == datetime(2021, 1, 2, 10, 30)

    def test_invalid_values_are_none(self) -> None:
        assert coerce(Int("12.")) is None
        assert coerce(Date("2021-13-01")) is None
        assert coerce(Time("")) is None


class TestSortKey:
    def test_numeric_not_textual(self) -> None:
        assert sort_key(Int("9")) < sort_key(Int("10"))

    def test_dates(self) -> None:
        assert sort_key(Date("2020-12-31")) < sort_key(Date("2021-01-01"))

    def test_aware_and_naive_times_compare(self) -> None:
        assert sort_key(Time("2021-01-01T10:00+02:00")) < sort_key(Time("2021-01-01T09:00"))

    def test_unparseable_sorts_after_valid(self) -> None:
        assert sort_key(Int("100")) < sort_key(Int("abc"))

    def test_out_of_range_offset_falls_back_to_text(self) -> None:
        assert sort_key(Time("0001-01-01T00:00+01:00"))[0] == 1
