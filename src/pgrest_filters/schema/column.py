"""Schema – column value types consumed by the filter codec."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterator

from pgrest_filters.kernel.errors import ValidationError


class ColumnKind(str, Enum):
    """Value type of a column, as far as filtering is concerned."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    TIME = "time"
    ENUM = "enum"


@dataclasses.dataclass(frozen=True)
class Column:
    """A named column and its value type.

    ``choices`` lists the legal values of an ``ENUM`` column in display
    order and must be empty for every other kind.
    """

    name: str
    kind: ColumnKind
    choices: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("column name must not be empty")
        if self.kind is ColumnKind.ENUM and not self.choices:
            raise ValidationError(
                f"enum column '{self.name}' needs at least one choice",
                errors=[{"field": "choices", "reason": "empty"}],
            )
        if self.kind is not ColumnKind.ENUM and self.choices:
            raise ValidationError(
                f"column '{self.name}' of kind {self.kind.value} cannot declare choices",
                errors=[{"field": "choices", "reason": "unexpected"}],
            )

    @classmethod
    def enum(cls, name: str, choices: list[str] | tuple[str, ...]) -> "Column":
        # dict.fromkeys keeps first-seen order while dropping duplicates
        return cls(name, ColumnKind.ENUM, tuple(dict.fromkeys(choices)))


@dataclasses.dataclass(frozen=True)
class Table:
    """Ordered column map of one table."""

    name: str
    columns: tuple[Column, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for column in self.columns:
            if column.name in seen:
                raise ValidationError(
                    f"duplicate column '{column.name}' in table '{self.name}'",
                    detail={"table": self.name},
                    errors=[{"field": "columns", "value": column.name, "reason": "duplicate"}],
                )
            seen.add(column.name)

    @classmethod
    def of(cls, name: str, *columns: Column) -> "Table":
        return cls(name, tuple(columns))

    def column(self, name: str) -> Column | None:
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def first_column(self) -> Column | None:
        return self.columns[0] if self.columns else None

    def __contains__(self, name: object) -> bool:
        return any(column.name == name for column in self.columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)


__all__ = ["Column", "ColumnKind", "Table"]
