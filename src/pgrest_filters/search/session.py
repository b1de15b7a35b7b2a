"""Search – the active filters of one listing view.

A session is an immutable value: every mutation returns a new session and
indices are only meaningful for the session they were read from.
"""
from __future__ import annotations

import dataclasses
from enum import Enum

from pgrest_filters.config import SearchSettings
from pgrest_filters.filters.codec import fragment_column, parse_fragment, serialize
from pgrest_filters.filters.operation import Filter, default_operation, is_legal
from pgrest_filters.observability import get_logger
from pgrest_filters.schema import Table

logger = get_logger(__name__)


class Position(str, Enum):
    PREPEND = "prepend"
    APPEND = "append"


@dataclasses.dataclass(frozen=True)
class SearchSession:
    """Ordered filters scoped to one table.

    Order is insertion order and only matters for display.
    """

    table: Table
    filters: tuple[Filter, ...] = ()

    @classmethod
    def from_query(
        cls,
        table: Table,
        query_string: str,
        settings: SearchSettings | None = None,
    ) -> "SearchSession":
        """Rebuild the session of a page from its query string.

        ``query_string`` must be in wire form (percent-encoded): every
        fragment is decoded exactly once while parsing, so a literal ``%``
        in a value has to arrive as ``%25``. Each ``&``-separated fragment
        (``and=(...)`` groups included) is parsed against ``table``;
        fragments that do not parse are dropped.
        """
        settings = settings or SearchSettings()
        ignored = set(settings.ignored_params)
        filters: list[Filter] = []
        for fragment in query_string.lstrip("?").split("&"):
            if not fragment or fragment.partition("=")[0] in ignored:
                continue
            parsed = parse_fragment(table, fragment)
            if parsed.is_none():
                logger.debug(
                    "filter_fragment_dropped",
                    table=table.name,
                    column=fragment_column(fragment),
                    fragment=fragment,
                )
            filters.extend(parsed)
        return cls(table, tuple(filters))

    def is_blank(self) -> bool:
        return not self.filters

    def __len__(self) -> int:
        return len(self.filters)

    def add_filter(self, position: Position = Position.APPEND) -> "SearchSession":
        """Insert a default filter for the table's first column."""
        column = self.table.first_column()
        if column is None:
            return self
        new = Filter.default_for(column)
        if position is Position.PREPEND:
            return dataclasses.replace(self, filters=(new, *self.filters))
        return dataclasses.replace(self, filters=(*self.filters, new))

    def remove_filter(self, index: int) -> "SearchSession":
        if not 0 <= index < len(self.filters):
            return self
        return dataclasses.replace(
            self, filters=self.filters[:index] + self.filters[index + 1:]
        )

    def update_filter(self, index: int, new_filter: Filter) -> "SearchSession":
        """Replace the filter at ``index``.

        The filter may name a different column than the one it replaces; an
        operation that column does not allow is reset to the column's default.
        """
        column = self.table.column(new_filter.column)
        if column is None or not 0 <= index < len(self.filters):
            return self
        if not is_legal(column, new_filter.operation):
            new_filter = Filter(column.name, default_operation(column))
        filters = list(self.filters)
        filters[index] = new_filter
        return dataclasses.replace(self, filters=tuple(filters))

    def to_query_params(self) -> list[str]:
        """Query fragments for every filter, in session order."""
        return [fragment for f in self.filters for fragment in serialize(f)]

    def to_query_string(self) -> str:
        return "&".join(self.to_query_params())


__all__ = ["Position", "SearchSession"]
