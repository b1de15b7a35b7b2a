"""Shared fixtures: column maps modelled on the example admin database."""
from __future__ import annotations

import pytest

from pgrest_filters.schema import Column, ColumnKind, Table


@pytest.fixture
def products() -> Table:
    return Table.of(
        "products",
        Column("name", ColumnKind.TEXT),
        Column("price", ColumnKind.FLOAT),
        Column("stock", ColumnKind.INTEGER),
        Column("in_stock", ColumnKind.BOOLEAN),
        Column("released", ColumnKind.DATE),
        Column("created", ColumnKind.TIME),
        Column.enum("category", ["books", "music", "games"]),
    )


@pytest.fixture
def people() -> Table:
    return Table.of("people", Column("age", ColumnKind.INTEGER))


@pytest.fixture
def empty_table() -> Table:
    return Table.of("nothing")
