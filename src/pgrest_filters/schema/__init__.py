"""Schema – column kinds and table column maps."""
from pgrest_filters.schema.column import Column, ColumnKind, Table

__all__ = ["Column", "ColumnKind", "Table"]
