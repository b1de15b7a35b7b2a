"""
pgrest_filters – PostgREST filter query codec.

Import path convention::

    from pgrest_filters.filters import parse, serialize
    from pgrest_filters.schema import Column, ColumnKind, Table
    from pgrest_filters.search import Position, SearchSession
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
