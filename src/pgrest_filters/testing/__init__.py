"""Testing – property-based testing helpers."""
from pgrest_filters.testing.strategies import (
    column_name_strategy,
    column_strategy,
    filter_strategy,
    raw_operand_strategy,
)

__all__ = [
    "column_name_strategy",
    "column_strategy",
    "filter_strategy",
    "raw_operand_strategy",
]
