"""Kernel – framework-agnostic building blocks (Option, error hierarchy)."""

from pgrest_filters.kernel.errors import BaseError, DomainError, ValidationError
from pgrest_filters.kernel.types import NOTHING, Nothing, Option, Some

__all__ = [
    "BaseError",
    "DomainError",
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "ValidationError",
]
