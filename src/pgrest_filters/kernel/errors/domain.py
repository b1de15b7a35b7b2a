"""Domain errors – schema and value invariant violations."""

from __future__ import annotations

from typing import Any

from pgrest_filters.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""


class ValidationError(DomainError):
    """A value object was constructed with data that breaks its invariants.

    ``errors`` is a list of field-level failures, e.g.
    ``[{"field": "chosen", "value": "x", "reason": "not a known choice"}]``.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
