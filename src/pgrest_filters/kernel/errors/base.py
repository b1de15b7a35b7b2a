"""Root error class for the pgrest-filters error hierarchy."""

from __future__ import annotations

import json
import re
from typing import Any, ClassVar

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class BaseError(Exception):
    """Root of the error hierarchy.

    Subclasses get a ``default_code`` derived from their class name
    (``ConfigError`` -> ``config_error``) unless they declare one.

    Args:
        message: Human-readable description.
        code: Machine-readable slug, overriding ``default_code``.
        detail: Extra context for logs (column, table, setting...).
        cause: Original exception that triggered this error.
    """

    default_code: ClassVar[str] = "base_error"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "default_code" not in cls.__dict__:
            cls.default_code = _snake(cls.__name__)

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


__all__ = ["BaseError"]
