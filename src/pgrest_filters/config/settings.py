"""Config – Settings base class and the search settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from pgrest_filters.config.errors import InvalidSettingValueError

# PostgREST query parameters that are not row filters.
DEFAULT_IGNORED_PARAMS: tuple[str, ...] = (
    "select",
    "order",
    "limit",
    "offset",
    "on_conflict",
    "columns",
)


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class SearchSettings(Settings):
    """Settings consumed by :class:`~pgrest_filters.search.SearchSession`.

    ``ignored_params`` names query-string keys that are skipped silently when
    a session is rebuilt from a URL (ordering, paging, column selection).
    """

    _prefix: ClassVar[str] = "PGREST_FILTERS"

    ignored_params: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_IGNORED_PARAMS)
    )
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "not a logging level name"
            )

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["DEFAULT_IGNORED_PARAMS", "SearchSettings", "Settings"]
