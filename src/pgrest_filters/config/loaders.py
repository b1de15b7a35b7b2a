"""Config – build settings objects from the environment or a ``.env`` file.

Field ``ignored_params`` of a class with ``_prefix = "PGREST_FILTERS"`` is
read from ``PGREST_FILTERS_IGNORED_PARAMS``. Values are coerced from the
field's annotation; list fields are comma separated.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

from dotenv import dotenv_values

from pgrest_filters.config.errors import ConfigError, MissingRequiredSettingError
from pgrest_filters.config.settings import Settings

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_key(settings_class: type[Settings], field_name: str) -> str:
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper().lstrip("_")


def coerce_env_value(raw: str, annotation: Any) -> Any:
    """Turn one environment string into a value of ``annotation``."""
    if annotation is bool:
        return raw.strip().lower() in _TRUTHY
    if annotation in (int, float):
        return annotation(raw)
    origin = typing.get_origin(annotation)
    if origin in (list, tuple):
        items = [item.strip() for item in raw.split(",") if item.strip()]
        return items if origin is list else tuple(items)
    return raw


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read settings from ``environ`` (``os.environ`` at load time by default)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            raw = environ.get(key)
            if raw is not None:
                kwargs[field.name] = self._read(key, raw, hints.get(field.name, str))
            elif (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(key)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    @staticmethod
    def _read(key: str, raw: str, annotation: Any) -> Any:
        try:
            return coerce_env_value(raw, annotation)
        except ValueError as exc:
            raise ConfigError(
                f"Cannot read {key}={raw!r}", detail={"setting": key}, cause=exc
            ) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Layer a ``.env`` file under (or, with ``override``, over) ``os.environ``.

    The file is read with ``dotenv_values``; the process environment is
    left untouched.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            environ = {**os.environ, **from_file}
        else:
            environ = {**from_file, **os.environ}
        return EnvSettingsLoader(environ).load(settings_class)


__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SettingsLoader",
    "coerce_env_value",
    "env_key",
]
