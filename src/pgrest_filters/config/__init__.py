"""Config – search settings, env/dotenv loaders and config errors."""

from pgrest_filters.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from pgrest_filters.config.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)
from pgrest_filters.config.settings import DEFAULT_IGNORED_PARAMS, SearchSettings, Settings

__all__ = [
    "ConfigError",
    "DEFAULT_IGNORED_PARAMS",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchSettings",
    "Settings",
    "SettingsLoader",
]
