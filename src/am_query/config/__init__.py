"""Config – query defaults, sentinels, and their loaders."""

from am_query.config.settings import (
    ALL_SENTINEL,
    DEFAULT_SETTINGS,
    USER_TYPE_ALL_SENTINEL,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    QuerySettings,
    Settings,
    SettingsLoader,
)
from am_query.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ALL_SENTINEL",
    "DEFAULT_SETTINGS",
    "USER_TYPE_ALL_SENTINEL",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettings",
    "Settings",
    "SettingsLoader",
]
