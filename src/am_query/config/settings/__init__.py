"""Config settings – env-based configuration."""
from am_query.config.settings.base import Settings
from am_query.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from am_query.config.settings.query import (
    ALL_SENTINEL,
    DEFAULT_SETTINGS,
    USER_TYPE_ALL_SENTINEL,
    QuerySettings,
)

__all__ = [
    "ALL_SENTINEL",
    "DEFAULT_SETTINGS",
    "USER_TYPE_ALL_SENTINEL",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "QuerySettings",
    "Settings",
    "SettingsLoader",
]
