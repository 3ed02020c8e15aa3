"""Config – 12-factor settings and loaders."""

from remote_flags.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FeatureFlagSettings,
    Settings,
    SettingsLoader,
)
from remote_flags.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeatureFlagSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
