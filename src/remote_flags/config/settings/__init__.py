"""Config settings – 12-factor env-based configuration."""
from remote_flags.config.settings.base import Settings
from remote_flags.config.settings.feature_flags import FeatureFlagSettings
from remote_flags.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeatureFlagSettings",
    "Settings",
    "SettingsLoader",
]
