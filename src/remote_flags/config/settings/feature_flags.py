"""Config settings – FeatureFlagSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from remote_flags.config.settings.base import Settings
from remote_flags.config.validation import InvalidSettingValueError

APP_FLAVORS: frozenset[str] = frozenset({"wordpress", "jetpack"})
BUILD_CONFIGURATIONS: frozenset[str] = frozenset({"debug", "alpha", "beta", "release"})


@dataclasses.dataclass
class FeatureFlagSettings(Settings):
    """Runtime configuration for flag resolution and remote sync.

    Every field maps to ``REMOTE_FLAGS_<FIELD>`` in the environment. Paths left
    unset select in-memory stores.
    """

    _prefix: ClassVar[str] = "REMOTE_FLAGS"

    app_flavor: str = "wordpress"
    build_configuration: str = "debug"
    api_base_url: str = "https://public-api.wordpress.com"
    sync_path: str = "/wpcom/v2/mobile/feature-flags"
    sync_timeout: float = 10.0
    cache_path: str | None = None
    overrides_path: str | None = None
    device_id: str = ""
    platform: str = "ios"
    build_number: str = ""
    marketing_version: str = ""
    identifier: str = ""
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.app_flavor = self.app_flavor.lower()
        self.build_configuration = self.build_configuration.lower()
        if self.app_flavor not in APP_FLAVORS:
            raise InvalidSettingValueError(
                "app_flavor", self.app_flavor, f"expected one of {sorted(APP_FLAVORS)}"
            )
        if self.build_configuration not in BUILD_CONFIGURATIONS:
            raise InvalidSettingValueError(
                "build_configuration",
                self.build_configuration,
                f"expected one of {sorted(BUILD_CONFIGURATIONS)}",
            )
        if self.sync_timeout <= 0:
            raise InvalidSettingValueError("sync_timeout", self.sync_timeout, "must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def overrides_enabled(self) -> bool:
        """Overrides are a QA tool; release builds ignore them."""
        return self.build_configuration != "release"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["APP_FLAVORS", "BUILD_CONFIGURATIONS", "FeatureFlagSettings"]
