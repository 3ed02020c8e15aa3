"""Application feature flags – FeatureFlagProvider port and cascade adapter."""
from __future__ import annotations

import abc
from typing import Any

from remote_flags.application.feature_flags.flag import RemoteFeatureFlag
from remote_flags.application.feature_flags.resolver import FeatureFlagResolver


class FeatureFlagProvider(abc.ABC):
    """Port: evaluate feature flags for a given context."""

    @abc.abstractmethod
    async def is_enabled(self, flag: RemoteFeatureFlag, context: dict[str, Any] | None = None) -> bool: ...

    @abc.abstractmethod
    async def get_variant(self, flag: RemoteFeatureFlag, context: dict[str, Any] | None = None) -> str | None: ...


class CascadingFeatureFlagProvider(FeatureFlagProvider):
    """Expose a :class:`FeatureFlagResolver` through the async provider port.

    *context* is accepted for port compatibility; the cascade does not target
    by context.
    """

    def __init__(self, resolver: FeatureFlagResolver) -> None:
        self._resolver = resolver

    async def is_enabled(
        self, flag: RemoteFeatureFlag, context: dict[str, Any] | None = None
    ) -> bool:
        return self._resolver.resolve(flag)

    async def get_variant(
        self, flag: RemoteFeatureFlag, context: dict[str, Any] | None = None
    ) -> str | None:
        return "on" if self._resolver.resolve(flag) else "off"


__all__ = ["CascadingFeatureFlagProvider", "FeatureFlagProvider"]
