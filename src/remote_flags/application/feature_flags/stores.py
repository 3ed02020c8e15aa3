"""Application feature flags – store ports consulted during resolution.

Implementations must absorb their own failures (I/O, decoding) and report
``None``; resolution treats ``None`` as "not present" and moves on.
"""
from __future__ import annotations

import abc
from collections.abc import Mapping

from remote_flags.application.feature_flags.flag import RemoteFeatureFlag


class OverrideStore(abc.ABC):
    """Port: locally forced flag values."""

    @abc.abstractmethod
    def overridden_value(self, flag: RemoteFeatureFlag) -> bool | None: ...


class RemoteFlagStore(abc.ABC):
    """Port: last values synced from the remote configuration service."""

    @abc.abstractmethod
    def value(self, remote_key: str) -> bool | None: ...


class WritableRemoteFlagStore(RemoteFlagStore):
    """A remote store a synchronizer can refresh."""

    @abc.abstractmethod
    def replace(self, values: Mapping[str, object]) -> int:
        """Swap the whole cache for *values*; return how many entries were kept."""


__all__ = ["OverrideStore", "RemoteFlagStore", "WritableRemoteFlagStore"]
