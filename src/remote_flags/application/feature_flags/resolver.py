"""Application feature flags – FeatureFlagResolver.

Resolution order:

1. override store (forced value, QA / staged rollout testing)
2. remote cache keyed by ``flag.remote_key`` (may be empty before first sync)
3. ``flag.default_value``

Resolution is a synchronous read of the two stores and never raises.
"""
from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable

from remote_flags.application.feature_flags.flag import RemoteFeatureFlag
from remote_flags.application.feature_flags.stores import OverrideStore, RemoteFlagStore
from remote_flags.observability.logging import get_logger

_log = get_logger(__name__)


class ResolutionSource(str, enum.Enum):
    OVERRIDE = "override"
    REMOTE = "remote"
    DEFAULT = "default"


@dataclasses.dataclass(frozen=True)
class Resolution:
    """A resolved value and the tier that produced it."""
    flag: RemoteFeatureFlag
    enabled: bool
    source: ResolutionSource


class FeatureFlagResolver:
    """Resolve flags against an override store and a remote cache."""

    def __init__(self, override_store: OverrideStore, remote_store: RemoteFlagStore) -> None:
        self._override_store = override_store
        self._remote_store = remote_store

    @property
    def override_store(self) -> OverrideStore:
        return self._override_store

    @property
    def remote_store(self) -> RemoteFlagStore:
        return self._remote_store

    def resolve(self, flag: RemoteFeatureFlag) -> bool:
        return self.resolve_with_source(flag).enabled

    def resolve_with_source(self, flag: RemoteFeatureFlag) -> Resolution:
        overridden = self._override_store.overridden_value(flag)
        if overridden is not None:
            return Resolution(flag, overridden, ResolutionSource.OVERRIDE)

        remote = self._remote_store.value(flag.remote_key)
        if remote is not None:
            return Resolution(flag, remote, ResolutionSource.REMOTE)

        _log.info(
            "remote_flag_default_used",
            flag_id=flag.id,
            remote_key=flag.remote_key,
            description=flag.description,
            default_value=flag.default_value,
        )
        return Resolution(flag, flag.default_value, ResolutionSource.DEFAULT)

    def original_value(self, flag: RemoteFeatureFlag) -> bool:
        """What *flag* resolves to with its override ignored; shown beside the toggle in QA screens."""
        remote = self._remote_store.value(flag.remote_key)
        return flag.default_value if remote is None else remote

    def snapshot(self, flags: Iterable[RemoteFeatureFlag]) -> dict[str, bool]:
        """Resolve every flag in *flags*, keyed by flag id."""
        return {flag.id: self.resolve(flag) for flag in flags}


def resolve(
    flag: RemoteFeatureFlag,
    override_store: OverrideStore,
    remote_store: RemoteFlagStore,
) -> bool:
    """One-shot resolution without holding a resolver."""
    return FeatureFlagResolver(override_store, remote_store).resolve(flag)


__all__ = ["FeatureFlagResolver", "Resolution", "ResolutionSource", "resolve"]
