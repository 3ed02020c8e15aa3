"""Application feature flags – in-memory override and remote stores."""

from __future__ import annotations

import threading
from collections.abc import Mapping

from remote_flags.application.feature_flags.flag import RemoteFeatureFlag
from remote_flags.application.feature_flags.stores import OverrideStore, WritableRemoteFlagStore
from remote_flags.kernel.errors import FlagNotOverridableError, OverridesDisabledError
from remote_flags.observability.logging import get_logger

_log = get_logger(__name__)


def _only_bools(
    values: Mapping[str, object], *, event: str = "remote_flag_value_ignored"
) -> dict[str, bool]:
    result: dict[str, bool] = {}
    for key, value in values.items():
        if isinstance(value, bool):
            result[str(key)] = value
        else:
            _log.warning(event, key=key, value=repr(value))
    return result


class InMemoryOverrideStore(OverrideStore):
    """Override store backed by a ``{flag_id: bool}`` dict.

    A disabled store (release builds) never reports an override and refuses
    new ones.
    """

    def __init__(self, overrides: Mapping[str, object] | None = None, *, enabled: bool = True) -> None:
        self._overrides: dict[str, bool] = _only_bools(overrides or {}, event="flag_override_value_ignored")
        self._enabled = enabled
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def overridden_value(self, flag: RemoteFeatureFlag) -> bool | None:
        if not self._enabled or not flag.can_override:
            return None
        with self._lock:
            return self._overrides.get(flag.id)

    def is_overridden(self, flag: RemoteFeatureFlag) -> bool:
        return self.overridden_value(flag) is not None

    def override(self, flag: RemoteFeatureFlag, value: bool) -> None:
        """Force *flag* to *value* until removed."""
        if not self._enabled:
            raise OverridesDisabledError()
        if not flag.can_override:
            raise FlagNotOverridableError(flag.id)
        with self._lock:
            self._overrides[flag.id] = bool(value)
            self._persist()
        _log.info("remote_flag_overridden", flag_id=flag.id, value=bool(value))

    def remove_override(self, flag: RemoteFeatureFlag) -> None:
        with self._lock:
            if self._overrides.pop(flag.id, None) is None:
                return
            self._persist()
        _log.info("remote_flag_override_removed", flag_id=flag.id)

    def clear(self) -> None:
        with self._lock:
            self._overrides.clear()
            self._persist()

    def snapshot(self) -> dict[str, bool]:
        with self._lock:
            return dict(self._overrides)

    def _persist(self) -> None:
        """Hook for durable subclasses; called with the lock held."""


class InMemoryRemoteFlagStore(WritableRemoteFlagStore):
    """Remote value cache backed by a ``{remote_key: bool}`` dict.

    Safe to refresh from a sync task while other threads resolve flags.
    """

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: dict[str, bool] = _only_bools(values or {})
        self._lock = threading.Lock()

    def value(self, remote_key: str) -> bool | None:
        with self._lock:
            return self._values.get(remote_key)

    def update(self, values: Mapping[str, object]) -> None:
        """Merge *values* into the cache."""
        cleaned = _only_bools(values)
        with self._lock:
            self._values.update(cleaned)
            self._persist()

    def replace(self, values: Mapping[str, object]) -> int:
        cleaned = _only_bools(values)
        with self._lock:
            self._values = cleaned
            self._persist()
        return len(cleaned)

    def clear(self) -> None:
        with self._lock:
            self._values = {}
            self._persist()

    def snapshot(self) -> dict[str, bool]:
        with self._lock:
            return dict(self._values)

    def _persist(self) -> None:
        """Hook for durable subclasses; called with the lock held."""


__all__ = ["InMemoryOverrideStore", "InMemoryRemoteFlagStore"]
