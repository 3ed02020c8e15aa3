"""Application feature flags – RemoteFlagSynchronizer.

Fetches ``{remote_key: bool}`` from the remote configuration endpoint and
swaps it into a :class:`WritableRemoteFlagStore`. A failed sync keeps the
previous (possibly stale) cache; resolution never sees the failure.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from remote_flags.adapters.http.client import HttpxHttpClient
from remote_flags.application.feature_flags.stores import WritableRemoteFlagStore
from remote_flags.kernel.errors import InfrastructureError
from remote_flags.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class RemoteFlagQuery:
    """Device and build identity sent with each sync request."""
    device_id: str = ""
    platform: str = "ios"
    build_number: str = ""
    marketing_version: str = ""
    identifier: str = ""

    def as_params(self) -> dict[str, str]:
        return {k: v for k, v in dataclasses.asdict(self).items() if v}


class RemoteFlagSynchronizer:
    """Refresh a remote flag store from the configuration endpoint."""

    def __init__(
        self,
        client: HttpxHttpClient,
        store: WritableRemoteFlagStore,
        *,
        path: str = "/wpcom/v2/mobile/feature-flags",
        query: RemoteFlagQuery | None = None,
    ) -> None:
        self._client = client
        self._store = store
        self._path = path
        self._query = query or RemoteFlagQuery()

    async def sync(self) -> bool:
        """Return ``True`` when the store was refreshed."""
        params = self._query.as_params()
        try:
            response = await self._client.get(self._path, params=params)
            payload: Any = response.json()
        except InfrastructureError as exc:
            _log.warning("remote_flag_sync_failed", path=self._path, params=params, error=exc.to_dict())
            return False
        except ValueError as exc:
            _log.warning("remote_flag_sync_undecodable", path=self._path, error=str(exc))
            return False

        if not isinstance(payload, dict):
            _log.warning("remote_flag_sync_malformed", path=self._path, type=type(payload).__name__)
            return False

        stored = self._store.replace(payload)
        _log.info(
            "remote_flag_sync_completed", path=self._path, count=stored, dropped=len(payload) - stored
        )
        return True


__all__ = ["RemoteFlagQuery", "RemoteFlagSynchronizer"]
