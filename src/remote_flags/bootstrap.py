"""Wire catalog, stores and resolver from :class:`FeatureFlagSettings`.

Usage::

    settings = EnvSettingsLoader().load(FeatureFlagSettings)
    flags = build_resolver(settings)
    if flags.gate("blaze"):
        ...
"""
from __future__ import annotations

import dataclasses

from remote_flags.adapters.http.client import HttpxHttpClient
from remote_flags.application.feature_flags import (
    AppConfiguration,
    FeatureFlagResolver,
    FeatureGate,
    FlagCatalog,
    InMemoryOverrideStore,
    InMemoryRemoteFlagStore,
    JsonFileOverrideStore,
    JsonFileRemoteFlagStore,
    RemoteFlagQuery,
    RemoteFlagSynchronizer,
    build_remote_feature_flags,
)
from remote_flags.config.settings import FeatureFlagSettings
from remote_flags.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class FeatureFlags:
    """Everything a host application needs to gate features."""
    catalog: FlagCatalog
    override_store: InMemoryOverrideStore
    remote_store: InMemoryRemoteFlagStore
    resolver: FeatureFlagResolver
    gate: FeatureGate


def configure_logging(settings: FeatureFlagSettings) -> None:
    JsonLoggerFactory.configure(level=settings.log_level_value)


def build_resolver(settings: FeatureFlagSettings) -> FeatureFlags:
    catalog = build_remote_feature_flags(AppConfiguration(flavor=settings.app_flavor))

    override_store: InMemoryOverrideStore
    if settings.overrides_path:
        override_store = JsonFileOverrideStore(settings.overrides_path, enabled=settings.overrides_enabled)
    else:
        override_store = InMemoryOverrideStore(enabled=settings.overrides_enabled)

    remote_store: InMemoryRemoteFlagStore
    if settings.cache_path:
        remote_store = JsonFileRemoteFlagStore(settings.cache_path)
    else:
        remote_store = InMemoryRemoteFlagStore()

    resolver = FeatureFlagResolver(override_store, remote_store)
    _log.debug(
        "remote_flags_ready",
        app_flavor=settings.app_flavor,
        build_configuration=settings.build_configuration,
        overrides_enabled=settings.overrides_enabled,
        flags=len(catalog),
    )
    return FeatureFlags(
        catalog=catalog,
        override_store=override_store,
        remote_store=remote_store,
        resolver=resolver,
        gate=FeatureGate(resolver, catalog),
    )


def build_synchronizer(
    settings: FeatureFlagSettings,
    store: InMemoryRemoteFlagStore,
    client: HttpxHttpClient | None = None,
) -> RemoteFlagSynchronizer:
    """The caller owns *client* (or the one created here) and must close it."""
    client = client or HttpxHttpClient(base_url=settings.api_base_url, timeout=settings.sync_timeout)
    query = RemoteFlagQuery(
        device_id=settings.device_id,
        platform=settings.platform,
        build_number=settings.build_number,
        marketing_version=settings.marketing_version,
        identifier=settings.identifier,
    )
    return RemoteFlagSynchronizer(client, store, path=settings.sync_path, query=query)


__all__ = ["FeatureFlags", "build_resolver", "build_synchronizer", "configure_logging"]
