"""Application feature flags – flag table, stores and the resolution cascade."""
from remote_flags.application.feature_flags.bridge import FeatureGate
from remote_flags.application.feature_flags.catalog import (
    AppConfiguration,
    FlagCatalog,
    build_remote_feature_flags,
)
from remote_flags.application.feature_flags.file_store import (
    JsonFileOverrideStore,
    JsonFileRemoteFlagStore,
)
from remote_flags.application.feature_flags.flag import OverridableFlag, RemoteFeatureFlag
from remote_flags.application.feature_flags.in_memory import (
    InMemoryOverrideStore,
    InMemoryRemoteFlagStore,
)
from remote_flags.application.feature_flags.provider import (
    CascadingFeatureFlagProvider,
    FeatureFlagProvider,
)
from remote_flags.application.feature_flags.resolver import (
    FeatureFlagResolver,
    Resolution,
    ResolutionSource,
    resolve,
)
from remote_flags.application.feature_flags.stores import (
    OverrideStore,
    RemoteFlagStore,
    WritableRemoteFlagStore,
)
from remote_flags.application.feature_flags.sync import RemoteFlagQuery, RemoteFlagSynchronizer

__all__ = [
    "AppConfiguration",
    "CascadingFeatureFlagProvider",
    "FeatureFlagProvider",
    "FeatureFlagResolver",
    "FeatureGate",
    "FlagCatalog",
    "InMemoryOverrideStore",
    "InMemoryRemoteFlagStore",
    "JsonFileOverrideStore",
    "JsonFileRemoteFlagStore",
    "OverridableFlag",
    "OverrideStore",
    "RemoteFeatureFlag",
    "RemoteFlagQuery",
    "RemoteFlagStore",
    "RemoteFlagSynchronizer",
    "Resolution",
    "ResolutionSource",
    "WritableRemoteFlagStore",
    "build_remote_feature_flags",
    "resolve",
]
