"""Application – use-case building blocks (framework-agnostic)."""

from remote_flags.application.feature_flags import (
    FeatureFlagResolver,
    FeatureGate,
    FlagCatalog,
    RemoteFeatureFlag,
)

__all__ = [
    "FeatureFlagResolver",
    "FeatureGate",
    "FlagCatalog",
    "RemoteFeatureFlag",
]
