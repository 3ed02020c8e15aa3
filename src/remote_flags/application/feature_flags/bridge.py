"""Application feature flags – FeatureGate, a boolean-only binding by flag id."""
from __future__ import annotations

from remote_flags.application.feature_flags.catalog import FlagCatalog
from remote_flags.application.feature_flags.resolver import FeatureFlagResolver


class FeatureGate:
    """Answer ``enabled("blaze")`` for callers that only hold flag ids.

    Usage::

        gate = FeatureGate(resolver, catalog)
        if gate("site_editor_mvp"):
            ...
    """

    def __init__(self, resolver: FeatureFlagResolver, catalog: FlagCatalog) -> None:
        self._resolver = resolver
        self._catalog = catalog

    def enabled(self, flag_id: str) -> bool:
        """Raises :class:`~remote_flags.kernel.errors.UnknownFlagError` for ids outside the catalog."""
        return self._resolver.resolve(self._catalog.get(flag_id))

    __call__ = enabled


__all__ = ["FeatureGate"]
