"""Unit tests for remote feature flags — flag table, resolver, gate, provider."""

from __future__ import annotations

import asyncio

import pytest
import structlog
from hypothesis import given
from hypothesis import strategies as st

from remote_flags.application.feature_flags import (
    AppConfiguration,
    CascadingFeatureFlagProvider,
    FeatureFlagResolver,
    FeatureGate,
    FlagCatalog,
    InMemoryOverrideStore,
    InMemoryRemoteFlagStore,
    OverridableFlag,
    RemoteFeatureFlag,
    ResolutionSource,
    build_remote_feature_flags,
    resolve,
)
from remote_flags.kernel.errors import DuplicateFlagError, UnknownFlagError
from remote_flags.testing.fakes import FakeOverrideStore, FakeRemoteFlagStore
from remote_flags.testing.generators import flag_catalog_strategy, remote_flag_strategy


def _flag(
    flag_id: str = "my_flag",
    remote_key: str = "my_flag_remote",
    default: bool = False,
    can_override: bool = True,
) -> RemoteFeatureFlag:
    return RemoteFeatureFlag(
        id=flag_id,
        remote_key=remote_key,
        description="My flag",
        default_value=default,
        can_override=can_override,
    )


# ---------------------------------------------------------------------------
# RemoteFeatureFlag value object
# ---------------------------------------------------------------------------


class TestRemoteFeatureFlag:
    def test_frozen(self) -> None:
        flag = _flag()
        with pytest.raises((AttributeError, TypeError)):
            flag.remote_key = "other"  # type: ignore[misc]

    def test_defaults(self) -> None:
        flag = RemoteFeatureFlag(id="x", remote_key="x_key")
        assert flag.default_value is False
        assert flag.description == ""
        assert flag.can_override is True

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError):
            RemoteFeatureFlag(id="", remote_key="k")

    def test_empty_remote_key_rejected(self) -> None:
        with pytest.raises(ValueError):
            RemoteFeatureFlag(id="x", remote_key="")

    def test_satisfies_overridable_protocol(self) -> None:
        assert isinstance(_flag(), OverridableFlag)


# ---------------------------------------------------------------------------
# FlagCatalog
# ---------------------------------------------------------------------------


class TestFlagCatalog:
    def test_preserves_order(self) -> None:
        catalog = FlagCatalog([_flag("b", "kb"), _flag("a", "ka")])
        assert catalog.ids() == ["b", "a"]
        assert catalog.remote_keys() == ["kb", "ka"]

    def test_get_and_lookup_by_remote_key(self) -> None:
        flag = _flag("a", "ka")
        catalog = FlagCatalog([flag])
        assert catalog.get("a") is flag
        assert catalog.by_remote_key("ka") is flag
        assert catalog.by_remote_key("missing") is None

    def test_unknown_id_raises(self) -> None:
        with pytest.raises(UnknownFlagError) as exc_info:
            FlagCatalog([]).get("nope")
        assert exc_info.value.flag_id == "nope"

    def test_duplicate_id_rejected(self) -> None:
        with pytest.raises(DuplicateFlagError) as exc_info:
            FlagCatalog([_flag("a", "k1"), _flag("a", "k2")])
        assert exc_info.value.attribute == "id"

    def test_duplicate_remote_key_rejected(self) -> None:
        with pytest.raises(DuplicateFlagError) as exc_info:
            FlagCatalog([_flag("a", "k"), _flag("b", "k")])
        assert exc_info.value.attribute == "remote_key"
        assert exc_info.value.value == "k"

    def test_contains_by_id_and_instance(self) -> None:
        flag = _flag("a", "ka")
        catalog = FlagCatalog([flag])
        assert "a" in catalog
        assert flag in catalog
        assert _flag("a", "other") not in catalog
        assert len(catalog) == 1


class TestShippedFlags:
    def test_twenty_flags(self) -> None:
        assert len(build_remote_feature_flags()) == 20

    def test_remote_keys_are_unique(self) -> None:
        keys = build_remote_feature_flags().remote_keys()
        assert len(keys) == len(set(keys))

    def test_known_entries(self) -> None:
        catalog = build_remote_feature_flags()
        assert catalog.get("blaze").remote_key == "blaze"
        dup = catalog.get("jetpack_migration_prevent_duplicate_notifications")
        assert dup.remote_key == "prevent_duplicate_notifs_remote_field"
        assert dup.default_value is True
        assert catalog.get("site_editor_mvp").default_value is True
        assert catalog.get("contact_support_chatbot").description == "Contact Support via DocsBot"

    def test_wordpress_flavor_defaults(self) -> None:
        catalog = build_remote_feature_flags(AppConfiguration(flavor="wordpress"))
        assert catalog.get("wordpress_individual_plugin_support").default_value is True
        assert catalog.get("blogging_prompts_social").default_value is False
        assert catalog.get("jetpack_social_improvements").default_value is False

    def test_jetpack_flavor_defaults(self) -> None:
        catalog = build_remote_feature_flags(AppConfiguration(flavor="jetpack"))
        assert catalog.get("wordpress_individual_plugin_support").default_value is False
        assert catalog.get("blogging_prompts_social").default_value is True
        assert catalog.get("jetpack_social_improvements").default_value is True


# ---------------------------------------------------------------------------
# FeatureFlagResolver
# ---------------------------------------------------------------------------


class TestFeatureFlagResolver:
    def test_scenario_remote_value_beats_default(self) -> None:
        flag = _flag(default=False)
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore().enable(flag))
        assert resolver.resolve(flag) is True

    def test_scenario_override_beats_remote_and_default(self) -> None:
        flag = _flag(default=True)
        resolver = FeatureFlagResolver(
            FakeOverrideStore().disable(flag), FakeRemoteFlagStore().enable(flag)
        )
        assert resolver.resolve(flag) is False

    def test_scenario_default_when_nothing_cached(self) -> None:
        flag = _flag(default=True)
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore())
        assert resolver.resolve(flag) is True

    def test_remote_store_queried_by_remote_key(self) -> None:
        flag = _flag("a", "a_remote")
        remote = FakeRemoteFlagStore()
        FeatureFlagResolver(FakeOverrideStore(), remote).resolve(flag)
        assert remote.calls == ["a_remote"]

    def test_remote_store_not_queried_when_overridden(self) -> None:
        flag = _flag()
        remote = FakeRemoteFlagStore()
        FeatureFlagResolver(FakeOverrideStore().enable(flag), remote).resolve(flag)
        assert remote.calls == []

    def test_resolve_with_source(self) -> None:
        flag = _flag()
        overrides = FakeOverrideStore()
        remote = FakeRemoteFlagStore()
        resolver = FeatureFlagResolver(overrides, remote)

        assert resolver.resolve_with_source(flag).source is ResolutionSource.DEFAULT
        remote.disable(flag)
        assert resolver.resolve_with_source(flag).source is ResolutionSource.REMOTE
        overrides.enable(flag)
        resolution = resolver.resolve_with_source(flag)
        assert resolution.source is ResolutionSource.OVERRIDE
        assert resolution.enabled is True
        assert resolution.flag is flag

    def test_default_fallthrough_is_logged_every_call(self) -> None:
        flag = _flag("quiet", "quiet_key")
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore())
        with structlog.testing.capture_logs() as logs:
            resolver.resolve(flag)
            resolver.resolve(flag)
        events = [e for e in logs if e["event"] == "remote_flag_default_used"]
        assert len(events) == 2
        assert events[0]["flag_id"] == "quiet"
        assert events[0]["log_level"] == "info"

    def test_no_log_when_remote_answers(self) -> None:
        flag = _flag()
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore().enable(flag))
        with structlog.testing.capture_logs() as logs:
            resolver.resolve(flag)
        assert logs == []

    def test_original_value_ignores_override(self) -> None:
        flag = _flag(default=False)
        overrides = FakeOverrideStore().disable(flag)
        remote = FakeRemoteFlagStore()
        resolver = FeatureFlagResolver(overrides, remote)
        assert resolver.original_value(flag) is False
        remote.enable(flag)
        assert resolver.original_value(flag) is True
        assert resolver.resolve(flag) is False
        assert overrides.calls == ["my_flag"]

    def test_disabled_override_store_falls_through(self) -> None:
        flag = _flag(default=False)
        overrides = InMemoryOverrideStore({"my_flag": True}, enabled=False)
        resolver = FeatureFlagResolver(overrides, InMemoryRemoteFlagStore())
        assert resolver.resolve(flag) is False

    def test_snapshot(self) -> None:
        catalog = FlagCatalog([_flag("a", "ka", default=True), _flag("b", "kb")])
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore({"kb": True}))
        assert resolver.snapshot(catalog) == {"a": True, "b": True}

    def test_module_level_resolve(self) -> None:
        flag = _flag(default=False)
        assert resolve(flag, FakeOverrideStore(), FakeRemoteFlagStore().enable(flag)) is True


class TestResolverProperties:
    @given(flag=remote_flag_strategy(), override=st.booleans(), remote=st.one_of(st.none(), st.booleans()))
    def test_override_always_wins(self, flag: RemoteFeatureFlag, override: bool, remote: bool | None) -> None:
        overrides = FakeOverrideStore().enable(flag) if override else FakeOverrideStore().disable(flag)
        remote_store = FakeRemoteFlagStore({} if remote is None else {flag.remote_key: remote})
        assert FeatureFlagResolver(overrides, remote_store).resolve(flag) is override

    @given(flag=remote_flag_strategy(), remote=st.booleans())
    def test_remote_wins_without_override(self, flag: RemoteFeatureFlag, remote: bool) -> None:
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore({flag.remote_key: remote}))
        assert resolver.resolve(flag) is remote

    @given(flag=remote_flag_strategy())
    def test_default_when_both_absent(self, flag: RemoteFeatureFlag) -> None:
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore())
        assert resolver.resolve(flag) is flag.default_value

    @given(catalog=flag_catalog_strategy(), cached=st.dictionaries(st.text(max_size=10), st.booleans()))
    def test_idempotent(self, catalog: FlagCatalog, cached: dict[str, bool]) -> None:
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore(cached))
        assert resolver.snapshot(catalog) == resolver.snapshot(catalog)

    @given(catalog=flag_catalog_strategy())
    def test_generated_catalogs_have_unique_remote_keys(self, catalog: FlagCatalog) -> None:
        keys = catalog.remote_keys()
        assert len(keys) == len(set(keys))


# ---------------------------------------------------------------------------
# FeatureGate
# ---------------------------------------------------------------------------


class TestFeatureGate:
    def _gate(self, remote: dict[str, bool] | None = None) -> FeatureGate:
        catalog = build_remote_feature_flags()
        resolver = FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore(remote))
        return FeatureGate(resolver, catalog)

    def test_enabled_by_id(self) -> None:
        gate = self._gate({"blaze": True})
        assert gate.enabled("blaze") is True
        assert gate.enabled("blaze_manage_campaigns") is False

    def test_callable(self) -> None:
        assert self._gate()("site_editor_mvp") is True

    def test_unknown_id_raises(self) -> None:
        with pytest.raises(UnknownFlagError):
            self._gate().enabled("not_a_flag")


# ---------------------------------------------------------------------------
# CascadingFeatureFlagProvider
# ---------------------------------------------------------------------------


class TestCascadingFeatureFlagProvider:
    def test_is_enabled_uses_cascade(self) -> None:
        flag = _flag(default=False)
        provider = CascadingFeatureFlagProvider(
            FeatureFlagResolver(FakeOverrideStore(), FakeRemoteFlagStore().enable(flag))
        )
        assert asyncio.run(provider.is_enabled(flag, {"user": "u1"})) is True

    def test_variant_on_off(self) -> None:
        flag = _flag(default=False)
        overrides = FakeOverrideStore()
        provider = CascadingFeatureFlagProvider(FeatureFlagResolver(overrides, FakeRemoteFlagStore()))
        assert asyncio.run(provider.get_variant(flag)) == "off"
        overrides.enable(flag)
        assert asyncio.run(provider.get_variant(flag)) == "on"


# ---------------------------------------------------------------------------
# Public surface smoke test
# ---------------------------------------------------------------------------


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("remote_flags.application.feature_flags")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing"
