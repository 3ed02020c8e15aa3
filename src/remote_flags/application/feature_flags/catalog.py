"""Application feature flags – FlagCatalog and the shipped flag table."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator

from remote_flags.application.feature_flags.flag import RemoteFeatureFlag
from remote_flags.kernel.errors import DuplicateFlagError, UnknownFlagError


@dataclasses.dataclass(frozen=True)
class AppConfiguration:
    """Which app this build is; some defaults differ between the two."""

    flavor: str = "wordpress"

    @property
    def is_wordpress(self) -> bool:
        return self.flavor == "wordpress"

    @property
    def is_jetpack(self) -> bool:
        return self.flavor == "jetpack"


class FlagCatalog:
    """Ordered, immutable set of flags keyed by id.

    Ids and remote keys are unique; a collision raises
    :class:`~remote_flags.kernel.errors.DuplicateFlagError` at construction.
    """

    def __init__(self, flags: Iterable[RemoteFeatureFlag]) -> None:
        self._by_id: dict[str, RemoteFeatureFlag] = {}
        self._by_remote_key: dict[str, RemoteFeatureFlag] = {}
        for flag in flags:
            if flag.id in self._by_id:
                raise DuplicateFlagError("id", flag.id)
            if flag.remote_key in self._by_remote_key:
                raise DuplicateFlagError("remote_key", flag.remote_key)
            self._by_id[flag.id] = flag
            self._by_remote_key[flag.remote_key] = flag

    def get(self, flag_id: str) -> RemoteFeatureFlag:
        try:
            return self._by_id[flag_id]
        except KeyError:
            raise UnknownFlagError(flag_id) from None

    def by_remote_key(self, remote_key: str) -> RemoteFeatureFlag | None:
        return self._by_remote_key.get(remote_key)

    def ids(self) -> list[str]:
        return list(self._by_id)

    def remote_keys(self) -> list[str]:
        return list(self._by_remote_key)

    def __iter__(self) -> Iterator[RemoteFeatureFlag]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, RemoteFeatureFlag):
            return self._by_id.get(item.id) == item
        return item in self._by_id

    def __repr__(self) -> str:
        return f"FlagCatalog({len(self)} flags)"


def build_remote_feature_flags(app: AppConfiguration | None = None) -> FlagCatalog:
    """Return the app's shipped remote flag table for *app*'s flavour."""
    app = app or AppConfiguration()
    # (id, remote_key, description, default)
    table: list[tuple[str, str, str, bool]] = [
        ("jetpack_features_removal_phase_one", "jp_removal_one",
         "Jetpack Features Removal Phase One", False),
        ("jetpack_features_removal_phase_two", "jp_removal_two",
         "Jetpack Features Removal Phase Two", False),
        ("jetpack_features_removal_phase_three", "jp_removal_three",
         "Jetpack Features Removal Phase Three", False),
        ("jetpack_features_removal_phase_four", "jp_removal_four",
         "Jetpack Features Removal Phase Four", False),
        ("jetpack_features_removal_phase_new_users", "jp_removal_new_users",
         "Jetpack Features Removal Phase For New Users", False),
        ("jetpack_features_removal_phase_self_hosted", "jp_removal_self_hosted",
         "Jetpack Features Removal Phase For Self-Hosted Sites", False),
        ("jetpack_features_removal_static_posters", "jp_removal_static_posters",
         "Jetpack Features Removal Static Screens Phase", False),
        ("jetpack_migration_prevent_duplicate_notifications", "prevent_duplicate_notifs_remote_field",
         "Jetpack Migration prevent duplicate WordPress app notifications when Jetpack is installed", True),
        ("blaze", "blaze", "Blaze", False),
        ("blaze_manage_campaigns", "blaze_manage_campaigns", "Blaze Manage Campaigns", False),
        ("wordpress_individual_plugin_support", "wp_individual_plugin_overlay",
         "Jetpack Individual Plugin Support for WordPress", app.is_wordpress),
        ("domains_dashboard_card", "dashboard_card_domain", "Domains Dashboard Card", False),
        ("free_to_paid_plans_dashboard_card", "dashboard_card_free_to_paid_plans",
         "Free to Paid Plans Dashboard Card", False),
        ("pages_dashboard_card", "dashboard_card_pages", "Pages Dashboard Card", False),
        ("activity_log_dashboard_card", "dashboard_card_activity_log", "Activity Log Dashboard Card", False),
        ("sdk_less_google_sign_in", "google_signin_without_sdk",
         "Sign-In with Google without the Google SDK", False),
        ("blogging_prompts_social", "blogging_prompts_social_enabled",
         "Blogging Prompts Social", app.is_jetpack),
        ("site_editor_mvp", "site_editor_mvp", "Site Editor MVP", True),
        ("contact_support_chatbot", "contact_support_chatbot", "Contact Support via DocsBot", False),
        ("jetpack_social_improvements", "jetpack_social_improvements_v1",
         "Jetpack Social Improvements v1", app.is_jetpack),
    ]
    return FlagCatalog(
        RemoteFeatureFlag(id=flag_id, remote_key=key, description=desc, default_value=default)
        for flag_id, key, desc, default in table
    )


__all__ = ["AppConfiguration", "FlagCatalog", "build_remote_feature_flags"]
