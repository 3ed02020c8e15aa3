"""Feature flag errors — catalog and override misuse."""

from __future__ import annotations

from typing import Any

from remote_flags.kernel.errors.domain import DomainError


class FlagError(DomainError):
    """Base class for feature flag programming errors."""

    default_code = "flag_error"


class UnknownFlagError(FlagError):
    """A flag id is not part of the catalog."""

    default_code = "unknown_flag"

    def __init__(self, flag_id: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown feature flag '{flag_id}'", **kwargs)
        self.flag_id = flag_id


class DuplicateFlagError(FlagError):
    """Two flags in one catalog share an id or a remote key."""

    default_code = "duplicate_flag"

    def __init__(self, attribute: str, value: str, **kwargs: Any) -> None:
        super().__init__(
            f"Duplicate feature flag {attribute} '{value}'",
            detail={"attribute": attribute, "value": value},
            **kwargs,
        )
        self.attribute = attribute
        self.value = value


class FlagNotOverridableError(FlagError):
    """An override was requested for a flag that does not allow one."""

    default_code = "flag_not_overridable"

    def __init__(self, flag_id: str, **kwargs: Any) -> None:
        super().__init__(f"Feature flag '{flag_id}' cannot be overridden", **kwargs)
        self.flag_id = flag_id


class OverridesDisabledError(FlagError):
    """Overrides are switched off for this build."""

    default_code = "overrides_disabled"

    def __init__(self, message: str = "Feature flag overrides are disabled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "DuplicateFlagError",
    "FlagError",
    "FlagNotOverridableError",
    "OverridesDisabledError",
    "UnknownFlagError",
]
