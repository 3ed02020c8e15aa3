"""Application feature flags – RemoteFeatureFlag value object."""
from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable


@runtime_checkable
class OverridableFlag(Protocol):
    """Anything a QA override screen can list and toggle."""

    @property
    def id(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def can_override(self) -> bool: ...


@dataclasses.dataclass(frozen=True)
class RemoteFeatureFlag:
    """A build-time registered feature toggle.

    ``remote_key`` must match the key the remote configuration service uses
    for this flag.
    """

    id: str
    remote_key: str
    description: str = ""
    default_value: bool = False
    can_override: bool = True

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("RemoteFeatureFlag.id must not be empty")
        if not self.remote_key:
            raise ValueError(f"RemoteFeatureFlag {self.id!r} has an empty remote_key")


__all__ = ["OverridableFlag", "RemoteFeatureFlag"]
