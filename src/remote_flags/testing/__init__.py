"""Testing support – fakes and property-based generators for flag stores."""

from remote_flags.testing.fakes import FakeOverrideStore, FakeRemoteFlagStore

__all__ = ["FakeOverrideStore", "FakeRemoteFlagStore"]
