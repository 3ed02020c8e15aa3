"""Testing fakes – in-memory doubles for the flag store ports."""
from remote_flags.testing.fakes.stores import FakeOverrideStore, FakeRemoteFlagStore

__all__ = ["FakeOverrideStore", "FakeRemoteFlagStore"]
