"""Testing generators – hypothesis strategies for flags and catalogs."""
from remote_flags.testing.generators.strategies import (
    flag_catalog_strategy,
    remote_flag_strategy,
)

__all__ = ["flag_catalog_strategy", "remote_flag_strategy"]
