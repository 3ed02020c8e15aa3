"""
remote_flags – remote feature flag resolution.

Import path convention::

    from remote_flags.application.feature_flags import FeatureFlagResolver, RemoteFeatureFlag
    from remote_flags.kernel.errors import UnknownFlagError
    from remote_flags.bootstrap import build_resolver
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
