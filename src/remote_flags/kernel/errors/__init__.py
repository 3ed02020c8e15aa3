"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── FlagError        (flags.py)
    │       ├── UnknownFlagError
    │       ├── DuplicateFlagError
    │       ├── FlagNotOverridableError
    │       └── OverridesDisabledError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError

Flag resolution never raises any of these; they belong to catalog
construction, override management and remote sync.
"""

from remote_flags.kernel.errors.application import ApplicationError
from remote_flags.kernel.errors.base import BaseError
from remote_flags.kernel.errors.domain import DomainError
from remote_flags.kernel.errors.flags import (
    DuplicateFlagError,
    FlagError,
    FlagNotOverridableError,
    OverridesDisabledError,
    UnknownFlagError,
)
from remote_flags.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "DuplicateFlagError",
    "ExternalServiceError",
    "FlagError",
    "FlagNotOverridableError",
    "InfrastructureError",
    "OverridesDisabledError",
    "TimeoutError",
    "UnknownFlagError",
]
