"""Kernel – framework-agnostic building blocks."""

from remote_flags.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    FlagError,
    InfrastructureError,
    UnknownFlagError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "FlagError",
    "InfrastructureError",
    "UnknownFlagError",
]
