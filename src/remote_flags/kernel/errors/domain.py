"""Domain errors — rule and invariant violations."""

from __future__ import annotations

from remote_flags.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


__all__ = ["DomainError"]
