"""HTTP adapter – async HTTP client wrapper."""
from remote_flags.adapters.http.client import HttpxHttpClient

__all__ = ["HttpxHttpClient"]
