"""Adapters – infrastructure bindings for the application ports."""
