"""Errors raised while reading facetsync settings from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a setting is present but cannot be used (bad number, unknown scheme)."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a required ``FACETSYNC_*`` variable is absent or blank."""
