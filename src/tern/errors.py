"""Tern exception hierarchy.

Rendering itself never raises; these types cover the configuration,
storage, and command-line boundaries around it.
"""


class TernError(Exception):
    """Base for all tern-specific errors."""


class ConfigurationError(TernError):
    """Raised when a ``RenderConfig`` is constructed with invalid values."""


class StoreError(TernError):
    """Raised when a key-value store is used incorrectly."""
