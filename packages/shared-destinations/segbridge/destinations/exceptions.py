"""Custom exceptions for destination plugins."""

from __future__ import annotations


class DestinationError(Exception):
    """Base exception for destination errors."""

    pass


class SettingsError(DestinationError):
    """Raised when integration settings fail validation."""

    pass


class RegistrationError(DestinationError):
    """Raised when a destination plugin cannot be registered or created."""

    pass
