"""Configuration models for destination plugins."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PluginType(str, Enum):
    """Position of a plugin in the pipeline timeline."""

    BEFORE = "before"  # Runs before event processing
    ENRICHMENT = "enrichment"  # Modifies events
    DESTINATION = "destination"  # Forwards events to a vendor
    AFTER = "after"  # Runs after all destinations
    UTILITY = "utility"  # Not part of the event flow


class UpdateType(str, Enum):
    """Reason a settings update was delivered."""

    INITIAL = "initial"  # First settings payload after startup
    REFRESH = "refresh"  # Settings re-fetched later in the session


@dataclass
class Settings:
    """Settings payload delivered by the analytics pipeline.

    Example:
        settings = Settings(
            write_key="abc123",
            integrations={
                "AppsFlyer": {
                    "appsFlyerDevKey": "dev-key",
                    "appleAppID": "123456789",
                    "trackAttributionData": True,
                }
            },
        )
        settings.integration_settings("AppsFlyer")
    """

    write_key: str | None = None
    integrations: dict[str, Any] = field(default_factory=dict)
    plan: dict[str, Any] = field(default_factory=dict)

    def integration_settings(self, key: str) -> dict[str, Any] | None:
        """Return the settings mapping for one integration.

        Args:
            key: Integration key, e.g. "AppsFlyer".

        Returns:
            The integration's settings, or None if it is absent or disabled.
        """
        value = self.integrations.get(key)
        if not isinstance(value, dict):
            return None
        return value

    def has_integration(self, key: str) -> bool:
        """Return True if settings exist for the integration key."""
        return self.integration_settings(key) is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from the pipeline's settings payload.

        Raises:
            ValueError: If 'integrations' is present but not a mapping.
        """
        integrations = data.get("integrations", {})
        if not isinstance(integrations, dict):
            raise ValueError(f"Invalid integrations: {integrations!r}")

        return cls(
            write_key=data.get("writeKey"),
            integrations=integrations,
            plan=data.get("plan", {}),
        )
