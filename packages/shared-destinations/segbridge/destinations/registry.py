"""Destination registry for managing available destination plugins."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from segbridge.destinations.exceptions import RegistrationError

if TYPE_CHECKING:
    from segbridge.destinations.base import DestinationPlugin

logger = logging.getLogger(__name__)


class DestinationRegistry:
    """Registry of available destination plugin implementations.

    Singleton pattern for global destination registration.

    Example:
        registry = DestinationRegistry()
        registry.register("AppsFlyer", AppsFlyerDestination)

        destination = registry.create("AppsFlyer", appsflyer=sdk)
    """

    _instance: DestinationRegistry | None = None
    _destinations: dict[str, type[DestinationPlugin]]

    def __new__(cls) -> DestinationRegistry:
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._destinations = {}
        return cls._instance

    def register(
        self,
        key: str,
        destination_class: type[DestinationPlugin],
    ) -> None:
        """Register a destination implementation.

        Args:
            key: Integration key the destination handles.
            destination_class: The destination class to use.

        Raises:
            RegistrationError: If the key is empty.
        """
        if not key:
            raise RegistrationError(f"Cannot register {destination_class.__name__} without a key")
        self._destinations[key] = destination_class
        logger.debug(f"Registered destination: {key}")

    def unregister(self, key: str) -> None:
        """Unregister a destination key."""
        if key in self._destinations:
            del self._destinations[key]

    def get(self, key: str) -> type[DestinationPlugin] | None:
        """Get a destination class by integration key.

        Returns:
            The destination class or None if not registered.
        """
        return self._destinations.get(key)

    def create(self, key: str, **kwargs: Any) -> DestinationPlugin:
        """Create a destination instance.

        Args:
            key: Integration key.
            **kwargs: Passed through to the destination constructor.

        Returns:
            Initialized destination instance.

        Raises:
            RegistrationError: If no destination is registered for the key.
        """
        destination_class = self.get(key)
        if destination_class is None:
            raise RegistrationError(f"No destination registered for key: {key}")
        return destination_class(**kwargs)

    def list_available(self) -> list[str]:
        """List all registered integration keys."""
        return list(self._destinations.keys())

    def is_registered(self, key: str) -> bool:
        """Check if an integration key is registered."""
        return key in self._destinations


# Global registry instance
_registry = DestinationRegistry()


def get_registry() -> DestinationRegistry:
    """Get the global destination registry."""
    return _registry
