"""Tests for segbridge.destinations.registry."""

from __future__ import annotations

import pytest
from segbridge.destinations.exceptions import RegistrationError
from segbridge.destinations.registry import DestinationRegistry, get_registry


class TestDestinationRegistry:
    """Tests for DestinationRegistry singleton."""

    def test_singleton_pattern(self, fresh_registry) -> None:
        """Test registry is a singleton."""
        assert DestinationRegistry() is fresh_registry
        assert DestinationRegistry() is DestinationRegistry()

    def test_register_destination(self, fresh_registry, mock_destination_class) -> None:
        """Test registering a destination."""
        fresh_registry.register("Mock", mock_destination_class)

        assert fresh_registry.is_registered("Mock")

    def test_register_empty_key_raises(self, fresh_registry, mock_destination_class) -> None:
        """Test registering without a key raises RegistrationError."""
        with pytest.raises(RegistrationError) as exc_info:
            fresh_registry.register("", mock_destination_class)

        assert "MockDestination" in str(exc_info.value)

    def test_unregister_destination(self, fresh_registry, mock_destination_class) -> None:
        """Test unregistering a destination."""
        fresh_registry.register("Mock", mock_destination_class)
        fresh_registry.unregister("Mock")

        assert not fresh_registry.is_registered("Mock")

    def test_unregister_nonexistent(self, fresh_registry) -> None:
        """Test unregistering an unknown key doesn't raise."""
        fresh_registry.unregister("Unknown")

    def test_get_destination_class(self, fresh_registry, mock_destination_class) -> None:
        """Test getting a registered destination class."""
        fresh_registry.register("Mock", mock_destination_class)

        assert fresh_registry.get("Mock") is mock_destination_class

    def test_get_unregistered_returns_none(self, fresh_registry) -> None:
        """Test getting an unregistered key returns None."""
        assert fresh_registry.get("Unknown") is None

    def test_create_destination(self, fresh_registry, mock_destination_class) -> None:
        """Test creating a destination passes kwargs to the constructor."""
        fresh_registry.register("Mock", mock_destination_class)

        destination = fresh_registry.create("Mock", api_key="secret")

        assert isinstance(destination, mock_destination_class)
        assert destination.api_key == "secret"

    def test_create_unregistered_raises(self, fresh_registry) -> None:
        """Test creating an unregistered destination raises RegistrationError."""
        with pytest.raises(RegistrationError) as exc_info:
            fresh_registry.create("Unknown")

        assert "No destination registered for key" in str(exc_info.value)
        assert "Unknown" in str(exc_info.value)

    def test_list_available(self, fresh_registry, mock_destination_class) -> None:
        """Test listing registered keys."""
        assert fresh_registry.list_available() == []

        fresh_registry.register("Mock", mock_destination_class)
        fresh_registry.register("Other", mock_destination_class)

        assert sorted(fresh_registry.list_available()) == ["Mock", "Other"]


class TestGetRegistry:
    """Tests for get_registry function."""

    def test_get_registry_returns_same_instance(self) -> None:
        """Test get_registry always returns the module-level instance."""
        registry1 = get_registry()
        registry2 = get_registry()

        assert registry1 is registry2
        assert isinstance(registry1, DestinationRegistry)
