"""Pytest fixtures for shared-destinations tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from segbridge.destinations.base import DestinationPlugin
from segbridge.destinations.config import Settings, UpdateType
from segbridge.destinations.events import IdentifyEvent, TrackEvent
from segbridge.destinations.registry import DestinationRegistry


class MockDestination(DestinationPlugin):
    """Mock destination for testing."""

    key = "Mock"

    def __init__(self, api_key: str | None = None):
        super().__init__()
        self.api_key = api_key
        self.updates: list[tuple[Settings, UpdateType]] = []
        self.tracked: list[TrackEvent] = []

    def update(self, settings: Settings, update_type: UpdateType) -> None:
        """Record settings deliveries."""
        self.updates.append((settings, update_type))

    def track(self, event: TrackEvent) -> TrackEvent | None:
        """Record tracked events."""
        self.tracked.append(event)
        return event


@pytest.fixture
def mock_destination() -> MockDestination:
    """Create a mock destination instance."""
    return MockDestination()


@pytest.fixture
def settings(sample_settings_payload) -> Settings:
    """Create pipeline settings from the sample payload."""
    return Settings.from_dict(sample_settings_payload)


@pytest.fixture
def identify_event() -> IdentifyEvent:
    """Create a test identify event."""
    return IdentifyEvent(
        user_id="u1",
        traits={"email": "jane@example.com", "firstName": "Jane", "age": 34},
    )


@pytest.fixture
def track_event() -> TrackEvent:
    """Create a test track event."""
    return TrackEvent(
        event="Order Completed",
        properties={"revenue": "9.99", "currency": "EUR", "order_id": "ORD-1"},
    )


@pytest.fixture
def fresh_registry() -> Generator[DestinationRegistry, None, None]:
    """Create a fresh registry instance for testing.

    Resets the singleton after the test.
    """
    original = DestinationRegistry._instance
    DestinationRegistry._instance = None
    registry = DestinationRegistry()
    yield registry
    DestinationRegistry._instance = original


@pytest.fixture
def mock_destination_class() -> type[MockDestination]:
    """Return the mock destination class."""
    return MockDestination
