"""
Pipeline event records - the payloads a destination plugin receives.

The host analytics pipeline hands destinations loosely-typed property bags.
Values are restricted to JSON scalars:
- str
- int / float
- bool
- None

Extraction helpers are explicit about the type they accept so that a
destination never silently coerces a value it does not understand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any
from uuid import uuid4

PropertyValue = str | int | float | bool | None
Properties = dict[str, PropertyValue]


class EventType(str, Enum):
    """Pipeline event types a destination can receive."""

    IDENTIFY = "identify"
    TRACK = "track"


def _check_properties(name: str, value: Any) -> Properties | None:
    """Validate a property bag from a raw payload."""
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"Invalid {name}: expected mapping, got {type(value).__name__}")
    for key, item in value.items():
        if not isinstance(key, str):
            raise ValueError(f"Invalid {name} key: {key!r}")
        if item is not None and not isinstance(item, (str, int, float, bool)):
            raise ValueError(f"Invalid {name} value for {key!r}: {type(item).__name__}")
    return dict(value)


@dataclass(frozen=True)
class IdentifyEvent:
    """
    User identification event.

    Example:
        event = IdentifyEvent(
            user_id="u1",
            traits={"email": "jane@example.com", "currencyCode": "EUR"},
        )
    """

    user_id: str | None = None
    traits: Properties | None = None
    anonymous_id: str | None = None
    message_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    event_type = EventType.IDENTIFY

    def to_dict(self) -> dict[str, Any]:
        """Convert to the pipeline's wire shape."""
        return {
            "type": self.event_type.value,
            "userId": self.user_id,
            "anonymousId": self.anonymous_id,
            "traits": dict(self.traits) if self.traits is not None else None,
            "messageId": self.message_id,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IdentifyEvent:
        """Create an IdentifyEvent from a pipeline payload.

        Raises:
            ValueError: If the payload carries non-scalar traits or a
                non-string user id.
        """
        user_id = data.get("userId")
        if user_id is not None and not isinstance(user_id, str):
            raise ValueError(f"Invalid userId: {user_id!r}")

        kwargs: dict[str, Any] = {
            "user_id": user_id,
            "traits": _check_properties("traits", data.get("traits")),
            "anonymous_id": data.get("anonymousId"),
        }
        if data.get("messageId"):
            kwargs["message_id"] = data["messageId"]
        if isinstance(data.get("timestamp"), str):
            kwargs["timestamp"] = datetime.fromisoformat(data["timestamp"])
        return cls(**kwargs)


@dataclass(frozen=True)
class TrackEvent:
    """
    Named action event.

    Example:
        event = TrackEvent(
            event="Order Completed",
            properties={"revenue": "9.99", "currency": "EUR"},
        )
    """

    event: str
    properties: Properties | None = None
    user_id: str | None = None
    anonymous_id: str | None = None
    message_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    event_type = EventType.TRACK

    def to_dict(self) -> dict[str, Any]:
        """Convert to the pipeline's wire shape."""
        return {
            "type": self.event_type.value,
            "event": self.event,
            "userId": self.user_id,
            "anonymousId": self.anonymous_id,
            "properties": dict(self.properties) if self.properties is not None else None,
            "messageId": self.message_id,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TrackEvent:
        """Create a TrackEvent from a pipeline payload.

        Raises:
            ValueError: If the event name is missing or properties are not scalars.
        """
        name = data.get("event")
        if not isinstance(name, str):
            raise ValueError("Missing required field: event")

        kwargs: dict[str, Any] = {
            "event": name,
            "properties": _check_properties("properties", data.get("properties")),
            "user_id": data.get("userId"),
            "anonymous_id": data.get("anonymousId"),
        }
        if data.get("messageId"):
            kwargs["message_id"] = data["messageId"]
        if isinstance(data.get("timestamp"), str):
            kwargs["timestamp"] = datetime.fromisoformat(data["timestamp"])
        return cls(**kwargs)


def get_string(values: dict[str, Any] | None, key: str) -> str | None:
    """Return values[key] if it is a string, else None."""
    if not values:
        return None
    value = values.get(key)
    return value if isinstance(value, str) else None


def get_number(values: dict[str, Any] | None, key: str) -> float | None:
    """Return values[key] as float if it is an int or float (bools excluded)."""
    if not values:
        return None
    value = values.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)
