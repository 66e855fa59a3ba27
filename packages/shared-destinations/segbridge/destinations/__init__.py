"""Segbridge Destinations - plugin framework for analytics destinations.

This package provides the pieces every destination adapter shares:
- Pipeline event records (identify, track) with typed property access
- Settings payload and update semantics
- DestinationPlugin base class and the host Analytics protocol
- A registry of destination implementations keyed by integration key

Example:
    from segbridge.destinations import Settings, get_registry
    import segbridge.appsflyer  # noqa: F401  (registers "AppsFlyer")

    destination = get_registry().create("AppsFlyer", appsflyer=sdk)
    destination.analytics = analytics
    destination.configure(Settings.from_dict(settings_payload))
"""

from segbridge.destinations.base import Analytics, DestinationPlugin
from segbridge.destinations.config import PluginType, Settings, UpdateType
from segbridge.destinations.events import (
    EventType,
    IdentifyEvent,
    Properties,
    PropertyValue,
    TrackEvent,
    get_number,
    get_string,
)
from segbridge.destinations.exceptions import (
    DestinationError,
    RegistrationError,
    SettingsError,
)
from segbridge.destinations.registry import DestinationRegistry, get_registry

__all__ = [
    # Base
    "Analytics",
    "DestinationPlugin",
    # Config
    "PluginType",
    "Settings",
    "UpdateType",
    # Events
    "EventType",
    "IdentifyEvent",
    "Properties",
    "PropertyValue",
    "TrackEvent",
    "get_number",
    "get_string",
    # Exceptions
    "DestinationError",
    "RegistrationError",
    "SettingsError",
    # Registry
    "DestinationRegistry",
    "get_registry",
]
