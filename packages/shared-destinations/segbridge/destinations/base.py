"""Base destination plugin abstract class."""

from __future__ import annotations

import logging
import weakref
from abc import ABC, abstractmethod
from typing import Any, Protocol

from segbridge.destinations.config import PluginType, Settings, UpdateType
from segbridge.destinations.events import IdentifyEvent, Properties, TrackEvent

logger = logging.getLogger(__name__)


class Analytics(Protocol):
    """The slice of the host analytics pipeline a destination may call."""

    def track(self, name: str, properties: Properties | None = None) -> Any:
        """Track a named event through the pipeline."""
        ...


class DestinationPlugin(ABC):
    """Abstract base class for destination plugins.

    Subclasses must implement:
    - update(): Apply settings delivered by the pipeline

    Subclasses must set the class attribute:
    - key: The integration key used to look up settings (e.g. "AppsFlyer")

    Optional overrides:
    - identify() / track(): Forward events; default is pass-through
    - application_did_become_active(), open_url(),
      received_remote_notification(), continue_user_activity():
      host lifecycle hooks; default is no-op

    Example:
        class ExampleDestination(DestinationPlugin):
            key = "Example"

            def update(self, settings, update_type):
                if update_type is UpdateType.INITIAL:
                    self.api_key = settings.integration_settings(self.key)["apiKey"]

            def track(self, event):
                vendor.log(event.event, event.properties)
                return event
    """

    key: str
    plugin_type: PluginType = PluginType.DESTINATION

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Validate that subclasses define key."""
        super().__init_subclass__(**kwargs)
        # Skip validation for abstract subclasses
        if ABC in cls.__bases__:
            return
        if not getattr(cls, "key", None):
            raise TypeError(f"{cls.__name__} must define a 'key' class attribute")

    def __init__(self) -> None:
        self._analytics: weakref.ReferenceType[Analytics] | None = None
        self._configured = False

    @property
    def analytics(self) -> Analytics | None:
        """Return the host pipeline, or None if detached or collected."""
        if self._analytics is None:
            return None
        return self._analytics()

    @analytics.setter
    def analytics(self, analytics: Analytics | None) -> None:
        self._analytics = weakref.ref(analytics) if analytics is not None else None

    @property
    def is_configured(self) -> bool:
        """Return True once configure() has delivered initial settings."""
        return self._configured

    def configure(self, settings: Settings) -> None:
        """Deliver settings to the plugin.

        The first call is delivered as UpdateType.INITIAL, every later call
        as UpdateType.REFRESH.

        Args:
            settings: Pipeline settings payload.
        """
        update_type = UpdateType.REFRESH if self._configured else UpdateType.INITIAL
        self._configured = True
        logger.debug(f"Delivering {update_type.value} settings to {self.key}")
        self.update(settings, update_type)

    @abstractmethod
    def update(self, settings: Settings, update_type: UpdateType) -> None:
        """Apply settings delivered by the pipeline.

        Args:
            settings: Pipeline settings payload.
            update_type: Whether these are the initial settings or a refresh.
        """
        pass  # pragma: no cover

    def identify(self, event: IdentifyEvent) -> IdentifyEvent | None:
        """Forward an identify event. Returns the event for the pipeline."""
        return event

    def track(self, event: TrackEvent) -> TrackEvent | None:
        """Forward a track event. Returns the event for the pipeline."""
        return event

    def execute(self, event: IdentifyEvent | TrackEvent) -> IdentifyEvent | TrackEvent | None:
        """Dispatch an event to the matching handler.

        Args:
            event: Any pipeline event.

        Returns:
            Whatever the handler returns.
        """
        if isinstance(event, IdentifyEvent):
            return self.identify(event)
        if isinstance(event, TrackEvent):
            return self.track(event)
        logger.debug(f"{self.key} ignoring unsupported event: {type(event).__name__}")
        return event

    # Host lifecycle hooks

    def application_did_become_active(self, application: Any = None) -> None:  # noqa: B027
        """Called when the host application becomes active."""
        pass

    def open_url(self, url: str, options: dict[str, Any] | None = None) -> None:  # noqa: B027
        """Called when the host application is opened with a URL."""
        pass

    def received_remote_notification(self, user_info: dict[str, Any]) -> None:  # noqa: B027
        """Called when the host application receives a push notification."""
        pass

    def continue_user_activity(self, activity: Any) -> None:  # noqa: B027
        """Called when the host application continues a user activity."""
        pass

    @classmethod
    def version(cls) -> str:
        """Return the plugin version."""
        return "0.0.0"
