"""AppsFlyer destination plugin."""

from __future__ import annotations

import logging
import weakref
from typing import Any

from segbridge.appsflyer.attribution import AttributionResult, is_first_launch
from segbridge.appsflyer.deeplink import DeepLinkResult, DeepLinkStatus
from segbridge.appsflyer.sdk import (
    AdditionalConfigurationHandler,
    AppsFlyerLib,
    ConversionDelegate,
    DeepLinkDelegate,
)
from segbridge.appsflyer.settings import AppsFlyerSettings
from segbridge.appsflyer.translator import DerivedEvent, EventTranslator
from segbridge.appsflyer.version import __version__
from segbridge.destinations.base import DestinationPlugin
from segbridge.destinations.config import Settings, UpdateType
from segbridge.destinations.events import IdentifyEvent, TrackEvent
from segbridge.destinations.exceptions import SettingsError
from segbridge.destinations.registry import get_registry

logger = logging.getLogger(__name__)


class AppsFlyerDestination(DestinationPlugin):
    """Destination forwarding pipeline events to AppsFlyer.

    Also acts as the SDK's conversion and deep link delegate, tracking
    attribution outcomes back into the pipeline and relaying every
    callback to the optional host delegates.

    Required integration settings:
        - appsFlyerDevKey: AppsFlyer developer key
        - appleAppID: App identifier

    Optional integration settings:
        - trackAttributionData: Subscribe to conversion callbacks

    Example:
        destination = AppsFlyerDestination(
            appsflyer=sdk,
            conversion_delegate=host_delegate,
            additional_configuration_handler=lambda lib: setattr(lib, "is_debug", True),
        )
        destination.analytics = analytics
        destination.configure(settings)
    """

    key = "AppsFlyer"

    def __init__(
        self,
        appsflyer: AppsFlyerLib,
        conversion_delegate: ConversionDelegate | None = None,
        deep_link_delegate: DeepLinkDelegate | None = None,
        additional_configuration_handler: AdditionalConfigurationHandler | None = None,
        emit_deep_link_events: bool = True,
    ):
        """Initialize AppsFlyer destination.

        Args:
            appsflyer: AppsFlyer SDK handle.
            conversion_delegate: Receives every conversion / app-open callback.
                Held weakly.
            deep_link_delegate: Receives every deep link resolution. Held weakly.
            additional_configuration_handler: Called with the SDK after the
                destination has configured it.
            emit_deep_link_events: Track "Deferred Deep Link" / "Direct Deep Link"
                for found deep links. When False, found links are only relayed
                to the deep link delegate.
        """
        super().__init__()
        self.appsflyer = appsflyer
        self.translator = EventTranslator(appsflyer)
        self.settings: AppsFlyerSettings | None = None
        self.emit_deep_link_events = emit_deep_link_events
        self.additional_configuration_handler = additional_configuration_handler
        self._conversion_delegate = (
            weakref.ref(conversion_delegate) if conversion_delegate is not None else None
        )
        self._deep_link_delegate = (
            weakref.ref(deep_link_delegate) if deep_link_delegate is not None else None
        )

    @property
    def conversion_delegate(self) -> ConversionDelegate | None:
        """Return the host conversion delegate, if still alive."""
        if self._conversion_delegate is None:
            return None
        return self._conversion_delegate()

    @property
    def deep_link_delegate(self) -> DeepLinkDelegate | None:
        """Return the host deep link delegate, if still alive."""
        if self._deep_link_delegate is None:
            return None
        return self._deep_link_delegate()

    def update(self, settings: Settings, update_type: UpdateType) -> None:
        """Configure the SDK from the initial settings.

        The SDK can only be configured once; refreshes are ignored.
        """
        if update_type is not UpdateType.INITIAL:
            logger.debug(f"Ignoring {update_type.value} settings for {self.key}")
            return

        try:
            appsflyer_settings = AppsFlyerSettings.from_settings(settings, self.key)
        except SettingsError as e:
            logger.warning(f"Skipping {self.key} configuration: {e}")
            return

        if appsflyer_settings is None:
            logger.debug(f"No {self.key} settings present")
            return

        self.settings = appsflyer_settings
        self.appsflyer.app_dev_key = appsflyer_settings.apps_flyer_dev_key
        self.appsflyer.app_id = appsflyer_settings.apple_app_id

        self.appsflyer.deep_link_delegate = self

        if appsflyer_settings.subscribes_to_attribution:
            self.appsflyer.delegate = self

        if self.additional_configuration_handler is not None:
            self.additional_configuration_handler(self.appsflyer)

        logger.info(f"Configured {self.key} for app {appsflyer_settings.apple_app_id}")

    def identify(self, event: IdentifyEvent) -> IdentifyEvent | None:
        """Forward user id and traits to AppsFlyer."""
        return self.translator.identify(event)

    def track(self, event: TrackEvent) -> TrackEvent | None:
        """Log the event with AppsFlyer."""
        return self.translator.track(event)

    # Host lifecycle

    def application_did_become_active(self, application: Any = None) -> None:
        """Start the SDK session."""
        self.appsflyer.start()

    def open_url(self, url: str, options: dict[str, Any] | None = None) -> None:
        """Forward an opened URL to the SDK."""
        self.appsflyer.handle_open_url(url, options or {})

    def received_remote_notification(self, user_info: dict[str, Any]) -> None:
        """Forward a push notification payload to the SDK."""
        self.appsflyer.handle_push_notification(user_info)

    def continue_user_activity(self, activity: Any) -> None:
        """Forward a continued user activity to the SDK."""
        self.appsflyer.continue_user_activity(activity, restoration_handler=None)

    # Conversion delegate

    def on_conversion_data_success(self, conversion_info: dict[str, Any]) -> None:
        """Track the install attribution on first launch."""
        if not is_first_launch(conversion_info):
            return
        result = AttributionResult.from_conversion_data(conversion_info)
        if result is None:
            return

        self._notify(self.conversion_delegate, "on_conversion_data_success", conversion_info)
        self._emit(self.translator.install_event(result))

    def on_conversion_data_fail(self, error: Exception) -> None:
        """Relay a conversion data failure to the host delegate."""
        self._notify(self.conversion_delegate, "on_conversion_data_fail", error)

    def on_app_open_attribution(self, attribution_data: dict[str, Any]) -> None:
        """Track an attributed app open."""
        self._notify(self.conversion_delegate, "on_app_open_attribution", attribution_data)
        self._emit(self.translator.app_open_event(attribution_data))

    def on_app_open_attribution_failure(self, error: Exception) -> None:
        """Relay an app-open attribution failure to the host delegate."""
        self._notify(self.conversion_delegate, "on_app_open_attribution_failure", error)

    # Deep link delegate

    def did_resolve_deep_link(self, result: DeepLinkResult) -> None:
        """Track a found deep link as deferred or direct."""
        self._notify(self.deep_link_delegate, "did_resolve_deep_link", result)

        if result.status in (DeepLinkStatus.NOT_FOUND, DeepLinkStatus.FAILURE):
            logger.debug(f"Deep link resolution ended: {result.status.value}")
            return
        if not self.emit_deep_link_events:
            return

        self._emit(self.translator.deep_link_event(result))

    @classmethod
    def version(cls) -> str:
        """Return the destination version."""
        return __version__

    def _notify(self, delegate: Any, method: str, payload: Any) -> None:
        """Call delegate.method(payload) if both exist."""
        if delegate is None:
            return
        callback = getattr(delegate, method, None)
        if callable(callback):
            callback(payload)

    def _emit(self, derived: DerivedEvent | None) -> None:
        """Track a derived event through the pipeline."""
        if derived is None:
            return
        analytics = self.analytics
        if analytics is None:
            logger.debug(f"No pipeline attached, dropping {derived.name}")
            return
        analytics.track(derived.name, derived.properties)


# Auto-register destination
get_registry().register(AppsFlyerDestination.key, AppsFlyerDestination)
