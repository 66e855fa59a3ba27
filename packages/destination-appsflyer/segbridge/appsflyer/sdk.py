"""Interfaces of the AppsFlyer SDK as seen by the destination.

The SDK itself is supplied by the host application. The destination only
depends on these protocols, so any object with the same surface (the real
binding, or a fake in tests) can be injected.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from segbridge.appsflyer.deeplink import DeepLinkResult


class ConversionDelegate(Protocol):
    """Receives conversion and app-open attribution callbacks."""

    def on_conversion_data_success(self, conversion_info: dict[str, Any]) -> None: ...

    def on_conversion_data_fail(self, error: Exception) -> None: ...

    def on_app_open_attribution(self, attribution_data: dict[str, Any]) -> None: ...

    def on_app_open_attribution_failure(self, error: Exception) -> None: ...


class DeepLinkDelegate(Protocol):
    """Receives unified deep link resolution callbacks."""

    def did_resolve_deep_link(self, result: DeepLinkResult) -> None: ...


class AppsFlyerLib(Protocol):
    """Shared AppsFlyer SDK handle."""

    app_dev_key: str | None
    app_id: str | None
    customer_user_id: str | None
    custom_data: dict[str, Any] | None
    currency_code: str | None
    delegate: ConversionDelegate | None
    deep_link_delegate: DeepLinkDelegate | None

    def start(self) -> None: ...

    def log_event(self, name: str, values: dict[str, Any] | None) -> None: ...

    def handle_open_url(self, url: str, options: dict[str, Any] | None) -> None: ...

    def handle_push_notification(self, user_info: dict[str, Any]) -> None: ...

    def continue_user_activity(
        self,
        activity: Any,
        restoration_handler: Callable[..., Any] | None = None,
    ) -> None: ...


AdditionalConfigurationHandler = Callable[[AppsFlyerLib], None]
