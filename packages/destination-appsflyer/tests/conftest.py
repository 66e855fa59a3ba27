"""Pytest fixtures for destination-appsflyer tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from segbridge.appsflyer.deeplink import DeepLink, DeepLinkResult, DeepLinkStatus
from segbridge.appsflyer.destination import AppsFlyerDestination
from segbridge.destinations.config import Settings


class FakeAppsFlyerLib:
    """In-memory stand-in for the AppsFlyer SDK handle."""

    def __init__(self) -> None:
        self.app_dev_key: str | None = None
        self.app_id: str | None = None
        self.customer_user_id: str | None = None
        self.custom_data: dict[str, Any] | None = None
        self.currency_code: str | None = None
        self.delegate: Any = None
        self.deep_link_delegate: Any = None
        self.logged: list[tuple[str, dict[str, Any] | None]] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def start(self) -> None:
        self.calls.append(("start", ()))

    def log_event(self, name: str, values: dict[str, Any] | None) -> None:
        self.logged.append((name, values))

    def handle_open_url(self, url: str, options: dict[str, Any] | None) -> None:
        self.calls.append(("handle_open_url", (url, options)))

    def handle_push_notification(self, user_info: dict[str, Any]) -> None:
        self.calls.append(("handle_push_notification", (user_info,)))

    def continue_user_activity(self, activity: Any, restoration_handler: Any = None) -> None:
        self.calls.append(("continue_user_activity", (activity, restoration_handler)))


@pytest.fixture
def appsflyer() -> FakeAppsFlyerLib:
    """Create a fake SDK handle."""
    return FakeAppsFlyerLib()


@pytest.fixture
def conversion_delegate() -> MagicMock:
    """Mock host conversion delegate."""
    return MagicMock(name="conversion_delegate")


@pytest.fixture
def deep_link_delegate() -> MagicMock:
    """Mock host deep link delegate."""
    return MagicMock(name="deep_link_delegate")


@pytest.fixture
def destination(
    appsflyer: FakeAppsFlyerLib,
    conversion_delegate: MagicMock,
    deep_link_delegate: MagicMock,
    mock_analytics: MagicMock,
) -> AppsFlyerDestination:
    """Create a destination wired to the fake SDK and a mock pipeline."""
    destination = AppsFlyerDestination(
        appsflyer=appsflyer,
        conversion_delegate=conversion_delegate,
        deep_link_delegate=deep_link_delegate,
    )
    destination.analytics = mock_analytics
    return destination


@pytest.fixture
def settings(sample_settings_payload) -> Settings:
    """Create pipeline settings from the sample payload."""
    return Settings.from_dict(sample_settings_payload)


@pytest.fixture
def found_deep_link() -> DeepLinkResult:
    """A found, deferred deep link."""
    return DeepLinkResult(
        status=DeepLinkStatus.FOUND,
        deep_link=DeepLink.from_click_event({
            "is_deferred": True,
            "media_source": "email",
            "campaign": "winback",
            "deep_link_value": "shoes",
        }),
    )
