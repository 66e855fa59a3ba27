"""Deep link resolution results delivered by the AppsFlyer SDK."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from segbridge.destinations.events import get_string


class DeepLinkStatus(str, Enum):
    """Outcome of a deep link resolution."""

    NOT_FOUND = "not_found"
    FAILURE = "failure"
    FOUND = "found"


@dataclass(frozen=True)
class DeepLink:
    """A resolved deep link.

    Attributes:
        is_deferred: True when the link was resolved on first launch after install.
        media_source: Attribution media source (pid).
        campaign: Campaign name.
        deeplink_value: The deep_link_value parameter, typically a product or screen.
        match_type: How the click was matched, e.g. "referrer" or "probabilistic".
        click_event: The raw click event mapping.
    """

    is_deferred: bool = False
    media_source: str | None = None
    campaign: str | None = None
    deeplink_value: str | None = None
    match_type: str | None = None
    click_event: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_click_event(cls, click_event: dict[str, Any]) -> DeepLink:
        """Build a DeepLink from the SDK's click event mapping."""
        return cls(
            is_deferred=click_event.get("is_deferred") is True,
            media_source=get_string(click_event, "media_source"),
            campaign=get_string(click_event, "campaign"),
            deeplink_value=get_string(click_event, "deep_link_value"),
            match_type=get_string(click_event, "match_type"),
            click_event=dict(click_event),
        )


@dataclass(frozen=True)
class DeepLinkResult:
    """One deep link resolution; a one-shot classification."""

    status: DeepLinkStatus
    deep_link: DeepLink | None = None
    error: Exception | None = None

    @property
    def is_found(self) -> bool:
        return self.status is DeepLinkStatus.FOUND
