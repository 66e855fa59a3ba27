"""
Event translation between the analytics pipeline and AppsFlyer.

Outbound:
- identify: user id -> customer user id, selected traits -> custom data
- track: revenue/currency -> af_revenue/af_currency, then log_event

Inbound:
- conversion data -> "Install Attributed" / "Organic Install"
- app-open attribution -> "Deep Link Opened"
- deep link resolution -> "Deferred Deep Link" / "Direct Deep Link"
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any

from segbridge.appsflyer.attribution import (
    AttributionResult,
    AttributionStatus,
    format_campaign,
)
from segbridge.appsflyer.deeplink import DeepLinkResult
from segbridge.appsflyer.sdk import AppsFlyerLib
from segbridge.destinations.events import (
    IdentifyEvent,
    Properties,
    TrackEvent,
    get_number,
    get_string,
)

logger = logging.getLogger(__name__)

PROVIDER = "AppsFlyer"
DEFAULT_CURRENCY = "USD"

# Derived event names
INSTALL_ATTRIBUTED = "Install Attributed"
ORGANIC_INSTALL = "Organic Install"
DEEP_LINK_OPENED = "Deep Link Opened"
DEFERRED_DEEP_LINK = "Deferred Deep Link"
DIRECT_DEEP_LINK = "Direct Deep Link"

# Traits copied into AppsFlyer custom data
CUSTOM_DATA_TRAITS = ("email", "firstName", "lastName")

# Plain ASCII decimal with optional exponent
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class DerivedEvent:
    """An event the destination tracks back into the pipeline."""

    name: str
    properties: Properties | None = field(default=None)


def extract_revenue(properties: dict[str, Any] | None) -> float | None:
    """Return the revenue property as a float.

    Numbers are taken as-is. Strings are parsed only when they are a plain
    ASCII decimal such as "9.99" or "1e3". Anything else, including a
    non-finite value, is treated as absent.
    """
    if not properties or "revenue" not in properties:
        return None
    revenue = get_number(properties, "revenue")
    if revenue is None:
        text = get_string(properties, "revenue")
        if text is None or not _DECIMAL_RE.fullmatch(text):
            return None
        revenue = float(text)
    return float(revenue) if math.isfinite(revenue) else None


def extract_currency(properties: dict[str, Any] | None) -> str:
    """Return the currency property, defaulting to USD."""
    return get_string(properties, "currency") or DEFAULT_CURRENCY


def map_track_properties(properties: Properties | None) -> Properties | None:
    """Return the mapping to log with AppsFlyer.

    When revenue is present, a copy is returned with revenue/currency
    replaced by af_revenue/af_currency. Otherwise the input is returned.
    """
    revenue = extract_revenue(properties)
    if revenue is None or properties is None:
        return properties

    mapped = dict(properties)
    mapped["af_revenue"] = revenue
    mapped["af_currency"] = extract_currency(properties)
    mapped.pop("revenue", None)
    mapped.pop("currency", None)
    return mapped


def map_custom_data(traits: Properties) -> dict[str, Any]:
    """Select the traits AppsFlyer stores as custom data."""
    custom_data: dict[str, Any] = {}
    for trait in CUSTOM_DATA_TRAITS:
        value = get_string(traits, trait)
        if value is not None:
            custom_data[trait] = value
    return custom_data


def _campaign_event(name: str, campaign: dict[str, Any]) -> DerivedEvent:
    return DerivedEvent(
        name=name,
        properties={"provider": PROVIDER, "campaign": format_campaign(campaign)},
    )


class EventTranslator:
    """Translate pipeline events into AppsFlyer calls and back.

    Example:
        translator = EventTranslator(appsflyer=sdk)
        translator.track(TrackEvent(event="Order Completed", properties={"revenue": 5}))
        # sdk.log_event("Order Completed", {"af_revenue": 5.0, "af_currency": "USD"})
    """

    def __init__(self, appsflyer: AppsFlyerLib):
        """
        Initialize translator.

        Args:
            appsflyer: AppsFlyer SDK handle to forward to
        """
        self.appsflyer = appsflyer

    def identify(self, event: IdentifyEvent) -> IdentifyEvent:
        """Forward user id and traits to AppsFlyer."""
        if event.user_id:
            self.appsflyer.customer_user_id = event.user_id

        if event.traits is not None:
            custom_data = map_custom_data(event.traits)

            currency_code = get_string(event.traits, "currencyCode")
            if currency_code is not None:
                self.appsflyer.currency_code = currency_code

            self.appsflyer.custom_data = custom_data

        return event

    def track(self, event: TrackEvent) -> TrackEvent:
        """Log the event with AppsFlyer, remapping revenue fields."""
        values = map_track_properties(event.properties)
        logger.debug(f"Logging AppsFlyer event: {event.event}")
        self.appsflyer.log_event(event.event, values)
        return event

    def install_event(self, result: AttributionResult) -> DerivedEvent | None:
        """Translate an install attribution into a pipeline event.

        Non-organic installs without complete campaign attributes produce
        nothing.
        """
        if result.status is AttributionStatus.ORGANIC:
            return DerivedEvent(name=ORGANIC_INSTALL)
        if not result.has_campaign:
            logger.debug("Non-organic install without campaign attributes")
            return None
        return _campaign_event(
            INSTALL_ATTRIBUTED,
            {
                "source": result.media_source,
                "name": result.campaign,
                "ad_group": result.ad_group,
            },
        )

    def app_open_event(self, attribution_data: dict[str, Any]) -> DerivedEvent | None:
        """Translate app-open attribution data into a pipeline event."""
        media_source = attribution_data.get("media_source")
        campaign = attribution_data.get("campaign")
        referrer = attribution_data.get("http_referrer")
        if media_source is None or campaign is None or referrer is None:
            return None
        return _campaign_event(
            DEEP_LINK_OPENED,
            {"source": media_source, "name": campaign, "url": referrer},
        )

    def deep_link_event(self, result: DeepLinkResult) -> DerivedEvent | None:
        """Translate a found deep link into a pipeline event."""
        if not result.is_found or result.deep_link is None:
            return None
        deep_link = result.deep_link
        name = DEFERRED_DEEP_LINK if deep_link.is_deferred else DIRECT_DEEP_LINK
        return _campaign_event(
            name,
            {
                "source": deep_link.media_source or "",
                "name": deep_link.campaign or "",
                "product": deep_link.deeplink_value or "",
            },
        )
