"""
Segbridge AppsFlyer - destination bridging the analytics pipeline and AppsFlyer.

Provides:
- AppsFlyerDestination, registered under the "AppsFlyer" integration key
- EventTranslator for revenue remapping and attribution event translation
- Protocols describing the AppsFlyer SDK and its delegates

Usage:
    from segbridge.appsflyer import AppsFlyerDestination

    destination = AppsFlyerDestination(appsflyer=sdk)
    destination.analytics = analytics
    destination.configure(settings)

    # SDK callbacks land on the destination
    destination.on_conversion_data_success(conversion_info)
"""

from segbridge.appsflyer.attribution import (
    AttributionResult,
    AttributionStatus,
    format_campaign,
    is_first_launch,
)
from segbridge.appsflyer.deeplink import DeepLink, DeepLinkResult, DeepLinkStatus
from segbridge.appsflyer.destination import AppsFlyerDestination
from segbridge.appsflyer.sdk import AppsFlyerLib, ConversionDelegate, DeepLinkDelegate
from segbridge.appsflyer.settings import AppsFlyerSettings
from segbridge.appsflyer.translator import (
    DerivedEvent,
    EventTranslator,
    extract_currency,
    extract_revenue,
    map_track_properties,
)
from segbridge.appsflyer.version import __version__

__all__ = [
    # Destination
    "AppsFlyerDestination",
    "AppsFlyerSettings",
    "__version__",
    # SDK
    "AppsFlyerLib",
    "ConversionDelegate",
    "DeepLinkDelegate",
    # Attribution
    "AttributionResult",
    "AttributionStatus",
    "format_campaign",
    "is_first_launch",
    # Deep links
    "DeepLink",
    "DeepLinkResult",
    "DeepLinkStatus",
    # Translation
    "DerivedEvent",
    "EventTranslator",
    "extract_currency",
    "extract_revenue",
    "map_track_properties",
]
