"""
Install attribution - interpret AppsFlyer conversion data.

The SDK reports conversion data as a loosely-typed mapping. The keys the
destination cares about:
- is_first_launch: 1 / true only on the first launch after install
- af_status: "Organic" or "Non-organic"
- media_source, campaign, adgroup: campaign attributes for non-organic installs
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

NON_ORGANIC = "Non-organic"


class AttributionStatus(str, Enum):
    """Install attribution outcome."""

    ORGANIC = "organic"
    NON_ORGANIC = "non_organic"


@dataclass(frozen=True)
class AttributionResult:
    """Attribution outcome of an install, with optional campaign attributes."""

    status: AttributionStatus
    media_source: Any = None
    campaign: Any = None
    ad_group: Any = None

    @property
    def has_campaign(self) -> bool:
        """Return True if all campaign attributes are present."""
        return (
            self.media_source is not None
            and self.campaign is not None
            and self.ad_group is not None
        )

    @classmethod
    def from_conversion_data(cls, conversion_info: dict[str, Any]) -> AttributionResult | None:
        """Classify conversion data.

        Args:
            conversion_info: Raw conversion data mapping from the SDK.

        Returns:
            AttributionResult, or None if af_status is missing or not a string.
        """
        status = conversion_info.get("af_status")
        if not isinstance(status, str):
            return None

        if status != NON_ORGANIC:
            return cls(status=AttributionStatus.ORGANIC)

        return cls(
            status=AttributionStatus.NON_ORGANIC,
            media_source=conversion_info.get("media_source"),
            campaign=conversion_info.get("campaign"),
            ad_group=conversion_info.get("adgroup"),
        )


def is_first_launch(conversion_info: dict[str, Any]) -> bool:
    """Return True if conversion data is flagged as the first launch."""
    flag = conversion_info.get("is_first_launch")
    return isinstance(flag, int) and flag == 1


def format_campaign(fields: dict[str, Any]) -> str:
    """Join campaign attributes as "key=value" pairs separated by ";".

    Pairs keep the mapping's insertion order.

    Example:
        >>> format_campaign({"source": "fb", "name": "spring", "ad_group": "a1"})
        'source=fb;name=spring;ad_group=a1'
    """
    return ";".join(f"{key}={value}" for key, value in fields.items())
