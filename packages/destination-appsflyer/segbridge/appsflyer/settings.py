"""AppsFlyer integration settings."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from segbridge.destinations.config import Settings
from segbridge.destinations.exceptions import SettingsError

_TRUTHY = {"1", "true", "yes", "on"}


class AppsFlyerSettings(BaseModel):
    """Configuration for the AppsFlyer destination.

    Field aliases match the integration settings keys delivered by the
    pipeline, so the raw mapping validates directly.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    apps_flyer_dev_key: StrictStr = Field(alias="appsFlyerDevKey")
    apple_app_id: StrictStr = Field(alias="appleAppID")
    track_attribution_data: StrictBool | None = Field(default=None, alias="trackAttributionData")

    @property
    def subscribes_to_attribution(self) -> bool:
        """Return True if conversion callbacks should be delivered."""
        return bool(self.track_attribution_data)

    @classmethod
    def from_settings(cls, settings: Settings, key: str) -> AppsFlyerSettings | None:
        """Extract AppsFlyer settings from a pipeline settings payload.

        Args:
            settings: Pipeline settings.
            key: Integration key to read.

        Returns:
            Parsed settings, or None if the integration is not present.

        Raises:
            SettingsError: If the integration settings fail validation.
        """
        raw = settings.integration_settings(key)
        if raw is None:
            return None
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise SettingsError(f"Invalid {key} settings: {e}") from e

    @classmethod
    def from_env(cls) -> AppsFlyerSettings:
        """Load configuration from environment variables.

        Raises:
            SettingsError: If a required variable is missing.
        """
        track = os.getenv("APPSFLYER_TRACK_ATTRIBUTION_DATA")
        try:
            return cls(
                apps_flyer_dev_key=os.getenv("APPSFLYER_DEV_KEY"),
                apple_app_id=os.getenv("APPSFLYER_APP_ID"),
                track_attribution_data=track.lower() in _TRUTHY if track else None,
            )
        except ValidationError as e:
            raise SettingsError(f"Invalid AppsFlyer environment: {e}") from e
