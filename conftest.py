"""Shared pytest fixtures for segbridge packages."""

import pytest
from unittest.mock import MagicMock


@pytest.fixture
def mock_analytics():
    """Mock host analytics pipeline."""
    return MagicMock(name="analytics")


@pytest.fixture
def sample_settings_payload():
    """Sample pipeline settings payload with an AppsFlyer integration."""
    return {
        "writeKey": "test-write-key",
        "integrations": {
            "AppsFlyer": {
                "appsFlyerDevKey": "test-dev-key",
                "appleAppID": "123456789",
                "trackAttributionData": True,
            },
            "Segment.io": {"apiKey": "test-write-key"},
        },
        "plan": {"track": {}},
    }


@pytest.fixture
def sample_conversion_data():
    """Sample non-organic first-launch conversion data."""
    return {
        "is_first_launch": 1,
        "af_status": "Non-organic",
        "media_source": "facebook",
        "campaign": "spring_sale",
        "adgroup": "lookalike_1",
        "install_time": "2025-01-15 10:30:00.000",
    }
