"""
Pytest configuration for Aura tests.

Provides sample provider payloads and a fake aiohttp session so the HTTP
clients can be tested without the network.
"""

import aiohttp
import pytest

from backend.models import AirQualityReading
from frontend.config import FrontendSettings


def make_payload(hours=48):
    """Open-Meteo style air quality payload with `hours` hourly samples."""
    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "current": {
            "time": "2025-03-01T12:00",
            "interval": 3600,
            "european_aqi": 38,
            "us_aqi": 42,
            "pm10": 18.4,
            "pm2_5": 9.7,
            "carbon_monoxide": 800.0,
            "nitrogen_dioxide": 21.3,
            "sulphur_dioxide": 3.1,
            "ozone": 55.0,
        },
        "hourly": {
            "time": [f"2025-03-{1 + h // 24:02d}T{h % 24:02d}:00" for h in range(hours)],
            "pm10": [10.0 + h for h in range(hours)],
            "pm2_5": [5.0 + h for h in range(hours)],
            "ozone": [40.0 + h for h in range(hours)],
        },
    }


class FakeResponse:
    def __init__(self, payload=None, status=200, json_error=None):
        self.payload = payload
        self.status = status
        self.json_error = json_error

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status >= 400:
            raise aiohttp.ClientError(f"HTTP {self.status}")

    async def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """Stands in for aiohttp.ClientSession; records every GET it receives."""

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture
def payload():
    return make_payload()


@pytest.fixture
def reading(payload):
    return AirQualityReading.model_validate(payload)


@pytest.fixture
def frontend_settings():
    return FrontendSettings(
        api_url="http://backend.test",
        gemini_api_key=None,
        nominatim_url="http://nominatim.test",
        geolocation_url="http://ipinfo.test/json",
    )


@pytest.fixture
def payload_factory():
    return make_payload


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse
