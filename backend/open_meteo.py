# file: backend/open_meteo.py

import aiohttp
import asyncio
from typing import Dict, Any
import logging
import certifi
import ssl

from backend.config import Settings
from backend.errors import UpstreamError

CURRENT_FIELDS = [
    "european_aqi",
    "us_aqi",
    "pm10",
    "pm2_5",
    "carbon_monoxide",
    "nitrogen_dioxide",
    "sulphur_dioxide",
    "ozone"
]
HOURLY_FIELDS = ["pm10", "pm2_5", "ozone"]


def build_query(lat: float, lon: float, forecast_days: int) -> Dict[str, str]:
    return {
        "latitude": str(lat),
        "longitude": str(lon),
        "current": ",".join(CURRENT_FIELDS),
        "hourly": ",".join(HOURLY_FIELDS),
        "forecast_days": str(forecast_days)
    }


def create_session() -> aiohttp.ClientSession:
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    return aiohttp.ClientSession(connector=aiohttp.TCPConnector(ssl=ssl_context))


async def _get_json(session: aiohttp.ClientSession, url: str, params: Dict[str, str]) -> Any:
    async with session.get(url, params=params) as response:
        # Relay the provider body as-is, including its own error payloads.
        return await response.json()


async def fetch_air_quality(lat: float, lon: float, settings: Settings,
                            session: aiohttp.ClientSession | None = None) -> Any:
    """Fetch current and hourly pollutant data for one location from Open-Meteo."""
    params = build_query(lat, lon, settings.forecast_days)
    logging.info(f"Fetching air quality for lat={lat}, lon={lon}")
    try:
        if session is None:
            async with create_session() as own_session:
                return await _get_json(own_session, settings.open_meteo_url, params)
        return await _get_json(session, settings.open_meteo_url, params)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        logging.error(f"Error fetching air quality data: {e}")
        raise UpstreamError("Failed to fetch air quality data") from e
