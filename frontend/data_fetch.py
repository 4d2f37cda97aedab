#file: frontend/data_fetch.py

import aiohttp
import logging
from pydantic import ValidationError

from backend.errors import UpstreamError
from backend.models import AirQualityReading, Coordinate
from frontend.config import FrontendSettings


async def fetch_air_quality(session: aiohttp.ClientSession, coordinate: Coordinate,
                            settings: FrontendSettings) -> AirQualityReading:
    """Fetch a reading for one location through the Aura backend proxy."""
    url = f"{settings.api_url}/api/air-quality"
    params = {"lat": str(coordinate.latitude), "lon": str(coordinate.longitude)}
    try:
        async with session.get(url, params=params) as response:
            payload = await response.json()
    except (aiohttp.ClientError, ValueError) as e:
        logging.error(f"[ERROR] Network request failed: {e}")
        raise UpstreamError("Failed to fetch air quality data") from e

    if isinstance(payload, dict) and "error" in payload:
        # Backend errors carry a message; Open-Meteo sends error=true plus a reason.
        message = payload.get("reason") or payload["error"]
        logging.error(f"[ERROR] Air quality request rejected: {message}")
        raise UpstreamError(str(message))

    try:
        return AirQualityReading.model_validate(payload)
    except ValidationError as e:
        logging.error(f"[ERROR] Malformed air quality payload: {e}")
        raise UpstreamError("Malformed air quality data") from e
