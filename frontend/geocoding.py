#file: frontend/geocoding.py

import aiohttp
import logging

from backend.errors import NotFound, UpstreamError
from backend.models import Coordinate
from frontend.config import FrontendSettings

FALLBACK_PLACE = "Your Location"


async def reverse_geocode(session: aiohttp.ClientSession, coordinate: Coordinate, settings: FrontendSettings) -> str:
    """Resolve a place name for coordinates, falling back to a generic label."""
    url = f"{settings.nominatim_url}/reverse"
    params = {"lat": str(coordinate.latitude), "lon": str(coordinate.longitude), "format": "json"}
    try:
        async with session.get(url, params=params, headers={"User-Agent": settings.user_agent}) as response:
            response.raise_for_status()
            data = await response.json()
    except (aiohttp.ClientError, ValueError) as e:
        logging.error(f"Error reverse geocoding {coordinate}: {e}")
        return FALLBACK_PLACE

    if not isinstance(data, dict):
        return FALLBACK_PLACE
    address = data.get("address") or {}
    return address.get("city") or address.get("town") or address.get("village") or FALLBACK_PLACE


async def forward_geocode(session: aiohttp.ClientSession, query: str, settings: FrontendSettings) -> tuple[Coordinate, str]:
    """Look up a place by name and return its coordinates and short name."""
    url = f"{settings.nominatim_url}/search"
    params = {"q": query, "format": "json", "limit": "1"}
    try:
        async with session.get(url, params=params, headers={"User-Agent": settings.user_agent}) as response:
            response.raise_for_status()
            results = await response.json()
    except (aiohttp.ClientError, ValueError) as e:
        logging.error(f"Error geocoding {query!r}: {e}")
        raise UpstreamError(f"Geocoding failed for {query!r}") from e

    if not isinstance(results, list):
        raise UpstreamError(f"Unexpected geocoding response for {query!r}")
    if not results:
        raise NotFound(f"No place matches {query!r}")
    first = results[0]
    try:
        coordinate = Coordinate(latitude = float(first["lat"]), longitude = float(first["lon"]))
    except (KeyError, TypeError, ValueError) as e:
        raise UpstreamError(f"Malformed geocoding result for {query!r}") from e
    place = first.get("display_name", query).split(",")[0]
    return coordinate, place
