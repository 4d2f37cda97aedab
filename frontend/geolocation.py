#file: frontend/geolocation.py

import logging
import requests

from backend.models import Coordinate
from frontend.config import FrontendSettings


def locate_by_ip(settings: FrontendSettings) -> Coordinate | None :
    """Approximate the user's position from their IP address via ipinfo.io."""
    try:
        response = requests.get(settings.geolocation_url, timeout = 10)
        response.raise_for_status()
        loc = response.json().get("loc")
    except (requests.RequestException, ValueError) as e:
        logging.error(f"Error locating user by IP: {e}")
        return None
    if not loc :
        logging.warning("Geolocation response has no coordinates")
        return None
    try:
        lat, lon = map(float, loc.split(","))
        return Coordinate(latitude = lat, longitude = lon)
    except ValueError as e:
        logging.error(f"Unexpected geolocation coordinates {loc!r}: {e}")
        return None
