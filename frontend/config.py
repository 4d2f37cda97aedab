#file: frontend/config.py

import os
from typing import Optional
from pydantic import BaseModel
from dotenv import load_dotenv


class FrontendSettings(BaseModel):
    """Dashboard settings. Passed explicitly to every call that needs them."""
    api_url: str = "http://localhost:8000"
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-3-flash-preview"
    nominatim_url: str = "https://nominatim.openstreetmap.org"
    geolocation_url: str = "https://ipinfo.io/json"
    user_agent: str = "aura-air-quality/0.1"
    hourly_limit: int = 24


def load_settings() -> FrontendSettings:
    load_dotenv()
    defaults = FrontendSettings()
    return FrontendSettings(
        api_url = os.getenv("AURA_API_URL", defaults.api_url),
        gemini_api_key = os.getenv("GEMINI_API_KEY") or None,
        gemini_model = os.getenv("GEMINI_MODEL", defaults.gemini_model),
        nominatim_url = os.getenv("AURA_NOMINATIM_URL", defaults.nominatim_url),
        geolocation_url = os.getenv("AURA_GEOLOCATION_URL", defaults.geolocation_url),
        user_agent = os.getenv("AURA_USER_AGENT", defaults.user_agent),
        hourly_limit = int(os.getenv("AURA_HOURLY_LIMIT", str(defaults.hourly_limit))),
    )
