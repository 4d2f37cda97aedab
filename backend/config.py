# file: backend/config.py

import os
from pydantic import BaseModel
from dotenv import load_dotenv

OPEN_METEO_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"


class Settings(BaseModel):
    """Backend settings, built once at startup and handed to the app."""
    open_meteo_url: str = OPEN_METEO_URL
    forecast_days: int = 3
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"


def load_settings() -> Settings:
    """Read backend settings from the environment (and .env, if present)."""
    load_dotenv()
    return Settings(
        open_meteo_url = os.getenv("AURA_OPEN_METEO_URL", OPEN_METEO_URL),
        forecast_days = int(os.getenv("AURA_FORECAST_DAYS", "3")),
        host = os.getenv("AURA_HOST", "0.0.0.0"),
        port = int(os.getenv("AURA_PORT", "8000")),
        log_level = os.getenv("AURA_LOG_LEVEL", "info"),
    )
