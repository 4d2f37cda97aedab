# file: backend/main.py

import logging
import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from typing import Optional, Dict, Any

from backend.config import Settings, load_settings
from backend.errors import MissingParameter, UpstreamError
from backend.open_meteo import fetch_air_quality

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def parse_coordinate(lat: Optional[str], lon: Optional[str]) -> tuple[float, float]:
    """Validate the raw lat/lon query values."""
    if not lat or not lon:
        raise MissingParameter("Latitude and longitude are required")
    try:
        return float(lat), float(lon)
    except ValueError:
        raise MissingParameter("Latitude and longitude must be numbers")


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title = "Aura - Air Quality",
        description = "Proxy for Open-Meteo air quality data used by the Aura dashboard.",
        version = "0.1"
    )
    app.state.settings = settings or load_settings()

    @app.exception_handler(MissingParameter)
    async def missing_parameter_handler(request: Request, exc: MissingParameter):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/api/health", response_model=Dict[str, str])
    async def health():
        return {"status": "ok", "message": "Aura API is running"}

    @app.get("/api/air-quality")
    async def air_quality(
        request: Request,
        lat: Optional[str] = Query(None, description="Latitude in decimal degrees"),
        lon: Optional[str] = Query(None, description="Longitude in decimal degrees")
    ) -> Any:
        """Relay current and 3-day hourly pollutant data for a location."""
        latitude, longitude = parse_coordinate(lat, lon)
        return await fetch_air_quality(latitude, longitude, request.app.state.settings)

    return app


app = create_app()

if __name__ == "__main__" :
    settings = app.state.settings
    uvicorn.run(app, host = settings.host, port = settings.port, log_level = settings.log_level)
