#file: frontend/dashboard.py
"""
Request chains behind the dashboard.

On load:   locate -> reverse geocode -> fetch readings -> generate insights
On search: forward geocode -> fetch readings -> generate insights

Each step runs after the previous one finishes. Every chain takes a token from
DashboardState.begin(); results that arrive after a newer chain has started
are dropped instead of overwriting newer state.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import aiohttp

from backend.errors import NotFound, UpstreamError
from backend.models import AirQualityReading, Coordinate
from frontend.config import FrontendSettings
from frontend.data_fetch import fetch_air_quality
from frontend.geocoding import forward_geocode, reverse_geocode
from frontend.geolocation import locate_by_ip
from frontend.insights import InsightGenerator

DEFAULT_COORDINATE = Coordinate(latitude = 51.5074, longitude = -0.1278)
DEFAULT_PLACE = "London"

LOCATION_DENIED = "Location access denied. Please search for a city."
FETCH_FAILED = "Failed to fetch air quality data. Please try again."
CITY_NOT_FOUND = "City not found. Try another name."
SEARCH_FAILED = "Search failed. Please try again."


@dataclass
class DashboardState:
    """View state for one dashboard session."""
    place: str = "Detecting location..."
    coordinate: Optional[Coordinate] = None
    reading: Optional[AirQualityReading] = None
    insights: str = ""
    error: Optional[str] = None
    notice: Optional[str] = None
    generation: int = 0

    def begin(self) -> int :
        self.generation += 1
        return self.generation

    def is_current(self, token: int) -> bool :
        return token == self.generation

    @property
    def started(self) -> bool :
        return self.generation > 0


class Dashboard :
    def __init__(self, settings: FrontendSettings, state: DashboardState, insights: InsightGenerator,
                 locate: Optional[Callable[[FrontendSettings], Optional[Coordinate]]] = None,
                 session_factory: Callable[[], aiohttp.ClientSession] = aiohttp.ClientSession) :
        self.settings = settings
        self.state = state
        self.insights = insights
        self._locate = locate or locate_by_ip
        self._session_factory = session_factory

    def _stale(self, token: int) -> bool :
        if self.state.is_current(token) :
            return False
        logging.info(f"Dropping stale result for request {token} (current {self.state.generation})")
        return True

    async def load(self) -> None :
        """Locate the user and show readings for wherever they are."""
        token = self.state.begin()
        # IP lookup uses blocking requests; keep it off the event loop
        coordinate = await asyncio.to_thread(self._locate, self.settings)
        if self._stale(token) :
            return
        async with self._session_factory() as session :
            if coordinate is None :
                self.state.notice = LOCATION_DENIED
                self.state.place = DEFAULT_PLACE
                coordinate = DEFAULT_COORDINATE
            else :
                place = await reverse_geocode(session, coordinate, self.settings)
                if self._stale(token) :
                    return
                self.state.place = place
            await self._refresh(session, token, coordinate)

    async def search(self, query: str) -> None :
        """Show readings for a place typed by the user."""
        if not query or not query.strip() :
            return
        token = self.state.begin()
        async with self._session_factory() as session :
            try :
                coordinate, place = await forward_geocode(session, query.strip(), self.settings)
            except NotFound :
                if not self._stale(token) :
                    self.state.error = CITY_NOT_FOUND
                return
            except UpstreamError :
                if not self._stale(token) :
                    self.state.error = SEARCH_FAILED
                return
            if self._stale(token) :
                return
            self.state.place = place
            self.state.notice = None
            await self._refresh(session, token, coordinate)

    async def _refresh(self, session: aiohttp.ClientSession, token: int, coordinate: Coordinate) -> None :
        try :
            reading = await fetch_air_quality(session, coordinate, self.settings)
        except UpstreamError as e :
            logging.error(f"Air quality fetch failed: {e}")
            if not self._stale(token) :
                self.state.error = FETCH_FAILED
            return
        if self._stale(token) :
            return
        self.state.coordinate = coordinate
        self.state.reading = reading
        self.state.error = None

        insights = await self.insights.generate(reading, self.state.place)
        if self._stale(token) :
            return
        self.state.insights = insights
