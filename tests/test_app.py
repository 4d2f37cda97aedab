"""
Tests for the Streamlit page.

The page runs under streamlit's AppTest with the network-facing functions
patched on frontend.dashboard, so only rendering and session handling are
exercised.

Tests cover:
- First load: place caption, AQI card, pollutant breakdown, footer
- Location notice: shown with a reading, hidden behind an error, cleared by search
- Error path: Retry resets the session state and reloads
"""

import pytest
from streamlit.testing.v1 import AppTest

import frontend.dashboard as dashboard_module
from backend.errors import UpstreamError
from backend.models import Coordinate
from frontend.dashboard import FETCH_FAILED, LOCATION_DENIED
from frontend.insights import INSIGHTS_UNAVAILABLE

PARIS = Coordinate(latitude=48.8566, longitude=2.3522)
BERLIN = Coordinate(latitude=52.52, longitude=13.405)
FOOTER = "Data provided by Open-Meteo & OpenStreetMap. AI insights powered by Gemini."


@pytest.fixture(autouse=True)
def offline(monkeypatch):
    """No .env, no Gemini key; geocoders answer locally."""
    monkeypatch.setattr("frontend.config.load_dotenv", lambda: False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    async def fake_reverse(session, coordinate, settings):
        return "Paris"

    async def fake_forward(session, query, settings):
        return BERLIN, "Berlin"

    monkeypatch.setattr(dashboard_module, "reverse_geocode", fake_reverse)
    monkeypatch.setattr(dashboard_module, "forward_geocode", fake_forward)


@pytest.fixture
def located(monkeypatch):
    monkeypatch.setattr(dashboard_module, "locate_by_ip", lambda settings: PARIS)


@pytest.fixture
def not_located(monkeypatch):
    monkeypatch.setattr(dashboard_module, "locate_by_ip", lambda settings: None)


@pytest.fixture
def fetch_results(monkeypatch, reading):
    """Queue of outcomes for the backend fetch; a reading once the queue is empty."""
    outcomes = []

    async def fake_fetch(session, coordinate, settings):
        if outcomes:
            outcome = outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        return reading

    monkeypatch.setattr(dashboard_module, "fetch_air_quality", fake_fetch)
    return outcomes


def run_page():
    app = AppTest.from_file("../frontend/app.py", default_timeout=30)
    app.run()
    return app


def captions(app):
    return [caption.value for caption in app.caption]


def search(app, query):
    app.text_input[0].input(query)
    next(button for button in app.button if button.label == "Search").click()
    app.run()


class TestFirstLoad:
    """Test suite for the initial render."""

    def test_renders_reading(self, located, fetch_results):
        app = run_page()
        assert not app.exception
        assert "📍 Paris" in captions(app)
        assert "48.8566, 2.3522" in captions(app)
        assert [metric.value for metric in app.metric if metric.label == "US AQI"] == ["42"]
        assert {metric.label for metric in app.metric} >= {"PM2.5", "PM10", "O3", "NO2", "SO2", "CO"}
        assert any(INSIGHTS_UNAVAILABLE in markdown.value for markdown in app.markdown)
        assert "💧 PM2.5: 9.7  ·  ☀️ Ozone: 55.0" in captions(app)
        assert len(app.error) == 0
        assert len(app.warning) == 0

    def test_footer_always_rendered(self, located, fetch_results):
        fetch_results.append(UpstreamError("down"))
        app = run_page()
        assert FOOTER in captions(app)

    def test_loads_only_once_per_session(self, located, fetch_results):
        app = run_page()
        app.run()
        assert app.session_state["dashboard_state"].generation == 1


class TestLocationNotice:
    """Test suite for the location-denied notice."""

    def test_notice_shown_with_fallback_reading(self, not_located, fetch_results):
        app = run_page()
        assert [warning.value for warning in app.warning] == [LOCATION_DENIED]
        assert "📍 London" in captions(app)
        assert len(app.metric) > 0

    def test_notice_hidden_behind_error(self, not_located, fetch_results):
        fetch_results.append(UpstreamError("down"))
        app = run_page()
        assert [error.value for error in app.error] == [FETCH_FAILED]
        assert len(app.warning) == 0

    def test_search_clears_notice(self, not_located, fetch_results):
        app = run_page()
        search(app, "Berlin")
        assert len(app.warning) == 0
        assert "📍 Berlin" in captions(app)


class TestErrorAndRetry:
    """Test suite for the error screen."""

    def test_error_hides_reading_and_offers_retry(self, located, fetch_results):
        fetch_results.append(UpstreamError("down"))
        app = run_page()
        assert [error.value for error in app.error] == [FETCH_FAILED]
        assert len(app.metric) == 0
        assert any(button.label == "Retry" for button in app.button)

    def test_retry_resets_session(self, located, fetch_results):
        fetch_results.append(UpstreamError("down"))
        app = run_page()
        first_state = app.session_state["dashboard_state"]

        next(button for button in app.button if button.label == "Retry").click()
        app.run()

        state = app.session_state["dashboard_state"]
        assert state is not first_state
        assert state.generation == 1
        assert state.error is None
        assert len(app.error) == 0
        assert [metric.value for metric in app.metric if metric.label == "US AQI"] == ["42"]
