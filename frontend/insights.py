#file: frontend/insights.py
"""
Plain-language air quality insights from Google Gemini.

The prompt is built deterministically from the current readings; the reply is
treated as an opaque Markdown blob. Any failure is logged and replaced with a
fixed fallback message so the dashboard can always render something.
"""

import logging
from google import genai

from backend.models import AirQualityReading
from frontend.config import FrontendSettings

NO_INSIGHTS = "No insights available at this time."
INSIGHTS_UNAVAILABLE = "Unable to generate AI insights at this moment."


def build_insight_prompt(reading: AirQualityReading, place: str) -> str:
    current = reading.current
    return f"""
As an environmental health expert, analyze the following air quality data for {place}:
- US AQI: {current.us_aqi}
- PM2.5: {current.pm2_5} µg/m³
- PM10: {current.pm10} µg/m³
- Ozone: {current.ozone} µg/m³
- NO2: {current.nitrogen_dioxide} µg/m³
- SO2: {current.sulphur_dioxide} µg/m³
- CO: {current.carbon_monoxide} µg/m³

Provide:
1. A brief "Air Quality Prediction" for the next 24 hours based on these levels.
2. Health recommendations for sensitive groups and the general public.
3. One actionable tip to reduce exposure or improve local air quality.
Keep it concise, professional, and formatted in Markdown.
"""


class InsightGenerator:
    """Relays a prompt to Gemini and returns the text, or a fallback string."""

    def __init__(self, client, model: str):
        """
        Args:
            client: a google-genai Client (or None when no API key is configured)
            model: Gemini model identifier
        """
        self._client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings: FrontendSettings) -> "InsightGenerator":
        if not settings.gemini_api_key:
            logging.warning("GEMINI_API_KEY not set, AI insights are disabled")
            return cls(None, settings.gemini_model)
        return cls(genai.Client(api_key=settings.gemini_api_key), settings.gemini_model)

    async def generate(self, reading: AirQualityReading, place: str) -> str:
        if self._client is None:
            return INSIGHTS_UNAVAILABLE

        prompt = build_insight_prompt(reading, place)
        try:
            result = await self._client.aio.models.generate_content(model=self.model, contents=prompt)
            text = result.text
        except Exception as e:
            logging.error(f"AI insight error: {e}")
            return INSIGHTS_UNAVAILABLE
        return text or NO_INSIGHTS
