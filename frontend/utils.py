#file: frontend/utils.py

import math
import numbers
import pandas as pd
from typing import List

from backend.errors import InvalidInput
from backend.models import AirQualityReading, PollutantRow, SeverityTier

SEVERITY_TIERS = (
    SeverityTier(label = "Good", color = "#34d399", upper_bound = 50),
    SeverityTier(label = "Moderate", color = "#facc15", upper_bound = 100),
    SeverityTier(label = "Unhealthy for Sensitive Groups", color = "#fb923c", upper_bound = 150),
    SeverityTier(label = "Unhealthy", color = "#f87171", upper_bound = 200),
    SeverityTier(label = "Very Unhealthy", color = "#c084fc", upper_bound = 300),
    SeverityTier(label = "Hazardous", color = "#e11d48", upper_bound = math.inf),
)

OUTDOOR_LIMIT_INDEX = 100
GAUGE_CEILING = 300

HEALTH_TIPS = (
    "Keep windows closed if AQI exceeds 100.",
    "Use air purifiers with HEPA filters indoors.",
    "Avoid outdoor exercise during peak pollution hours.",
)


def classify(index) -> SeverityTier :
    """Map an air quality index to its severity tier.

    Tiers are checked in order and the first one whose upper bound is >= index wins,
    so a value sitting on a bound belongs to the lower tier.
    Raises InvalidInput for missing, non-numeric, NaN or negative values.
    """
    if index is None or isinstance(index, bool) or not isinstance(index, numbers.Real) :
        raise InvalidInput(f"Air quality index must be a number, got {index!r}")
    if math.isnan(index) or index < 0 :
        raise InvalidInput(f"Air quality index must be a non-negative number, got {index!r}")
    for tier in SEVERITY_TIERS :
        if index <= tier.upper_bound :
            return tier
    # unreachable: the last tier is unbounded
    raise InvalidInput(f"Air quality index out of range: {index!r}")


def derive_hourly_series(reading: AirQualityReading, limit: int = 24) -> pd.DataFrame :
    """First `limit` hourly samples as a time/pm25/ozone frame, in input order."""
    if limit < 0 :
        raise InvalidInput(f"limit must be non-negative, got {limit}")
    hourly = reading.hourly
    df = pd.DataFrame({
        "time" : pd.to_datetime(hourly.time[:limit]),
        "pm25" : pd.Series(hourly.pm2_5[:limit], dtype = "float64"),
        "ozone" : pd.Series(hourly.ozone[:limit], dtype = "float64"),
    })
    return df


def derive_pollutant_rows(reading: AirQualityReading) -> List[PollutantRow] :
    """Pollutant breakdown rows in display order. CO is converted from µg/m³ to mg/m³."""
    current = reading.current
    return [
        PollutantRow(name = "PM2.5", value = current.pm2_5, unit = "µg/m³"),
        PollutantRow(name = "PM10", value = current.pm10, unit = "µg/m³"),
        PollutantRow(name = "O3", value = current.ozone, unit = "µg/m³"),
        PollutantRow(name = "NO2", value = current.nitrogen_dioxide, unit = "µg/m³"),
        PollutantRow(name = "SO2", value = current.sulphur_dioxide, unit = "µg/m³"),
        PollutantRow(name = "CO", value = current.carbon_monoxide / 1000, unit = "mg/m³"),
    ]


def describe_conditions(tier: SeverityTier, place: str, index: float) -> str :
    advice = (" Consider limiting outdoor activities." if index > OUTDOOR_LIMIT_INDEX
              else " It is a good time for outdoor activities.")
    return f"The air quality is currently {tier.label.lower()} in {place}.{advice}"


def gauge_fraction(index: float, ceiling: float = GAUGE_CEILING) -> float :
    """Share of the gauge ring to fill, clamped to [0, 1]."""
    return max(0.0, min(index, ceiling)) / ceiling
