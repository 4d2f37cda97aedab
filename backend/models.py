#file: backend/models.py

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class CurrentConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    european_aqi: Optional[float] = Field(None, description="European AQI")
    us_aqi: float = Field(..., description="US AQI")
    pm10: float = Field(..., description="PM10 concentration (µg/m³)")
    pm2_5: float = Field(..., description="PM2.5 concentration (µg/m³)")
    carbon_monoxide: float = Field(..., description="CO concentration (µg/m³)")
    nitrogen_dioxide: float = Field(..., description="NO2 concentration (µg/m³)")
    sulphur_dioxide: float = Field(..., description="SO2 concentration (µg/m³)")
    ozone: float = Field(..., description="O3 concentration (µg/m³)")


class HourlySeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: List[str] = Field(..., description="Sample timestamps in ISO format")
    pm10: List[Optional[float]] = Field(..., description="PM10 per sample (µg/m³)")
    pm2_5: List[Optional[float]] = Field(..., description="PM2.5 per sample (µg/m³)")
    ozone: List[Optional[float]] = Field(..., description="O3 per sample (µg/m³)")

    @model_validator(mode="after")
    def check_aligned(self) -> "HourlySeries":
        lengths = {len(self.time), len(self.pm10), len(self.pm2_5), len(self.ozone)}
        if len(lengths) != 1:
            raise ValueError(
                f"hourly arrays must share one length, got time={len(self.time)}, pm10={len(self.pm10)}, "
                f"pm2_5={len(self.pm2_5)}, ozone={len(self.ozone)}"
            )
        return self


class AirQualityReading(BaseModel):
    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    hourly: HourlySeries


class SeverityTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    color: str = Field(..., description="Hex color used for the tier")
    upper_bound: float = Field(..., description="Inclusive upper bound of the tier")


class PollutantRow(BaseModel):
    name: str
    value: float
    unit: str
