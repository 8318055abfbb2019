"""
Schemas dos payloads do Open-Meteo (forecast e geocoding)
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OpenMeteoModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OpenMeteoCurrentSchema(OpenMeteoModel):
    time: str
    temperature_2m: Optional[float] = None
    relative_humidity_2m: Optional[float] = None
    precipitation: Optional[float] = None
    rain: Optional[float] = None
    weather_code: Optional[int] = None
    wind_speed_10m: Optional[float] = None  # km/h
    wind_direction_10m: Optional[float] = None
    wind_gusts_10m: Optional[float] = None  # km/h
    surface_pressure: Optional[float] = None


class OpenMeteoHourlySchema(OpenMeteoModel):
    time: List[str] = Field(default_factory=list)
    temperature_2m: List[Optional[float]] = Field(default_factory=list)
    relative_humidity_2m: List[Optional[float]] = Field(default_factory=list)
    precipitation: List[Optional[float]] = Field(default_factory=list)
    rain: List[Optional[float]] = Field(default_factory=list)


class OpenMeteoForecastSchema(OpenMeteoModel):
    """Um ponto da resposta (objeto único ou item da lista multi-coordenada)"""
    latitude: float
    longitude: float
    utc_offset_seconds: int = 0
    current: OpenMeteoCurrentSchema
    hourly: OpenMeteoHourlySchema = Field(default_factory=OpenMeteoHourlySchema)


class OpenMeteoGeocodingResultSchema(OpenMeteoModel):
    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None
    country_code: Optional[str] = None
    admin1: Optional[str] = None  # estado
    population: Optional[int] = None
    elevation: Optional[float] = None


class OpenMeteoGeocodingSchema(OpenMeteoModel):
    # Sem resultados a API omite a chave
    results: List[OpenMeteoGeocodingResultSchema] = Field(default_factory=list)
