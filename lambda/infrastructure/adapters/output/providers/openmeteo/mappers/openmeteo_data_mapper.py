"""
OpenMeteo Data Mapper - Transforma dados da API Open-Meteo para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from domain.entities.location import GeocodedLocation
from domain.entities.point_forecast import PointForecast
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.providers.openmeteo.schemas import (
    OpenMeteoForecastSchema,
    OpenMeteoGeocodingResultSchema,
)
from shared.utils.datetime_parser import DateTimeParser


class OpenMeteoDataMapper:
    """
    Mapper para transformar respostas da API Open-Meteo em entities de domínio

    Responsabilidade: Traduzir formato Open-Meteo → Domain entities
    """

    @staticmethod
    def map_point_forecast(schema: OpenMeteoForecastSchema) -> PointForecast:
        """
        Condições atuais + séries horárias (últimas 24h + hora corrente)

        Raises:
            ValueError: current.time em formato inválido
        """
        current = schema.current
        hourly = schema.hourly
        return PointForecast(
            latitude=schema.latitude,
            longitude=schema.longitude,
            observed_at=DateTimeParser.parse_openmeteo(current.time, schema.utc_offset_seconds),
            precipitation=current.precipitation,
            temperature=current.temperature_2m,
            humidity=current.relative_humidity_2m,
            wind_speed=current.wind_speed_10m,
            wind_direction=current.wind_direction_10m,
            wind_gust=current.wind_gusts_10m,
            pressure=current.surface_pressure,
            hourly_precipitation=tuple(hourly.precipitation),
            hourly_temperature=tuple(hourly.temperature_2m),
            hourly_humidity=tuple(hourly.relative_humidity_2m)
        )

    @staticmethod
    def map_geocoding_result(schema: OpenMeteoGeocodingResultSchema) -> GeocodedLocation:
        return GeocodedLocation(
            name=schema.name,
            state=schema.admin1 or '',
            country=schema.country or '',
            coordinates=Coordinates(latitude=schema.latitude, longitude=schema.longitude),
            population=schema.population or 0,
            elevation=schema.elevation or 0.0,
            country_code=schema.country_code or ''
        )
