"""
Weather Provider Factory - criação centralizada dos providers upstream
"""
from typing import List, Optional

from application.ports.output.alert_feed_port import IAlertSource
from application.ports.output.geocoding_provider_port import IGeocodingProvider
from application.ports.output.point_forecast_provider_port import IPointForecastProvider
from application.ports.output.radar_provider_port import IRadarProvider
from application.ports.output.station_catalog_port import IStationCatalog
from application.ports.output.station_observation_provider_port import IStationObservationProvider
from domain.constants import Monitoring
from infrastructure.adapters.output.providers.inmet import InmetAlertFeed, InmetStationProvider
from infrastructure.adapters.output.providers.internal import WeatherFeedAlertSource
from infrastructure.adapters.output.providers.openmeteo import OpenMeteoGeocodingProvider, get_openmeteo_provider
from infrastructure.adapters.output.providers.rainviewer import RainViewerProvider


class WeatherProviderFactory:
    """
    Factory simples para gerenciar os providers.
    Mantém lazy-loading e singleton para reuso em execução quente da Lambda.
    """

    def __init__(self):
        self._station_provider: Optional[IStationObservationProvider] = None
        self._geocoding_provider: Optional[IGeocodingProvider] = None
        self._radar_provider: Optional[IRadarProvider] = None
        self._alert_sources: Optional[List[IAlertSource]] = None

    def get_station_provider(self) -> IStationObservationProvider:
        if self._station_provider is None:
            self._station_provider = InmetStationProvider()
        return self._station_provider

    def get_point_forecast_provider(self) -> IPointForecastProvider:
        return get_openmeteo_provider()

    def get_geocoding_provider(self) -> IGeocodingProvider:
        if self._geocoding_provider is None:
            self._geocoding_provider = OpenMeteoGeocodingProvider()
        return self._geocoding_provider

    def get_radar_provider(self) -> IRadarProvider:
        if self._radar_provider is None:
            self._radar_provider = RainViewerProvider()
        return self._radar_provider

    def get_alert_sources(self, catalog: IStationCatalog) -> List[IAlertSource]:
        """Ordem da cadeia: avisos oficiais, depois alertas calculados"""
        if self._alert_sources is None:
            capital_slugs = [
                capital.slug
                for capital in (catalog.get_capital_by_state(uf) for uf in Monitoring.MONITORED_STATES)
                if capital is not None
            ]
            self._alert_sources = [
                InmetAlertFeed(),
                WeatherFeedAlertSource(capital_slugs=capital_slugs)
            ]
        return self._alert_sources


# Factory singleton global
_factory_instance: Optional[WeatherProviderFactory] = None


def get_weather_provider_factory() -> WeatherProviderFactory:
    """Retorna singleton da factory"""
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherProviderFactory()

    return _factory_instance
