"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .cache_store_port import ICacheStore
from .station_catalog_port import IStationCatalog
from .station_observation_provider_port import IStationObservationProvider
from .point_forecast_provider_port import IPointForecastProvider
from .geocoding_provider_port import IGeocodingProvider
from .alert_feed_port import IAlertSource
from .radar_provider_port import IRadarProvider
