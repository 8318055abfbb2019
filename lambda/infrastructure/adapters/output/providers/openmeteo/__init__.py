"""Open-Meteo Provider Package"""

from infrastructure.adapters.output.providers.openmeteo.openmeteo_provider import (
    OpenMeteoProvider,
    get_openmeteo_provider
)
from infrastructure.adapters.output.providers.openmeteo.openmeteo_geocoding_provider import (
    OpenMeteoGeocodingProvider
)

__all__ = ['OpenMeteoProvider', 'get_openmeteo_provider', 'OpenMeteoGeocodingProvider']
