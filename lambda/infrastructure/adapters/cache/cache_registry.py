"""
Cache Registry - Uma instância de TtlCache por tipo de dado

Singleton global: em Lambda a variável persiste entre warm starts.
"""
import time
from typing import Callable, Optional

from domain.constants import Cache
from infrastructure.adapters.cache.in_memory_ttl_cache import TtlCache


class CacheRegistry:

    def __init__(self, clock: Callable[[], float] = time.time):
        self.stations = TtlCache(Cache.TTL_STATIONS, clock, name="stations")
        self.station_metadata = TtlCache(Cache.TTL_STATION_METADATA, clock, name="station_metadata")
        self.weather = TtlCache(Cache.TTL_WEATHER, clock, name="weather")
        self.state_weather = TtlCache(Cache.TTL_STATE_WEATHER, clock, name="state_weather")
        self.alerts = TtlCache(Cache.TTL_ALERTS, clock, name="alerts")
        self.radar = TtlCache(Cache.TTL_RADAR, clock, name="radar")

    def clear_all(self) -> None:
        for cache in (self.stations, self.station_metadata, self.weather,
                      self.state_weather, self.alerts, self.radar):
            cache.clear()


_registry_instance: Optional[CacheRegistry] = None


def get_cache_registry() -> CacheRegistry:
    """Retorna instância singleton do registro de caches"""
    global _registry_instance

    if _registry_instance is None:
        _registry_instance = CacheRegistry()

    return _registry_instance


def reset_cache_registry() -> None:
    """Descarta todos os caches (útil para testes)"""
    global _registry_instance
    _registry_instance = None
