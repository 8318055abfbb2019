"""
In-Memory TTL Cache - Cache local ao processo (sobrevive a warm starts do Lambda)

Cada instância tem um TTL fixo; a idade é medida pelo relógio injetado.
Entradas expiradas continuam disponíveis via peek() para fallback stale.
"""
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional


@dataclass(frozen=True)
class CacheEntry:
    data: Any
    created_at: float  # epoch (segundos) do relógio do cache


class TtlCache:
    """
    Cache chave -> valor com TTL por instância

    Uso:
        cache = TtlCache(ttl_seconds=300)
        cache.set("station_A701", payload)
        cache.get("station_A701")  # None depois de 300s
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time, name: str = "cache"):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self.name = name
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.created_at < self.ttl_seconds

    def get_entry(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None or not self._is_fresh(entry):
            return None
        return entry

    def get(self, key: str) -> Optional[Any]:
        entry = self.get_entry(key)
        return entry.data if entry is not None else None

    def peek(self, key: str) -> Optional[CacheEntry]:
        return self._entries.get(key)

    def set(self, key: str, data: Any) -> None:
        self._entries[key] = CacheEntry(data=data, created_at=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
