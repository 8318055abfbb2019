"""
Serviço de cache genérico para a camada de aplicação.
Leitura com TTL, busca no upstream em caso de miss e fallback stale em falha.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

from application.ports.output.cache_store_port import ICacheStore
from domain.exceptions import UpstreamProviderException
from shared.config.logger_config import get_logger
from shared.utils.datetime_parser import DateTimeParser

logger = get_logger(child=True)


@dataclass(frozen=True)
class CacheResult:
    """Dado + procedência (cache fresco, busca nova ou cópia stale)"""
    data: Any
    cached: bool
    stale: bool
    timestamp: str  # ISO 8601 UTC da criação da entrada


def _entry_timestamp(created_at: float) -> str:
    return DateTimeParser.to_iso_utc(datetime.fromtimestamp(created_at, tz=timezone.utc))


class CacheService:
    """Coordena leitura/gravação no cache sem expor o adapter aos use cases"""

    @staticmethod
    async def get_or_fetch(
        cache: ICacheStore,
        key: str,
        fetcher: Callable[[], Awaitable[Any]]
    ) -> CacheResult:
        """
        Args:
            cache: Instância de cache do tipo de dado
            key: Chave da entrada
            fetcher: Coroutine factory que busca o dado no upstream

        Returns:
            CacheResult (cached=True em hit, stale=True em fallback)

        Raises:
            UpstreamProviderException: Upstream falhou e não há entrada antiga
        """
        entry = cache.get_entry(key)
        if entry is not None:
            logger.info("Cache hit", cache_key=key)
            return CacheResult(entry.data, cached=True, stale=False,
                               timestamp=_entry_timestamp(entry.created_at))

        logger.info("Cache miss", cache_key=key)

        try:
            data = await fetcher()
        except UpstreamProviderException as e:
            stale_entry = cache.peek(key)
            if stale_entry is None:
                logger.error("Upstream failed without cached fallback", cache_key=key, error=e.message)
                raise

            logger.warning("Serving stale cache after upstream failure", cache_key=key, error=e.message)
            return CacheResult(stale_entry.data, cached=True, stale=True,
                               timestamp=_entry_timestamp(stale_entry.created_at))

        cache.set(key, data)
        created = cache.peek(key)
        return CacheResult(data, cached=False, stale=False,
                           timestamp=_entry_timestamp(created.created_at))
