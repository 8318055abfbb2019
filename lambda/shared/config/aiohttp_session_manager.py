"""
Sessão aiohttp compartilhada pelos providers upstream (INMET, Open-Meteo, RainViewer)
Uma sessão por event loop; sobrevive entre invocações warm do Lambda
"""
import asyncio
import threading
from dataclasses import dataclass
from typing import Dict, Optional

import aiohttp

from domain.constants import API
from shared.config.logger_config import get_logger
from shared.config.settings import HTTP_TIMEOUT_SECONDS

logger = get_logger(child=True)


@dataclass(frozen=True)
class SessionSettings:
    """Limites de conexão e timeouts aplicados a toda chamada de saída"""
    total_timeout: float = HTTP_TIMEOUT_SECONDS
    connect_timeout: float = API.HTTP_TIMEOUT_CONNECT
    sock_read_timeout: float = API.HTTP_TIMEOUT_READ
    limit: int = API.HTTP_CONNECTION_LIMIT
    limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST
    ttl_dns_cache: int = API.DNS_CACHE_TTL

    def client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )


# INMET recusa clientes sem User-Agent de navegador
DEFAULT_HEADERS: Dict[str, str] = {
    'User-Agent': API.INMET_USER_AGENT,
    'Accept': 'application/json',
}


class AiohttpSessionManager:
    """
    Singleton dono da ClientSession

    Uma ClientSession por event loop: cada thread que roda run_async tem o
    seu loop (servidor local com threads), e uma sessão só pode ser usada no
    loop em que foi criada. Sessões de loops já fechados são descartadas.
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(self, settings: Optional[SessionSettings] = None):
        self.settings = settings or SessionSettings()
        self._sessions: Dict[asyncio.AbstractEventLoop, aiohttp.ClientSession] = {}
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> 'AiohttpSessionManager':
        if cls._instance is None:
            cls._instance = cls()
            logger.info(
                "Gerenciador de sessão HTTP criado",
                total_timeout=cls._instance.settings.total_timeout,
                limit_per_host=cls._instance.settings.limit_per_host
            )
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def _prune_closed_loops(self) -> None:
        for loop in [loop for loop in self._sessions if loop.is_closed()]:
            del self._sessions[loop]

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Sessão do loop corrente (cria sob demanda)

        Raises:
            RuntimeError: chamado fora de um event loop
        """
        loop = asyncio.get_running_loop()
        with self._lock:
            session = self._sessions.get(loop)
            if session is not None and not session.closed:
                return session

            self._prune_closed_loops()
            session = aiohttp.ClientSession(
                timeout=self.settings.client_timeout(),
                connector=aiohttp.TCPConnector(
                    limit=self.settings.limit,
                    limit_per_host=self.settings.limit_per_host,
                    ttl_dns_cache=self.settings.ttl_dns_cache
                ),
                headers=DEFAULT_HEADERS
            )
            self._sessions[loop] = session

        logger.debug("Sessão HTTP aberta", sessions=len(self._sessions))
        return session

    @staticmethod
    def request_timeout(seconds: Optional[float]) -> Optional[aiohttp.ClientTimeout]:
        """Timeout total de uma chamada específica (None mantém o da sessão)"""
        if seconds is None:
            return None
        return aiohttp.ClientTimeout(total=seconds)

    async def cleanup(self) -> None:
        """Fecha a sessão do loop corrente"""
        with self._lock:
            session = self._sessions.pop(asyncio.get_running_loop(), None)
        if session is None or session.closed:
            return
        try:
            await session.close()
        except aiohttp.ClientError as e:
            logger.warning("Falha ao fechar sessão HTTP", error=str(e))


def get_aiohttp_session_manager() -> AiohttpSessionManager:
    return AiohttpSessionManager.get_instance()
