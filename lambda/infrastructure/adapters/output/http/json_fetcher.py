"""
JSON Fetcher - GET com tradução de erros HTTP/rede para UpstreamProviderException
Compartilhado pelos providers (INMET, Open-Meteo, RainViewer, feed interno)
"""
import asyncio
from typing import Any, Dict, Optional

import aiohttp

from domain.exceptions import UpstreamProviderException
from shared.config.aiohttp_session_manager import AiohttpSessionManager


async def fetch_json(
    session_manager: AiohttpSessionManager,
    url: str,
    provider: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None
) -> Any:
    """
    Busca JSON sem retentativas

    Args:
        provider: Nome do upstream (vai para os detalhes do erro)
        timeout: Timeout total desta chamada; None usa o da sessão

    Raises:
        UpstreamProviderException: status != 2xx, erro de rede, timeout ou corpo não-JSON
    """
    request_kwargs: Dict[str, Any] = {}
    if params is not None:
        request_kwargs['params'] = params
    request_timeout = session_manager.request_timeout(timeout)
    if request_timeout is not None:
        request_kwargs['timeout'] = request_timeout

    try:
        session = await session_manager.get_session()
        async with session.get(url, **request_kwargs) as response:
            status = response.status

            if status >= 400:
                raise UpstreamProviderException(
                    f"{provider} returned HTTP {status}",
                    details={"provider": provider, "status": status, "url": url}
                )

            return await response.json(content_type=None)

    except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
        raise UpstreamProviderException(
            f"{provider} request failed: {str(ex) or type(ex).__name__}",
            details={"provider": provider, "url": url}
        ) from ex
    except ValueError as ex:
        raise UpstreamProviderException(
            f"{provider} returned invalid JSON",
            details={"provider": provider, "url": url}
        ) from ex
