"""
Fallback Chain - Estratégias ordenadas; a primeira com resultado não vazio vence
"""
from typing import Awaitable, Callable, List, Sequence, Tuple, TypeVar

from domain.exceptions import DomainException, UpstreamProviderException
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

T = TypeVar('T')

Strategy = Tuple[str, Callable[[], Awaitable[List[T]]]]


class FallbackChain:
    """
    Executa estratégias em ordem:
    - resultado não vazio: retorna imediatamente
    - lista vazia: tenta a próxima
    - falha: registra e tenta a próxima

    Se todas falharam, lança UpstreamProviderException (o chamador decide
    usar cache stale). Se alguma respondeu vazio, retorna [].
    """

    def __init__(self, strategies: Sequence[Strategy]):
        self.strategies = list(strategies)

    async def run(self) -> Tuple[str, List[T]]:
        """
        Returns:
            (nome da estratégia, resultado); nome vazio quando nenhuma trouxe dados
        """
        failures = []

        for name, strategy in self.strategies:
            try:
                result = await strategy()
            except (DomainException, ValueError) as e:
                logger.warning("Fallback strategy failed", strategy=name, error=str(e))
                failures.append(name)
                continue

            if result:
                logger.info("Fallback strategy succeeded", strategy=name, total=len(result))
                return name, list(result)

            logger.info("Fallback strategy returned no data", strategy=name)

        if self.strategies and len(failures) == len(self.strategies):
            raise UpstreamProviderException(
                "All alert sources failed",
                details={"strategies": failures}
            )

        return "", []
