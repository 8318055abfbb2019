"""
Batching - Buscas concorrentes limitadas por lote, preservando a ordem de entrada
"""
import asyncio
from typing import Awaitable, Callable, List, Sequence, TypeVar

from domain.constants import API

T = TypeVar('T')
R = TypeVar('R')


async def gather_in_batches(
    items: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    batch_size: int = API.FETCH_BATCH_SIZE,
    return_exceptions: bool = False
) -> List[R]:
    """
    Executa `worker` para cada item, no máximo `batch_size` em paralelo

    Args:
        return_exceptions: Se True, exceções entram na lista no lugar do resultado

    Returns:
        Resultados na mesma ordem de `items`
    """
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")

    results: List[R] = []
    for start in range(0, len(items), batch_size):
        batch = items[start:start + batch_size]
        results.extend(await asyncio.gather(
            *(worker(item) for item in batch),
            return_exceptions=return_exceptions
        ))
    return results
