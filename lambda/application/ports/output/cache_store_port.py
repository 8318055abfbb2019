"""
Output Port: Interface para o cache em memória com TTL
Usado para desacoplar use cases do armazenamento (dict local, Redis, etc.)
"""
from typing import Any, Optional, Protocol


class ICacheEntry(Protocol):
    data: Any
    created_at: float


class ICacheStore(Protocol):
    """Interface para cache com TTL por instância"""

    ttl_seconds: float

    def get(self, key: str) -> Optional[Any]:
        """Valor se a entrada existe e ainda está dentro do TTL"""
        ...

    def set(self, key: str, data: Any) -> None:
        ...

    def get_entry(self, key: str) -> Optional[ICacheEntry]:
        """Entrada fresca (com instante de criação)"""
        ...

    def peek(self, key: str) -> Optional[ICacheEntry]:
        """Entrada ignorando a idade (fallback stale)"""
        ...

    def clear(self) -> None:
        ...
