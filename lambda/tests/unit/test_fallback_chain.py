"""
Testes da cadeia de estratégias de alertas
"""
import pytest
from unittest.mock import AsyncMock

from application.services.fallback_chain import FallbackChain
from domain.exceptions import UpstreamProviderException


class TestFallbackChain:

    @pytest.mark.asyncio
    async def test_first_non_empty_wins(self):
        second = AsyncMock(return_value=['calculated'])
        chain = FallbackChain([
            ('inmet', AsyncMock(return_value=['official'])),
            ('weather-feed', second),
        ])

        name, result = await chain.run()

        assert (name, result) == ('inmet', ['official'])
        second.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_result_falls_through(self):
        chain = FallbackChain([
            ('inmet', AsyncMock(return_value=[])),
            ('weather-feed', AsyncMock(return_value=['calculated'])),
        ])

        assert await chain.run() == ('weather-feed', ['calculated'])

    @pytest.mark.asyncio
    async def test_failure_falls_through(self):
        chain = FallbackChain([
            ('inmet', AsyncMock(side_effect=UpstreamProviderException("HTTP 500"))),
            ('weather-feed', AsyncMock(return_value=['calculated'])),
        ])

        assert await chain.run() == ('weather-feed', ['calculated'])

    @pytest.mark.asyncio
    async def test_all_empty_returns_empty(self):
        chain = FallbackChain([
            ('inmet', AsyncMock(side_effect=UpstreamProviderException("HTTP 500"))),
            ('weather-feed', AsyncMock(return_value=[])),
        ])

        assert await chain.run() == ('', [])

    @pytest.mark.asyncio
    async def test_all_failed_raises(self):
        chain = FallbackChain([
            ('inmet', AsyncMock(side_effect=UpstreamProviderException("HTTP 500"))),
            ('weather-feed', AsyncMock(side_effect=ValueError("bad payload"))),
        ])

        with pytest.raises(UpstreamProviderException) as exc_info:
            await chain.run()

        assert exc_info.value.details == {'strategies': ['inmet', 'weather-feed']}
