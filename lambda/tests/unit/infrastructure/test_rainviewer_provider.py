"""
Unit Tests: RainViewer
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from domain.exceptions import UpstreamProviderException
from infrastructure.adapters.output.providers.rainviewer import RainViewerProvider

FETCH = 'infrastructure.adapters.output.providers.rainviewer.rainviewer_provider.fetch_json'


class TestRainViewerProvider:

    @pytest.mark.asyncio
    async def test_get_frames(self):
        payload = {
            'version': '2.0',
            'generated': 1736964000,
            'host': 'https://tilecache.rainviewer.com/',
            'radar': {
                'past': [{'time': 1736963400, 'path': '/v2/radar/a'}],
                'nowcast': [{'time': 1736964600, 'path': '/v2/radar/b'}]
            }
        }

        with patch(FETCH, AsyncMock(return_value=payload)):
            frames = await RainViewerProvider(session_manager=MagicMock()).get_frames()

        assert frames.host == 'https://tilecache.rainviewer.com'
        assert frames.latest_index == 1
        assert frames.nowcast[0].path == '/v2/radar/b'

    @pytest.mark.asyncio
    async def test_invalid_payload(self):
        with patch(FETCH, AsyncMock(return_value={'radar': {}})):
            with pytest.raises(UpstreamProviderException):
                await RainViewerProvider(session_manager=MagicMock()).get_frames()
