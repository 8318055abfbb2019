"""
Testes do servidor local (Flask) com o feed interno de alertas

O feed calculado de /api/alerts chama o próprio /api/weather via HTTP; no
servidor local essa requisição aninhada é atendida por outra thread do
werkzeug enquanto a primeira ainda está rodando o seu event loop.
"""
import threading
from unittest.mock import AsyncMock, MagicMock

import pytest
from werkzeug.serving import make_server

from domain.alerts.primitives import AlertLevel
from infrastructure.adapters.input.lambda_handler import get_or_create_event_loop, run_async
from infrastructure.adapters.output.providers.internal.weather_feed_alert_source import WeatherFeedAlertSource
from local_server import app
from tests.integration.conftest import recent_observations

pytestmark = pytest.mark.integration


@pytest.fixture
def threaded_server():
    """local_server.app numa porta livre, atendendo cada requisição em uma thread"""
    server = make_server('127.0.0.1', 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    thread.join(timeout=5)


def _empty_inmet_feed():
    source = MagicMock()
    source.name = 'inmet'
    source.fetch_alerts = AsyncMock(return_value=[])
    return source


class TestLocalServerAlerts:

    def test_capital_weather_through_local_server(self, providers):
        providers.station_provider.get_observations = AsyncMock(
            return_value=recent_observations(rain_last_hour=35.0)
        )

        response = app.test_client().get('/api/weather?capital=sao-paulo')

        assert response.status_code == 200
        assert {item['alertLevel'] for item in response.get_json()['data']} == {'severe'}

    def test_alerts_synthesized_from_nested_weather_call(self, providers, threaded_server):
        providers.station_provider.get_observations = AsyncMock(
            return_value=recent_observations(rain_last_hour=35.0)
        )
        providers.alert_sources = [
            _empty_inmet_feed(),
            WeatherFeedAlertSource(['sao-paulo'], base_url=threaded_server),
        ]

        response = app.test_client().get('/api/alerts')

        assert response.status_code == 200
        body = response.get_json()
        assert body['total'] == 2
        assert {alert['level'] for alert in body['data']} == {AlertLevel.SEVERE.value}
        assert body['summary']['severe'] == 2

    def test_unknown_api_route(self):
        response = app.test_client().get('/api/unknown')

        assert response.status_code == 404
        assert 'GET /api/alerts' in response.get_json()['routes']


class TestEventLoopPerThread:

    def test_loop_reused_within_thread(self):
        assert get_or_create_event_loop() is get_or_create_event_loop()

    def test_each_thread_gets_its_own_loop(self):
        loops = []
        worker = threading.Thread(target=lambda: loops.append(get_or_create_event_loop()))
        worker.start()
        worker.join()

        assert loops[0] is not get_or_create_event_loop()
        loops[0].close()

    def test_run_async_inside_running_loop_of_other_thread(self):
        started, release = threading.Event(), threading.Event()

        async def blocking():
            started.set()
            release.wait(timeout=5)
            return 'outer'

        async def nested():
            return 'inner'

        results = {}
        worker = threading.Thread(target=lambda: results.setdefault('outer', run_async(blocking())))
        worker.start()
        started.wait(timeout=5)

        results['inner'] = run_async(nested())
        release.set()
        worker.join()

        assert results == {'outer': 'outer', 'inner': 'inner'}
