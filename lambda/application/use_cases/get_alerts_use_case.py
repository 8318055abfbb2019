"""
Async Use Case: Get Alerts
Avisos do INMET; sem avisos, alertas calculados a partir das leituras.
Resultado ordenado por severidade (cache de 10 min com fallback stale).
"""
from typing import List, Sequence

from ddtrace import tracer

from application.ports.input.use_case_ports import IGetAlertsUseCase
from application.ports.output.alert_feed_port import IAlertSource
from application.ports.output.cache_store_port import ICacheStore
from application.dtos.responses import AlertsResponse
from application.services.cache_service import CacheService
from application.services.fallback_chain import FallbackChain
from domain.constants import Cache
from domain.entities.alert import AlertRecord
from domain.services.alert_aggregator import sort_alerts, summarize_alerts
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetAlertsUseCase(IGetAlertsUseCase):

    def __init__(self, alert_sources: Sequence[IAlertSource], cache: ICacheStore):
        self.alert_sources = list(alert_sources)
        self.cache = cache

    async def _collect(self) -> List[AlertRecord]:
        chain = FallbackChain([(source.name, source.fetch_alerts) for source in self.alert_sources])
        source_name, alerts = await chain.run()
        logger.info("Alerts collected", source=source_name or "none", total=len(alerts))
        return sort_alerts(alerts)

    @tracer.wrap(resource="use_case.get_alerts")
    async def execute(self) -> AlertsResponse:
        result = await CacheService.get_or_fetch(self.cache, Cache.KEY_ALERTS, self._collect)
        alerts = result.data
        return AlertsResponse(
            alerts=alerts,
            summary=summarize_alerts(alerts),
            timestamp=result.timestamp,
            cached=result.cached,
            stale=result.stale
        )
