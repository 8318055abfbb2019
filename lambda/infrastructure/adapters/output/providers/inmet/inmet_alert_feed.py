"""
INMET Alert Feed - Avisos meteorológicos ativos (apiprevmet3.inmet.gov.br)
"""
from typing import Any, List, Optional, Sequence

from ddtrace import tracer
from pydantic import ValidationError

from application.ports.output.alert_feed_port import IAlertSource
from domain.constants import API, Monitoring
from domain.entities.alert import AlertRecord
from domain.exceptions import UpstreamProviderException
from infrastructure.adapters.output.http.json_fetcher import fetch_json
from infrastructure.adapters.output.providers.inmet.mappers import InmetMapper
from infrastructure.adapters.output.providers.inmet.schemas import InmetAlertSchema
from shared.config.aiohttp_session_manager import AiohttpSessionManager, get_aiohttp_session_manager
from shared.config.logger_config import get_logger
from shared.utils.datetime_parser import DateTimeParser

logger = get_logger(child=True)


def _notice_items(payload: Any) -> List[Any]:
    """Lista de avisos, ou objeto agrupando avisos de hoje/futuros"""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        items = []
        for group in ('hoje', 'futuro'):
            if isinstance(payload.get(group), list):
                items.extend(payload[group])
        return items
    raise UpstreamProviderException(
        "INMET alerts payload has unexpected format",
        details={"type": type(payload).__name__}
    )


class InmetAlertFeed(IAlertSource):
    """Avisos oficiais filtrados pelos estados monitorados"""

    name = "inmet"

    def __init__(
        self,
        session_manager: Optional[AiohttpSessionManager] = None,
        url: str = API.INMET_ALERTS_URL,
        monitored_states: Sequence[str] = Monitoring.MONITORED_STATES
    ):
        self.url = url
        self.monitored_states = tuple(monitored_states)
        self.session_manager = session_manager or get_aiohttp_session_manager()

    @tracer.wrap(resource="inmet.fetch_alerts")
    async def fetch_alerts(self) -> List[AlertRecord]:
        payload = await fetch_json(self.session_manager, self.url, "INMET alerts")
        now_iso = DateTimeParser.to_iso_utc(DateTimeParser.utc_now())

        alerts = []
        for item in _notice_items(payload or []):
            try:
                schema = InmetAlertSchema.model_validate(item)
            except ValidationError as e:
                logger.warning("Invalid INMET alert skipped", error=str(e).splitlines()[0])
                continue

            alert = InmetMapper.to_alert(schema, self.monitored_states, now_iso)
            if alert is not None:
                alerts.append(alert)

        logger.info("INMET alerts fetched", total=len(alerts))
        return alerts
