"""
Weather Feed Alert Source - Alertas calculados a partir do próprio /api/weather

Segunda estratégia da cadeia de alertas: consulta as capitais dos estados
monitorados via HTTP (timeout fixo de 5s por chamada) e sintetiza um alerta
por estação com nível diferente de normal.
"""
from typing import List, Optional, Sequence

from ddtrace import tracer
from pydantic import ValidationError

from application.ports.output.alert_feed_port import IAlertSource
from application.services.batching import gather_in_batches
from domain.alerts.primitives import AlertLevel
from domain.constants import API
from domain.entities.alert import AlertRecord
from domain.exceptions import UpstreamProviderException
from domain.services.alert_synthesizer import AlertSynthesizer
from infrastructure.adapters.output.http.json_fetcher import fetch_json
from infrastructure.adapters.output.providers.internal.schemas import FeedEnvelopeSchema, FeedReadingSchema
from shared.config.aiohttp_session_manager import AiohttpSessionManager, get_aiohttp_session_manager
from shared.config.logger_config import get_logger
from shared.config.settings import internal_base_url

logger = get_logger(child=True)


class WeatherFeedAlertSource(IAlertSource):

    name = "weather-feed"

    def __init__(
        self,
        capital_slugs: Sequence[str],
        base_url: Optional[str] = None,
        session_manager: Optional[AiohttpSessionManager] = None,
        timeout: float = API.SELF_CALL_TIMEOUT
    ):
        self.capital_slugs = list(capital_slugs)
        self.base_url = internal_base_url() if base_url is None else base_url.rstrip('/')
        self.timeout = timeout
        self.session_manager = session_manager or get_aiohttp_session_manager()

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    async def _fetch_capital(self, slug: str) -> List[FeedReadingSchema]:
        payload = await fetch_json(
            self.session_manager,
            f"{self.base_url}/api/weather",
            "Weather feed",
            params={'capital': slug},
            timeout=self.timeout
        )
        try:
            envelope = FeedEnvelopeSchema.model_validate(payload)
        except ValidationError as e:
            raise UpstreamProviderException(
                "Weather feed payload failed validation",
                details={"capital": slug, "error": str(e).splitlines()[0]}
            ) from e
        return envelope.data

    @staticmethod
    def _to_alert(reading: FeedReadingSchema) -> Optional[AlertRecord]:
        return AlertSynthesizer.build(
            station_id=reading.stationId,
            station_name=reading.stationName,
            level=AlertLevel(reading.alertLevel),
            start_time=reading.timestamp,
            rain_1h=reading.rain.last1h,
            rain_24h=reading.rain.last24h,
            wind_gust=reading.wind.gust or 0.0
        )

    @tracer.wrap(resource="weather_feed.fetch_alerts")
    async def fetch_alerts(self) -> List[AlertRecord]:
        """
        Raises:
            UpstreamProviderException: Todas as capitais falharam
        """
        if not self.enabled:
            logger.info("Weather feed disabled (production without PUBLIC_BASE_URL)")
            return []

        results = await gather_in_batches(self.capital_slugs, self._fetch_capital, return_exceptions=True)

        alerts: List[AlertRecord] = []
        failures = 0
        for slug, result in zip(self.capital_slugs, results):
            if isinstance(result, BaseException):
                failures += 1
                logger.warning("Weather feed capital failed", capital=slug, error=str(result))
                continue
            for reading in result:
                alert = self._to_alert(reading)
                if alert is not None:
                    alerts.append(alert)

        if self.capital_slugs and failures == len(self.capital_slugs):
            raise UpstreamProviderException(
                "Weather feed unavailable",
                details={"capitals": self.capital_slugs}
            )

        return alerts
