"""
Rain Aggregator - Acumulados móveis de chuva (30min, 1h, 24h)

Dois caminhos paralelos, mesma intenção numérica:
- observações de estação (precipitação desde a leitura anterior + instante)
- série horária pré-computada do modelo (soma dos N últimos elementos)
"""
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from domain.entities.observation import StationObservation
from domain.helpers.rounding import round_half_away
from domain.value_objects.rain_aggregates import RainAggregates

WINDOW_30MIN = timedelta(minutes=30)
WINDOW_1H = timedelta(hours=1)
ZERO = Decimal(0)


def _precipitation(value: Optional[float]) -> Decimal:
    """
    None e códigos negativos de erro de sensor contam como 0

    Soma em Decimal: o resultado não depende da ordem das leituras
    """
    if value is None or value < 0:
        return ZERO
    return Decimal(str(value))


class RainAggregator:
    """Redução de leituras brutas de precipitação em acumulados"""

    @staticmethod
    def from_observations(
        observations: Iterable[StationObservation],
        now: datetime
    ) -> Optional[RainAggregates]:
        """
        Soma a precipitação por janela relativa a `now`

        - last30min: leituras com now-30min <= t <= now
        - last1h: leituras com now-60min <= t <= now
        - last24h: todas as leituras fornecidas (a janela de 24h é
          responsabilidade da etapa de busca)
        - current: aproximado como last1h (não é taxa instantânea)

        Returns:
            RainAggregates arredondado, ou None se não houver observações
        """
        observations = list(observations)
        if not observations:
            return None

        rain_30min = ZERO
        rain_1h = ZERO
        rain_24h = ZERO

        for observation in observations:
            amount = _precipitation(observation.precipitation)
            rain_24h += amount

            age = now - observation.observed_at
            if age < timedelta(0):
                continue
            if age <= WINDOW_1H:
                rain_1h += amount
            if age <= WINDOW_30MIN:
                rain_30min += amount

        last_1h = round_half_away(rain_1h)
        return RainAggregates(
            current=last_1h,
            last_30min=round_half_away(rain_30min),
            last_1h=last_1h,
            last_24h=round_half_away(rain_24h)
        )

    @staticmethod
    def from_hourly_series(
        hourly_precipitation: Sequence[Optional[float]],
        current_precipitation: Optional[float] = None
    ) -> RainAggregates:
        """
        Soma os últimos elementos de uma série horária

        - last1h: último elemento
        - last24h: soma dos 24 últimos
        - last30min: metade da última hora (aproximação para dado horário)
        - current: precipitação corrente informada pelo modelo
        """
        last_24 = [_precipitation(v) for v in list(hourly_precipitation)[-24:]]
        rain_1h = last_24[-1] if last_24 else ZERO
        rain_24h = sum(last_24, ZERO)

        return RainAggregates(
            current=round_half_away(_precipitation(current_precipitation)),
            last_30min=round_half_away(rain_1h / 2),
            last_1h=round_half_away(rain_1h),
            last_24h=round_half_away(rain_24h)
        )
