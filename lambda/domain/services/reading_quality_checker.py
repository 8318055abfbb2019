"""
Reading Quality Checker - Avisos de consistência dos acumulados

As janelas de agregação são independentes; com lacunas nos dados
brutos, last24h < last1h é possível. Os valores são aceitos como vieram
e a inconsistência é apenas sinalizada.
"""
from typing import Tuple

from domain.value_objects.rain_aggregates import RainAggregates

RAIN_24H_BELOW_1H = "RAIN_24H_BELOW_1H"
RAIN_1H_BELOW_30MIN = "RAIN_1H_BELOW_30MIN"


class ReadingQualityChecker:

    @staticmethod
    def check(rain: RainAggregates) -> Tuple[str, ...]:
        warnings = []
        if rain.last_24h < rain.last_1h:
            warnings.append(RAIN_24H_BELOW_1H)
        if rain.last_1h < rain.last_30min:
            warnings.append(RAIN_1H_BELOW_30MIN)
        return tuple(warnings)
