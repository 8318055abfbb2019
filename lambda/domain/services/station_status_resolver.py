"""
Station Status Resolver - online/delayed/offline pela idade da última observação
"""
from datetime import datetime, timedelta
from typing import Optional

from domain.alerts.primitives import StationStatus
from domain.constants import Thresholds


class StationStatusResolver:
    """Função pura: (última observação, agora) -> status"""

    ONLINE_MAX_AGE = timedelta(minutes=Thresholds.STATUS_ONLINE_MINUTES)
    DELAYED_MAX_AGE = timedelta(minutes=Thresholds.STATUS_DELAYED_MINUTES)

    @staticmethod
    def resolve(last_observed_at: Optional[datetime], now: datetime) -> StationStatus:
        """
        Args:
            last_observed_at: Instante da observação mais recente (aware)
            now: Instante de referência (aware)

        Returns:
            ONLINE se idade <= 15 min, DELAYED se <= 60 min, senão OFFLINE
        """
        if last_observed_at is None:
            return StationStatus.OFFLINE

        age = now - last_observed_at
        if age <= StationStatusResolver.ONLINE_MAX_AGE:
            return StationStatus.ONLINE
        if age <= StationStatusResolver.DELAYED_MAX_AGE:
            return StationStatus.DELAYED
        return StationStatus.OFFLINE


def resolve_station_status(last_observed_at: Optional[datetime], now: datetime) -> StationStatus:
    return StationStatusResolver.resolve(last_observed_at, now)
