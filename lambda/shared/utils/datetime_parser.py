"""
DateTime Parser Utility
Conversão dos formatos de data/hora das APIs upstream para datetimes aware em UTC
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from domain.constants import App


class DateTimeParser:
    """Parse de datas do INMET e Open-Meteo"""

    DEFAULT_TIMEZONE = App.TIMEZONE

    @staticmethod
    def utc_now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def to_iso_utc(value: datetime) -> str:
        """
        Formata instante em ISO 8601 UTC com sufixo Z

        Examples:
            >>> DateTimeParser.to_iso_utc(datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc))
            '2025-01-15T12:00:00.000Z'
        """
        utc_value = value.astimezone(timezone.utc)
        return utc_value.strftime('%Y-%m-%dT%H:%M:%S.') + f"{utc_value.microsecond // 1000:03d}Z"

    @staticmethod
    def to_local(value: datetime, tz_name: str = DEFAULT_TIMEZONE) -> datetime:
        return value.astimezone(ZoneInfo(tz_name))

    @staticmethod
    def parse_inmet(date_str: str, hour_str: str) -> datetime:
        """
        Combina DT_MEDICAO (YYYY-MM-DD) e HR_MEDICAO (HHMM ou HH:MM), ambos em UTC

        Raises:
            ValueError: Formato inválido

        Examples:
            >>> DateTimeParser.parse_inmet("2025-01-15", "1200")
            datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
        """
        digits = hour_str.strip().replace(':', '')
        if len(digits) == 3:
            digits = f"0{digits}"
        if len(digits) != 4 or not digits.isdigit():
            raise ValueError(f"Invalid INMET hour: {hour_str}")

        parsed = datetime.strptime(f"{date_str.strip()} {digits}", "%Y-%m-%d %H%M")
        return parsed.replace(tzinfo=timezone.utc)

    @staticmethod
    def parse_openmeteo(time_str: str, utc_offset_seconds: int = 0) -> datetime:
        """
        Open-Meteo retorna horário local sem offset ("2025-01-15T09:00")
        acompanhado de utc_offset_seconds na raiz do payload
        """
        parsed = datetime.fromisoformat(time_str)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone(timedelta(seconds=utc_offset_seconds)))
        return parsed.astimezone(timezone.utc)

    @staticmethod
    def parse_iso(value: Optional[str]) -> Optional[datetime]:
        """ISO 8601 com ou sem offset (sem offset = horário de Brasília)"""
        if not value:
            return None
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=ZoneInfo(DateTimeParser.DEFAULT_TIMEZONE))
        return parsed
