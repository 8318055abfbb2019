"""
Alert Aggregator - Ordenação por severidade e resumo de contagens
"""
from typing import Dict, Iterable, List

from domain.alerts.primitives import AlertLevel
from domain.entities.alert import AlertRecord


class AlertAggregator:

    @staticmethod
    def sort_by_severity(alerts: Iterable[AlertRecord]) -> List[AlertRecord]:
        """
        severe(0) < alert(1) < attention(2)

        sorted() é estável: alertas de mesmo nível mantêm a ordem original.
        """
        return sorted(alerts, key=lambda alert: alert.level.rank)

    @staticmethod
    def summarize(alerts: Iterable[AlertRecord]) -> Dict[str, int]:
        summary = {
            AlertLevel.SEVERE.value: 0,
            AlertLevel.ALERT.value: 0,
            AlertLevel.ATTENTION.value: 0,
        }
        for alert in alerts:
            if alert.level.value in summary:
                summary[alert.level.value] += 1
        return summary


def sort_alerts(alerts: Iterable[AlertRecord]) -> List[AlertRecord]:
    return AlertAggregator.sort_by_severity(alerts)


def summarize_alerts(alerts: Iterable[AlertRecord]) -> Dict[str, int]:
    return AlertAggregator.summarize(alerts)
