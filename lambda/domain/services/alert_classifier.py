"""
Alert Classifier - Nível de alerta a partir da chuva acumulada
"""
from typing import Optional

from domain.alerts.primitives import AlertLevel
from domain.constants import Thresholds


class AlertClassifier:
    """
    Função pura (rain_1h, rain_24h, rajada?) -> nível de alerta

    Regras avaliadas em ordem de prioridade, a primeira que casar vence:
    1. severe se rain_24h >= 50 OU rain_1h >= 30
    2. alert se rain_1h >= 20
    3. attention se rain_1h >= 10
    4. normal

    A rajada é aceita por compatibilidade de assinatura mas nunca altera
    o nível: o vento só muda o tipo/mensagem do alerta gerado.
    """

    @staticmethod
    def classify(rain_1h: float, rain_24h: float, wind_gust: Optional[float] = None) -> AlertLevel:
        if rain_24h >= Thresholds.RAIN_24H_SEVERE or rain_1h >= Thresholds.RAIN_1H_SEVERE:
            return AlertLevel.SEVERE
        if rain_1h >= Thresholds.RAIN_1H_ALERT:
            return AlertLevel.ALERT
        if rain_1h >= Thresholds.RAIN_1H_ATTENTION:
            return AlertLevel.ATTENTION
        return AlertLevel.NORMAL


def classify_alert_level(rain_1h: float, rain_24h: float, wind_gust: Optional[float] = None) -> AlertLevel:
    """Atalho funcional para AlertClassifier.classify"""
    return AlertClassifier.classify(rain_1h, rain_24h, wind_gust)
