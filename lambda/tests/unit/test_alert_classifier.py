"""
Testes do classificador de nível de alerta por chuva acumulada
"""
import pytest

from domain.alerts.primitives import AlertLevel
from domain.services.alert_classifier import AlertClassifier, classify_alert_level


class TestAlertClassifier:

    @pytest.mark.parametrize("rain_1h, rain_24h, expected", [
        (0.0, 0.0, AlertLevel.NORMAL),
        (9.9, 9.9, AlertLevel.NORMAL),
        (10.0, 10.0, AlertLevel.ATTENTION),
        (19.9, 19.9, AlertLevel.ATTENTION),
        (20.0, 20.0, AlertLevel.ALERT),
        (29.9, 49.9, AlertLevel.ALERT),
        (30.0, 30.0, AlertLevel.SEVERE),
        (0.0, 50.0, AlertLevel.SEVERE),
        (5.0, 49.9, AlertLevel.NORMAL),
    ])
    def test_thresholds(self, rain_1h, rain_24h, expected):
        """REGRA: limiares inclusivos 10/20/30 mm/h e 50 mm/24h"""
        assert AlertClassifier.classify(rain_1h, rain_24h) == expected

    def test_rain_24h_alone_triggers_severe(self):
        """REGRA: acumulado de 24h >= 50 é severo mesmo sem chuva na última hora"""
        assert AlertClassifier.classify(0.0, 62.4) == AlertLevel.SEVERE

    @pytest.mark.parametrize("gust", [None, 0.0, 59.9, 60.0, 120.0])
    def test_wind_gust_never_changes_level(self, gust):
        """REGRA: rajada não altera o nível"""
        assert AlertClassifier.classify(12.0, 12.0, gust) == AlertLevel.ATTENTION
        assert AlertClassifier.classify(1.0, 1.0, gust) == AlertLevel.NORMAL

    def test_monotonic_in_rain_1h(self):
        """Mais chuva nunca reduz a severidade"""
        values = [0.0, 5.0, 9.9, 10.0, 15.0, 20.0, 25.0, 30.0, 45.0, 50.0, 80.0]
        for rain_24h in values:
            previous_rank = AlertLevel.NORMAL.rank
            for rain_1h in values:
                rank = AlertClassifier.classify(rain_1h, max(rain_24h, rain_1h)).rank
                assert rank <= previous_rank
                previous_rank = rank

    def test_monotonic_in_rain_24h(self):
        """Com a chuva da última hora fixa, mais acumulado em 24h nunca reduz a severidade"""
        values = [0.0, 5.0, 9.9, 10.0, 15.0, 20.0, 25.0, 30.0, 45.0, 49.9, 50.0, 80.0]
        for rain_1h in values:
            previous_rank = AlertLevel.NORMAL.rank
            for rain_24h in values:
                rank = AlertClassifier.classify(rain_1h, rain_24h).rank
                assert rank <= previous_rank
                previous_rank = rank

    def test_functional_shortcut(self):
        assert classify_alert_level(35.0, 60.0) == AlertLevel.SEVERE
