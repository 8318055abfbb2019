"""
Testes de ordenação e resumo dos alertas
"""
from domain.alerts.primitives import AlertLevel
from domain.services.alert_aggregator import sort_alerts, summarize_alerts


class TestAlertAggregator:

    def test_sort_by_severity_is_stable(self, make_alert):
        alerts = [
            make_alert('1', AlertLevel.ATTENTION),
            make_alert('2', AlertLevel.SEVERE),
            make_alert('3', AlertLevel.ALERT),
            make_alert('4', AlertLevel.SEVERE),
        ]

        ordered = sort_alerts(alerts)

        assert [alert.id for alert in ordered] == ['2', '4', '3', '1']

    def test_summary_counts(self, make_alert):
        alerts = [
            make_alert('1', AlertLevel.ATTENTION),
            make_alert('2', AlertLevel.SEVERE),
            make_alert('3', AlertLevel.SEVERE),
        ]

        assert summarize_alerts(alerts) == {'severe': 2, 'alert': 0, 'attention': 1}

    def test_empty(self):
        assert sort_alerts([]) == []
        assert summarize_alerts([]) == {'severe': 0, 'alert': 0, 'attention': 0}
