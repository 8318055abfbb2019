"""INMET providers"""
from infrastructure.adapters.output.providers.inmet.inmet_station_provider import InmetStationProvider
from infrastructure.adapters.output.providers.inmet.inmet_alert_feed import InmetAlertFeed

__all__ = ['InmetStationProvider', 'InmetAlertFeed']
