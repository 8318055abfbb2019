"""Infrastructure Providers - Implementações dos provedores upstream (INMET, Open-Meteo, RainViewer)"""
