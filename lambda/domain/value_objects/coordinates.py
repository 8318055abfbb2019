"""
Value Object para coordenadas geográficas (estações, capitais, geocoding)
"""
from dataclasses import dataclass


LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


@dataclass(frozen=True)
class Coordinates:
    """Par lat/lng validado na criação; serializa como {lat, lng}"""
    latitude: float
    longitude: float

    def __post_init__(self):
        for name, value, (low, high) in (
            ('latitude', self.latitude, LATITUDE_RANGE),
            ('longitude', self.longitude, LONGITUDE_RANGE),
        ):
            if not low <= value <= high:
                raise ValueError(f"{name} fora do intervalo [{low:g}, {high:g}]: {value}")

    def cache_key(self) -> str:
        # 4 casas decimais (~11 m)
        return f"{self.latitude:.4f},{self.longitude:.4f}"

    def to_api_response(self) -> dict:
        return {'lat': self.latitude, 'lng': self.longitude}
