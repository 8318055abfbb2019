"""
Radar Entities - Quadros de animação do radar (RainViewer)
"""
from dataclasses import dataclass, field
from typing import List

from domain.constants import API


@dataclass(frozen=True)
class RadarFrame:
    """Quadro de radar: instante (epoch s) e caminho do tile"""
    time: int
    path: str

    def tile_url_template(self, host: str) -> str:
        """Template no formato esperado por clientes de mapa ({z}/{x}/{y})"""
        return (
            f"{host}{self.path}/{API.RAINVIEWER_TILE_SIZE}/{{z}}/{{x}}/{{y}}/"
            f"{API.RAINVIEWER_COLOR_SCHEME}/1_1.png"
        )

    def to_api_response(self, host: str) -> dict:
        return {
            'time': self.time,
            'path': self.path,
            'tileUrl': self.tile_url_template(host)
        }


@dataclass(frozen=True)
class RadarFrames:
    """Lista de quadros passados e de nowcast"""
    host: str
    generated: int
    past: List[RadarFrame] = field(default_factory=list)
    nowcast: List[RadarFrame] = field(default_factory=list)

    @property
    def latest_index(self) -> int:
        """Índice do último quadro disponível na animação combinada"""
        return max(0, len(self.past) + len(self.nowcast) - 1)

    def to_api_response(self) -> dict:
        return {
            'host': self.host,
            'generated': self.generated,
            'past': [frame.to_api_response(self.host) for frame in self.past],
            'nowcast': [frame.to_api_response(self.host) for frame in self.nowcast],
            'latestIndex': self.latest_index
        }
