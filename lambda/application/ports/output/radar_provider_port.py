"""
Output Port: Quadros de radar
"""
from abc import ABC, abstractmethod

from domain.entities.radar import RadarFrames


class IRadarProvider(ABC):

    @abstractmethod
    async def get_frames(self) -> RadarFrames:
        pass
