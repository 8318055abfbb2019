"""
Schema do weather-maps.json do RainViewer
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RainViewerFrameSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    time: int
    path: str = Field(min_length=1)


class RainViewerRadarSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    past: List[RainViewerFrameSchema] = Field(default_factory=list)
    nowcast: List[RainViewerFrameSchema] = Field(default_factory=list)


class RainViewerMapsSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    host: str = Field(min_length=1)
    generated: int = 0
    radar: RainViewerRadarSchema = Field(default_factory=RainViewerRadarSchema)
