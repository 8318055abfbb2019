"""
Schema da resposta de GET /api/weather consumida pelo feed interno
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FeedModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class FeedRainSchema(FeedModel):
    last1h: float = 0.0
    last24h: float = 0.0


class FeedWindSchema(FeedModel):
    gust: Optional[float] = None


class FeedReadingSchema(FeedModel):
    stationId: str
    stationName: str
    timestamp: str
    alertLevel: Literal['normal', 'attention', 'alert', 'severe']
    rain: FeedRainSchema = Field(default_factory=FeedRainSchema)
    wind: FeedWindSchema = Field(default_factory=FeedWindSchema)


class FeedEnvelopeSchema(FeedModel):
    success: bool = True
    data: List[FeedReadingSchema] = Field(default_factory=list)
