from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from ..catalog.models import ScoredCandidate
from ..geo.distance import Coordinate
from ..ranking.context import ContextMode


class TurnRole(str, Enum):
    user = "user"
    assistant = "assistant"


class ConversationTurn(BaseModel):
    role: TurnRole
    content: str


class PositionMixin(BaseModel):
    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lon: float | None = Field(default=None, ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def _both_or_neither(self):
        if (self.lat is None) != (self.lon is None):
            raise ValueError("lat and lon must be supplied together")
        return self

    @property
    def position(self) -> Coordinate | None:
        if self.lat is None or self.lon is None:
            return None
        return Coordinate(latitude=self.lat, longitude=self.lon)


class SearchRequest(PositionMixin):
    query: str = Field(default="", max_length=1000)


class SearchResponse(BaseModel):
    results: list[ScoredCandidate]
    mode: ContextMode
    context: str


class ChatRequest(PositionMixin):
    message: str = Field(..., min_length=1, max_length=1000)
    history: list[ConversationTurn] = Field(default_factory=list)
    current_region: str | None = None


class ChatResponse(BaseModel):
    message: str
    mode: ContextMode
    results: list[ScoredCandidate] = Field(default_factory=list)
    model: str | None = None


class ReviewRequest(BaseModel):
    place_name: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    language: str = "English"
    external: bool = False


class ReviewResponse(BaseModel):
    review: str
