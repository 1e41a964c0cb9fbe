from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..geo.distance import UNKNOWN_DISTANCE_KM, Coordinate, is_known


class Place(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    name_local: str | None = None
    category: str | None = None
    desc_local: str | None = None
    desc_en: str | None = None
    address: str | None = None
    lat: float | None = None
    lon: float | None = None

    @property
    def coordinate(self) -> Coordinate | None:
        # 0.0 is a real latitude/longitude; only None means "unknown"
        if self.lat is None or self.lon is None:
            return None
        return Coordinate(latitude=self.lat, longitude=self.lon)

    @property
    def description(self) -> str:
        return self.desc_en or self.desc_local or ""


Catalog = dict[str, list[Place]]


class Candidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    place: Place
    origin_region: str
    distance_km: float = Field(default=UNKNOWN_DISTANCE_KM, ge=0.0)

    @property
    def is_locatable(self) -> bool:
        return is_known(self.distance_km)


class ScoredCandidate(BaseModel):
    candidate: Candidate
    score: int = Field(..., ge=0)
    matched: bool = False
    distance_info: str = ""
