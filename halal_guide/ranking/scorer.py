from __future__ import annotations

from collections.abc import Sequence

from ..catalog.models import Candidate, ScoredCandidate
from ..geo.distance import Coordinate, distance
from .config import DEFAULT_RANKING_CONFIG, RankingConfig


def build_content_blob(candidate: Candidate) -> str:
    """Lower-cased concatenation of every searchable field, region included."""
    place = candidate.place
    parts = [
        place.name,
        place.name_local,
        place.category,
        place.desc_local,
        place.desc_en,
        place.address,
        candidate.origin_region,
    ]
    return " ".join(p or "" for p in parts).lower()


def proximity_bonus(distance_km: float, config: RankingConfig = DEFAULT_RANKING_CONFIG) -> int:
    """Bonus for the first tier the distance falls under. Tiers never stack."""
    for limit_km, bonus in config.proximity_tiers:
        if distance_km < limit_km:
            return bonus
    return 0


def score(
    candidate: Candidate,
    keywords: Sequence[str],
    user_position: Coordinate | None = None,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> ScoredCandidate:
    """Additive score: keyword substring hits plus proximity to the user.

    Each keyword is checked on its own against the content blob, so a
    repeated keyword counts twice. Without a user position the distance is
    the sentinel and the proximity bonus is naturally zero.
    """
    content = build_content_blob(candidate)

    points = 0
    matched = False
    for keyword in keywords:
        if keyword and keyword.lower() in content:
            points += config.keyword_weight
            matched = True

    distance_km = distance(user_position, candidate.place.coordinate)
    points += proximity_bonus(distance_km, config)

    return ScoredCandidate(
        candidate=candidate.model_copy(update={"distance_km": distance_km}),
        score=points,
        matched=matched,
    )
