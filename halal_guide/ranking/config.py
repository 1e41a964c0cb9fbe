from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RankingConfig:
    keyword_weight: int = 10
    # (upper bound km, bonus) in ascending distance order; first match wins
    proximity_tiers: tuple[tuple[float, int], ...] = ((5.0, 20), (20.0, 10), (100.0, 5))
    max_results: int = 10


DEFAULT_RANKING_CONFIG = RankingConfig()
