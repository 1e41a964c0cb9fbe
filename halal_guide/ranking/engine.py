from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..catalog.index import flatten
from ..catalog.models import Place, ScoredCandidate
from ..geo.distance import Coordinate, format_distance
from .config import DEFAULT_RANKING_CONFIG, RankingConfig
from .scorer import score

logger = logging.getLogger(__name__)


def tokenize(query: str | None) -> list[str]:
    """Lower-case and split on whitespace. Duplicates are kept."""
    if not query:
        return []
    return [token for token in query.lower().split() if token]


def rank(
    query: str | None,
    catalog: Mapping[str, Sequence[Place]],
    user_position: Coordinate | None = None,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> list[ScoredCandidate]:
    """Return at most ``config.max_results`` scored candidates, best first.

    Only candidates with a positive score are returned. Nothing is
    backfilled when nothing matches: an empty list means "not in the
    catalog", and downstream prompting depends on that distinction.
    """
    if not query or not query.strip():
        return []

    keywords = tokenize(query)
    candidates = flatten(catalog)
    scored = [score(c, keywords, user_position, config) for c in candidates]

    relevant = [s for s in scored if s.score > 0]
    # Stable sort: equal score and distance keep catalog enumeration order
    relevant.sort(key=lambda s: (-s.score, s.candidate.distance_km))
    top = relevant[: config.max_results]

    if user_position is not None:
        for item in top:
            item.distance_info = format_distance(item.candidate.distance_km)

    logger.debug(
        "Ranked %d candidates for %r: %d relevant, %d returned",
        len(candidates), query, len(relevant), len(top),
    )
    return top
