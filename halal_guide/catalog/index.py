from __future__ import annotations

from collections.abc import Mapping, Sequence

from .models import Candidate, Place


def flatten(catalog: Mapping[str, Sequence[Place]]) -> list[Candidate]:
    """Union every region's places into one candidate pool.

    No filtering happens here: region membership never decides inclusion,
    relevance does. Distance is left at the sentinel for the scorer to fill.
    """
    candidates: list[Candidate] = []
    for region, places in catalog.items():
        for place in places or []:
            candidates.append(Candidate(place=place, origin_region=region))
    return candidates
