from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from ..catalog.models import ScoredCandidate

NO_MATCH_CONTEXT = "No direct match in DB."


class ContextMode(str, Enum):
    database = "database"
    external = "external"


def format_result_line(result: ScoredCandidate) -> str:
    """``- [name] (region, address) (2.3km away): description``"""
    place = result.candidate.place
    origin = result.candidate.origin_region
    if place.address:
        origin = f"{origin}, {place.address}"

    line = f"- [{place.name}] ({origin})"
    if result.distance_info:
        line += f" {result.distance_info}"
    return f"{line}: {place.description}"


def format_context(results: Sequence[ScoredCandidate]) -> tuple[ContextMode, str]:
    if not results:
        return ContextMode.external, NO_MATCH_CONTEXT
    return ContextMode.database, "\n".join(format_result_line(r) for r in results)
