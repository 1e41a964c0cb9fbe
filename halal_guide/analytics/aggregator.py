from __future__ import annotations

from collections import Counter
from typing import Any


def _avg(values: list[float]) -> float:
    return round(sum(values) / len(values), 1) if values else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    chats = [e for e in events if e["type"] == "chat"]
    ranked = searches + chats

    # Response times across both entry points
    times = [e["response_time_ms"] for e in ranked if "response_time_ms" in e]

    # Regions that actually supplied results
    region_counter: Counter[str] = Counter()
    for e in ranked:
        for region in e.get("regions", []) or []:
            region_counter[region] += 1
    top_regions = [{"name": n, "count": c} for n, c in region_counter.most_common(10)]

    # Database-grounded vs general-knowledge answers
    database_hits = sum(1 for e in ranked if e.get("mode") == "database")
    empty_results = len(ranked) - database_hits

    with_position = sum(1 for e in ranked if e.get("has_position"))

    model_counter: Counter[str] = Counter(
        e["model"] for e in chats if e.get("model")
    )

    total = len(ranked)
    return {
        "total_searches": len(searches),
        "total_chats": len(chats),
        "avg_response_time_ms": _avg(times),
        "top_regions": top_regions,
        "database_match_rate": round(database_hits / total * 100, 1) if total else 0.0,
        "empty_result_count": empty_results,
        "gps_usage_rate": round(with_position / total * 100, 1) if total else 0.0,
        "models_used": dict(model_counter),
    }
