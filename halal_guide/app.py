from __future__ import annotations

import time

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .catalog.data_store import get_catalog, parse_catalog, replace_catalog
from .catalog.models import ScoredCandidate
from .chat.assistant import ask, find_place, write_review
from .chat.models import (
    ChatRequest,
    ChatResponse,
    ReviewRequest,
    ReviewResponse,
    SearchRequest,
    SearchResponse,
)
from .ranking.context import format_context
from .ranking.engine import rank

app = FastAPI(title="Halal Travel Guide API", version="1.0.0")


def _regions(results: list[ScoredCandidate]) -> list[str]:
    return sorted({r.candidate.origin_region for r in results})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    catalog = get_catalog()
    categories: set[str] = set()
    for places in catalog.values():
        for place in places:
            if place.category:
                categories.add(place.category)
    return {
        "regions": [{"name": region, "places": len(places)} for region, places in catalog.items()],
        "categories": sorted(categories),
    }


# ── Search & chat ────────────────────────────────────────────────────────


@app.post("/search", response_model=SearchResponse)
def search(body: SearchRequest) -> SearchResponse:
    start_time = time.time()

    results = rank(body.query, get_catalog(), body.position)
    mode, context = format_context(results)

    record_event("search", {
        "query": body.query,
        "has_position": body.position is not None,
        "mode": mode.value,
        "regions": _regions(results),
        "results_returned": len(results),
        "response_time_ms": round((time.time() - start_time) * 1000, 1),
    })
    return SearchResponse(results=results, mode=mode, context=context)


@app.post("/chat", response_model=ChatResponse)
def chat(body: ChatRequest) -> ChatResponse:
    start_time = time.time()

    response = ask(
        body.message,
        body.history,
        get_catalog(),
        current_region=body.current_region,
        user_position=body.position,
    )

    record_event("chat", {
        "query": body.message,
        "has_position": body.position is not None,
        "mode": response.mode.value,
        "regions": _regions(response.results),
        "results_returned": len(response.results),
        "model": response.model,
        "response_time_ms": round((time.time() - start_time) * 1000, 1),
    })
    return response


@app.post("/review", response_model=ReviewResponse)
def review(body: ReviewRequest) -> ReviewResponse:
    place = None
    if not body.external:
        place = find_place(get_catalog(), body.region, body.place_name)
        if place is None:
            raise HTTPException(status_code=404, detail="Place not found in catalog")

    text = write_review(body.place_name, body.region, body.language, place)
    return ReviewResponse(review=text)


# ── Catalog & analytics ──────────────────────────────────────────────────


@app.put("/catalog")
def update_catalog(body: dict) -> dict:
    try:
        catalog = parse_catalog(body)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False)) from exc

    snapshot = replace_catalog(catalog)
    return {
        "status": "replaced",
        "regions": len(snapshot),
        "places": sum(len(p) for p in snapshot.values()),
    }


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
