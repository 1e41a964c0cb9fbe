from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import TypeAdapter

from .models import Catalog, Place

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

logger = logging.getLogger(__name__)

_DEFAULT_CATALOG_JSON = Path(__file__).resolve().parent.parent / "data" / "catalog.json"

_catalog_adapter: TypeAdapter[dict[str, list[Place]]] = TypeAdapter(dict[str, list[Place]])

# Current snapshot. Replaced wholesale, never mutated in place, so a ranking
# call holding a reference always sees one consistent catalog.
_catalog: Catalog | None = None


def _catalog_path() -> Path:
    return Path(os.getenv("CATALOG_PATH") or _DEFAULT_CATALOG_JSON)


def parse_catalog(raw: dict[str, Any]) -> Catalog:
    """Validate a region -> list-of-place mapping into typed ``Place`` objects."""
    return _catalog_adapter.validate_python(raw)


def load_catalog(path: Path | None = None) -> Catalog:
    path = path or _catalog_path()
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    catalog = parse_catalog(raw)
    logger.info(
        "Loaded catalog from %s: %d regions, %d places",
        path, len(catalog), sum(len(p) for p in catalog.values()),
    )
    return catalog


def get_catalog() -> Catalog:
    """Return the current catalog snapshot, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def replace_catalog(catalog: Catalog) -> Catalog:
    """Swap in a new snapshot. Callers holding the old one are unaffected."""
    global _catalog
    snapshot = {region: list(places) for region, places in catalog.items()}
    _catalog = snapshot
    return snapshot


def reset_catalog() -> None:
    """Drop the snapshot so the next ``get_catalog`` reloads from disk."""
    global _catalog
    _catalog = None
