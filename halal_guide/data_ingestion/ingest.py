from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import pandas as pd

from ..catalog.models import Catalog, Place
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)


PLACE_COLUMNS: List[str] = [
    "name",
    "name_local",
    "category",
    "desc_local",
    "desc_en",
    "address",
    "lat",
    "lon",
]

# Canonical field -> accepted source column names, first present wins
_COLUMN_ALIASES: dict[str, List[str]] = {
    "region": ["region", "country", "origin_country"],
    "name": ["name", "name_en", "place_name"],
    "name_local": ["name_local", "name_ko", "local_name"],
    "category": ["category", "type", "tag"],
    "desc_local": ["desc_local", "desc_ko", "description_local"],
    "desc_en": ["desc_en", "description", "description_en"],
    "address": ["address", "full_address"],
    "lat": ["lat", "latitude"],
    "lon": ["lon", "lng", "longitude"],
}

_NUMERIC_FIELDS = {"lat", "lon"}


def _first_present(df: pd.DataFrame, columns: List[str]) -> str | None:
    for col in columns:
        if col in df.columns:
            return col
    return None


def _normalize(df: pd.DataFrame) -> pd.DataFrame:
    if _first_present(df, _COLUMN_ALIASES["region"]) is None:
        raise ValueError("CSV has no region column (expected one of: region, country)")

    canonical = pd.DataFrame(index=df.index)
    for field, aliases in _COLUMN_ALIASES.items():
        col = _first_present(df, aliases)
        if col is None:
            canonical[field] = None
        elif field in _NUMERIC_FIELDS:
            canonical[field] = pd.to_numeric(df[col], errors="coerce")
        else:
            canonical[field] = df[col].astype("string").str.strip()

    # Rows without a name or region cannot be placed in the catalog
    before = len(canonical)
    canonical = canonical.dropna(subset=["region", "name"])
    canonical = canonical[(canonical["name"] != "") & (canonical["region"] != "")]
    dropped = before - len(canonical)
    if dropped:
        logger.warning("Dropped %d rows without a name or region", dropped)

    # pandas missing markers (NaN / <NA>) become None for pydantic
    return canonical.astype(object).where(canonical.notna(), None)


def load_places_csv(path: Path) -> Catalog:
    """Read a flat place CSV and group it into a region-keyed catalog."""
    df = _normalize(pd.read_csv(path))

    catalog: Catalog = {}
    for region, group in df.groupby("region", sort=False):
        records = group[PLACE_COLUMNS].to_dict(orient="records")
        catalog[str(region)] = [Place(**record) for record in records]
    return catalog


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Execute the catalog ingestion pipeline.

    Steps:
    - Read the source CSV.
    - Map raw columns into the canonical Place schema, grouped by region.
    - Persist the catalog as JSON for the catalog store.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    catalog = load_places_csv(config.source_csv)
    payload = {
        region: [place.model_dump(exclude_none=True) for place in places]
        for region, places in catalog.items()
    }

    output_path = config.processed_path
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return output_path


if __name__ == "__main__":
    path = run_ingestion()
    print(f"Ingestion complete. Catalog saved to: {path}")
