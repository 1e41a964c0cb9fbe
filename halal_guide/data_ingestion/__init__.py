"""
Catalog ingestion package.

Responsibilities:
- Read a flat CSV export of places (one row per place).
- Normalize it into the canonical Place schema, grouped by region.
- Persist the region-keyed catalog as JSON for the catalog store.
"""
