"""
Catalog layer.

Responsibilities:
- Typed models for places, candidates and scored candidates.
- Flatten a region-keyed catalog into one candidate pool ("no borders").
- Hold the current catalog snapshot and swap it atomically on update.
"""
