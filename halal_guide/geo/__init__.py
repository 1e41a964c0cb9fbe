"""
Geographic helpers.

Responsibilities:
- Great-circle distance between two optional coordinates.
- Define the "unknown location" sentinel distance.
- Render human-readable distance annotations.
"""
