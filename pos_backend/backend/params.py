# backend/params.py

"""
Path / query parameter parsing shared by the API views.
"""

from __future__ import annotations

from typing import Optional


def parse_positive_id(raw) -> Optional[int]:
    """
    Parse a path id. Returns None for anything that is not a positive integer
    so the caller can answer with its own "invalid ... id" message.
    """
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def parse_positive_int(raw, default: int) -> int:
    """
    Parse an optional positive query parameter (page, limit).
    Missing, malformed and non-positive values fall back to `default`.
    """
    if raw in (None, ""):
        return default
    value = parse_positive_id(raw)
    return value if value is not None else default
