"""Reusable field validators for the input models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so launch times and windows compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def none_as_empty(value: Any) -> Any:
    """Read a JSON null collection as an empty list."""
    return [] if value is None else value
