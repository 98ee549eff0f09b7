"""Formatting helpers for lap times and session labels."""

from __future__ import annotations

from datetime import datetime, timezone

from raceranking.config import SESSION_LABEL_FORMAT


def format_milliseconds(ms: float) -> str:
    """Format milliseconds as m:ss.fff, or h:mm:ss.fff past one hour.

    Negative values keep their sign so sentinel times stay visible.
    """
    sign = "-" if ms < 0 else ""
    total = int(round(abs(ms)))
    minutes, rest = divmod(total, 60_000)
    seconds, millis = divmod(rest, 1000)
    if minutes >= 60:
        hours, minutes = divmod(minutes, 60)
        return f"{sign}{hours}:{minutes:02d}:{seconds:02d}.{millis:03d}"
    return f"{sign}{minutes}:{seconds:02d}.{millis:03d}"


def format_session_label(launch_at: datetime) -> str:
    """Format a session launch time as a column label, in UTC."""
    if launch_at.tzinfo is not None:
        launch_at = launch_at.astimezone(timezone.utc)
    return launch_at.strftime(SESSION_LABEL_FORMAT)
