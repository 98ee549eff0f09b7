"""Defaults and environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_DIR = os.path.join(os.getcwd(), "logs")

CSV_DELIMITER = ";"
SESSION_LABEL_FORMAT = "%Y-%m-%d %H:%M"

SEASON_KIND = "iracing_league_season"


def season_document_name(league_id: int, season_id: int) -> str:
    """Name under which the scraper stores a league season."""
    return f"league_{league_id}_season_{season_id}"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for data sources and logging.

    Usage:
        settings = Settings.from_env()
        source = HttpCompetitionSource(settings.base_url, settings.timeout)
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_dir: str = DEFAULT_LOG_DIR

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from RACERANKING_* environment variables."""
        timeout = os.environ.get("RACERANKING_TIMEOUT")
        return cls(
            base_url=os.environ.get("RACERANKING_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            log_dir=os.environ.get("RACERANKING_LOG_DIR", DEFAULT_LOG_DIR),
        )
