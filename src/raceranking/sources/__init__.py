"""Data sources supplying competition configuration and raw data."""

from raceranking.sources.base import AsyncCompetitionSource, CompetitionSource
from raceranking.sources.http import AsyncHttpCompetitionSource, HttpCompetitionSource

__all__ = [
    "AsyncCompetitionSource",
    "AsyncHttpCompetitionSource",
    "CompetitionSource",
    "HttpCompetitionSource",
]
