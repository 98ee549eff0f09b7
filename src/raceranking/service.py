"""Ranking and export services on top of a competition source."""

from __future__ import annotations

import asyncio
from typing import NamedTuple

from raceranking._logging import get_logger
from raceranking.engine.pipeline import build_competition_matrix, calculate_ranking
from raceranking.engine.types import CompetitionRanking
from raceranking.export import matrix_to_csv
from raceranking.models.competition import Competition
from raceranking.models.results import CompetitionResults
from raceranking.models.season import SeasonData
from raceranking.sources.base import AsyncCompetitionSource, CompetitionSource


class CompetitionData(NamedTuple):
    competition: Competition
    season: SeasonData
    results: CompetitionResults


def _season_key(competition: Competition) -> tuple[int, int] | None:
    if competition.league_id is None or competition.season_id is None:
        get_logger().warning(
            "Competition %s has no league/season configured", competition.id,
        )
        return None
    return competition.league_id, competition.season_id


def _complete(
    slug: str,
    competition: Competition,
    results: CompetitionResults | None,
    season: SeasonData | None,
) -> CompetitionData | None:
    if results is None or season is None:
        get_logger().warning(
            "Skipping %r: results %s, season %s",
            slug,
            "missing" if results is None else "found",
            "missing" if season is None else "found",
        )
        return None
    return CompetitionData(competition, season, results)


class RankingService:
    """Loads a competition's documents and runs the engine over them.

    Every method returns None when any required document is missing.
    """

    def __init__(self, source: CompetitionSource) -> None:
        self._source = source

    def load(self, slug: str) -> CompetitionData | None:
        """Fetch configuration, results and season data for *slug*."""
        competition = self._source.get_competition(slug)
        if competition is None:
            get_logger().warning("Competition %r not found", slug)
            return None

        season_key = _season_key(competition)
        if season_key is None:
            return None

        results = self._source.get_competition_results(competition.id)
        season = self._source.get_season(*season_key)
        return _complete(slug, competition, results, season)

    def get_competition_ranking(self, slug: str) -> CompetitionRanking | None:
        """Rank the competition's roster."""
        data = self.load(slug)
        if data is None:
            return None
        items = calculate_ranking(data.competition, data.season, data.results)
        return CompetitionRanking(competition=data.competition, items=items)

    def get_competition_sessions_csv(self, slug: str) -> str | None:
        """Export every classified session's raw times as delimited text."""
        data = self.load(slug)
        if data is None:
            return None
        matrix = build_competition_matrix(data.competition, data.season, data.results)
        return matrix_to_csv(matrix)


class AsyncRankingService:
    """Async RankingService; results and season are fetched concurrently."""

    def __init__(self, source: AsyncCompetitionSource) -> None:
        self._source = source

    async def load(self, slug: str) -> CompetitionData | None:
        competition = await self._source.get_competition(slug)
        if competition is None:
            get_logger().warning("Competition %r not found", slug)
            return None

        season_key = _season_key(competition)
        if season_key is None:
            return None

        results, season = await asyncio.gather(
            self._source.get_competition_results(competition.id),
            self._source.get_season(*season_key),
        )
        return _complete(slug, competition, results, season)

    async def get_competition_ranking(self, slug: str) -> CompetitionRanking | None:
        data = await self.load(slug)
        if data is None:
            return None
        items = calculate_ranking(data.competition, data.season, data.results)
        return CompetitionRanking(competition=data.competition, items=items)

    async def get_competition_sessions_csv(self, slug: str) -> str | None:
        data = await self.load(slug)
        if data is None:
            return None
        matrix = build_competition_matrix(data.competition, data.season, data.results)
        return matrix_to_csv(matrix)
