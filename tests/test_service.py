"""Tests for service.py: loading documents and running the engine."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from raceranking.engine.types import CompetitionRanking
from raceranking.export import read_matrix_csv
from raceranking.models import Competition
from raceranking.service import AsyncRankingService, RankingService
from raceranking.sources.base import AsyncCompetitionSource, CompetitionSource


@pytest.fixture
def mock_source(competition, season, results):
    """Mock source returning the sample documents."""
    source = MagicMock(spec=CompetitionSource)
    source.get_competition.return_value = competition
    source.get_competition_results.return_value = results
    source.get_season.return_value = season
    return source


@pytest.fixture
def service(mock_source):
    return RankingService(mock_source)


class TestLoad:
    def test_calls_all_source_methods(self, service, mock_source):
        data = service.load("spring-cup-2024")
        mock_source.get_competition.assert_called_once_with("spring-cup-2024")
        mock_source.get_competition_results.assert_called_once_with(7)
        mock_source.get_season.assert_called_once_with(4321, 98)
        assert data is not None
        assert data.competition.id == 7

    def test_competition_missing(self, service, mock_source):
        mock_source.get_competition.return_value = None
        assert service.load("missing") is None
        mock_source.get_competition_results.assert_not_called()
        mock_source.get_season.assert_not_called()

    def test_results_missing(self, service, mock_source):
        mock_source.get_competition_results.return_value = None
        assert service.load("spring-cup-2024") is None

    def test_season_missing(self, service, mock_source):
        mock_source.get_season.return_value = None
        assert service.load("spring-cup-2024") is None

    def test_no_league_configured(self, service, mock_source):
        mock_source.get_competition.return_value = Competition(id=7)
        assert service.load("spring-cup-2024") is None
        mock_source.get_season.assert_not_called()

    def test_missing_documents_logged(self, service, mock_source, _log_to_tmp_path):
        mock_source.get_season.return_value = None
        service.load("spring-cup-2024")
        content = (_log_to_tmp_path / "raceranking.log").read_text()
        assert "Skipping 'spring-cup-2024': results found, season missing" in content

    def test_source_errors_propagate(self, service, mock_source):
        mock_source.get_competition.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError, match="boom"):
            service.load("spring-cup-2024")


class TestGetCompetitionRanking:
    def test_ranking(self, service):
        ranking = service.get_competition_ranking("spring-cup-2024")
        assert isinstance(ranking, CompetitionRanking)
        assert ranking.competition.slug == "spring-cup-2024"
        assert [(i.position, i.driver_id, i.is_valid) for i in ranking.items] == [
            (1, 3, True),
            (2, 1, True),
            (3, 2, False),
        ]

    def test_missing_data(self, service, mock_source):
        mock_source.get_competition.return_value = None
        assert service.get_competition_ranking("missing") is None


class TestGetCompetitionSessionsCsv:
    def test_csv(self, service):
        text = service.get_competition_sessions_csv("spring-cup-2024")
        header, rows = read_matrix_csv(text)
        assert header[:2] == ["Driver", "Id"]
        assert len(header) == 5
        assert [row[1] for row in rows] == ["1", "2", "3"]

    def test_missing_data(self, service, mock_source):
        mock_source.get_competition_results.return_value = None
        assert service.get_competition_sessions_csv("spring-cup-2024") is None


@pytest.fixture
def async_source(competition, season, results):
    source = MagicMock(spec=AsyncCompetitionSource)
    source.get_competition = AsyncMock(return_value=competition)
    source.get_competition_results = AsyncMock(return_value=results)
    source.get_season = AsyncMock(return_value=season)
    return source


class TestAsyncRankingService:
    @pytest.mark.asyncio
    async def test_ranking(self, async_source):
        ranking = await AsyncRankingService(async_source).get_competition_ranking("spring-cup-2024")
        assert ranking is not None
        assert [i.driver_id for i in ranking.items] == [3, 1, 2]
        async_source.get_season.assert_awaited_once_with(4321, 98)

    @pytest.mark.asyncio
    async def test_csv(self, async_source):
        text = await AsyncRankingService(async_source).get_competition_sessions_csv("spring-cup-2024")
        assert text.splitlines()[1] == "Ada Lovelace;1;1:30.500;1:40.000;1:30.200"

    @pytest.mark.asyncio
    async def test_reads_run_concurrently(self, async_source, results, season):
        started: list[str] = []
        both_started = asyncio.Event()

        async def fetch(name, value):
            started.append(name)
            if len(started) == 2:
                both_started.set()
            # Times out unless the other read is already in flight.
            await asyncio.wait_for(both_started.wait(), timeout=1)
            return value

        async def fetch_results(competition_id):
            return await fetch("results", results)

        async def fetch_season(league_id, season_id):
            return await fetch("season", season)

        async_source.get_competition_results = AsyncMock(side_effect=fetch_results)
        async_source.get_season = AsyncMock(side_effect=fetch_season)

        data = await AsyncRankingService(async_source).load("spring-cup-2024")
        assert data is not None
        assert sorted(started) == ["results", "season"]

    @pytest.mark.asyncio
    async def test_competition_missing(self, async_source):
        async_source.get_competition.return_value = None
        assert await AsyncRankingService(async_source).get_competition_ranking("x") is None
        async_source.get_competition_results.assert_not_awaited()
