"""HTTP-backed competition sources over JSON list endpoints."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from raceranking._http import AsyncTransport, Documents, SyncTransport
from raceranking._logging import log_source_call
from raceranking.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SEASON_KIND, season_document_name
from raceranking.exceptions import RankingValidationError
from raceranking.models.competition import Competition
from raceranking.models.results import CompetitionResults
from raceranking.models.season import SeasonData
from raceranking.sources.base import AsyncCompetitionSource, CompetitionSource

M = TypeVar("M", bound=BaseModel)

COMPETITIONS_ENDPOINT = "/competitions"
RESULTS_ENDPOINT = "/competition-results"
SEASONS_ENDPOINT = "/seasons"


def _first(model: type[M], data: Documents | None) -> M | None:
    """Validate the first document of a list response, or None if empty."""
    if not data:
        return None
    try:
        return model.model_validate(data[0])
    except ValidationError as exc:
        raise RankingValidationError(
            f"Failed to validate {model.__name__} response: {exc}"
        ) from exc


def _season_params(league_id: int, season_id: int) -> list[tuple[str, str]]:
    return [
        ("kind", SEASON_KIND),
        ("name", season_document_name(league_id, season_id)),
    ]


class HttpCompetitionSource(CompetitionSource):
    """Synchronous source reading competition documents over HTTP.

    Usage:
        with HttpCompetitionSource("https://league.example/api") as source:
            competition = source.get_competition("quali-2024-round-1")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> HttpCompetitionSource:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_source_call
    def get_competition(self, slug: str) -> Competition | None:
        data = self._transport.get(COMPETITIONS_ENDPOINT, [("slug", slug)])
        return _first(Competition, data)

    @log_source_call
    def get_competition_results(self, competition_id: int) -> CompetitionResults | None:
        data = self._transport.get(RESULTS_ENDPOINT, [("competition_id", str(competition_id))])
        return _first(CompetitionResults, data)

    @log_source_call
    def get_season(self, league_id: int, season_id: int) -> SeasonData | None:
        data = self._transport.get(SEASONS_ENDPOINT, _season_params(league_id, season_id))
        return _first(SeasonData, data)


class AsyncHttpCompetitionSource(AsyncCompetitionSource):
    """Asynchronous source reading competition documents over HTTP.

    Usage:
        async with AsyncHttpCompetitionSource() as source:
            season = await source.get_season(1234, 56)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncHttpCompetitionSource:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_source_call
    async def get_competition(self, slug: str) -> Competition | None:
        data = await self._transport.get(COMPETITIONS_ENDPOINT, [("slug", slug)])
        return _first(Competition, data)

    @log_source_call
    async def get_competition_results(self, competition_id: int) -> CompetitionResults | None:
        data = await self._transport.get(RESULTS_ENDPOINT, [("competition_id", str(competition_id))])
        return _first(CompetitionResults, data)

    @log_source_call
    async def get_season(self, league_id: int, season_id: int) -> SeasonData | None:
        data = await self._transport.get(SEASONS_ENDPOINT, _season_params(league_id, season_id))
        return _first(SeasonData, data)
