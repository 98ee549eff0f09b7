"""Abstract data sources for competition configuration and raw data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from raceranking.models.competition import Competition
from raceranking.models.results import CompetitionResults
from raceranking.models.season import SeasonData


class CompetitionSource(ABC):
    """Read-only access to the documents the engine consumes.

    Each getter returns None when the document does not exist.
    """

    @abstractmethod
    def get_competition(self, slug: str) -> Competition | None: ...

    @abstractmethod
    def get_competition_results(self, competition_id: int) -> CompetitionResults | None: ...

    @abstractmethod
    def get_season(self, league_id: int, season_id: int) -> SeasonData | None: ...


class AsyncCompetitionSource(ABC):
    """Coroutine flavour of CompetitionSource."""

    @abstractmethod
    async def get_competition(self, slug: str) -> Competition | None: ...

    @abstractmethod
    async def get_competition_results(self, competition_id: int) -> CompetitionResults | None: ...

    @abstractmethod
    async def get_season(self, league_id: int, season_id: int) -> SeasonData | None: ...
