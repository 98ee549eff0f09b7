"""raceranking input models."""

from raceranking.models.competition import Competition, Crew, Driver, EventGroup, EventSession, Team
from raceranking.models.results import CompetitionResults, RawResult, ResultLap
from raceranking.models.season import ParsedSession, RawSession, SeasonData, SeasonMeta, SeasonStatus

__all__ = [
    "Competition",
    "CompetitionResults",
    "Crew",
    "Driver",
    "EventGroup",
    "EventSession",
    "ParsedSession",
    "RawResult",
    "RawSession",
    "ResultLap",
    "SeasonData",
    "SeasonMeta",
    "SeasonStatus",
    "Team",
]
