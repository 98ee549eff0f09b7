"""Data contracts produced by the ranking engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from raceranking.models.competition import Competition


class LaunchedSession(Protocol):
    """Anything with a track and a launch time can be classified."""

    @property
    def track_id(self) -> int | None: ...

    @property
    def launch_at(self) -> datetime: ...


@dataclass(frozen=True)
class SessionAssignment:
    event_group_id: str
    event_session_id: str


# subsession id -> assignment, matched sessions only
Classification = dict[int, SessionAssignment]

# driver id -> event group id -> event session id -> best average lap (ms)
BestResults = dict[int, dict[str, dict[str, float]]]


@dataclass(frozen=True)
class RankingItem:
    position: int
    driver_id: int
    total: float
    is_valid: bool
    results: dict[str, dict[str, float]] = field(default_factory=dict)


@dataclass(frozen=True)
class SessionMatrix:
    """Driver x session table: header row plus one row per roster entry."""

    header: list[str]
    rows: list[list[str]]
    session_ids: list[int]


@dataclass(frozen=True)
class CompetitionRanking:
    competition: Competition
    items: list[RankingItem]
