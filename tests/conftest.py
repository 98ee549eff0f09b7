"""Shared test fixtures and sample source documents."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from raceranking.models import (
    Competition,
    CompetitionResults,
    EventGroup,
    EventSession,
    RawResult,
    RawSession,
    SeasonData,
)

BASE_URL = "http://localhost:3000/api"

SPA = 100
MONZA = 200


SAMPLE_COMPETITION = {
    "id": 7,
    "slug": "spring-cup-2024",
    "name": "Spring Cup 2024",
    "leagueId": 4321,
    "seasonId": 98,
    "eventGroups": [
        {
            "id": "g-spa",
            "name": "Spa",
            "iRacingTrackId": SPA,
            "sessions": [
                {
                    "id": "s-spa-1",
                    "fromTime": "2024-03-01T00:00:00Z",
                    "toTime": "2024-03-07T23:59:59Z",
                },
                {
                    "id": "s-spa-2",
                    "fromTime": "2024-03-08T00:00:00Z",
                    "toTime": "2024-03-14T23:59:59Z",
                },
            ],
        },
        {
            "id": "g-monza",
            "name": "Monza",
            "iRacingTrackId": MONZA,
            "sessions": [
                {
                    "id": "s-monza-1",
                    "fromTime": "2024-03-01T00:00:00Z",
                    "toTime": "2024-03-14T23:59:59Z",
                },
            ],
        },
    ],
    "teams": [
        {
            "name": "Alpha",
            "crews": [
                {
                    "drivers": [
                        {"iRacingId": 1, "firstName": "Ada", "lastName": "Lovelace"},
                        {"iRacingId": 2, "firstName": "Bo", "lastName": "Berg"},
                    ],
                },
            ],
        },
        {
            "name": "Bravo",
            "crews": [
                {
                    "drivers": [
                        {"iRacingId": 3, "firstName": "Cy", "lastName": "Clark"},
                        {"iRacingId": None, "firstName": "No", "lastName": "Account"},
                    ],
                },
            ],
        },
    ],
}

SAMPLE_SEASON = {
    "meta": {"kind": "iracing_league_season", "name": "league_4321_season_98"},
    "status": {
        "parsed_sessions": {
            "1001": {"track_id": SPA, "launch_at": "2024-03-02T18:00:00Z"},
            "1002": {"track_id": SPA, "launch_at": "2024-03-09T18:00:00Z"},
            "1003": {"track_id": MONZA, "launch_at": "2024-03-05T20:00:00Z"},
            "1004": {"track_id": 300, "launch_at": "2024-03-05T20:00:00Z"},
            "1005": {"track_id": SPA, "launch_at": "2024-04-01T18:00:00Z"},
        },
    },
}

SAMPLE_RESULTS = {
    "competition_id": 7,
    "results": [
        {"driver_id": 1, "subsession_id": 1001, "average_lap_time_ms": 90500},
        {"driver_id": 1, "subsession_id": 1002, "average_lap_time_ms": 90200},
        {"driver_id": 1, "subsession_id": 1003, "average_lap_time_ms": 100000},
        {"driver_id": 2, "subsession_id": 1001, "average_lap_time_ms": 91000},
        {"driver_id": 2, "subsession_id": 1003, "average_lap_time_ms": 0},
        {
            "driver_id": 3,
            "subsession_id": 1001,
            "average_lap_time_ms": 89000,
            "laps": [
                {
                    "lap_number": 1,
                    "flags": 0,
                    "incident": False,
                    "session_time": 1200.5,
                    "lap_time": 89000,
                    "lap_events": [],
                },
            ],
        },
        {"driver_id": 3, "subsession_id": 1003, "average_lap_time_ms": 99000},
        {"driver_id": 3, "subsession_id": 1004, "average_lap_time_ms": 80000},
        {"driver_id": 99, "subsession_id": 1001, "average_lap_time_ms": 50000},
    ],
}


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def _make_group(
    group_id: str | None,
    track_id: int | None,
    windows: list[tuple[str | None, datetime, datetime]],
) -> EventGroup:
    return EventGroup(
        id=group_id,
        track_id=track_id,
        sessions=[
            EventSession(id=session_id, from_time=start, to_time=end)
            for session_id, start, end in windows
        ],
    )


def _make_session(session_id: int, track_id: int | None, launch_at: datetime) -> RawSession:
    return RawSession(session_id=session_id, track_id=track_id, launch_at=launch_at)


def _make_result(
    driver_id: int,
    subsession_id: int,
    average_lap_time_ms: float | None,
) -> RawResult:
    return RawResult(
        driver_id=driver_id,
        subsession_id=subsession_id,
        average_lap_time_ms=average_lap_time_ms,
    )


def _drop_file_handlers(logger: logging.Logger) -> None:
    for h in logger.handlers[:]:
        if isinstance(h, logging.FileHandler):
            h.close()
            logger.removeHandler(h)


@pytest.fixture(autouse=True)
def _log_to_tmp_path(tmp_path):
    """Redirect the package file logger into tmp_path for every test."""
    import raceranking._logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("raceranking")
    _drop_file_handlers(named_logger)

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "raceranking.log")

    yield tmp_path

    _drop_file_handlers(named_logger)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def competition() -> Competition:
    return Competition.model_validate(SAMPLE_COMPETITION)


@pytest.fixture
def season() -> SeasonData:
    return SeasonData.model_validate(SAMPLE_SEASON)


@pytest.fixture
def results() -> CompetitionResults:
    return CompetitionResults.model_validate(SAMPLE_RESULTS)


@pytest.fixture
def make_group():
    """Factory fixture for event groups from (session id, from, to) windows."""
    return _make_group


@pytest.fixture
def make_session():
    """Factory fixture for raw sessions."""
    return _make_session


@pytest.fixture
def make_result():
    """Factory fixture for raw results."""
    return _make_result
