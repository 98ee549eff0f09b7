"""Maps raw sessions onto configured event groups and sessions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

from raceranking._logging import log_engine_call
from raceranking.engine.types import Classification, LaunchedSession, SessionAssignment
from raceranking.models._validators import as_utc
from raceranking.models.competition import EventGroup, EventSession
from raceranking.models.season import RawSession


class _Window(NamedTuple):
    track_id: int
    event_group_id: str | None
    session: EventSession


def _flatten(event_groups: Sequence[EventGroup]) -> list[_Window]:
    """Ordered windows, groups first then their sessions, as configured."""
    return [
        _Window(group.track_id, group.id, session)
        for group in event_groups
        if group.track_id is not None
        for session in group.sessions
    ]


class SessionClassifier:
    """First-match-wins lookup of (track, launch time) against event windows.

    Usage:
        classifier = SessionClassifier(competition.event_groups)
        assignment = classifier.classify(session)
        index = classifier.build_index(season.sessions())
    """

    def __init__(self, event_groups: Sequence[EventGroup]) -> None:
        self._windows = _flatten(event_groups)

    def classify(self, session: LaunchedSession | None) -> SessionAssignment | None:
        """Return the assignment of the earliest-declared matching window.

        Overlapping windows on the same track resolve to the one declared
        first. A matching window lacking a group or session id leaves the
        session unclassified.
        """
        if session is None:
            return None

        launch_at = as_utc(session.launch_at)
        for window in self._windows:
            if session.track_id == window.track_id and window.session.contains(launch_at):
                if not window.event_group_id or not window.session.id:
                    return None
                return SessionAssignment(window.event_group_id, window.session.id)

        return None

    def build_index(self, sessions: Iterable[RawSession]) -> Classification:
        """Classify every session, keeping only the matched ones."""
        index: Classification = {}
        for session in sessions:
            assignment = self.classify(session)
            if assignment is not None:
                index[session.session_id] = assignment
        return index


def classify_session(
    session: LaunchedSession | None,
    event_groups: Sequence[EventGroup],
) -> SessionAssignment | None:
    """Classify a single session against *event_groups*."""
    return SessionClassifier(event_groups).classify(session)


@log_engine_call
def build_classification(
    sessions: Iterable[RawSession],
    event_groups: Sequence[EventGroup],
) -> Classification:
    """Map subsession id -> assignment for every session that matches."""
    return SessionClassifier(event_groups).build_index(sessions)
