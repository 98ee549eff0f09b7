"""Folds raw results into per-driver best times."""

from __future__ import annotations

from collections.abc import Iterable

from raceranking._logging import log_engine_call
from raceranking.engine.types import BestResults, Classification
from raceranking.models.results import RawResult


@log_engine_call
def aggregate_best_results(
    results: Iterable[RawResult],
    classification: Classification,
    allowed_driver_ids: Iterable[int],
) -> BestResults:
    """Keep each driver's minimum average lap per event group and session.

    Results are silently skipped when the driver is not on the roster, the
    average is absent, zero or negative, or the subsession is unclassified.
    """
    allowed = set(allowed_driver_ids)
    best: BestResults = {}

    for result in results:
        if result.driver_id not in allowed:
            continue
        if not result.has_valid_time:
            continue

        assignment = classification.get(result.subsession_id)
        if assignment is None:
            continue

        sessions = best.setdefault(result.driver_id, {}).setdefault(
            assignment.event_group_id, {},
        )
        current = sessions.get(assignment.event_session_id)
        time_ms = result.average_lap_time_ms
        if current is None or time_ms < current:  # type: ignore[operator]
            sessions[assignment.event_session_id] = time_ms  # type: ignore[assignment]

    return best
