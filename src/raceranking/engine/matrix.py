"""Driver x session table of raw average lap times for export."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from raceranking._logging import log_engine_call
from raceranking.engine.types import Classification, SessionMatrix
from raceranking.formatters import format_milliseconds, format_session_label
from raceranking.models.competition import Driver
from raceranking.models.results import RawResult
from raceranking.models.season import RawSession

MATRIX_LABEL_COLUMNS = ["Driver", "Id"]


def group_results_by_driver(
    results: Iterable[RawResult],
) -> dict[int, dict[int, float | None]]:
    """Index raw averages as driver id -> subsession id -> time.

    A later result for the same driver and subsession replaces the earlier.
    """
    grouped: dict[int, dict[int, float | None]] = {}
    for result in results:
        grouped.setdefault(result.driver_id, {})[result.subsession_id] = result.average_lap_time_ms
    return grouped


@log_engine_call
def build_session_matrix(
    sessions: Iterable[RawSession],
    classification: Classification,
    results: Iterable[RawResult],
    roster: Sequence[Driver],
) -> SessionMatrix:
    """Build the export table over classified sessions, oldest first.

    Cells hold the verbatim average of that exact session, zero and negative
    values included, or an empty string when the driver has none.
    """
    ordered = sorted(
        (s for s in sessions if s.session_id in classification),
        key=lambda s: s.launch_at,
    )
    session_ids = [s.session_id for s in ordered]
    header = MATRIX_LABEL_COLUMNS + [format_session_label(s.launch_at) for s in ordered]

    grouped = group_results_by_driver(results)
    rows: list[list[str]] = []
    for driver in roster:
        times = grouped.get(driver.iracing_id, {})  # type: ignore[arg-type]
        row = [driver.display_name, str(driver.iracing_id)]
        for session_id in session_ids:
            lap_time = times.get(session_id)
            row.append("" if lap_time is None else format_milliseconds(lap_time))
        rows.append(row)

    return SessionMatrix(header=header, rows=rows, session_ids=session_ids)
