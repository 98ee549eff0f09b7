"""Totals, validity and ordering of the driver ranking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from raceranking._logging import log_engine_call
from raceranking.engine.types import BestResults, RankingItem
from raceranking.models.competition import EventGroup


def _sort_key(item: RankingItem) -> tuple[bool, bool, float]:
    # Valid first; a zero total goes last within its validity group.
    return (not item.is_valid, item.total == 0, item.total)


def score_driver(
    driver_id: int,
    best_results: BestResults,
    event_groups: Sequence[EventGroup],
) -> RankingItem:
    """Sum the best time of every event group for one driver.

    A group without any recorded time makes the driver invalid and
    contributes nothing to the total.
    """
    driver_results = best_results.get(driver_id, {})
    total = 0.0
    is_valid = True

    for group in event_groups:
        group_results = driver_results.get(group.id, {}) if group.id else {}
        if not group_results:
            is_valid = False
        else:
            total += min(group_results.values())

    return RankingItem(
        position=0,
        driver_id=driver_id,
        total=total,
        is_valid=is_valid,
        results=driver_results,
    )


@log_engine_call
def rank_drivers(
    best_results: BestResults,
    allowed_driver_ids: Iterable[int],
    event_groups: Sequence[EventGroup],
) -> list[RankingItem]:
    """Score and order every roster entry, then number positions from 1.

    Roster duplicates yield duplicate items.
    """
    items = [
        score_driver(driver_id, best_results, event_groups)
        for driver_id in allowed_driver_ids
    ]
    items.sort(key=_sort_key)
    return [replace(item, position=index) for index, item in enumerate(items, start=1)]
