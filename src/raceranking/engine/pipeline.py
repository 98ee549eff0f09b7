"""End-to-end composition of the engine stages for one competition."""

from __future__ import annotations

from raceranking.engine.aggregator import aggregate_best_results
from raceranking.engine.classifier import build_classification
from raceranking.engine.matrix import build_session_matrix
from raceranking.engine.ranking import rank_drivers
from raceranking.engine.types import RankingItem, SessionMatrix
from raceranking.models.competition import Competition
from raceranking.models.results import CompetitionResults
from raceranking.models.season import SeasonData


def calculate_ranking(
    competition: Competition,
    season: SeasonData,
    results: CompetitionResults,
) -> list[RankingItem]:
    """Classify sessions, fold best times and rank the roster."""
    driver_ids = competition.driver_ids()
    classification = build_classification(season.sessions(), competition.event_groups)
    best_results = aggregate_best_results(results.results, classification, driver_ids)
    return rank_drivers(best_results, driver_ids, competition.event_groups)


def build_competition_matrix(
    competition: Competition,
    season: SeasonData,
    results: CompetitionResults,
) -> SessionMatrix:
    """Driver x session table over the competition's classified sessions."""
    sessions = season.sessions()
    classification = build_classification(sessions, competition.event_groups)
    return build_session_matrix(sessions, classification, results.results, competition.roster())
