"""Ranking engine: classification, aggregation, ranking and matrix stages."""

from raceranking.engine.aggregator import aggregate_best_results
from raceranking.engine.classifier import SessionClassifier, build_classification, classify_session
from raceranking.engine.matrix import build_session_matrix, group_results_by_driver
from raceranking.engine.pipeline import build_competition_matrix, calculate_ranking
from raceranking.engine.ranking import rank_drivers, score_driver
from raceranking.engine.types import (
    BestResults,
    Classification,
    CompetitionRanking,
    LaunchedSession,
    RankingItem,
    SessionAssignment,
    SessionMatrix,
)

__all__ = [
    "BestResults",
    "Classification",
    "CompetitionRanking",
    "LaunchedSession",
    "RankingItem",
    "SessionAssignment",
    "SessionClassifier",
    "SessionMatrix",
    "aggregate_best_results",
    "build_classification",
    "build_competition_matrix",
    "build_session_matrix",
    "calculate_ranking",
    "classify_session",
    "group_results_by_driver",
    "rank_drivers",
    "score_driver",
]
