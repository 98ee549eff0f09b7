"""raceranking: classification and ranking engine for league competitions."""

from raceranking.engine import (
    CompetitionRanking,
    RankingItem,
    SessionAssignment,
    SessionClassifier,
    SessionMatrix,
    aggregate_best_results,
    build_classification,
    build_session_matrix,
    classify_session,
    rank_drivers,
)
from raceranking.exceptions import (
    RankingAPIError,
    RankingConnectionError,
    RankingError,
    RankingTimeoutError,
    RankingValidationError,
)
from raceranking.export import matrix_to_csv, read_matrix_csv
from raceranking.formatters import format_milliseconds
from raceranking.service import AsyncRankingService, RankingService

__all__ = [
    "AsyncRankingService",
    "CompetitionRanking",
    "RankingAPIError",
    "RankingConnectionError",
    "RankingError",
    "RankingItem",
    "RankingService",
    "RankingTimeoutError",
    "RankingValidationError",
    "SessionAssignment",
    "SessionClassifier",
    "SessionMatrix",
    "aggregate_best_results",
    "build_classification",
    "build_session_matrix",
    "classify_session",
    "format_milliseconds",
    "matrix_to_csv",
    "rank_drivers",
    "read_matrix_csv",
]

__version__ = "0.1.0"
