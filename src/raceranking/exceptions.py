"""Custom exceptions for the ranking engine and its data sources."""

from __future__ import annotations


class RankingError(Exception):
    """Base exception for all raceranking errors."""


class RankingConnectionError(RankingError):
    """Raised when a data source cannot be reached."""


class RankingTimeoutError(RankingError):
    """Raised when a request to a data source times out."""


class RankingAPIError(RankingError):
    """Raised when a data source returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class RankingValidationError(RankingError):
    """Raised when source data fails model validation."""
