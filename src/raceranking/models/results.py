"""Per-driver session result models from the results operator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from raceranking.models._validators import none_as_empty


class ResultLap(BaseModel):
    """Single lap of a result. Carried through but unused by the engine."""

    model_config = ConfigDict(frozen=True)

    lap_number: int | None = None
    flags: int | None = None
    incident: bool | None = None
    session_time: float | None = None
    lap_time: float | None = None
    lap_events: list[str] = Field(default_factory=list)

    @field_validator("lap_events", mode="before")
    @classmethod
    def events_none_as_empty(cls, value: Any) -> Any:
        return none_as_empty(value)


class RawResult(BaseModel):
    """A driver's average lap time in one subsession."""

    model_config = ConfigDict(frozen=True)

    driver_id: int
    subsession_id: int
    average_lap_time_ms: float | None = None
    laps: list[ResultLap] = Field(default_factory=list)

    @field_validator("laps", mode="before")
    @classmethod
    def laps_none_as_empty(cls, value: Any) -> Any:
        return none_as_empty(value)

    @property
    def has_valid_time(self) -> bool:
        """False for absent, zero or negative averages."""
        return self.average_lap_time_ms is not None and self.average_lap_time_ms > 0


class CompetitionResults(BaseModel):
    """All processed results of one competition."""

    model_config = ConfigDict(frozen=True)

    competition_id: int
    results: list[RawResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def results_none_as_empty(cls, value: Any) -> Any:
        return none_as_empty(value)
