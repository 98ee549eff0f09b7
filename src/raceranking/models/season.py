"""Raw telemetry session models from the league season scraper."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from raceranking.models._validators import as_utc


class ParsedSession(BaseModel):
    """Session as stored in a season document, keyed by its id."""

    model_config = ConfigDict(frozen=True)

    track_id: int | None = None
    launch_at: datetime

    @field_validator("launch_at")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return as_utc(value)


class RawSession(ParsedSession):
    """Parsed session carrying its own subsession id."""

    session_id: int


class SeasonMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    name: str


class SeasonStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    parsed_sessions: dict[int, ParsedSession] | None = None


class SeasonData(BaseModel):
    """Scraper document describing one league season."""

    model_config = ConfigDict(frozen=True)

    meta: SeasonMeta
    status: SeasonStatus = Field(default_factory=SeasonStatus)

    def sessions(self) -> list[RawSession]:
        """Parsed sessions in document order, each tagged with its id."""
        parsed = self.status.parsed_sessions or {}
        return [
            RawSession(session_id=session_id, track_id=s.track_id, launch_at=s.launch_at)
            for session_id, s in parsed.items()
        ]
