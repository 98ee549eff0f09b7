"""Competition configuration models (roster and event groups)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from raceranking.models._validators import as_utc, none_as_empty


class Driver(BaseModel):
    """Roster entry, identified by the driver's iRacing customer id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    iracing_id: int | None = Field(default=None, alias="iRacingId")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Crew(BaseModel):
    model_config = ConfigDict(frozen=True)

    drivers: list[Driver] = Field(default_factory=list)

    @field_validator("drivers", mode="before")
    @classmethod
    def drivers_none_as_empty(cls, value: Any) -> Any:
        return none_as_empty(value)


class Team(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    crews: list[Crew] = Field(default_factory=list)

    @field_validator("crews", mode="before")
    @classmethod
    def crews_none_as_empty(cls, value: Any) -> Any:
        return none_as_empty(value)


class EventSession(BaseModel):
    """Time window in which a raw session must launch to count for its group.

    Both bounds are inclusive.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    from_time: datetime = Field(alias="fromTime")
    to_time: datetime = Field(alias="toTime")

    @field_validator("from_time", "to_time")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return as_utc(value)

    def contains(self, moment: datetime) -> bool:
        """True if *moment* lies inside the window, bounds included."""
        return self.from_time <= moment <= self.to_time


class EventGroup(BaseModel):
    """Competition category (one track) contributing one term to a total."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    name: str | None = None
    track_id: int | None = Field(default=None, alias="iRacingTrackId")
    sessions: list[EventSession] = Field(default_factory=list)

    @field_validator("sessions", mode="before")
    @classmethod
    def sessions_none_as_empty(cls, value: Any) -> Any:
        return none_as_empty(value)


class Competition(BaseModel):
    """Competition configuration as published by the CMS."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    slug: str | None = None
    name: str | None = None
    league_id: int | None = Field(default=None, alias="leagueId")
    season_id: int | None = Field(default=None, alias="seasonId")
    event_groups: list[EventGroup] = Field(default_factory=list, alias="eventGroups")
    teams: list[Team] = Field(default_factory=list)

    @field_validator("event_groups", "teams", mode="before")
    @classmethod
    def collections_none_as_empty(cls, value: Any) -> Any:
        return none_as_empty(value)

    def roster(self) -> list[Driver]:
        """Drivers of every crew of every team, in configured order.

        Drivers without an iRacing id are dropped. Duplicates are kept.
        """
        return [
            driver
            for team in self.teams
            for crew in team.crews
            for driver in crew.drivers
            if driver.iracing_id is not None
        ]

    def driver_ids(self) -> list[int]:
        """iRacing ids of the roster, duplicates included."""
        return [driver.iracing_id for driver in self.roster()]  # type: ignore[misc]
