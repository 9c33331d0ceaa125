"""Odds feed records: today's fixtures and full event lookups.

Fixtures and single events come back in two different shapes. The fixture
tree is a light listing grouped by competition; the event record carries
markets, settlement and metadata keyed by arbitrary strings.
"""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from cloudbet.models.base import CloudbetModel


class Sport(CloudbetModel):
    """Sport descriptor."""

    name: str = ""
    key: str = ""


class Category(CloudbetModel):
    """Competition category, usually a country or region."""

    name: str = ""
    key: str = ""


# =============================================================================
# Fixtures
# =============================================================================


def type_tag_to_string(value: Any) -> Any:
    """Event type tags arrive as strings or integers; keep them as strings."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class Team(CloudbetModel):
    """Home or away side of a fixture."""

    name: str = ""
    key: str = ""
    abbreviation: str = ""
    nationality: str = ""
    research_id: str = ""


class Players(CloudbetModel):
    """Placeholder; the fixtures feed is requested with players=false."""

    model_config = ConfigDict(extra="allow")


class FixtureMarkets(CloudbetModel):
    """Placeholder for markets embedded in a fixture listing."""

    model_config = ConfigDict(extra="allow")


class FixtureEvent(CloudbetModel):
    """Event as listed under a competition in the fixtures feed."""

    id: int = 0
    home: Team = Field(default_factory=Team)
    away: Team = Field(default_factory=Team)
    players: Players = Field(default_factory=Players)
    status: str = ""
    markets: FixtureMarkets = Field(default_factory=FixtureMarkets)
    name: str = ""
    key: str = ""
    cutoff_time: datetime | None = None
    type: str = ""

    _type_as_string = field_validator("type", mode="before")(type_tag_to_string)


class Competition(CloudbetModel):
    """Competition grouping in the fixtures feed."""

    name: str = ""
    key: str = ""
    sport: Sport = Field(default_factory=Sport)
    category: Category = Field(default_factory=Category)
    events: list[FixtureEvent] = Field(default_factory=list)


class Fixtures(CloudbetModel):
    """Response of GET /pub/v2/odds/fixtures."""

    competitions: list[Competition] = Field(default_factory=list)


# =============================================================================
# Event lookup
# =============================================================================


class EventTeam(CloudbetModel):
    """Home or away side of a full event record."""

    name: str = ""
    key: str = ""
    abbreviation: str = ""
    nationality: str = ""


class EventCompetition(CloudbetModel):
    """Competition a full event record belongs to."""

    name: str = ""
    key: str = ""
    category: Category = Field(default_factory=Category)


class Selection(CloudbetModel):
    """One outcome of a market with its price and stake bounds."""

    outcome: str = ""
    params: str = ""
    side: str = ""
    status: str = ""
    price: float = 0.0
    probability: float = 0.0
    min_stake: float = 0.0
    max_stake: float = 0.0


class Submarket(CloudbetModel):
    """Selections of a market for one parameter set."""

    selections: list[Selection] = Field(default_factory=list)
    sequence: int = 0


class Market(CloudbetModel):
    """Market (or settlement) entry keyed by market key."""

    selections: list[Selection] = Field(default_factory=list)
    sequence: int = 0
    submarkets: dict[str, Submarket] = Field(default_factory=dict)


class Opinion(CloudbetModel):
    """Crowd opinion on one outcome."""

    market_key: str = ""
    outcome: str = ""
    params: str = ""
    probability: float = 0.0


class OpinionGroup(CloudbetModel):
    """Opinions collected under one key."""

    opinion: list[Opinion] = Field(default_factory=list)


class Metadata(CloudbetModel):
    """Event metadata."""

    opinion: list[Opinion] = Field(default_factory=list)
    opinions: dict[str, OpinionGroup] = Field(default_factory=dict)


class Event(CloudbetModel):
    """Response of GET /pub/v2/odds/events/{id}."""

    id: int = 0
    key: str = ""
    name: str = ""
    status: str = ""
    type: str = ""
    sequence: int = 0
    grading_duration: int = 0
    home: EventTeam = Field(default_factory=EventTeam)
    away: EventTeam = Field(default_factory=EventTeam)
    competition: EventCompetition = Field(default_factory=EventCompetition)
    sport: Sport = Field(default_factory=Sport)
    cutoff_time: datetime | None = None
    end_time: datetime | None = None
    resulted_time: datetime | None = None
    markets: dict[str, Market] = Field(default_factory=dict)
    settlement: dict[str, Market] = Field(default_factory=dict)
    metadata: Metadata = Field(default_factory=Metadata)

    _type_as_string = field_validator("type", mode="before")(type_tag_to_string)
