"""Cloudbet wire records."""

from cloudbet.models.account import Balance
from cloudbet.models.base import CloudbetModel
from cloudbet.models.bets import (
    PlaceBetRequest,
    PlaceBetResponse,
    PriceChangePolicy,
    new_reference_id,
)
from cloudbet.models.odds import (
    Category,
    Competition,
    Event,
    EventCompetition,
    EventTeam,
    FixtureEvent,
    FixtureMarkets,
    Fixtures,
    Market,
    Metadata,
    Opinion,
    OpinionGroup,
    Players,
    Selection,
    Sport,
    Submarket,
    Team,
)

__all__ = [
    "Balance",
    "Category",
    "CloudbetModel",
    "Competition",
    "Event",
    "EventCompetition",
    "EventTeam",
    "FixtureEvent",
    "FixtureMarkets",
    "Fixtures",
    "Market",
    "Metadata",
    "Opinion",
    "OpinionGroup",
    "PlaceBetRequest",
    "PlaceBetResponse",
    "Players",
    "PriceChangePolicy",
    "Selection",
    "Sport",
    "Submarket",
    "Team",
    "new_reference_id",
]
