"""Bet placement request and response records."""

import uuid
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from cloudbet.models.base import CloudbetModel


class PriceChangePolicy(str, Enum):
    """Which price movements the server may accept when placing a bet."""

    NONE = "NONE"
    ALL = "ALL"
    BETTER = "BETTER"


def new_reference_id() -> str:
    """Generate a unique reference ID for one bet attempt."""
    return str(uuid.uuid4())


class PlaceBetRequest(CloudbetModel):
    """
    Payload for POST /pub/v3/bets/place.

    Price and stake travel as decimal strings. Nothing here is checked
    against business rules; the server decides what is acceptable.
    """

    accept_price_change: str
    currency: str
    event_id: str
    market_url: str
    price: str
    stake: str
    reference_id: str = Field(default_factory=new_reference_id)

    @field_validator("price", "stake", mode="before")
    @classmethod
    def _decimal_to_string(cls, value: Any) -> Any:
        # fixed-point, never exponent form
        if isinstance(value, Decimal):
            return format(value, "f")
        # bool is an int subclass but never a valid amount
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("accept_price_change", mode="before")
    @classmethod
    def _policy_to_string(cls, value: Any) -> Any:
        if isinstance(value, PriceChangePolicy):
            return value.value
        return value


class PlaceBetResponse(CloudbetModel):
    """Server view of a bet placement, including rejections."""

    reference_id: str = ""
    price: str = ""
    event_id: str = ""
    market_url: str = ""
    side: str = ""
    currency: str = ""
    stake: str = ""
    create_time: str = ""
    status: str = ""
    return_amount: str = ""
    event_name: str = ""
    sports_key: str = ""
    competition_id: str = ""
    category_key: str = ""
    customer_reference: str = ""
    error: str = ""
