"""Cloudbet Sports API client.

Provides synchronous access to the Cloudbet Sports API:
- Bet placement
- Account balance
- Today's fixtures and single event lookups

Each call is a single HTTP round trip. Nothing is retried, cached or
rate limited here; callers own that policy.
"""

import re
from datetime import date
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import ValidationError

from cloudbet.config import Settings, get_settings
from cloudbet.config.settings import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from cloudbet.models import (
    Balance,
    CloudbetModel,
    Event,
    Fixtures,
    PlaceBetRequest,
    PlaceBetResponse,
)

logger = structlog.get_logger(__name__)

# Cloudbet API paths
PLACE_BET_PATH = "/pub/v3/bets/place"
BALANCE_PATH = "/pub/v1/account/currencies/{currency}/balance"
FIXTURES_PATH = "/pub/v2/odds/fixtures"
EVENT_PATH = "/pub/v2/odds/events/{event_id}"

JSON_CONTENT_TYPE = "application/json"

# Plain decimal amount: no surrounding whitespace, underscores or words
DECIMAL_AMOUNT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

ModelT = TypeVar("ModelT", bound=CloudbetModel)


class CloudbetAPIError(Exception):
    """Raised when a Cloudbet API call fails for any reason."""

    pass


class BetPlacementError(CloudbetAPIError):
    """
    Bet placement answered with a non-OK status.

    The decoded response is kept so callers can read the server's
    rejection message from ``response.error``.
    """

    def __init__(self, message: str, response: PlaceBetResponse, status_code: int):
        super().__init__(message)
        self.response = response
        self.status_code = status_code


def today_iso() -> str:
    """Today's date on the local clock, formatted YYYY-MM-DD."""
    return date.today().isoformat()


class CloudbetClient:
    """
    Cloudbet Sports API client.

    Configuration is fixed at construction and the underlying
    httpx.Client is shared, so one instance can serve many threads.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize Cloudbet client.

        Args:
            api_key: Cloudbet API key, sent as X-API-Key on every call
            base_url: API host, defaults to the production host
            timeout: Per-call timeout in seconds, defaults to 10
            transport: Optional custom httpx transport
        """
        self.api_key = api_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS
        self._http_client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "CloudbetClient":
        """Build a client from configured settings."""
        settings = settings or get_settings()
        return cls(
            settings.cloudbet_api_key,
            base_url=settings.cloudbet_base_url,
            timeout=settings.cloudbet_timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> "CloudbetClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP transport."""
        self._http_client.close()

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Make one authenticated request and read the whole body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            params: Query parameters
            json: JSON body
            headers: Extra headers

        Returns:
            The response, whatever its status

        Raises:
            CloudbetAPIError: If the request cannot be built or sent
        """
        request_headers = {"X-API-Key": self.api_key}
        if headers:
            request_headers.update(headers)

        try:
            response = self._http_client.request(
                method,
                path,
                params=params,
                json=json,
                headers=request_headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.error(
                "cloudbet_request_failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise CloudbetAPIError(f"{method} {path} failed: {e}") from e

        logger.debug(
            "cloudbet_request",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return response

    def _decode(self, model: type[ModelT], body: str | bytes, what: str) -> ModelT:
        """Decode a JSON body into a record, wrapping decode errors."""
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            logger.warning(
                "cloudbet_decode_failed",
                record=model.__name__,
                error_count=e.error_count(),
            )
            raise CloudbetAPIError(f"failed to decode {what}: {e}") from e

    def place_bet(self, payload: PlaceBetRequest) -> PlaceBetResponse:
        """
        Submit a bet.

        Args:
            payload: Bet to place; its reference_id identifies the attempt

        Returns:
            The server's view of the placed bet

        Raises:
            BetPlacementError: If the server answers with a non-OK status;
                the decoded response is attached
            CloudbetAPIError: If the request fails or the body cannot be decoded
        """
        response = self._send(
            "POST",
            PLACE_BET_PATH,
            json=payload.to_wire(),
            headers={
                "Content-Type": JSON_CONTENT_TYPE,
                "Accept": JSON_CONTENT_TYPE,
            },
        )
        placed = self._decode(PlaceBetResponse, response.content, "bet placement response")

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "bet_placement_failed",
                status_code=response.status_code,
                reference_id=payload.reference_id,
                error=placed.error,
            )
            raise BetPlacementError(
                f"failed to place bet: {response.status_code} {response.reason_phrase}",
                placed,
                response.status_code,
            )

        logger.info(
            "bet_placed",
            reference_id=placed.reference_id,
            event_id=placed.event_id,
            status=placed.status,
        )
        return placed

    def account_balance(self, currency: str) -> float:
        """
        Fetch the account balance for one currency.

        Args:
            currency: Currency code, e.g. "EUR" or "PLAY_EUR"

        Returns:
            Balance amount

        Raises:
            CloudbetAPIError: If the request, decoding or number parsing fails
        """
        response = self._send("GET", BALANCE_PATH.format(currency=currency))
        balance = self._decode(Balance, response.content, "balance response")
        if not DECIMAL_AMOUNT_RE.fullmatch(balance.amount):
            raise CloudbetAPIError(
                f"invalid balance amount {balance.amount!r} for {currency}"
            )
        return float(balance.amount)

    def get_today_fixtures_raw(self, sport: str, limit: int) -> str:
        """
        Fetch today's fixtures for a sport as raw JSON text.

        Args:
            sport: Sport key, e.g. "soccer"
            limit: Maximum number of results

        Returns:
            Response body
        """
        params = {
            "sport": sport,
            "date": today_iso(),
            "players": "false",
            "limit": limit,
        }
        response = self._send(
            "GET",
            FIXTURES_PATH,
            params=params,
            headers={"Accept": JSON_CONTENT_TYPE},
        )
        return response.text

    def get_today_fixtures(self, sport: str, limit: int) -> Fixtures:
        """Fetch today's fixtures for a sport, parsed."""
        body = self.get_today_fixtures_raw(sport, limit)
        return self._decode(Fixtures, body, "fixtures response")

    def get_event_raw(self, event_id: str) -> str:
        """
        Fetch one event as raw JSON text.

        Args:
            event_id: Cloudbet event ID

        Returns:
            Response body
        """
        response = self._send("GET", EVENT_PATH.format(event_id=event_id))
        return response.text

    def get_event(self, event_id: str) -> Event:
        """Fetch one event, parsed."""
        body = self.get_event_raw(event_id)
        return self._decode(Event, body, "event response")
