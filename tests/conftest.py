"""Pytest configuration and fixtures for Cloudbet client tests."""

from collections.abc import Callable

import httpx
import pytest

from cloudbet.client import CloudbetClient
from cloudbet.config import get_settings

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://sports-api.test"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_key() -> str:
    """API key the test client is built with."""
    return TEST_API_KEY


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(recorded_requests, api_key):
    """
    Build a client whose transport is answered by a handler function.

    The handler receives the httpx.Request and returns an httpx.Response.
    """
    clients: list[CloudbetClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> CloudbetClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        client = CloudbetClient(
            api_key,
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(_record),
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def fixtures_payload():
    """Fixtures feed with two competitions holding one event each."""
    return {
        "competitions": [
            {
                "name": "2. Bundesliga",
                "key": "soccer-germany-2nd-bundesliga",
                "sport": {"name": "Soccer", "key": "soccer"},
                "category": {"name": "Germany", "key": "germany"},
                "events": [
                    {
                        "id": 24055338,
                        "home": {
                            "name": "Hamburger SV",
                            "key": "c-hamburger-sv",
                            "abbreviation": "HSV",
                            "nationality": "GER",
                            "researchId": "r-101",
                        },
                        "away": {
                            "name": "FC St. Pauli",
                            "key": "c-fc-st-pauli",
                            "abbreviation": "STP",
                            "nationality": "GER",
                            "researchId": "r-102",
                        },
                        "players": {},
                        "status": "TRADING",
                        "markets": {},
                        "name": "Hamburger SV V FC St. Pauli",
                        "key": "hamburger-sv-v-fc-st-pauli",
                        "cutoffTime": "2026-10-16T18:30:00Z",
                        "type": "EVENT_TYPE_EVENT",
                    }
                ],
            },
            {
                "name": "Serie B",
                "key": "soccer-italy-serie-b",
                "sport": {"name": "Soccer", "key": "soccer"},
                "category": {"name": "Italy", "key": "italy"},
                "events": [
                    {
                        "id": 24055401,
                        "home": {"name": "Palermo", "key": "c-palermo"},
                        "away": {"name": "Bari", "key": "c-bari"},
                        "players": {},
                        "status": "TRADING",
                        "markets": {},
                        "name": "Palermo V Bari",
                        "key": "palermo-v-bari",
                        "cutoffTime": "2026-10-16T19:00:00Z",
                        "type": "EVENT_TYPE_EVENT",
                    }
                ],
            },
        ]
    }


@pytest.fixture
def event_payload():
    """Full event record with markets, settlement and metadata."""
    return {
        "id": 24055338,
        "key": "hamburger-sv-v-fc-st-pauli",
        "name": "Hamburger SV V FC St. Pauli",
        "status": "TRADING",
        "type": "EVENT_TYPE_EVENT",
        "sequence": 1842,
        "gradingDuration": 120,
        "home": {
            "name": "Hamburger SV",
            "key": "c-hamburger-sv",
            "abbreviation": "HSV",
            "nationality": "GER",
        },
        "away": {
            "name": "FC St. Pauli",
            "key": "c-fc-st-pauli",
            "abbreviation": "STP",
            "nationality": "GER",
        },
        "competition": {
            "name": "2. Bundesliga",
            "key": "soccer-germany-2nd-bundesliga",
            "category": {"name": "Germany", "key": "germany"},
        },
        "sport": {"name": "Soccer", "key": "soccer"},
        "cutoffTime": "2026-10-16T18:30:00Z",
        "endTime": "2026-10-16T20:30:00Z",
        "resultedTime": "2026-10-16T20:45:00Z",
        "markets": {
            "soccer.match_odds": {
                "sequence": 7,
                "selections": [
                    {
                        "outcome": "home",
                        "params": "",
                        "side": "BACK",
                        "status": "SELECTION_ENABLED",
                        "price": 2.1,
                        "probability": 0.462,
                        "minStake": 0.01,
                        "maxStake": 2500.0,
                    },
                    {
                        "outcome": "away",
                        "params": "",
                        "side": "BACK",
                        "status": "SELECTION_ENABLED",
                        "price": 3.4,
                        "probability": 0.285,
                        "minStake": 0.01,
                        "maxStake": 1800.0,
                    },
                ],
                "submarkets": {
                    "period=ft": {
                        "sequence": 7,
                        "selections": [
                            {"outcome": "draw", "price": 3.25, "probability": 0.253}
                        ],
                    }
                },
            },
            "soccer.total_goals": {"sequence": 3, "selections": []},
        },
        "settlement": {
            "soccer.match_odds": {
                "sequence": 9,
                "selections": [{"outcome": "home", "status": "SELECTION_WIN"}],
            }
        },
        "metadata": {
            "opinion": [
                {
                    "marketKey": "soccer.match_odds",
                    "outcome": "home",
                    "params": "",
                    "probability": 0.51,
                }
            ],
            "opinions": {
                "soccer.match_odds": {
                    "opinion": [
                        {"marketKey": "soccer.match_odds", "outcome": "away", "probability": 0.3}
                    ]
                }
            },
        },
    }
