"""Cloudbet API client module."""

from cloudbet.client.api import BetPlacementError, CloudbetAPIError, CloudbetClient

__all__ = ["CloudbetClient", "CloudbetAPIError", "BetPlacementError"]
