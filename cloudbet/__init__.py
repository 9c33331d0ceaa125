"""Client for the Cloudbet Sports API.

The library logs through structlog but never configures it. Applications
that want the JSON log format call ``cloudbet.logging_config.configure_logging``
once at startup.
"""

from cloudbet.client import BetPlacementError, CloudbetAPIError, CloudbetClient
from cloudbet.models import PlaceBetRequest, PriceChangePolicy

__version__ = "0.1.0"

__all__ = [
    "BetPlacementError",
    "CloudbetAPIError",
    "CloudbetClient",
    "PlaceBetRequest",
    "PriceChangePolicy",
]
