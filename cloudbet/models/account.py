"""Account records."""

from cloudbet.models.base import CloudbetModel


class Balance(CloudbetModel):
    """Balance of one account currency, as a decimal string."""

    amount: str = ""
