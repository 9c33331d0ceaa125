"""Base model for Cloudbet wire records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CloudbetModel(BaseModel):
    """
    Base class for all request and response records.

    Attributes are snake_case in Python and camelCase on the wire.
    Either spelling is accepted when building a record.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Dump the record as a JSON-ready dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)
