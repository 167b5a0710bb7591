# groupie/tracker/contracts/artist.py
"""
Typed artist record served by the local artists API.

The detail renderer never relies on this model: it works on whatever JSON an
API returns. The model only governs what the local store accepts.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Artist(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = 0
    image: str = ""
    name: str = ""
    members: list[str] = Field(default_factory=list)
    creation_date: int = 0
    first_album: str = ""
    locations: str = ""
    concert_dates: str = ""
    relations: str = ""

    def to_payload(self) -> dict:
        """camelCase JSON payload, as the API serves it."""
        return self.model_dump(by_alias=True)
