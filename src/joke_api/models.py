"""Data models for the joke API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class JokeRequest(BaseModel):
    """Inbound request as seen by the joke handler."""

    model_config = ConfigDict(frozen=True)

    method: Optional[str] = None


class JokePayload(BaseModel):
    """JSON body of a joke response."""

    joke: str
