"""Joke API - Serve a random joke over HTTP with permissive CORS."""

from .catalog import CHUCK_NORRIS_JOKES, JokeCatalog, JokeCatalogError
from .handler import (
    BufferedResponse,
    JokeHandler,
    RequestDescriptor,
    ResponseAlreadySentError,
    ResponseWriter,
    handle_event,
)
from .models import JokePayload, JokeRequest

__version__ = "0.1.0"

__all__ = [
    "BufferedResponse",
    "CHUCK_NORRIS_JOKES",
    "JokeCatalog",
    "JokeCatalogError",
    "JokeHandler",
    "JokePayload",
    "JokeRequest",
    "RequestDescriptor",
    "ResponseAlreadySentError",
    "ResponseWriter",
    "handle_event",
]
