"""Request handler that answers with a random joke."""

import random
from typing import Any, Callable, Mapping, Optional, Protocol

from .catalog import CHUCK_NORRIS_JOKES, JokeCatalog
from .models import JokePayload, JokeRequest

# Sent on every response, preflight or not
CORS_ORIGIN_HEADERS = {
    "Access-Control-Allow-Origin": "*",
}

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "3600",
}


class RequestDescriptor(Protocol):
    """Read-only view of an inbound request."""

    method: Optional[str]


class ResponseWriter(Protocol):
    """Write-only handle for producing a response."""

    def set_header(self, name: str, value: str) -> None: ...

    def set_status(self, status_code: int) -> None: ...

    def send(self, body: str) -> None: ...


class ResponseAlreadySentError(Exception):
    """Raised when a response body is sent more than once."""


class JokeHandler:
    """Answers CORS preflight requests and serves random jokes."""

    def __init__(
        self,
        catalog: JokeCatalog = CHUCK_NORRIS_JOKES,
        random_source: Callable[[], float] = random.random,
    ):
        """
        Initialize the handler.

        Args:
            catalog: Jokes to choose from
            random_source: Zero-argument callable returning a float in [0, 1)
        """
        self.catalog = catalog
        self.random_source = random_source

    def handle(self, request: RequestDescriptor, response: ResponseWriter) -> None:
        """Write exactly one response for the request."""
        for name, value in CORS_ORIGIN_HEADERS.items():
            response.set_header(name, value)

        # Runtimes may hand over a request without a method at all
        if getattr(request, "method", None) == "OPTIONS":
            for name, value in PREFLIGHT_HEADERS.items():
                response.set_header(name, value)
            response.set_status(204)
            response.send("")
            return

        joke = self.catalog.pick(self.random_source)
        response.set_status(200)
        response.set_header("Content-Type", "application/json")
        response.send(JokePayload(joke=joke).model_dump_json())


class BufferedResponse:
    """In-memory response writer for function-style runtimes."""

    def __init__(self):
        self.status_code: Optional[int] = None
        self.headers: dict[str, str] = {}
        self.body: Optional[str] = None

    @property
    def sent(self) -> bool:
        return self.body is not None

    def set_header(self, name: str, value: str) -> None:
        if self.sent:
            raise ResponseAlreadySentError("Cannot set a header after the response was sent")
        self.headers[name] = value

    def set_status(self, status_code: int) -> None:
        if self.sent:
            raise ResponseAlreadySentError("Cannot set the status after the response was sent")
        self.status_code = status_code

    def send(self, body: str) -> None:
        if self.sent:
            raise ResponseAlreadySentError("Response was already sent")
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        """Render the response as a {statusCode, headers, body} envelope."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body if self.body is not None else "",
        }


# Shared default handler, stateless apart from the random source
default_handler = JokeHandler()


def handle_event(event: Any = None, handler: Optional[JokeHandler] = None) -> dict[str, Any]:
    """
    Handle a function-style invocation and return the response envelope.

    Args:
        event: Mapping with a "method" (or API gateway "httpMethod") key,
            or any object exposing a method attribute
        handler: Handler to use instead of the shared default

    Returns:
        Dict with statusCode, headers and body
    """
    if isinstance(event, Mapping):
        method = event.get("method") or event.get("httpMethod")
    else:
        method = getattr(event, "method", None)
    # Anything that is not a string can never be "OPTIONS"
    request = JokeRequest(method=method if isinstance(method, str) else None)

    response = BufferedResponse()
    (handler or default_handler).handle(request, response)
    return response.to_dict()
