"""FastAPI server for the joke API."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import Response

from . import __version__
from .handler import BufferedResponse, JokeHandler, default_handler


class JokeEndpoint:
    """ASGI endpoint answering every method through a joke handler."""

    def __init__(self, handler: JokeHandler):
        self.handler = handler

    async def __call__(self, scope, receive, send):
        buffered = BufferedResponse()
        self.handler.handle(Request(scope, receive), buffered)
        response = Response(
            content=buffered.body or "",
            status_code=buffered.status_code,
            headers=buffered.headers,
        )
        await response(scope, receive, send)


def create_app(handler: Optional[JokeHandler] = None) -> FastAPI:
    """Create the FastAPI app around a joke handler."""
    # Every path belongs to the joke route, so no docs or schema routes
    app = FastAPI(
        title="Joke API",
        description="Serve a random Chuck Norris joke",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # An ASGI endpoint with methods=None matches any method.
    # CORS headers come from the joke handler itself, so no CORSMiddleware
    app.add_route(
        "/{path:path}",
        JokeEndpoint(handler or default_handler),
        name="get_random_joke",
        include_in_schema=False,
    )

    return app


app = create_app()
