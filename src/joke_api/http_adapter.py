"""Adapter between http.server request handlers and the joke handler."""

from http.server import BaseHTTPRequestHandler
from typing import Optional

from .handler import JokeHandler, ResponseAlreadySentError, default_handler
from .models import JokeRequest


class HTTPResponseWriter:
    """Response writer backed by a BaseHTTPRequestHandler."""

    def __init__(self, request_handler: BaseHTTPRequestHandler):
        self._request_handler = request_handler
        self._status_code = 200
        self._headers: dict[str, str] = {}
        self._sent = False

    def set_header(self, name: str, value: str) -> None:
        self._headers[name] = value

    def set_status(self, status_code: int) -> None:
        self._status_code = status_code

    def send(self, body: str) -> None:
        """Write status line, headers and body to the socket."""
        if self._sent:
            raise ResponseAlreadySentError("Response was already sent")
        self._sent = True

        encoded = body.encode()
        self._request_handler.send_response(self._status_code)
        for name, value in self._headers.items():
            self._request_handler.send_header(name, value)
        if encoded:
            self._request_handler.send_header("Content-Length", str(len(encoded)))
        self._request_handler.end_headers()

        if encoded and self._request_handler.command != "HEAD":
            self._request_handler.wfile.write(encoded)


class JokeRequestHandler(BaseHTTPRequestHandler):
    """HTTP request handler serving jokes on every path."""

    joke_handler: Optional[JokeHandler] = None

    def _handle(self):
        handler = self.joke_handler or default_handler
        handler.handle(JokeRequest(method=self.command), HTTPResponseWriter(self))

    def __getattr__(self, name):
        # http.server dispatches on do_<METHOD>; every method is served
        if name.startswith("do_"):
            return self._handle
        raise AttributeError(name)
