"""Tests for the http.server adapter and the Vercel function."""

import importlib.util
import threading
from http.server import HTTPServer
from pathlib import Path

import httpx
import pytest

from joke_api.catalog import CHUCK_NORRIS_JOKES, JokeCatalog
from joke_api.handler import JokeHandler, ResponseAlreadySentError
from joke_api.http_adapter import HTTPResponseWriter, JokeRequestHandler

VERCEL_FUNCTION = Path(__file__).parent.parent / "api" / "joke.py"


class QuietJokeRequestHandler(JokeRequestHandler):
    def log_message(self, format, *args):
        pass


class FixedJokeRequestHandler(QuietJokeRequestHandler):
    joke_handler = JokeHandler(catalog=JokeCatalog(jokes=("fixed",)))


def serve(handler_class):
    """Start a threaded HTTP server on an ephemeral port."""
    server = HTTPServer(("127.0.0.1", 0), handler_class)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server, f"http://127.0.0.1:{server.server_address[1]}"


@pytest.fixture
def base_url():
    server, url = serve(QuietJokeRequestHandler)
    yield url
    server.shutdown()
    server.server_close()


class TestJokeRequestHandler:
    """Tests for JokeRequestHandler over a real socket."""

    def test_preflight(self, base_url):
        """Test OPTIONS answers 204 with the preflight headers."""
        response = httpx.options(base_url + "/")

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert response.headers["Access-Control-Allow-Methods"] == "GET"
        assert response.headers["Access-Control-Allow-Headers"] == "Content-Type"
        assert response.headers["Access-Control-Max-Age"] == "3600"

    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE"])
    def test_methods_return_joke(self, base_url, method):
        """Test every non-preflight method returns a joke."""
        response = httpx.request(method, base_url + "/api/joke")

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert response.headers["Content-Type"] == "application/json"
        assert response.json()["joke"] in CHUCK_NORRIS_JOKES

    @pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "BREW"])
    def test_unlisted_methods_return_joke(self, base_url, method):
        """Test methods without a do_ handler of their own still return a joke."""
        response = httpx.request(method, base_url + "/")

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert response.json()["joke"] in CHUCK_NORRIS_JOKES

    def test_non_dispatch_attributes_still_missing(self):
        """Test only do_ lookups are redirected to the joke handler."""
        assert not hasattr(JokeRequestHandler, "do_TRACE")
        with pytest.raises(AttributeError):
            JokeRequestHandler.__getattr__(object.__new__(JokeRequestHandler), "missing")

    def test_head_has_no_body(self, base_url):
        """Test HEAD gets joke headers without a body."""
        response = httpx.head(base_url + "/")

        assert response.status_code == 200
        assert response.headers["Content-Type"] == "application/json"
        assert response.content == b""

    def test_injected_handler(self):
        """Test a subclass can swap in its own joke handler."""
        server, url = serve(FixedJokeRequestHandler)
        try:
            response = httpx.get(url + "/")
        finally:
            server.shutdown()
            server.server_close()

        assert response.json() == {"joke": "fixed"}


class FakeRequestHandler:
    """Stand-in for BaseHTTPRequestHandler recording writes."""

    command = "GET"

    def __init__(self):
        self.status = None
        self.headers = []
        self.ended = False
        self.written = b""
        self.wfile = self

    def send_response(self, code):
        self.status = code

    def send_header(self, name, value):
        self.headers.append((name, value))

    def end_headers(self):
        self.ended = True

    def write(self, data):
        self.written += data


class TestHTTPResponseWriter:
    """Tests for HTTPResponseWriter."""

    def test_writes_status_headers_and_body(self):
        """Test a send emits everything in order."""
        fake = FakeRequestHandler()
        writer = HTTPResponseWriter(fake)
        writer.set_header("Content-Type", "application/json")
        writer.set_status(200)
        writer.send('{"joke":"x"}')

        assert fake.status == 200
        assert fake.headers == [("Content-Type", "application/json"), ("Content-Length", "12")]
        assert fake.ended
        assert fake.written == b'{"joke":"x"}'

    def test_empty_body_has_no_content_length(self):
        """Test a 204 carries no Content-Length."""
        fake = FakeRequestHandler()
        writer = HTTPResponseWriter(fake)
        writer.set_status(204)
        writer.send("")

        assert fake.status == 204
        assert fake.headers == []
        assert fake.written == b""

    def test_double_send_raises(self):
        """Test a second send is rejected."""
        writer = HTTPResponseWriter(FakeRequestHandler())
        writer.send("")
        with pytest.raises(ResponseAlreadySentError):
            writer.send("")


class TestVercelFunction:
    """Tests for api/joke.py."""

    def test_exposes_handler_class(self):
        """Test the module exposes a JokeRequestHandler named handler."""
        spec = importlib.util.spec_from_file_location("vercel_joke", VERCEL_FUNCTION)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        assert issubclass(module.handler, JokeRequestHandler)
