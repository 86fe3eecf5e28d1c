"""CLI entry point for the joke API."""

import argparse
import os
import sys

from dotenv import load_dotenv

from .handler import handle_event

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def get_default_port() -> int:
    """Read the server port from JOKE_API_PORT or PORT."""
    value = os.environ.get("JOKE_API_PORT") or os.environ.get("PORT")
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid port in environment: {value!r}") from None


def run_server(host: str, port: int, reload: bool = False) -> None:
    """Run the API server under uvicorn."""
    import uvicorn

    print(f"{'='*60}")
    print("JOKE API")
    print(f"{'='*60}")
    print(f"\nListening on: http://{host}:{port}")
    print(f"Reload: {'Enabled' if reload else 'Disabled'}")
    print()

    uvicorn.run(
        "joke_api.api:app",
        host=host,
        port=port,
        reload=reload,
    )


def tell_joke() -> None:
    """Print one joke payload as JSON."""
    response = handle_event({"method": "GET"})
    print(response["body"])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="joke-api",
        description="Serve random Chuck Norris jokes over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  joke-api serve
  joke-api serve --port 9000 --reload
  joke-api tell

Environment Variables:
  JOKE_API_HOST         Host to bind (default: 0.0.0.0)
  JOKE_API_PORT         Port to bind, falls back to PORT (default: 8000)
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument(
        "--host",
        default=None,
        help=f"Host to bind (default: $JOKE_API_HOST or {DEFAULT_HOST})",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port to bind (default: $JOKE_API_PORT, $PORT or {DEFAULT_PORT})",
    )
    serve.add_argument(
        "--reload",
        action="store_true",
        help="Reload the server when source files change",
    )

    subparsers.add_parser("tell", help="Print one random joke as JSON and exit")

    return parser


def cli(argv=None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Load environment variables
    load_dotenv()

    try:
        if args.command == "serve":
            host = args.host or os.environ.get("JOKE_API_HOST", DEFAULT_HOST)
            port = args.port if args.port is not None else get_default_port()
            run_server(host, port, args.reload)
        else:
            tell_joke()
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli()
