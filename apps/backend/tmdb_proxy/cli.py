"""
Command-line interface for the TMDB proxy.

Provides commands for:
- serve: Run the REST API with uvicorn
- validate: Check that the configured TMDB API key is accepted
- fetch: Issue a single raw TMDB request and print the JSON body
"""

import argparse
import json
import sys
from typing import Optional

from .client import TMDBClient, TMDBError
from .config import Config
from .utils import parse_params, print_header


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all commands."""
    parser = argparse.ArgumentParser(
        prog="tmdb_proxy",
        description="TMDB Proxy - REST aggregator in front of the TMDB API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the API on the configured host/port
  python -m tmdb_proxy serve

  # Check the API key
  python -m tmdb_proxy validate

  # Raw upstream call
  python -m tmdb_proxy fetch /search/movie --param query=Inception
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the REST API server",
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        help="Bind address (default: API_HOST or 0.0.0.0)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Bind port (default: API_PORT or 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes (development only)",
    )

    # Validate command
    subparsers.add_parser(
        "validate",
        help="Validate the TMDB API key",
    )

    # Fetch command
    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Fetch a raw TMDB endpoint and print the JSON response",
    )
    fetch_parser.add_argument(
        "endpoint",
        help="Endpoint path relative to the TMDB base URL (e.g. /movie/550)",
    )
    fetch_parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )

    return parser


def cmd_serve(config: Config, args) -> int:
    """Run serve command."""
    import uvicorn

    host = args.host or config.api_host
    port = args.port or config.api_port
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=args.reload or config.api_debug,
    )
    return 0


def cmd_validate(client: TMDBClient) -> int:
    """Run validate command."""
    print_header("API Key Validation")

    valid = client.validate_credentials()
    print(f"\nAPI Key: {'VALID' if valid else 'INVALID'}")

    return 0 if valid else 1


def cmd_fetch(client: TMDBClient, args) -> int:
    """Run fetch command."""
    try:
        params = parse_params(args.param)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    try:
        data = client.fetch(args.endpoint, params)
    except TMDBError as e:
        print(f"TMDB request failed: {e}")
        return 1

    print(json.dumps(data, indent=2))
    return 0


def main(args: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 0

    # Load configuration
    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}")
        print("\nMake sure your .env file contains:")
        print("  TMDB_API_KEY=<your_tmdb_api_key>")
        print("  TMDB_BASE_URL=https://api.themoviedb.org/3 (optional)")
        return 1

    try:
        if parsed_args.command == "serve":
            return cmd_serve(config, parsed_args)

        client = TMDBClient(config)
        if parsed_args.command == "validate":
            return cmd_validate(client)
        elif parsed_args.command == "fetch":
            return cmd_fetch(client, parsed_args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
