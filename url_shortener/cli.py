#!/usr/bin/env python3
"""
Command-line client for a running URL shortener service.

Records live in the server's memory, so every command goes over HTTP.

Usage:
    url-shortener-cli encode <url>
    url-shortener-cli decode <code>
    url-shortener-cli list [--search TEXT] [--page N] [--limit N]
    url-shortener-cli stats <code>
    url-shortener-cli activate <code>
    url-shortener-cli deactivate <code>
    url-shortener-cli health

Environment variables:
    URL_SHORTENER_URL - Service base URL (default http://localhost:3000)
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, Optional

import httpx

from url_shortener.lib.common.logging_config import setup_logging

DEFAULT_SERVICE_URL = "http://localhost:3000"


class URLShortenerCLI:
    """Command-line interface for URL shortener."""

    def __init__(
        self,
        client: httpx.Client,
        api_prefix: str = "/api",
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize CLI.

        Args:
            client: HTTP client whose base URL points at the service
            api_prefix: Prefix of the JSON API
            logger: Optional logger
        """
        self.client = client
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self.logger = logger or logging.getLogger(__name__)

    def _call(self, method: str, path: str, **kwargs: Any) -> int:
        url = f"{self.api_prefix}{path}"
        self.logger.debug(f"{method} {url}")

        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            self._print_error({"success": False, "message": f"Request failed: {e}"})
            return 1

        try:
            payload = response.json()
        except ValueError:
            payload = {
                "success": response.is_success,
                "statusCode": response.status_code,
                "message": response.text,
            }

        if response.is_success:
            print(json.dumps(payload, indent=2))
            return 0

        self._print_error(payload)
        return 1

    @staticmethod
    def _print_error(payload: Dict[str, Any]) -> None:
        print(json.dumps(payload, indent=2), file=sys.stderr)

    def encode(self, url: str) -> int:
        """Shorten a URL."""
        return self._call("POST", "/url/encode", json={"url": url})

    def decode(self, code: str) -> int:
        """Get original URL for a short code."""
        return self._call("GET", f"/url/decode/{code}")

    def list(self, search: Optional[str] = None, page: int = 1, limit: Optional[int] = None) -> int:
        """List shortened URLs."""
        params: Dict[str, Any] = {"page": page}
        if search:
            params["search"] = search
        if limit is not None:
            params["limit"] = limit
        return self._call("GET", "/url/list", params=params)

    def stats(self, code: str) -> int:
        """Get statistics for a short code (counts as a visit)."""
        return self._call("GET", f"/url/statistic/{code}")

    def set_status(self, code: str, status: str) -> int:
        """Activate or deactivate a short code."""
        return self._call("PATCH", f"/url/{code}", json={"status": status})

    def health(self) -> int:
        """Check service health."""
        return self._call("GET", "/health")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--service-url",
        default=os.getenv("URL_SHORTENER_URL", DEFAULT_SERVICE_URL),
        help="Service base URL (default: $URL_SHORTENER_URL or %(default)s)",
    )
    parser.add_argument("--api-prefix", default="/api", help="JSON API prefix")
    parser.add_argument("--timeout", type=float, default=5.0, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Shorten a URL")
    encode_parser.add_argument("url", help="URL to shorten")

    decode_parser = subparsers.add_parser("decode", help="Get original URL")
    decode_parser.add_argument("code", help="Short code")

    list_parser = subparsers.add_parser("list", help="List shortened URLs")
    list_parser.add_argument("--search", help="Substring of the original URL")
    list_parser.add_argument("--page", type=int, default=1, help="Page number")
    list_parser.add_argument("--limit", type=int, help="Items per page")

    stats_parser = subparsers.add_parser("stats", help="Get URL statistics")
    stats_parser.add_argument("code", help="Short code")

    activate_parser = subparsers.add_parser("activate", help="Activate a short code")
    activate_parser.add_argument("code", help="Short code")

    deactivate_parser = subparsers.add_parser("deactivate", help="Deactivate a short code")
    deactivate_parser.add_argument("code", help="Short code")

    subparsers.add_parser("health", help="Check service health")

    return parser


def run_command(cli: URLShortenerCLI, args: argparse.Namespace) -> int:
    """Dispatch parsed arguments to the CLI."""
    if args.command == "encode":
        return cli.encode(args.url)
    elif args.command == "decode":
        return cli.decode(args.code)
    elif args.command == "list":
        return cli.list(search=args.search, page=args.page, limit=args.limit)
    elif args.command == "stats":
        return cli.stats(args.code)
    elif args.command == "activate":
        return cli.set_status(args.code, "ACTIVE")
    elif args.command == "deactivate":
        return cli.set_status(args.code, "INACTIVE")
    elif args.command == "health":
        return cli.health()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(level="DEBUG" if args.verbose else "WARNING")

    with httpx.Client(base_url=args.service_url, timeout=args.timeout) as client:
        cli = URLShortenerCLI(client, api_prefix=args.api_prefix, logger=logger)
        return run_command(cli, args)


if __name__ == "__main__":
    sys.exit(main())
