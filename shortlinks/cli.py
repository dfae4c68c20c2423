#!/usr/bin/env python3
"""
Command-line client for a running short-link service.

Usage:
    shortlinks shorten <url>
    shortlinks resolve <key>
    shortlinks info <key>
    shortlinks health
    shortlinks --server http://host:8080 shorten <url>
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, Optional

import httpx

from .common.logging_config import setup_logging


DEFAULT_SERVER = "http://localhost:8080"


class ShortLinksCLI:
    """Command-line interface speaking to the service's HTTP API."""

    def __init__(
        self,
        server: str = DEFAULT_SERVER,
        verbose: bool = False,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.server = server.rstrip("/")
        self.verbose = verbose
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.client = client
        self._owns_client = client is None

    async def initialize(self):
        """Open the HTTP client."""
        if self.client is None:
            self.client = httpx.AsyncClient(base_url=self.server, timeout=10.0)
        self.logger.debug(f"Using server {self.server}")

    async def cleanup(self):
        """Close the HTTP client if this CLI opened it."""
        if self.client is not None and self._owns_client:
            await self.client.aclose()

    def _print(self, payload: Dict[str, Any], error: bool = False) -> int:
        print(json.dumps(payload, indent=2), file=sys.stderr if error else sys.stdout)
        return 1 if error else 0

    def _failure(self, response: httpx.Response) -> int:
        try:
            detail = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text
        return self._print(
            {"success": False, "status": response.status_code, "error": detail},
            error=True,
        )

    async def shorten(self, url: str) -> int:
        """Shorten a URL."""
        response = await self.client.post("/api/shorten", json={"url": url})
        if response.status_code != httpx.codes.CREATED:
            return self._failure(response)

        data = response.json()
        return self._print({
            "success": True,
            "key": data["key"],
            "short_url": data["short_url"],
            "target": data["target"],
            "created_at": data["created_at"],
        })

    async def resolve(self, key: str) -> int:
        """Resolve a key to its target without following the redirect."""
        response = await self.client.get(f"/{key}", follow_redirects=False)
        if response.status_code != httpx.codes.TEMPORARY_REDIRECT:
            return self._print(
                {"success": False, "status": response.status_code, "error": response.text},
                error=True,
            )

        return self._print({
            "success": True,
            "key": key,
            "target": response.headers["location"],
        })

    async def info(self, key: str) -> int:
        """Show the stored mapping for a key."""
        response = await self.client.get(f"/api/urls/{key}")
        if response.status_code != httpx.codes.OK:
            return self._failure(response)

        return self._print({"success": True, **response.json()})

    async def health(self) -> int:
        """Check service health."""
        response = await self.client.get("/api/health")
        if response.status_code != httpx.codes.OK:
            return self._failure(response)

        return self._print({"success": True, **response.json()})

    async def run(self, args: argparse.Namespace) -> int:
        """Dispatch a parsed command."""
        await self.initialize()
        try:
            if args.command == "shorten":
                return await self.shorten(args.url)
            if args.command == "resolve":
                return await self.resolve(args.key)
            if args.command == "info":
                return await self.info(args.key)
            if args.command == "health":
                return await self.health()
            raise ValueError(f"Unknown command: {args.command}")
        except httpx.HTTPError as e:
            return self._print(
                {"success": False, "error": f"Request failed: {e}"},
                error=True,
            )
        finally:
            await self.cleanup()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortlinks",
        description="Client for the short-link service",
    )
    parser.add_argument(
        "--server",
        default=DEFAULT_SERVER,
        help=f"Service base URL (default: {DEFAULT_SERVER})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    shorten = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten.add_argument("url", help="URL to shorten")

    resolve = subparsers.add_parser("resolve", help="Resolve a key to its target")
    resolve.add_argument("key", help="Short key")

    info = subparsers.add_parser("info", help="Show the mapping for a key")
    info.add_argument("key", help="Short key")

    subparsers.add_parser("health", help="Check service health")

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    cli = ShortLinksCLI(server=args.server, verbose=args.verbose)
    return asyncio.run(cli.run(args))


if __name__ == "__main__":
    sys.exit(main())
