"""
Command-line interface for TinyLink.

Usage:
    tinylink shorten <url> [--code CODE]
    tinylink list [--search TEXT]
    tinylink get <code>
    tinylink stats <code>
    tinylink click <code>
    tinylink delete <code>
    tinylink health
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .config import load_config
from .common.logging_config import setup_logging
from .errors import StorageError
from .factory import create_slot, create_service
from .models import ApiResponse, Link
from .service import LinkService


def _emit(payload: dict, ok: bool) -> int:
    print(json.dumps(payload, indent=2))
    return 0 if ok else 1


def _report(response: ApiResponse, payload: Optional[dict] = None) -> int:
    if not response.ok:
        return _emit({"success": False, "status": response.status, "error": response.error}, ok=False)
    return _emit({"success": True, "status": response.status, **(payload or {})}, ok=True)


async def run_command(args: argparse.Namespace, service: LinkService) -> int:
    """Execute one parsed command against a service."""
    if args.command == "shorten":
        response = await service.create_link(args.url, args.code)
        return _report(response, {"link": response.data.to_dict()} if response.ok else None)

    if args.command == "list":
        response = await service.list_links(args.search)
        links: List[Link] = response.data or []
        return _report(response, {"count": len(links), "links": [link.to_dict() for link in links]})

    if args.command == "get":
        response = await service.get_link(args.code)
        return _report(response, {"link": response.data.to_dict()} if response.ok else None)

    if args.command == "stats":
        response = await service.get_link_stats(args.code)
        payload = None
        if response.ok:
            payload = {
                "link": response.data["link"].to_dict(),
                "history": [point.to_dict() for point in response.data["history"]],
                "simulated": True,
            }
        return _report(response, payload)

    if args.command == "click":
        response = await service.record_click(args.code)
        return _report(response, {"original_url": response.data})

    if args.command == "delete":
        response = await service.delete_link(args.code)
        return _report(response, {"code": args.code, "deleted": True})

    if args.command == "health":
        health = await service.health()
        return _emit({"success": health.ok, "health": health.to_dict()}, ok=health.ok)

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinylink",
        description="TinyLink CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL (https:// is assumed)
  %(prog)s shorten example.com/my-long-article

  # Shorten with a custom code
  %(prog)s shorten https://example.com/sale --code summer24

  # Search links
  %(prog)s list --search example

  # Show click statistics
  %(prog)s stats summer24
        """
    )

    parser.add_argument(
        "--backend",
        choices=["memory", "file", "redis"],
        help="Storage backend (default: from STORAGE_BACKEND env or file)"
    )
    parser.add_argument("--storage-path", help="Directory for the file backend")
    parser.add_argument("--redis-url", help="Redis connection URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Create a short link")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--code", help="Custom short code (6-8 alphanumeric characters)")

    list_parser = subparsers.add_parser("list", help="List links, newest first")
    list_parser.add_argument("--search", help="Filter by code or URL (case-insensitive)")

    for name, help_text in (
        ("get", "Show a link"),
        ("stats", "Show click statistics"),
        ("click", "Record a click and print the destination"),
        ("delete", "Delete a link"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("code", help="Short code")

    subparsers.add_parser("health", help="Check storage health")

    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    overrides = {}
    if args.backend:
        overrides["storage_backend"] = args.backend
    if args.storage_path:
        overrides["storage_path"] = args.storage_path
    if args.redis_url:
        overrides["redis_url"] = args.redis_url
    config = load_config(**overrides)

    # Logs go to stderr so stdout holds only the JSON result
    logger = setup_logging(level="DEBUG" if args.verbose else "WARNING", stream=sys.stderr)

    try:
        slot = await create_slot(config, logger=logger)
    except (ValueError, StorageError) as e:
        return _emit({"success": False, "error": str(e)}, ok=False)

    service = create_service(config, slot, logger=logger)
    try:
        return await run_command(args, service)
    finally:
        await service.close()


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
