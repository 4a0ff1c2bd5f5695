"""Travel chat entry point."""

import argparse
import asyncio
import logging

from aiohttp import web

from travelchat.config import settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
)
logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Travel agency chat front-end")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["serve", "repl"],
        default="serve",
        help="serve: HTTP API (default); repl: interactive terminal chat",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Start the configured front-end."""
    args = _parse_args(argv)
    logger.info("Backend at %s", settings.backend_url)

    if args.mode == "repl":
        from travelchat.repl import run_repl

        asyncio.run(run_repl())
        return

    from travelchat.web.server import create_web_app

    logger.info("Starting HTTP front-end on %s:%d...", settings.web_host, settings.web_port)
    web.run_app(create_web_app(), host=settings.web_host, port=settings.web_port, print=None)


if __name__ == "__main__":
    main()
