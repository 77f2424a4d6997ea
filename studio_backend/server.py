"""
Run the relay under uvicorn.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from studio_backend.config import get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Script studio relay server")
    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help="Interface to bind",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=settings.port,
        help="Port to listen on (PORT env var)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Logging level",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    logger.info("Relay listening on %s:%d", args.host, args.port)
    uvicorn.run(
        "studio_backend.app:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
