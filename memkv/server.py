#!/usr/bin/env python3
"""
memkv server entry point

Usage:
    memkv                              # listen on 127.0.0.1:3000
    memkv --bind 0.0.0.0:8080          # custom address
    memkv --log-level DEBUG            # log every request
    memkv --no-delete                  # do not expose DELETE /-/{key}
"""

import argparse
import asyncio
import logging
import signal
import sys

from . import __version__
from .config import DEFAULT_BIND, Settings, parse_bind
from .errors import MemKVError
from .http_server import HTTPKVStore
from .store import KeyValueStore

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="memkv",
        description="memkv: in-memory key-value store over HTTP",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--bind",
        type=str,
        default=DEFAULT_BIND,
        help="Bind IP address and port",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    parser.add_argument(
        "--no-delete",
        dest="expose_delete",
        action="store_false",
        help="Do not expose DELETE /-/{key}",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


async def serve(settings: Settings, shutdown_event: asyncio.Event = None) -> None:
    """Run the server until shutdown_event is set.

    Without an event, one is created and set by SIGINT/SIGTERM.
    """
    host, port = parse_bind(settings.bind)

    store = KeyValueStore()
    server = HTTPKVStore(store, host=host, port=port, expose_delete=settings.expose_delete)

    loop = asyncio.get_running_loop()
    handled_signals = []
    if shutdown_event is None:
        shutdown_event = asyncio.Event()
        # Register signal handlers (Unix only)
        if sys.platform != 'win32':
            for sig in (signal.SIGTERM, signal.SIGINT):
                loop.add_signal_handler(sig, shutdown_event.set)
                handled_signals.append(sig)

    try:
        await server.start()
        logger.info("listening on %s:%s", host, port)

        try:
            await shutdown_event.wait()
            logger.info("Shutting down...")
        finally:
            await server.stop()
            logger.info("Server stopped with %d keys in memory", store.size())
    finally:
        for sig in handled_signals:
            loop.remove_signal_handler(sig)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = Settings(
        bind=args.bind,
        log_level=args.log_level,
        expose_delete=args.expose_delete,
    )
    setup_logging(settings.log_level)

    try:
        asyncio.run(serve(settings))
    except MemKVError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")

    return 0


if __name__ == "__main__":
    sys.exit(main())
