"""Example CLI: install a UDP sink and log a counter line periodically.

Usage::

    python -m udp_logger --destination 127.0.0.1:1999 --level info --count 5

Listen on the other side with e.g. ``nc -ul 1999``.  Flags override the
``UDP_LOGGER_DESTINATION``, ``UDP_LOGGER_LEVEL``, ``UDP_LOGGER_BUFFERED``
and ``UDP_LOGGER_INTERVAL`` environment variables.
"""
from __future__ import annotations

import argparse
import itertools
import logging
import sys
import time
from collections.abc import Sequence

from udp_logger.config import ConfigError, EnvSettingsLoader, UdpLoggerSettings
from udp_logger.diagnostics import get_diagnostic_logger
from udp_logger.kernel.errors import InitializationError
from udp_logger.logging import UdpLoggerBuilder, uninstall

DEFAULT_DESTINATION = "127.0.0.1:1999"

logger = logging.getLogger("udp_logger.example")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="udp_logger",
        description="Send 'testing N things' log lines to a UDP destination.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--destination", help=f"HOST:PORT of the receiver (default {DEFAULT_DESTINATION})")
    parser.add_argument("--level", help="minimum level: error, warn, info, debug, trace (default info)")
    strategy = parser.add_mutually_exclusive_group()
    strategy.add_argument("--buffered", dest="buffered", action="store_true", default=None,
                          help="queue records and send from a background worker (default)")
    strategy.add_argument("--unbuffered", dest="buffered", action="store_false",
                          help="send each record on the logging thread")
    parser.add_argument("--interval", type=float, help="drain interval in seconds for --buffered")
    parser.add_argument("--count", type=int, help="number of lines to send (default: forever)")
    parser.add_argument("--period", type=float, default=1.0, help="seconds between lines (default 1.0)")
    return parser


def load_settings(args: argparse.Namespace, loader: EnvSettingsLoader | None = None) -> UdpLoggerSettings:
    loader = loader or EnvSettingsLoader()
    destination = args.destination or loader.environ.get("UDP_LOGGER_DESTINATION", DEFAULT_DESTINATION)
    return loader.load(
        UdpLoggerSettings,
        destination=destination,
        level=args.level,
        buffered=args.buffered,
        interval=args.interval,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    diagnostics = get_diagnostic_logger("udp_logger.cli")

    try:
        settings = load_settings(args)
        UdpLoggerBuilder.from_settings(settings)
    except (ConfigError, InitializationError) as exc:
        diagnostics.error("udp_logger.init_failed", **exc.to_dict())
        return 2

    counter = itertools.count(1) if args.count is None else range(1, args.count + 1)
    try:
        for n in counter:
            logger.info("testing %d things", n)
            time.sleep(args.period)
    except KeyboardInterrupt:
        pass
    finally:
        uninstall()
    return 0


if __name__ == "__main__":
    sys.exit(main())
