"""Headless command-line player.

Usage::

    python -m nmeaplay LOGFILE --interface eth0 [--port 10110]
    python -m nmeaplay --list-interfaces

Ctrl+C stops playback gracefully.
"""

import argparse
import logging
import os
import sys

from nmeaplay.navigation import NavigationStore
from nmeaplay.playback import (
    DEFAULT_UDP_PORT,
    PlaybackConfig,
    PlaybackController,
    PlaybackStatus,
    list_interfaces,
)

logger = logging.getLogger("nmeaplay")

# Seconds between navigation summaries while playing
_REPORT_INTERVAL = 5.0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nmeaplay",
        description="Replay an NMEA 0183 log as UDP broadcasts at its recorded pace.",
    )
    parser.add_argument("logfile", nargs="?", help="NMEA log file (CRLF-terminated lines)")
    parser.add_argument(
        "-i",
        "--interface",
        default=os.environ.get("NMEAPLAY_INTERFACE"),
        help="Network interface name or IPv4 address to broadcast on",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=int(os.environ.get("NMEAPLAY_PORT", DEFAULT_UDP_PORT)),
        help=f"Destination UDP port (default: {DEFAULT_UDP_PORT})",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("NMEAPLAY_LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--list-interfaces",
        action="store_true",
        help="Print broadcast-capable interfaces and exit",
    )
    return parser


def _print_interfaces() -> None:
    for entry in list_interfaces():
        print(f"{entry.name}\t{entry.address}\tbroadcast {entry.broadcast}")


def _wait_for_playback(player: PlaybackController) -> None:
    while not player.join(timeout=_REPORT_INTERVAL):
        state = player.store.snapshot()
        logger.info(
            "%s  %.5f %.5f  COG %.1f SOG %.1f  AWA %.1f AWS %.1f  depth %.2f",
            state.utc_timestamp,
            state.latitude,
            state.longitude,
            state.course_over_ground,
            state.speed_over_ground,
            state.apparent_wind_angle,
            state.apparent_wind_speed,
            state.depth,
        )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    if args.list_interfaces:
        _print_interfaces()
        return 0
    if args.logfile is None or args.interface is None:
        parser.error("LOGFILE and --interface are required unless --list-interfaces is given")

    player = PlaybackController(NavigationStore())
    player.start(PlaybackConfig(path=args.logfile, interface=args.interface, port=args.port))
    try:
        _wait_for_playback(player)
    except KeyboardInterrupt:
        logger.info("Stopping playback...")
        player.stop()
        player.join()

    if player.status is PlaybackStatus.FAILED:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
