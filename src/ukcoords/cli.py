"""
UK Coordinate Converter — Interactive CLI
=========================================
Thin wrapper around the ukcoords library.

Usage:
    ukcoords                                   # interactive mode
    ukcoords "SX 41815 48338"                  # show every notation
    ukcoords "50.3136, -4.2231" "NS 24627 89037"   # distance between two

Logging verbosity is read from the environment:
    UKCOORDS_LOG_LEVEL   DEBUG, INFO, WARNING (default) or ERROR;
                         unknown names fall back to WARNING
"""

import logging
import os
import sys

from ukcoords import (
    GeoPoint,
    ParseError,
    distance_between,
    format_ddm,
    format_dms,
    parse_coordinate_text,
    to_bng,
)

_BANNER = """\
╔══════════════════════════════════════╗
║      UK Coordinate Converter         ║
║   DD · DDM · DMS · National Grid     ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def _log_level() -> int:
    """Resolve UKCOORDS_LOG_LEVEL to a logging level, defaulting to WARNING."""
    name = os.environ.get("UKCOORDS_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, name, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def describe(point: GeoPoint) -> dict:
    """Every display notation for *point*, keyed by label."""
    return {
        "Decimal Degrees": f"{point.latitude:.6f}, {point.longitude:.6f}",
        "Degrees Decimal Minutes": (
            f"{format_ddm(point.latitude, True)}, "
            f"{format_ddm(point.longitude, False)}"
        ),
        "Degrees Minutes Seconds": (
            f"{format_dms(point.latitude, True)}, "
            f"{format_dms(point.longitude, False)}"
        ),
        "British National Grid": to_bng(point.latitude, point.longitude),
    }


def _print_point(point: GeoPoint) -> None:
    print(f"  ┌──────────────────────────────────────────────────────────────┐")
    for label, value in describe(point).items():
        print(f"  │  {label:<24}{value:<36}│")
    print(f"  └──────────────────────────────────────────────────────────────┘")


def _run_interactive() -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nCoordinates:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ Coordinates are required.")
            continue

        try:
            point = parse_coordinate_text(raw)
        except ParseError as exc:
            print(f"  ✗ {exc}")
            continue

        print("  ✓ Parsed")
        _print_point(point)


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    logging.basicConfig(
        level=_log_level(), format="%(levelname)s %(name)s: %(message)s"
    )

    args = sys.argv[1:]
    if not args:
        _run_interactive()
        return

    try:
        points = [parse_coordinate_text(arg) for arg in args[:2]]
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if len(points) == 1:
        for label, value in describe(points[0]).items():
            print(f"{label:>24}: {value}")
    else:
        distance = distance_between(points[0], points[1])
        print(f"{'meters':>24}: {distance.meters:.2f}")
        print(f"{'miles':>24}: {distance.miles:.2f}")


if __name__ == "__main__":
    main()
