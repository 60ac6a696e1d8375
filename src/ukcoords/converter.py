"""
Public conversion functions: the entry point for callers of the library.

Grid reference failures are ordinary outcomes here rather than
exceptions: to_bng returns OUTSIDE_COVERAGE and from_bng returns None.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ukcoords import formatter, gridref, parser, projection
from ukcoords.distance import haversine
from ukcoords.exceptions import (
    CoordinateRangeError,
    CoverageError,
    GridReferenceFormatError,
)
from ukcoords.models import DDMComponent, Distance, GeoPoint, ProjectedPoint

logger = logging.getLogger(__name__)

OUTSIDE_COVERAGE = "Outside UK Coverage"


def parse_coordinate_text(text: str) -> GeoPoint:
    """
    Parse free-form coordinate text to a WGS84 GeoPoint.

    Raises ParseError on failure.
    """
    return parser.parse_coordinate_text(text)


def format_ddm(value: float, is_latitude: bool) -> DDMComponent:
    """Degrees and decimal minutes for one axis."""
    return formatter.to_degrees_decimal_minutes(value, is_latitude)


def format_dms(value: float, is_latitude: bool) -> str:
    """Degrees, minutes and seconds text for one axis."""
    return formatter.to_degrees_minutes_seconds(value, is_latitude)


def to_bng(latitude: float, longitude: float) -> str:
    """
    Return the British National Grid reference for a WGS84 position,
    e.g. 'SX 41815 48338', or OUTSIDE_COVERAGE.
    """
    try:
        projected = projection.project(GeoPoint(latitude, longitude))
    except CoordinateRangeError:
        logger.debug("Invalid position (%s, %s)", latitude, longitude)
        return OUTSIDE_COVERAGE

    # Round half up to whole metres before splitting into square + offsets
    rounded = ProjectedPoint(
        easting=math.floor(projected.easting + 0.5),
        northing=math.floor(projected.northing + 0.5),
    )
    try:
        return str(gridref.encode(rounded))
    except CoverageError as exc:
        logger.debug("%s", exc)
        return OUTSIDE_COVERAGE


def from_bng(text: str) -> Optional[GeoPoint]:
    """
    Convert 'LL EEEEE NNNNN' grid reference text to a GeoPoint, or None.

    Surrounding whitespace is ignored; letters must already be upper case.
    """
    try:
        projected = gridref.decode(text.strip())
    except GridReferenceFormatError as exc:
        logger.debug("%s", exc)
        return None
    return projection.unproject(projected)


def distance_between(a: GeoPoint, b: GeoPoint) -> Distance:
    """Great-circle distance between two points."""
    return haversine(a, b)
