"""Free-form coordinate text parsing."""

from __future__ import annotations

import logging
import re
from typing import Optional

from ukcoords import gridref, projection
from ukcoords.exceptions import GridReferenceFormatError, ParseError
from ukcoords.models import GeoPoint, Notation

logger = logging.getLogger(__name__)

_GRID_REF_RE = re.compile(
    r"^([A-Z]{2})\s*(\d{4,5})(?:\s*,\s*|\s+)(\d{4,5})$"
    r"|^([A-Z]{2})\s*(\d{8,10})$"
)
_DD_RE = re.compile(r"^(-?\d+\.?\d*)[,\s]+(-?\d+\.?\d*)$")
_DDM_RE = re.compile(
    r"^(\d+)°?\s+(\d+\.?\d*)'?\s*([NS])[,\s]+"
    r"(\d+)°?\s+(\d+\.?\d*)'?\s*([EW])$"
)
_DMS_RE = re.compile(
    r"^(\d+)°\s*(\d+)'\s*(\d+\.?\d*)\"?\s*([NS])[,\s]+"
    r"(\d+)°\s*(\d+)'\s*(\d+\.?\d*)\"?\s*([EW])$"
)

# Tried in this order; the first pattern that matches decides the notation
_PATTERNS = (
    (Notation.BNG, _GRID_REF_RE),
    (Notation.DD, _DD_RE),
    (Notation.DDM, _DDM_RE),
    (Notation.DMS, _DMS_RE),
)


def _clean(text: str) -> str:
    return text.strip().upper()


def detect_notation(text: str) -> Optional[Notation]:
    """Return the notation *text* is written in, or None if unrecognised."""
    cleaned = _clean(text)
    for notation, pattern in _PATTERNS:
        if pattern.match(cleaned):
            return notation
    return None


def parse_coordinate_text(text: str) -> GeoPoint:
    """
    Parse coordinates in any supported notation to a WGS84 GeoPoint.

    Raises ParseError if the text matches no notation, or matches one but
    does not describe a valid location.
    """
    if not text or not text.strip():
        raise ParseError(text or "", "empty input")

    cleaned = _clean(text)
    for notation, pattern in _PATTERNS:
        match = pattern.match(cleaned)
        if match is None:
            continue
        logger.debug("Parsing %r as %s", cleaned, notation.value)
        try:
            return _DECODERS[notation](match)
        except GridReferenceFormatError as exc:
            raise ParseError(text, exc.reason) from exc
        except ValueError as exc:
            # CoordinateRangeError or a minutes/seconds value of 60 or more
            raise ParseError(text, str(exc)) from exc

    raise ParseError(text)


def _from_grid_reference(match: re.Match) -> GeoPoint:
    if match.group(1):
        letters = match.group(1)
        easting = match.group(2).ljust(5, "0")
        northing = match.group(3).ljust(5, "0")
    else:
        letters = match.group(4)
        digits = match.group(5)
        mid = len(digits) // 2
        easting = digits[:mid].ljust(5, "0")
        northing = digits[mid:].ljust(5, "0")

    return projection.unproject(gridref.decode(f"{letters} {easting} {northing}"))


def _from_decimal_degrees(match: re.Match) -> GeoPoint:
    return GeoPoint(
        latitude=float(match.group(1)), longitude=float(match.group(2))
    )


def _signed(value: float, hemisphere: str) -> float:
    return -value if hemisphere in ("S", "W") else value


def _sexagesimal(value: str, unit: str) -> float:
    """Minutes or seconds as a float; raises ValueError at 60 or more."""
    number = float(value)
    if number >= 60:
        raise ValueError(f"{unit} must be below 60: {value}")
    return number


def _from_degrees_decimal_minutes(match: re.Match) -> GeoPoint:
    lat_deg, lat_min, lat_hem, lon_deg, lon_min, lon_hem = match.groups()
    lat = int(lat_deg) + _sexagesimal(lat_min, "minutes") / 60
    lon = int(lon_deg) + _sexagesimal(lon_min, "minutes") / 60
    return GeoPoint(
        latitude=_signed(lat, lat_hem), longitude=_signed(lon, lon_hem)
    )


def _from_degrees_minutes_seconds(match: re.Match) -> GeoPoint:
    (lat_deg, lat_min, lat_sec, lat_hem,
     lon_deg, lon_min, lon_sec, lon_hem) = match.groups()
    lat = (
        int(lat_deg)
        + _sexagesimal(lat_min, "minutes") / 60
        + _sexagesimal(lat_sec, "seconds") / 3600
    )
    lon = (
        int(lon_deg)
        + _sexagesimal(lon_min, "minutes") / 60
        + _sexagesimal(lon_sec, "seconds") / 3600
    )
    return GeoPoint(
        latitude=_signed(lat, lat_hem), longitude=_signed(lon, lon_hem)
    )


_DECODERS = {
    Notation.BNG: _from_grid_reference,
    Notation.DD: _from_decimal_degrees,
    Notation.DDM: _from_degrees_decimal_minutes,
    Notation.DMS: _from_degrees_minutes_seconds,
}
