"""British National Grid reference encoding and decoding."""

import math
import re

from ukcoords._squares import GRID_SQUARES, SQUARE_AT
from ukcoords.exceptions import CoverageError, GridReferenceFormatError
from ukcoords.models import GridReference, ProjectedPoint

_GRID_REF_RE = re.compile(r"^([A-Z]{2})\s*(\d{5})\s*(\d{5})$")

_SQUARE_SIZE = 100000


def encode(point: ProjectedPoint) -> GridReference:
    """
    Encode an easting/northing as a two-letter grid reference.

    Raises CoverageError if the point lies outside the National Grid.
    """
    if not point.in_coverage:
        raise CoverageError(point.easting, point.northing)

    e100k = math.floor(point.easting / _SQUARE_SIZE)
    n100k = math.floor(point.northing / _SQUARE_SIZE)
    square = SQUARE_AT.get((e100k, n100k))
    if square is None:
        raise CoverageError(point.easting, point.northing)

    return GridReference(
        square=square,
        easting=math.floor(point.easting % _SQUARE_SIZE),
        northing=math.floor(point.northing % _SQUARE_SIZE),
    )


def decode(text: str) -> ProjectedPoint:
    """
    Decode 'LL EEEEE NNNNN' (or 'LLEEEEENNNNN') to an easting/northing.

    Raises GridReferenceFormatError for malformed text or an unknown square.
    """
    match = _GRID_REF_RE.match(text)
    if match is None:
        raise GridReferenceFormatError(
            text, "expected two letters and two 5-digit groups"
        )

    letters, easting_digits, northing_digits = match.groups()
    block = GRID_SQUARES.get(letters)
    if block is None:
        raise GridReferenceFormatError(text, f"unknown grid square '{letters}'")

    east_block, north_block = block
    return ProjectedPoint(
        easting=east_block * _SQUARE_SIZE + int(easting_digits),
        northing=north_block * _SQUARE_SIZE + int(northing_digits),
    )
