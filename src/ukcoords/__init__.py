"""ukcoords — Parse, convert and project UK coordinates (WGS84 <-> British National Grid)."""

from ukcoords.converter import (
    OUTSIDE_COVERAGE,
    distance_between,
    format_ddm,
    format_dms,
    from_bng,
    parse_coordinate_text,
    to_bng,
)
from ukcoords.exceptions import (
    CalculationError,
    CoordinateRangeError,
    CoverageError,
    GridReferenceFormatError,
    ParseError,
    UKCoordsError,
)
from ukcoords.models import (
    DDMComponent,
    Distance,
    GeoPoint,
    GridReference,
    Notation,
    ProjectedPoint,
)

__all__ = [
    "parse_coordinate_text",
    "format_ddm",
    "format_dms",
    "to_bng",
    "from_bng",
    "distance_between",
    "OUTSIDE_COVERAGE",
    "GeoPoint",
    "DDMComponent",
    "ProjectedPoint",
    "GridReference",
    "Distance",
    "Notation",
    "UKCoordsError",
    "ParseError",
    "CoordinateRangeError",
    "CoverageError",
    "GridReferenceFormatError",
    "CalculationError",
]
