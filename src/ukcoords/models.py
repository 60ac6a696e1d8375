"""Typed value models for ukcoords."""

from dataclasses import dataclass
from enum import Enum

from ukcoords.exceptions import CoordinateRangeError

METERS_PER_MILE = 1609.344


class Notation(str, Enum):
    """Textual notations accepted by the coordinate parser."""

    BNG = "BNG"
    DD = "DD"
    DDM = "DDM"
    DMS = "DMS"


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.latitude <= 90.0) or not (
            -180.0 <= self.longitude <= 180.0
        ):
            raise CoordinateRangeError(self.latitude, self.longitude)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class DDMComponent:
    """One axis of a coordinate in degrees and decimal minutes."""

    degrees: int
    minutes: int
    thousandths: int         # thousandths of a minute, 0-999
    hemisphere: str          # N, S, E or W

    def __str__(self) -> str:
        return (
            f"{self.degrees}° {self.minutes}.{self.thousandths:03d}' "
            f"{self.hemisphere}"
        )


@dataclass(frozen=True)
class ProjectedPoint:
    """Easting/northing in metres on the OSGB36 National Grid plane."""

    easting: float
    northing: float

    @property
    def in_coverage(self) -> bool:
        """True if the point lies inside the National Grid bounding box."""
        return 0 <= self.easting <= 700000 and 0 <= self.northing <= 1300000


@dataclass(frozen=True)
class GridReference:
    """A two-letter 100 km square plus metre offsets inside it."""

    square: str
    easting: int             # 0-99999 within the square
    northing: int            # 0-99999 within the square

    def __str__(self) -> str:
        return f"{self.square} {self.easting:05d} {self.northing:05d}"


@dataclass(frozen=True)
class Distance:
    """Great-circle distance between two points."""

    meters: float

    @property
    def miles(self) -> float:
        return self.meters / METERS_PER_MILE

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {"meters": self.meters, "miles": self.miles}
