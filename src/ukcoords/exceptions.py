"""Custom exception hierarchy for ukcoords."""

PARSE_ERROR_MESSAGE = (
    "Could not parse coordinates. Please use one of these formats: "
    'Grid Reference (e.g., "SX 41815 48338"), '
    'Decimal Degrees (e.g., "50.313611, -4.223056"), '
    'Degrees Decimal Minutes (e.g., "50 18.817N, 4 13.383W"), '
    'Degrees Minutes Seconds (e.g., "50° 18\' 49"N, 4° 13\' 23"W")'
)


class UKCoordsError(Exception):
    """Base exception for all ukcoords errors."""


class ParseError(UKCoordsError):
    """Free-form text could not be read as coordinates.

    The message is always the user-facing list of accepted formats;
    *reason* holds the detail for logs and debugging.
    """

    def __init__(self, text: str, reason: str = "no known notation matched"):
        self.text = text
        self.reason = reason
        super().__init__(PARSE_ERROR_MESSAGE)


class CoordinateRangeError(UKCoordsError, ValueError):
    """Latitude or longitude lies outside the valid geodetic range."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Coordinates out of valid range: ({latitude}, {longitude})"
        )


class CoverageError(UKCoordsError):
    """A projected point has no British National Grid reference."""

    def __init__(self, easting: float, northing: float):
        self.easting = easting
        self.northing = northing
        super().__init__(
            f"Outside UK coverage: easting={easting}, northing={northing}"
        )


class GridReferenceFormatError(UKCoordsError):
    """Grid reference text is malformed or names an unknown square."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid grid reference '{text}': {reason}")


class CalculationError(UKCoordsError):
    """Rate/time/distance inputs cannot produce a result."""
