"""Decimal degrees to degrees-decimal-minutes and degrees-minutes-seconds."""

import math

from ukcoords.models import DDMComponent


def _hemisphere(value: float, is_latitude: bool) -> str:
    if is_latitude:
        return "N" if value >= 0 else "S"
    return "E" if value >= 0 else "W"


def to_degrees_decimal_minutes(value: float, is_latitude: bool) -> DDMComponent:
    """
    Split one coordinate axis into degrees, whole minutes and thousandths
    of a minute.

    The fractional minute is truncated, not rounded, to three digits.
    """
    absolute = abs(value)
    degrees = math.floor(absolute)
    minutes_decimal = (absolute - degrees) * 60
    minutes = math.floor(minutes_decimal)
    # Small epsilon absorbs binary noise such as 0.817 -> 816.9999...
    thousandths = min(int((minutes_decimal - minutes) * 1000 + 1e-9), 999)
    return DDMComponent(
        degrees=degrees,
        minutes=minutes,
        thousandths=thousandths,
        hemisphere=_hemisphere(value, is_latitude),
    )


def to_degrees_minutes_seconds(value: float, is_latitude: bool) -> str:
    """Render one coordinate axis as e.g. ``50° 18' 49.0" N``."""
    absolute = abs(value)
    degrees = math.floor(absolute)
    minutes_decimal = (absolute - degrees) * 60
    minutes = math.floor(minutes_decimal)
    seconds = round((minutes_decimal - minutes) * 60, 1)
    # 59.96" shows as 60.0"; carry it into the minutes instead
    if seconds >= 60:
        seconds = 0.0
        minutes += 1
        if minutes == 60:
            minutes = 0
            degrees += 1
    return (
        f"{degrees}° {minutes}' {seconds:.1f}\" "
        f"{_hemisphere(value, is_latitude)}"
    )
