"""Distance and speed unit conversion plus a rate/time/distance solver."""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

from ukcoords.exceptions import CalculationError


class DistanceUnit(str, Enum):
    NAUTICAL_MILES = "nm"
    MILES = "mi"
    METERS = "m"


class SpeedUnit(str, Enum):
    KNOTS = "kts"
    MPH = "mph"
    KMH = "kmh"


# Factors to statute miles / miles per hour
_TO_MILES = {
    DistanceUnit.NAUTICAL_MILES: 1.15078,
    DistanceUnit.MILES: 1.0,
    DistanceUnit.METERS: 0.000621371,
}

_TO_MPH = {
    SpeedUnit.KNOTS: 1.15078,
    SpeedUnit.MPH: 1.0,
    SpeedUnit.KMH: 0.621371,
}

DistanceUnitLike = Union[DistanceUnit, str]
SpeedUnitLike = Union[SpeedUnit, str]


def convert_distance(
    value: float, from_unit: DistanceUnitLike, to_unit: DistanceUnitLike
) -> float:
    """Convert *value* between nautical miles, miles and metres."""
    return (
        value * _TO_MILES[DistanceUnit(from_unit)]
        / _TO_MILES[DistanceUnit(to_unit)]
    )


def convert_speed(
    value: float, from_unit: SpeedUnitLike, to_unit: SpeedUnitLike
) -> float:
    """Convert *value* between knots, mph and km/h."""
    return value * _TO_MPH[SpeedUnit(from_unit)] / _TO_MPH[SpeedUnit(to_unit)]


def to_hours(hours: float = 0, minutes: float = 0, seconds: float = 0) -> float:
    return hours + minutes / 60 + seconds / 3600


def solve_speed(
    distance: float,
    distance_unit: DistanceUnitLike,
    hours: float,
    speed_unit: SpeedUnitLike,
) -> float:
    """Speed needed to cover *distance* in *hours*, in *speed_unit*."""
    if not hours:
        raise CalculationError("Time must be non-zero to calculate speed")
    mph = convert_distance(distance, distance_unit, DistanceUnit.MILES) / hours
    return convert_speed(mph, SpeedUnit.MPH, speed_unit)


def solve_distance(
    speed: float,
    speed_unit: SpeedUnitLike,
    hours: float,
    distance_unit: DistanceUnitLike,
) -> float:
    """Distance covered at *speed* for *hours*, in *distance_unit*."""
    miles = convert_speed(speed, speed_unit, SpeedUnit.MPH) * hours
    return convert_distance(miles, DistanceUnit.MILES, distance_unit)


def solve_time(
    distance: float,
    distance_unit: DistanceUnitLike,
    speed: float,
    speed_unit: SpeedUnitLike,
) -> float:
    """Hours needed to cover *distance* at *speed*."""
    if not speed:
        raise CalculationError("Speed must be non-zero to calculate time")
    miles = convert_distance(distance, distance_unit, DistanceUnit.MILES)
    return miles / convert_speed(speed, speed_unit, SpeedUnit.MPH)


def format_duration(hours: float) -> str:
    """Render a duration in hours as e.g. '1h 30m 0s'."""
    total_seconds = math.floor(hours * 3600 + 0.5)
    hrs, remainder = divmod(total_seconds, 3600)
    mins, secs = divmod(remainder, 60)
    return f"{hrs}h {mins}m {secs}s"
