"""Great-circle distance on a spherical Earth."""

import math

from ukcoords.models import Distance, GeoPoint

EARTH_RADIUS_M = 6371000.0  # mean radius


def haversine(a: GeoPoint, b: GeoPoint) -> Distance:
    """Great-circle distance between two points using the haversine formula."""
    phi1 = math.radians(a.latitude)
    phi2 = math.radians(b.latitude)
    dphi = math.radians(b.latitude - a.latitude)
    dlam = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    )
    h = min(h, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return Distance(meters=EARTH_RADIUS_M * c)
