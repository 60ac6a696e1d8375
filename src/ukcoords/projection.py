"""
Transverse Mercator projection between latitude/longitude and the OSGB36
National Grid, using the Airy 1830 ellipsoid.

Latitude/longitude are taken as-is on the Airy ellipsoid: no Helmert or
OSTN datum shift is applied, so results differ from Ordnance Survey's
published WGS84 <-> grid transformation by up to ~100 m. Forward and
inverse are consistent with each other to well under a metre.
"""

import math

from ukcoords.models import GeoPoint, ProjectedPoint

# Airy 1830 ellipsoid
AIRY_A = 6377563.396   # semi-major axis
AIRY_B = 6356256.909   # semi-minor axis
AIRY_E2 = 1 - (AIRY_B ** 2) / (AIRY_A ** 2)

# National Grid projection constants
F0 = 0.9996012717               # scale factor on central meridian
PHI0 = math.radians(49.0)       # latitude of true origin
LAMBDA0 = math.radians(-2.0)    # longitude of true origin
E0 = 400000.0                   # easting of true origin
N0 = -100000.0                  # northing of true origin

_N = (AIRY_A - AIRY_B) / (AIRY_A + AIRY_B)

_ARC_TOLERANCE = 0.00001        # metres
_MAX_ITERATIONS = 20


def meridional_arc(phi: float) -> float:
    """Meridional arc length in metres from the true origin to latitude *phi* (radians)."""
    n, n2, n3 = _N, _N ** 2, _N ** 3
    dphi = phi - PHI0
    sphi = phi + PHI0

    ma = (1 + n + (5.0 / 4.0) * n2 + (5.0 / 4.0) * n3) * dphi
    mb = (3 * n + 3 * n2 + (21.0 / 8.0) * n3) * math.sin(dphi) * math.cos(sphi)
    mc = ((15.0 / 8.0) * n2 + (15.0 / 8.0) * n3) * math.sin(2 * dphi) * math.cos(2 * sphi)
    md = (35.0 / 24.0) * n3 * math.sin(3 * dphi) * math.cos(3 * sphi)

    return AIRY_B * F0 * (ma - mb + mc - md)


def _radii(phi: float) -> tuple[float, float, float]:
    """Return (nu, rho, eta2) at latitude *phi*."""
    s2 = 1 - AIRY_E2 * math.sin(phi) ** 2
    nu = AIRY_A * F0 / math.sqrt(s2)
    rho = AIRY_A * F0 * (1 - AIRY_E2) / s2 ** 1.5
    return nu, rho, nu / rho - 1


def project(point: GeoPoint) -> ProjectedPoint:
    """Project a latitude/longitude to National Grid easting/northing."""
    phi = math.radians(point.latitude)
    lam = math.radians(point.longitude)

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    tan2 = math.tan(phi) ** 2
    nu, rho, eta2 = _radii(phi)

    I = meridional_arc(phi) + N0
    II = nu / 2 * sin_phi * cos_phi
    III = nu / 24 * sin_phi * cos_phi ** 3 * (5 - tan2 + 9 * eta2)
    IIIA = nu / 720 * sin_phi * cos_phi ** 5 * (61 - 58 * tan2 + tan2 ** 2)
    IV = nu * cos_phi
    V = nu / 6 * cos_phi ** 3 * (nu / rho - tan2)
    VI = nu / 120 * cos_phi ** 5 * (
        5 - 18 * tan2 + tan2 ** 2 + 14 * eta2 - 58 * tan2 * eta2
    )

    dl = lam - LAMBDA0
    northing = I + II * dl ** 2 + III * dl ** 4 + IIIA * dl ** 6
    easting = E0 + IV * dl + V * dl ** 3 + VI * dl ** 5
    return ProjectedPoint(easting=easting, northing=northing)


def unproject(point: ProjectedPoint) -> GeoPoint:
    """Convert National Grid easting/northing back to latitude/longitude."""
    target = point.northing - N0

    # Solve the meridional arc for latitude
    phi = PHI0
    m = 0.0
    for _ in range(_MAX_ITERATIONS):
        phi = (target - m) / (AIRY_A * F0) + phi
        m = meridional_arc(phi)
        if abs(target - m) < _ARC_TOLERANCE:
            break

    cos_phi = math.cos(phi)
    tan_phi = math.tan(phi)
    tan2 = tan_phi ** 2
    nu, rho, eta2 = _radii(phi)

    VII = tan_phi / (2 * rho * nu)
    VIII = tan_phi / (24 * rho * nu ** 3) * (5 + 3 * tan2 + eta2 - 9 * tan2 * eta2)
    IX = tan_phi / (720 * rho * nu ** 5) * (61 + 90 * tan2 + 45 * tan2 ** 2)
    X = 1 / (cos_phi * nu)
    XI = 1 / (6 * cos_phi * nu ** 3) * (nu / rho + 2 * tan2)
    XII = 1 / (120 * cos_phi * nu ** 5) * (5 + 28 * tan2 + 24 * tan2 ** 2)
    XIIA = 1 / (5040 * cos_phi * nu ** 7) * (
        61 + 662 * tan2 + 1320 * tan2 ** 2 + 720 * tan2 ** 3
    )

    # Products rather than ** so huge offsets overflow to inf, not OverflowError
    de = point.easting - E0
    de2 = de * de
    de3 = de2 * de
    de4 = de3 * de
    de5 = de4 * de
    de6 = de5 * de
    de7 = de6 * de
    lat = phi - VII * de2 + VIII * de4 - IX * de6
    lon = LAMBDA0 + X * de - XI * de3 + XII * de5 - XIIA * de7

    # Far outside the grid the series diverge; keep the result a valid point
    if math.isfinite(lat):
        lat_deg = max(-90.0, min(90.0, math.degrees(lat)))
    else:
        lat_deg = 90.0 if lat > 0 else -90.0
    if math.isfinite(lon):
        lon_deg = (math.degrees(lon) + 180.0) % 360.0 - 180.0
    else:
        lon_deg = math.degrees(LAMBDA0)
    return GeoPoint(latitude=lat_deg, longitude=lon_deg)
