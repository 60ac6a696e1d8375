"""Shared test fixtures — well-known locations across Great Britain."""

import pytest

from ukcoords.models import GeoPoint


@pytest.fixture()
def plymouth() -> GeoPoint:
    return GeoPoint(50.313611, -4.223056)


@pytest.fixture()
def london() -> GeoPoint:
    return GeoPoint(51.5074, -0.1278)


@pytest.fixture()
def os_worked_example() -> GeoPoint:
    """Ordnance Survey's published transverse Mercator worked example.

    52°39'27.2531"N, 1°43'4.5177"E on Airy 1830 projects to
    E 651409.903, N 313177.270.
    """
    return GeoPoint(
        52 + 39 / 60 + 27.2531 / 3600,
        1 + 43 / 60 + 4.5177 / 3600,
    )


# Spread from Land's End to Shetland, Norfolk to the Hebrides
GB_LOCATIONS = [
    (50.0660, -5.7150),    # Land's End
    (50.3715, -4.1427),    # Plymouth
    (51.5074, -0.1278),    # London
    (52.6309, 1.2974),     # Norwich
    (53.4808, -2.2426),    # Manchester
    (55.9533, -3.1883),    # Edinburgh
    (57.4778, -4.2247),    # Inverness
    (58.2090, -6.3865),    # Stornoway
    (60.1550, -1.1450),    # Lerwick
]


@pytest.fixture(params=GB_LOCATIONS, ids=lambda p: f"{p[0]},{p[1]}")
def gb_point(request) -> GeoPoint:
    return GeoPoint(*request.param)
