"""Internal table of British National Grid 100 km square letters."""

from types import MappingProxyType

# Second letter of a square within its 500 km block, rows listed south to
# north, columns west to east. The letter I is never used.
_MINOR_ROWS = ("VWXYZ", "QRSTU", "LMNOP", "FGHJK", "ABCDE")

# First letter: the 500 km block, rows south to north, columns west to east.
_MAJOR_ROWS = ("ST", "NO", "HJ")

# The grid's coverage box is 7 x 13 squares of 100 km.
EAST_BLOCKS = 7
NORTH_BLOCKS = 13


def _build_index() -> dict:
    index = {}
    for n in range(NORTH_BLOCKS):
        for e in range(EAST_BLOCKS):
            major = _MAJOR_ROWS[n // 5][e // 5]
            minor = _MINOR_ROWS[n % 5][e % 5]
            index[major + minor] = (e, n)
    return index


# Two-letter code -> (east block, north block). Read-only.
GRID_SQUARES = MappingProxyType(_build_index())

# (east block, north block) -> two-letter code. Read-only.
SQUARE_AT = MappingProxyType({pos: code for code, pos in GRID_SQUARES.items()})
