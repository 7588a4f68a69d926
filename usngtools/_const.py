"""
Constants declarations for usngtools
"""

# GRS-80 Ellipsoid Constants
GRS80_A = 6378137.0  # Major axis (meters)
GRS80_B = 6356752.3  # Minor axis (meters)
ECC_SQUARED = (GRS80_A * GRS80_A - GRS80_B * GRS80_B) / (GRS80_A * GRS80_A)
ECC_PRIME_SQUARED = ECC_SQUARED / (1.0 - ECC_SQUARED)
ECC_4 = ECC_SQUARED * ECC_SQUARED
ECC_6 = ECC_SQUARED * ECC_4

# UTM
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500000.0
UTM_ZONE_WIDTH = 6.0

# NAD83 / UTM zone N is EPSG:26900 + N
NAD83_UTM_EPSG_BASE = 26900

# USNG grid squares are lettered from the SW corner of each 100km square.
# Northing letters repeat every 2,000km (20 x 100km).
NS_LETTERS_135 = (
    'A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'J', 'K',
    'L', 'M', 'N', 'P', 'Q', 'R', 'S', 'T', 'U', 'V',
)
NS_LETTERS_246 = (
    'F', 'G', 'H', 'J', 'K', 'L', 'M', 'N', 'P', 'Q',
    'R', 'S', 'T', 'U', 'V', 'A', 'B', 'C', 'D', 'E',
)
NS_CYCLE_METERS = 2000000

# Easting letters, 1..8 x 100km
EW_LETTERS_14 = ('A', 'B', 'C', 'D', 'E', 'F', 'G', 'H')
EW_LETTERS_25 = ('J', 'K', 'L', 'M', 'N', 'P', 'Q', 'R')
EW_LETTERS_36 = ('S', 'T', 'U', 'V', 'W', 'X', 'Y', 'Z')

# (easting letters, northing letters) keyed on utm_zone % 6
GRID_SQUARE_SETS = {
    1: (EW_LETTERS_14, NS_LETTERS_135),
    2: (EW_LETTERS_25, NS_LETTERS_246),
    3: (EW_LETTERS_36, NS_LETTERS_135),
    4: (EW_LETTERS_14, NS_LETTERS_246),
    5: (EW_LETTERS_25, NS_LETTERS_135),
    0: (EW_LETTERS_36, NS_LETTERS_246),  # zone set 6
}

# 8 degree latitude bands, -80 to 80
GRID_ZONE_LETTERS = (
    'C', 'D', 'E', 'F', 'G', 'H', 'J', 'K', 'L', 'M',
    'N', 'P', 'Q', 'R', 'S', 'T', 'U', 'V', 'W', 'X',
)
GRID_ZONE_DEGREES = tuple(range(-80, 80, 8))
GRID_ZONE_MIN_LAT = -80.0
GRID_ZONE_MAX_LAT = 80.0
GRID_ZONE_HEIGHT = 8.0

# Approximate northing of each band's southern edge (2 * pi * b / 360 meters per degree).
# Only valid along the central meridian; used to unwrap decoded northings.
GRID_ZONE_NORTHINGS = tuple(110946.259 * deg for deg in GRID_ZONE_DEGREES)
