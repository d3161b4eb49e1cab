"""
Constants declarations for geogrids
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# UTM projection
UTM_K0 = 0.9996  # Scale on the central meridian
UTM_FALSE_EASTING = 500_000.0
UTM_FALSE_NORTHING = 10_000_000.0  # Southern hemisphere only
UTM_MIN_LATITUDE = -80.0
UTM_MAX_LATITUDE = 84.0

# Inverse projection; conformal latitude recovery
NEWTON_TOLERANCE = 1e-12
MAX_NEWTON_ITERATIONS = 10

# Output precision (decimal places)
EN_PRECISION = 6  # nm
LATLON_PRECISION = 11  # ~1nm
CONVERGENCE_PRECISION = 9
SCALE_PRECISION = 12

# MGRS letter tables. X is repeated to cover 80-84N.
LATITUDE_BANDS = 'CDEFGHJKLMNPQRSTUVWXX'

# 100km column letters, keyed by (zone - 1) % 3
E100K_LETTERS = ('ABCDEFGH', 'JKLMNPQR', 'STUVWXYZ')

# 100km row letters, keyed by (zone - 1) % 2
N100K_LETTERS = ('ABCDEFGHJKLMNPQRSTUV', 'FGHJKLMNPQRSTUVABCDE')

MGRS_SQUARE_SIZE = 100_000.0
MGRS_ROW_CYCLE = 2_000_000.0  # Row letters repeat every 20 squares
