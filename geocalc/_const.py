"""
Constants declarations for geocalc
"""

# Vincenty inverse solver
VINCENTY_MAX_ITER = 100
VINCENTY_TOLERANCE = 1e-12  # radians of lambda change between passes

# Mollweide auxiliary angle (fixed number of Newton-Raphson passes)
MOLLWEIDE_ITERATIONS = 10

# Mercator latitudes are clamped to this bound (degrees) to keep y finite
MERCATOR_MAX_LAT = 85.0

# Universal Transverse Mercator
UTM_K0 = 0.9996  # Central meridian scale factor
UTM_FALSE_EASTING = 500_000.0
UTM_FALSE_NORTHING = 10_000_000.0  # Southern hemisphere only
UTM_ZONE_WIDTH = 6  # degrees of longitude
UTM_ZONE_COUNT = 60
