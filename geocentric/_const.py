"""
Constants declarations for geocentric
"""

import sys

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# GRS80 Ellipsoid Constants
GRS80_A = 6378137.0
GRS80_F = 1 / 298.257222101

# Mean Earth Radius (spherical model)
EARTH_RADIUS_METERS = 6_371_000.0

# Machine epsilon for doubles
DBL_EPSILON = sys.float_info.epsilon
