"""
Constants declarations for geodistance
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6_378_137.0  # Semi-major axis (meters)
WGS84_B = 6_356_752.314245  # Semi-minor axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Mean Earth Radius (for Haversine)
MEAN_EARTH_RADIUS_METERS = 6_371_008.8

# Vincenty iteration
CONVERGENCE_THRESHOLD = 1e-12  # radians
DEGENERACY_THRESHOLD = 1e-12
MAX_ITERATIONS = 200

# Coordinate bounds
MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0
MIN_ALTITUDE_METERS = -500.0  # Below the Dead Sea shore
MAX_ALTITUDE_METERS = 100_000.0  # Karman line

# Meters per unit
METERS_PER_KILOMETER = 1000.0
METERS_PER_MILE = 1609.344
METERS_PER_NAUTICAL_MILE = 1852.0
