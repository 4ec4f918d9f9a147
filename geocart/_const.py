"""
Constants declarations for geocart
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Divisor guards for the Cartesian -> geodetic transform. These protect against
# floating point blow-up, they are not physical tolerances.
AXIS_TOLERANCE = 1e-10  # meters from the rotation axis
POLE_TOLERANCE = 1e-10  # |cos(latitude)|
