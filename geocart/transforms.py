"""
Conversions between geodetic (lat/lon/height) and geocentric Cartesian coordinates
on the WGS84 ellipsoid
"""

__all__ = ['cartesian_to_geodetic', 'geodetic_to_cartesian']

import math

from geocart._const import AXIS_TOLERANCE, POLE_TOLERANCE
from geocart.coordinates import CartesianCoordinate, GeodeticCoordinate
from geocart.ellipsoid import WGS84


def geodetic_to_cartesian(
    latitude: float,
    longitude: float,
    height: float = 0.0,
) -> CartesianCoordinate:
    """
    Converts a geodetic position to geocentric Cartesian coordinates (closed form).

    Inputs are not range-checked; out-of-range angles are evaluated as-is.

    Args:
        latitude:
            The geodetic latitude, in degrees

        longitude:
            The longitude, in degrees

        height:
            (Default 0.0) The height above the ellipsoid, in meters

    Returns:
        CartesianCoordinate
    """
    phi = math.radians(latitude)
    lam = math.radians(longitude)

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    n = WGS84.prime_vertical_radius(phi)

    return CartesianCoordinate(
        (n + height) * cos_phi * math.cos(lam),
        (n + height) * cos_phi * math.sin(lam),
        ((1 - WGS84.e2) * n + height) * sin_phi,
    )


def cartesian_to_geodetic(x: float, y: float, z: float) -> GeodeticCoordinate:
    """
    Converts geocentric Cartesian coordinates to a geodetic position using Bowring's
    method, a single-pass closed form which is sub-millimeter accurate for points
    near the surface of the earth.

    Points on (or within 1e-10 m of) the rotation axis resolve to the nearest pole
    with a longitude of 0. Points at the geocenter resolve to the south pole.

    Args:
        x:
            The X component, in meters

        y:
            The Y component, in meters

        z:
            The Z component, in meters

    Returns:
        GeodeticCoordinate
    """
    p = math.sqrt(x * x + y * y)

    if p < AXIS_TOLERANCE:
        return GeodeticCoordinate(
            90. if z > 0 else -90.,
            0.,
            abs(z) - WGS84.b
        )

    # Parametric (reduced) latitude
    theta = math.atan2(z * WGS84.a, p * WGS84.b)
    sin_theta = math.sin(theta)
    cos_theta = math.cos(theta)

    phi = math.atan2(
        z + WGS84.ep2 * WGS84.b * sin_theta ** 3,
        p - WGS84.e2 * WGS84.a * cos_theta ** 3
    )
    lam = math.atan2(y, x)

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    n = WGS84.prime_vertical_radius(phi)

    if abs(cos_phi) > POLE_TOLERANCE:
        height = p / cos_phi - n
    else:
        height = z / sin_phi - n * (1 - WGS84.e2)

    return GeodeticCoordinate(math.degrees(phi), math.degrees(lam), height)
