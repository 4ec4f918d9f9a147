"""
Input validation for callers that receive coordinates from users (forms, CLIs, files).

The transforms in geocart.transforms accept any finite number and never raise; the
functions here parse loosely-typed input, reject values that are not numbers, and
range-check geodetic angles before handing off to the transforms.
"""

__all__ = ['convert_cartesian', 'convert_geodetic', 'parse_cartesian', 'parse_geodetic']

import math
from typing import Union

from geocart.coordinates import CartesianCoordinate, GeodeticCoordinate
from geocart.transforms import cartesian_to_geodetic, geodetic_to_cartesian
from geocart.utils.logging import warn_once

_NUMERIC = Union[float, int, str]


def _parse_number(value: _NUMERIC, name: str) -> float:
    """
    Converts a user-supplied value to a finite float.

    A string holding a single comma and no period (e.g. '48,7823') is read with the
    comma as the decimal separator.
    """
    if isinstance(value, bool):
        raise ValueError(f'{name} must be a numeric value, got {value!r}')

    parsed = value
    if isinstance(value, str):
        parsed = value.strip()
        if parsed.count(',') == 1 and '.' not in parsed:
            warn_once(
                'Comma decimal separators were interpreted as decimal points. '
                '(this warning will not repeat)'
            )
            parsed = parsed.replace(',', '.')

    try:
        number = float(parsed)
    except (TypeError, ValueError):
        raise ValueError(f'{name} must be a numeric value, got {value!r}') from None

    if not math.isfinite(number):
        raise ValueError(f'{name} must be a finite value, got {value!r}')

    return number


def parse_geodetic(
    latitude: _NUMERIC,
    longitude: _NUMERIC,
    height: _NUMERIC = 0.0,
    radians: bool = False,
) -> GeodeticCoordinate:
    """
    Parses and range-checks a geodetic position.

    Args:
        latitude:
            The geodetic latitude, as a number or numeric string

        longitude:
            The longitude, as a number or numeric string

        height:
            (Default 0.0) The height above the ellipsoid in meters, as a number or
            numeric string

        radians: (bool)
            (Default False) If True, latitude and longitude are given in radians and
            will be converted to degrees before the range checks

    Returns:
        GeodeticCoordinate, in degrees

    Raises:
        ValueError: if a value is not numeric or finite, or an angle is out of range
    """
    lat = _parse_number(latitude, 'Latitude')
    lon = _parse_number(longitude, 'Longitude')
    h = _parse_number(height, 'Height')

    if radians:
        lat, lon = math.degrees(lat), math.degrees(lon)

    if abs(lat) > 90:
        raise ValueError(f'Latitude must be between -90 and 90 degrees, got {lat}')

    if abs(lon) > 180:
        raise ValueError(f'Longitude must be between -180 and 180 degrees, got {lon}')

    return GeodeticCoordinate(lat, lon, h)


def parse_cartesian(x: _NUMERIC, y: _NUMERIC, z: _NUMERIC) -> CartesianCoordinate:
    """
    Parses a geocentric Cartesian position. Any finite values are accepted.

    Args:
        x:
            The X component in meters, as a number or numeric string

        y:
            The Y component in meters, as a number or numeric string

        z:
            The Z component in meters, as a number or numeric string

    Returns:
        CartesianCoordinate

    Raises:
        ValueError: if a value is not numeric or finite
    """
    return CartesianCoordinate(
        _parse_number(x, 'X'),
        _parse_number(y, 'Y'),
        _parse_number(z, 'Z'),
    )


def convert_geodetic(
    latitude: _NUMERIC,
    longitude: _NUMERIC,
    height: _NUMERIC = 0.0,
    radians: bool = False,
) -> CartesianCoordinate:
    """Validates a geodetic position and converts it to Cartesian coordinates"""
    coord = parse_geodetic(latitude, longitude, height, radians=radians)
    return geodetic_to_cartesian(coord.latitude, coord.longitude, coord.height)


def convert_cartesian(x: _NUMERIC, y: _NUMERIC, z: _NUMERIC) -> GeodeticCoordinate:
    """Validates a Cartesian position and converts it to geodetic coordinates"""
    coord = parse_cartesian(x, y, z)
    return cartesian_to_geodetic(coord.x, coord.y, coord.z)
