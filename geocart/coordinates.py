"""
Representations of a position relative to the WGS84 ellipsoid
"""

__all__ = ['CartesianCoordinate', 'GeodeticCoordinate']

from functools import cached_property
import math
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np

from geocart.utils.functions import round_half_up


def _round(values: Tuple[float, ...], precision: Optional[int]) -> Tuple[float, ...]:
    if precision is None:
        return values

    return tuple(round_half_up(x, precision) for x in values)


class GeodeticCoordinate:
    """
    Representation of a geodetic position (i.e., a lat/lon/height triple)

    Values are stored as given; no clamping or wrapping is applied. Use
    geocart.validation.parse_geodetic() to range-check user input.

    Args:
        latitude:
            The geodetic latitude, in degrees

        longitude:
            The longitude, in degrees

        height:
            (Default 0.0) The height above the ellipsoid, in meters
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        height: Union[float, int, str] = 0.0,
    ):
        self._latitude = float(latitude)
        self._longitude = float(longitude)
        self._height = float(height)

    def __eq__(self, other):
        if not isinstance(other, GeodeticCoordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.height == other.height
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.height))

    def __repr__(self):
        return f'<GeodeticCoordinate({self.latitude}, {self.longitude}, {self.height})>'

    @property
    def latitude(self) -> float:
        """The geodetic latitude, in degrees"""
        return self._latitude

    @property
    def longitude(self) -> float:
        """The longitude, in degrees"""
        return self._longitude

    @property
    def height(self) -> float:
        """The height above the ellipsoid, in meters"""
        return self._height

    @classmethod
    def from_radians(cls, latitude: float, longitude: float, height: float = 0.0):
        """
        Creates a GeodeticCoordinate from a latitude and longitude expressed in radians.

        Args:
            latitude:
                The geodetic latitude, in radians

            longitude:
                The longitude, in radians

            height:
                (Default 0.0) The height above the ellipsoid, in meters

        Returns:
            GeodeticCoordinate
        """
        return GeodeticCoordinate(math.degrees(latitude), math.degrees(longitude), height)

    def to_radians(self) -> Tuple[float, float, float]:
        """Returns (latitude, longitude, height) with the angles in radians"""
        return math.radians(self.latitude), math.radians(self.longitude), self.height

    def to_cartesian(self) -> 'CartesianCoordinate':
        """Converts this position to geocentric Cartesian coordinates"""
        from geocart.transforms import geodetic_to_cartesian  # pylint: disable=import-outside-toplevel
        return geodetic_to_cartesian(self.latitude, self.longitude, self.height)

    def to_dict(self) -> Dict[str, float]:
        """Converts the coordinate to a dict keyed by latitude, longitude and height"""
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'height': self.height,
        }

    def to_float(self, precision: Optional[int] = None) -> Tuple[float, ...]:
        """
        Converts the coordinate to a tuple of floats (latitude, longitude, height)

        Args:
            precision: (int)
                (Default None) If provided, rounds each value half-up to this
                many decimal places

        Returns:
            Tuple of (latitude, longitude, height)
        """
        return _round((self.latitude, self.longitude, self.height), precision)

    def to_str(self, precision: Optional[int] = None) -> Tuple[str, ...]:
        """
        Converts the coordinate to a tuple of strings (latitude, longitude, height)

        Args:
            precision: (int)
                (Default None) If provided, formats each value with exactly this
                many decimal places

        Returns:
            Tuple of (latitude, longitude, height)
        """
        if precision is None:
            return tuple(map(str, self.to_float()))

        return tuple(f'{x:.{precision}f}' for x in self.to_float(precision))


class CartesianCoordinate:
    """
    Representation of a geocentric (Earth-centered, Earth-fixed) position.

    The frame is right-handed with its origin at the center of the ellipsoid, the
    Z axis along the rotation axis and the X axis through the prime meridian.

    Args:
        x:
            The X component, in meters

        y:
            The Y component, in meters

        z:
            The Z component, in meters
    """

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
        z: Union[float, int, str],
    ):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    def __eq__(self, other):
        if not isinstance(other, CartesianCoordinate):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<CartesianCoordinate({self.x}, {self.y}, {self.z})>'

    @property
    def x(self) -> float:
        """The X component, in meters"""
        return self._x

    @property
    def y(self) -> float:
        """The Y component, in meters"""
        return self._y

    @property
    def z(self) -> float:
        """The Z component, in meters"""
        return self._z

    @cached_property
    def magnitude(self) -> float:
        """The distance from the geocenter, in meters"""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @classmethod
    def from_array(cls, array: Union[np.ndarray, Sequence[float]]):
        """
        Creates a CartesianCoordinate from an array-like of [x, y, z]

        Args:
            array:
                A numpy array or sequence holding exactly three values, in meters

        Returns:
            CartesianCoordinate
        """
        arr = np.asarray(array, dtype=float).ravel()
        if arr.shape != (3,):
            raise ValueError(f'Expected exactly three values (x, y, z), got {arr.size}')

        return CartesianCoordinate(*arr.tolist())

    def to_array(self) -> np.ndarray:
        """Converts the coordinate to a numpy array of [x, y, z]"""
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_geodetic(self) -> GeodeticCoordinate:
        """Converts this position to geodetic latitude, longitude and height"""
        from geocart.transforms import cartesian_to_geodetic  # pylint: disable=import-outside-toplevel
        return cartesian_to_geodetic(self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, float]:
        """Converts the coordinate to a dict keyed by x, y and z"""
        return {'x': self.x, 'y': self.y, 'z': self.z}

    def to_float(self, precision: Optional[int] = None) -> Tuple[float, ...]:
        """
        Converts the coordinate to a tuple of floats (x, y, z)

        Args:
            precision: (int)
                (Default None) If provided, rounds each value half-up to this
                many decimal places

        Returns:
            Tuple of (x, y, z)
        """
        return _round((self.x, self.y, self.z), precision)

    def to_str(self, precision: Optional[int] = None) -> Tuple[str, ...]:
        """
        Converts the coordinate to a tuple of strings (x, y, z)

        Args:
            precision: (int)
                (Default None) If provided, formats each value with exactly this
                many decimal places

        Returns:
            Tuple of (x, y, z)
        """
        if precision is None:
            return tuple(map(str, self.to_float()))

        return tuple(f'{x:.{precision}f}' for x in self.to_float(precision))
