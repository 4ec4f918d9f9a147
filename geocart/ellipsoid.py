"""
Reference ellipsoid parameters and the quantities derived from them
"""

__all__ = ['Ellipsoid', 'WGS84']

from functools import cached_property
import math

from geocart._const import WGS84_A, WGS84_F


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, defined by its semi-major axis and flattening.

    The defining parameters are read-only, so the derived quantities can be cached
    on first access without ever going stale.

    Args:
        a:
            The semi-major axis, in meters

        f:
            The flattening, (a - b) / a
    """

    def __init__(self, a: float, f: float):
        a, f = float(a), float(f)
        if not a > 0:
            raise ValueError(f'Semi-major axis must be positive, got {a}')

        if not 0 < f < 1:
            raise ValueError(f'Flattening must be between 0 and 1 (exclusive), got {f}')

        self._a = a
        self._f = f

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, f={self.f})>'

    @property
    def a(self) -> float:
        """The semi-major (equatorial) axis, in meters"""
        return self._a

    @property
    def f(self) -> float:
        """The flattening"""
        return self._f

    @cached_property
    def b(self) -> float:
        """The semi-minor (polar) axis, in meters"""
        return self.a * (1 - self.f)

    @cached_property
    def e2(self) -> float:
        """The first eccentricity squared"""
        return 2 * self.f - self.f * self.f

    @cached_property
    def ep2(self) -> float:
        """The second eccentricity squared"""
        return (self.a * self.a - self.b * self.b) / (self.b * self.b)

    def prime_vertical_radius(self, latitude: float) -> float:
        """
        The radius of curvature in the prime vertical (N) at a geodetic latitude,
        i.e. the length of the ellipsoid normal from the surface to the polar axis.

        Args:
            latitude:
                The geodetic latitude, in radians

        Returns:
            float, in meters
        """
        sin_lat = math.sin(latitude)
        return self.a / math.sqrt(1 - self.e2 * sin_lat * sin_lat)

    def geocentric_radius(self, latitude: float) -> float:
        """
        The distance from the center of the ellipsoid to its surface at a geodetic
        latitude. Equals the semi-major axis at the equator and the semi-minor axis
        at the poles.

        Args:
            latitude:
                The geodetic latitude, in degrees

        Returns:
            float, in meters
        """
        r_lat = math.radians(latitude)
        a_cos = self.a * math.cos(r_lat)
        b_sin = self.b * math.sin(r_lat)
        return math.sqrt(
            ((self.a * a_cos) ** 2 + (self.b * b_sin) ** 2) / (a_cos ** 2 + b_sin ** 2)
        )


WGS84 = Ellipsoid(WGS84_A, WGS84_F)
