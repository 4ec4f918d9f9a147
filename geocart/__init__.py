
from geocart._version import __version__  # noqa: F401
from geocart.utils.logging import LOGGER
from geocart.ellipsoid import Ellipsoid, WGS84
from geocart.coordinates import CartesianCoordinate, GeodeticCoordinate
from geocart.transforms import cartesian_to_geodetic, geodetic_to_cartesian
from geocart.validation import (
    convert_cartesian, convert_geodetic, parse_cartesian, parse_geodetic
)


__all__ = [
    'CartesianCoordinate',
    'Ellipsoid',
    'GeodeticCoordinate',
    'WGS84',
    'cartesian_to_geodetic',
    'convert_cartesian',
    'convert_geodetic',
    'geodetic_to_cartesian',
    'parse_cartesian',
    'parse_geodetic',
    'LOGGER',
]
