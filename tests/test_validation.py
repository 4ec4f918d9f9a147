import math
import re

import pytest

from geocart import CartesianCoordinate, GeodeticCoordinate, WGS84
from geocart.validation import (
    convert_cartesian, convert_geodetic, parse_cartesian, parse_geodetic
)

from tests.functions import assert_cartesian_equal, assert_geodetic_equal


def test_parse_geodetic():
    assert parse_geodetic(48.7823, 11.9601, 400) == GeodeticCoordinate(48.7823, 11.9601, 400.)
    assert parse_geodetic('48.7823', ' 11.9601 ', '400') == \
        GeodeticCoordinate(48.7823, 11.9601, 400.)
    assert parse_geodetic(0, 0) == GeodeticCoordinate(0., 0., 0.)

    # Bounds are inclusive
    assert parse_geodetic(-90, 180, -1e4) == GeodeticCoordinate(-90., 180., -1e4)
    assert parse_geodetic(90, -180, 0) == GeodeticCoordinate(90., -180., 0.)


def test_parse_geodetic_not_numeric():
    with pytest.raises(ValueError, match='Latitude must be a numeric value'):
        parse_geodetic('abc', 0, 0)

    with pytest.raises(ValueError, match='Longitude must be a numeric value'):
        parse_geodetic(0, '', 0)

    with pytest.raises(ValueError, match='Height must be a numeric value'):
        parse_geodetic(0, 0, None)

    with pytest.raises(ValueError, match='Height must be a numeric value'):
        parse_geodetic(0, 0, '12abc')

    with pytest.raises(ValueError, match='Latitude must be a numeric value'):
        parse_geodetic(True, 0, 0)

    with pytest.raises(ValueError, match='Latitude must be a finite value'):
        parse_geodetic(float('nan'), 0, 0)

    with pytest.raises(ValueError, match='Height must be a finite value'):
        parse_geodetic(0, 0, 'inf')


def test_parse_geodetic_out_of_range():
    with pytest.raises(ValueError, match='Latitude must be between -90 and 90'):
        parse_geodetic(90.0001, 0, 0)

    with pytest.raises(ValueError, match='Latitude must be between -90 and 90'):
        parse_geodetic(-91, 0, 0)

    with pytest.raises(ValueError, match='Longitude must be between -180 and 180'):
        parse_geodetic(0, 180.5, 0)

    with pytest.raises(ValueError, match='Longitude must be between -180 and 180'):
        parse_geodetic(0, -360, 0)


def test_parse_geodetic_radians():
    assert_geodetic_equal(
        parse_geodetic(math.pi / 4, -math.pi / 2, 10, radians=True),
        GeodeticCoordinate(45., -90., 10.)
    )
    assert_geodetic_equal(
        parse_geodetic('0.5', '1', 0, radians=True),
        GeodeticCoordinate(math.degrees(0.5), math.degrees(1.), 0.)
    )

    # Range checks apply after conversion to degrees
    with pytest.raises(ValueError, match='Latitude must be between -90 and 90'):
        parse_geodetic(1.6, 0, 0, radians=True)

    with pytest.raises(ValueError, match='Longitude must be between -180 and 180'):
        parse_geodetic(0, 3.2, 0, radians=True)


def test_parse_geodetic_decimal_comma(caplog):
    assert parse_geodetic('48,7823', '11,9601', '400') == \
        GeodeticCoordinate(48.7823, 11.9601, 400.)
    assert 'Comma decimal separators' in caplog.text

    parse_geodetic('1,5', '2,5', '0')
    assert len(re.findall('Comma decimal separators', caplog.text)) == 1

    # Thousands separators are not guessed at
    with pytest.raises(ValueError, match='Height must be a numeric value'):
        parse_geodetic(0, 0, '1,000.5')


def test_parse_cartesian():
    assert parse_cartesian(1, '2.5', -3.) == CartesianCoordinate(1., 2.5, -3.)

    # No range checks on Cartesian input
    assert parse_cartesian(1e12, -1e12, 0) == CartesianCoordinate(1e12, -1e12, 0.)

    with pytest.raises(ValueError, match='X must be a numeric value'):
        parse_cartesian('x', 0, 0)

    with pytest.raises(ValueError, match='Y must be a numeric value'):
        parse_cartesian(0, [1.], 0)

    with pytest.raises(ValueError, match='Z must be a finite value'):
        parse_cartesian(0, 0, float('-inf'))


def test_convert_geodetic():
    assert convert_geodetic('0', '0', '0') == CartesianCoordinate(WGS84.a, 0., 0.)

    assert_cartesian_equal(
        convert_geodetic(math.pi / 2, 0, 0, radians=True),
        CartesianCoordinate(0., 0., WGS84.b),
    )

    with pytest.raises(ValueError):
        convert_geodetic(100, 0, 0)


def test_convert_cartesian():
    assert_geodetic_equal(
        convert_cartesian(str(WGS84.a), '0', '0'),
        GeodeticCoordinate(0., 0., 0.)
    )
    assert convert_cartesian(0, 0, '6356752.314245').latitude == 90.

    with pytest.raises(ValueError):
        convert_cartesian('', 0, 0)
