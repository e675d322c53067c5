import pytest

from geodistance import Coordinate


def test_coordinate_init():
    c = Coordinate(1., 0.)
    assert c.latitude == 1.
    assert c.longitude == 0.
    assert c.altitude == 0.

    c = Coordinate('1.0', '0.0', '10')
    assert c.latitude == 1.
    assert c.longitude == 0.
    assert c.altitude == 10.

    # Out-of-range values are kept for validation, not wrapped
    c = Coordinate(100., -200.)
    assert c.latitude == 100.
    assert c.longitude == -200.


def test_coordinate_immutable():
    c = Coordinate(1., 0.)
    with pytest.raises(AttributeError):
        c.latitude = 2.


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != Coordinate(0., 0., 1.)
    assert Coordinate(0., 0.) != (0., 0., 0.)


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 2


def test_coordinate_repr():
    assert repr(Coordinate(1., 0.)) == '<Coordinate(1.0, 0.0, 0.0)>'


def test_coordinate_from_raw():
    assert Coordinate.from_raw(
        {'latitude': 40.7128, 'longitude': -74.0060}
    ) == Coordinate(40.7128, -74.0060, 0.)

    # Numeric strings, as from form parameters
    assert Coordinate.from_raw(
        {'latitude': '40.7128', 'longitude': '-74.0060', 'altitude': '12.5'}
    ) == Coordinate(40.7128, -74.0060, 12.5)


def test_coordinate_from_raw_altitude_precedence():
    assert Coordinate.from_raw(
        {'latitude': 0, 'longitude': 0, 'altitude': 100, 'height': 200}
    ).altitude == 100.

    assert Coordinate.from_raw(
        {'latitude': 0, 'longitude': 0, 'height': 200}
    ).altitude == 200.

    # An explicit zero altitude still wins over height
    assert Coordinate.from_raw(
        {'latitude': 0, 'longitude': 0, 'altitude': 0, 'height': 200}
    ).altitude == 0.

    assert Coordinate.from_raw(
        {'latitude': 0, 'longitude': 0, 'altitude': None, 'height': 200}
    ).altitude == 200.


def test_coordinate_from_raw_coercion():
    assert Coordinate.from_raw({}) == Coordinate(0., 0., 0.)
    assert Coordinate.from_raw(
        {'latitude': 'north', 'longitude': None, 'altitude': [1]}
    ) == Coordinate(0., 0., 0.)
    assert Coordinate.from_raw(
        {'latitude': float('nan'), 'longitude': 'nan'}
    ) == Coordinate(0., 0., 0.)


def test_coordinate_to_dict():
    assert Coordinate(1., 2., 3.).to_dict() == {
        'latitude': 1.,
        'longitude': 2.,
        'altitude': 3.,
    }


def test_coordinate_to_float():
    assert Coordinate(1., 2., 3.).to_float() == (1., 2., 3.)
