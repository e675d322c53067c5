from geodistance import Coordinate
from geodistance.validation import validate_coordinate, validate_coordinates


def test_validate_coordinate_valid():
    assert validate_coordinate(Coordinate(0., 0.), 'Point 1') == []
    assert validate_coordinate(Coordinate(90., 180., 100_000.), 'Point 1') == []
    assert validate_coordinate(Coordinate(-90., -180., -500.), 'Point 1') == []


def test_validate_coordinate_messages():
    assert validate_coordinate(Coordinate(100., 0.), 'Point 1') == [
        'Point 1 latitude must be between -90 and 90 degrees (got 100.0)'
    ]
    assert validate_coordinate(Coordinate(0., -200.), 'Point 2') == [
        'Point 2 longitude must be between -180 and 180 degrees (got -200.0)'
    ]
    assert validate_coordinate(Coordinate(0., 0., -600.), 'Point 1') == [
        'Point 1 altitude seems too low: -600.0 meters'
    ]
    assert validate_coordinate(Coordinate(0., 0., 100_001.), 'Point 1') == [
        'Point 1 altitude exceeds Earth-based limits: 100001.0 meters'
    ]


def test_validate_coordinate_collects_all():
    errors = validate_coordinate(Coordinate(-91., 181., 200_000.), 'Point 1')
    assert len(errors) == 3
    assert 'latitude' in errors[0]
    assert 'longitude' in errors[1]
    assert 'altitude' in errors[2]


def test_validate_coordinates_order():
    errors = validate_coordinates(
        Coordinate(0., 0., -1000.),
        Coordinate(95., 0.),
    )
    assert len(errors) == 2
    assert errors[0].startswith('Point 1 altitude')
    assert errors[1].startswith('Point 2 latitude')

    assert validate_coordinates(Coordinate(0., 0.), Coordinate(1., 1.)) == []
