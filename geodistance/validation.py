"""
Range validation for coordinates. Violations are collected rather than raised so a
caller can report every problem at once.
"""

__all__ = ['validate_coordinate', 'validate_coordinates']

from typing import List

from geodistance._const import (
    MAX_ALTITUDE_METERS, MAX_LATITUDE, MAX_LONGITUDE,
    MIN_ALTITUDE_METERS, MIN_LATITUDE, MIN_LONGITUDE,
)
from geodistance.coordinates import Coordinate


def validate_coordinate(coord: Coordinate, name: str) -> List[str]:
    """
    Checks a coordinate's latitude, longitude and altitude against their permitted
    ranges.

    Args:
        coord:
            The Coordinate to check

        name:
            The label used in error messages, e.g. "Point 1"

    Returns:
        A list of error messages, one per violated constraint (empty if valid)
    """
    errors = []
    lat, lon, alt = coord.to_float()

    if not MIN_LATITUDE <= lat <= MAX_LATITUDE:
        errors.append(
            f'{name} latitude must be between {MIN_LATITUDE:g} and {MAX_LATITUDE:g} '
            f'degrees (got {lat})'
        )

    if not MIN_LONGITUDE <= lon <= MAX_LONGITUDE:
        errors.append(
            f'{name} longitude must be between {MIN_LONGITUDE:g} and {MAX_LONGITUDE:g} '
            f'degrees (got {lon})'
        )

    if alt < MIN_ALTITUDE_METERS:
        errors.append(f'{name} altitude seems too low: {alt} meters')

    if alt > MAX_ALTITUDE_METERS:
        errors.append(f'{name} altitude exceeds Earth-based limits: {alt} meters')

    return errors


def validate_coordinates(coord1: Coordinate, coord2: Coordinate) -> List[str]:
    """
    Validates a pair of coordinates. Errors for the first coordinate ("Point 1")
    precede errors for the second ("Point 2").
    """
    return validate_coordinate(coord1, 'Point 1') + validate_coordinate(coord2, 'Point 2')
