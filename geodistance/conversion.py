"""
Module for unit conversions
"""
__all__ = ['convert_from_meters', 'convert_to_meters']

from geodistance._const import METERS_PER_KILOMETER, METERS_PER_MILE, METERS_PER_NAUTICAL_MILE

_CONVERSION_FACTORS = {
    'm': 1.0,
    'km': METERS_PER_KILOMETER,
    'mi': METERS_PER_MILE,
    'nmi': METERS_PER_NAUTICAL_MILE,
}


def _factor(unit: str) -> float:
    unit = unit.lower()
    if unit not in _CONVERSION_FACTORS:
        raise ValueError(
            f"Unknown distance unit '{unit}'. Options: {list(_CONVERSION_FACTORS.keys())}"
        )

    return _CONVERSION_FACTORS[unit]


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', mile = 'mi',
        nautical mile = 'nmi').

    Returns:
        float: The distance in meters.
    """
    return distance * _factor(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit.

    Args:
        distance (float): The distance, in meters.
        unit (str): The target unit ('m', 'km', 'mi', 'nmi').

    Returns:
        float: The distance in the target unit.
    """
    return distance / _factor(unit)
