"""
Result records returned to callers: a full distance report, or the list of validation
errors which prevented one.
"""

__all__ = ['DistanceReport', 'ValidationFailure', 'build_report']

import math
from typing import Any, Dict, List, Optional

from geodistance.conversion import convert_from_meters
from geodistance.coordinates import Coordinate
from geodistance.geodesic import GeodesicSolution
from geodistance.utils.functions import round_half_up


class ValidationFailure:
    """One or more coordinates were out of range; no distance was computed."""

    success = False

    def __init__(self, errors: List[str]):
        self.errors = list(errors)

    def __eq__(self, other):
        if not isinstance(other, ValidationFailure):
            return False

        return self.errors == other.errors

    def __repr__(self):
        return f'<ValidationFailure({len(self.errors)} errors)>'

    def to_dict(self) -> Dict[str, Any]:
        return {'success': False, 'errors': list(self.errors)}


class DistanceReport:
    """
    The distance and bearings between two coordinates, expressed in meters, kilometers,
    statute miles and nautical miles.

    Total distance combines the surface distance with the altitude difference as though
    the two were orthogonal, which holds when the altitude difference is small relative
    to the surface distance.

    Args:
        point1:
            The normalized start coordinate

        point2:
            The normalized end coordinate

        solution:
            The geodesic solution between the two coordinates
    """

    success = True

    def __init__(self, point1: Coordinate, point2: Coordinate, solution: GeodesicSolution):
        self.point1 = point1
        self.point2 = point2
        self.method = solution.method
        self.initial_bearing = solution.initial_bearing
        self.final_bearing = solution.final_bearing

        self.surface_distance = solution.distance
        self.altitude_difference = point2.altitude - point1.altitude
        self.total_distance = math.sqrt(
            self.surface_distance ** 2 + self.altitude_difference ** 2
        )

    def __repr__(self):
        return (
            f'<DistanceReport({self.surface_distance} m, '
            f'{self.initial_bearing}° -> {self.final_bearing}°)>'
        )

    @property
    def surface_distance_km(self) -> float:
        return convert_from_meters(self.surface_distance, 'km')

    @property
    def surface_distance_miles(self) -> float:
        return convert_from_meters(self.surface_distance, 'mi')

    @property
    def surface_distance_nautical_miles(self) -> float:
        return convert_from_meters(self.surface_distance, 'nmi')

    @property
    def total_distance_km(self) -> float:
        return convert_from_meters(self.total_distance, 'km')

    @property
    def total_distance_miles(self) -> float:
        return convert_from_meters(self.total_distance, 'mi')

    @property
    def total_distance_nautical_miles(self) -> float:
        return convert_from_meters(self.total_distance, 'nmi')

    def to_dict(self, precision: Optional[int] = None) -> Dict[str, Any]:
        """
        Converts the report to a dict suitable for serialization.

        Args:
            precision: (int) (Default None)
                If provided, rounds distances, bearings and the altitude difference to
                this many decimal places. Coordinates are never rounded.

        Returns:
            dict
        """
        values = {
            'surface_distance': self.surface_distance,
            'surface_distance_km': self.surface_distance_km,
            'surface_distance_miles': self.surface_distance_miles,
            'surface_distance_nautical_miles': self.surface_distance_nautical_miles,
            'total_distance': self.total_distance,
            'total_distance_km': self.total_distance_km,
            'total_distance_miles': self.total_distance_miles,
            'total_distance_nautical_miles': self.total_distance_nautical_miles,
            'altitude_difference': self.altitude_difference,
            'initial_bearing': self.initial_bearing,
            'final_bearing': self.final_bearing,
        }
        if precision is not None:
            values = {k: round_half_up(v, precision) for k, v in values.items()}

        return {
            'success': True,
            **values,
            'point1': self.point1.to_dict(),
            'point2': self.point2.to_dict(),
        }


def build_report(
    point1: Coordinate,
    point2: Coordinate,
    solution: GeodesicSolution
) -> DistanceReport:
    """Assembles the externally-consumed report from a geodesic solution"""
    return DistanceReport(point1, point2, solution)
