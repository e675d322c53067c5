"""
Entry point for distance calculation between two raw coordinate records.

Usage:
    from geodistance import solve

    report = solve(
        {'latitude': 40.7128, 'longitude': -74.0060},
        {'latitude': 51.5074, 'longitude': -0.1278, 'altitude': 35},
    )
    report.surface_distance_km
"""

__all__ = ['GeodesicSolver', 'solve', 'validate']

from typing import List, Union

from geodistance.coordinates import Coordinate, RawCoordinate
from geodistance.geodesic import geodesic_inverse
from geodistance.report import DistanceReport, ValidationFailure, build_report
from geodistance.utils.mixins import LoggingMixin
from geodistance.validation import validate_coordinates


class GeodesicSolver(LoggingMixin):
    """
    Calculates the distance between two coordinates following the curvature of the
    earth (WGS84 ellipsoid).

    Inputs are normalized and validated on construction; every range violation across
    both points is available via .errors before solving.

    Args:
        point1:
            The start point, as a mapping of 'latitude', 'longitude' and optionally
            'altitude' (or 'height') in meters

        point2:
            The end point, in the same form as point1
    """

    def __init__(self, point1: RawCoordinate, point2: RawCoordinate):
        super().__init__()
        self.point1 = Coordinate.from_raw(point1)
        self.point2 = Coordinate.from_raw(point2)
        self.errors: List[str] = validate_coordinates(self.point1, self.point2)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def solve(self) -> Union[DistanceReport, ValidationFailure]:
        """
        Calculate the distance and bearings between the two points.

        Returns:
            DistanceReport, or ValidationFailure listing every out-of-range value
        """
        if self.errors:
            self.logger.debug('Rejected coordinates: %s', '; '.join(self.errors))
            return ValidationFailure(self.errors)

        solution = geodesic_inverse(self.point1, self.point2)
        self.logger.debug(
            'Solved %r -> %r: %s m via %s',
            self.point1, self.point2, solution.distance, solution.method
        )
        return build_report(self.point1, self.point2, solution)


def solve(point1: RawCoordinate, point2: RawCoordinate) -> Union[DistanceReport, ValidationFailure]:
    """
    Calculate the distance and bearings between two raw coordinate records.

    Args:
        point1:
            The start point, as a mapping of 'latitude', 'longitude' and optionally
            'altitude' (or 'height') in meters

        point2:
            The end point, in the same form as point1

    Returns:
        DistanceReport, or ValidationFailure listing every out-of-range value
    """
    return GeodesicSolver(point1, point2).solve()


def validate(point1: RawCoordinate, point2: RawCoordinate) -> List[str]:
    """Returns every range violation across both points, without solving"""
    return GeodesicSolver(point1, point2).errors
