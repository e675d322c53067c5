
from geodistance._version import __version__  # noqa: F401
from geodistance.utils.logging import LOGGER
from geodistance.coordinates import Coordinate
from geodistance.geodesic import GeodesicSolution
from geodistance.report import DistanceReport, ValidationFailure
from geodistance.solver import GeodesicSolver, solve, validate

__all__ = [
    'Coordinate',
    'DistanceReport',
    'GeodesicSolution',
    'GeodesicSolver',
    'ValidationFailure',
    'LOGGER',
    'solve',
    'validate',
]
