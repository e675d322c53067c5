"""
Geodesic inverse solutions: distance and bearings between two coordinates.

Vincenty's inverse formula on the WGS84 ellipsoid is used first. Where it cannot produce
an answer (antipodal points, or failure to converge) the solution falls back to the
Haversine formula on a sphere of mean Earth radius.
"""

__all__ = [
    'GeodesicSolution', 'geodesic_inverse', 'haversine_inverse', 'vincenty_inverse',
]

import math
from typing import Literal, Optional

from geodistance._const import (
    CONVERGENCE_THRESHOLD, DEGENERACY_THRESHOLD, MAX_ITERATIONS,
    MEAN_EARTH_RADIUS_METERS, WGS84_A, WGS84_B, WGS84_F,
)
from geodistance.coordinates import Coordinate
from geodistance.utils.logging import LOGGER

SolveMethod = Literal['vincenty', 'haversine']


class GeodesicSolution:
    """
    The outcome of a successful inverse solution.

    Args:
        distance:
            The surface distance, in meters

        initial_bearing:
            The bearing at the start point, in degrees [0, 360)

        final_bearing:
            The bearing at the end point, in degrees [0, 360)

        method:
            The method which produced the solution ('vincenty' or 'haversine')
    """

    success = True

    def __init__(
        self,
        distance: float,
        initial_bearing: float,
        final_bearing: float,
        method: SolveMethod,
    ):
        self.distance = distance
        self.initial_bearing = initial_bearing
        self.final_bearing = final_bearing
        self.method = method

    def __eq__(self, other):
        if not isinstance(other, GeodesicSolution):
            return False

        return (
            self.distance == other.distance and
            self.initial_bearing == other.initial_bearing and
            self.final_bearing == other.final_bearing and
            self.method == other.method
        )

    def __repr__(self):
        return (
            f'<GeodesicSolution({self.distance} m, {self.initial_bearing}°, '
            f'{self.final_bearing}°, {self.method})>'
        )


def _normalize_bearing(radians: float) -> float:
    return (math.degrees(radians) + 360) % 360


# -------------------------------------------------------------------------
# Haversine Implementation (Spherical)
# -------------------------------------------------------------------------

def haversine_inverse(coord1: Coordinate, coord2: Coordinate) -> GeodesicSolution:
    """
    Calculate distance and bearings using the Haversine formula (spherical earth).

    The final bearing is approximated as the reverse of the initial bearing, which is
    only exact in symmetric cases.
    """
    lat1, lon1 = coord1.to_radians()
    lat2, lon2 = coord2.to_radians()

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    # Rounding near the antipode can push a just past 1
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    initial_bearing = _normalize_bearing(math.atan2(y, x))

    return GeodesicSolution(
        MEAN_EARTH_RADIUS_METERS * c,
        initial_bearing,
        (initial_bearing + 180) % 360,
        'haversine',
    )


# -------------------------------------------------------------------------
# Vincenty Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def vincenty_inverse(coord1: Coordinate, coord2: Coordinate) -> Optional[GeodesicSolution]:
    """
    Calculate distance and bearings using Vincenty's inverse formula (WGS84 ellipsoid).

    Args:
        coord1:
            The start point Coordinate

        coord2:
            The end point Coordinate

    Returns:
        GeodesicSolution, or None if the points are antipodal or the iteration fails
        to converge
    """
    lat1, lon1 = coord1.to_radians()
    lat2, lon2 = coord2.to_radians()

    if abs(lat1 - lat2) < DEGENERACY_THRESHOLD and abs(lon1 - lon2) < DEGENERACY_THRESHOLD:
        # Coincident points
        return GeodesicSolution(0.0, 0.0, 0.0, 'vincenty')

    # Reduced latitudes (latitude on the auxiliary sphere)
    U1 = math.atan((1 - WGS84_F) * math.tan(lat1))
    U2 = math.atan((1 - WGS84_F) * math.tan(lat2))
    L = lon2 - lon1
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    for _ in range(MAX_ITERATIONS):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        if abs(sinSigma) < DEGENERACY_THRESHOLD:
            if cosSigma > 0:
                # Coincident on the auxiliary sphere, e.g. the same pole
                return GeodesicSolution(0.0, 0.0, 0.0, 'vincenty')

            LOGGER.debug('Antipodal points %r and %r; no unique geodesic', coord1, coord2)
            return None

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        if abs(cosSqAlpha) < DEGENERACY_THRESHOLD:
            # Both points on the equator
            cos2SigmaM = 0.0
        else:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha

        # eq. 10
        C = WGS84_F / 16 * cosSqAlpha * (4 + WGS84_F * (4 - 3 * cosSqAlpha))

        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * WGS84_F * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) < CONVERGENCE_THRESHOLD:
            break
    else:
        LOGGER.debug(
            'Vincenty failed to converge after %d iterations for %r and %r',
            MAX_ITERATIONS, coord1, coord2
        )
        return None

    # eq. 3 - 7
    uSq = cosSqAlpha * (WGS84_A ** 2 - WGS84_B ** 2) / (WGS84_B ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
    )
    )

    distance = WGS84_B * A * (sigma - deltaSigma)

    # eq. 20, and the same taken from the end point back towards the start
    sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
    initial_bearing = _normalize_bearing(
        math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)
    )
    final_bearing = _normalize_bearing(
        math.atan2(-cosU1 * sinLambda, sinU1 * cosU2 - cosU1 * sinU2 * cosLambda)
    )

    return GeodesicSolution(distance, initial_bearing, final_bearing, 'vincenty')


def geodesic_inverse(coord1: Coordinate, coord2: Coordinate) -> GeodesicSolution:
    """
    Solve for the distance and bearings between two coordinates, using Vincenty's formula
    and falling back to Haversine where Vincenty cannot produce a solution.

    Coordinates are assumed to be within valid ranges.
    """
    solution = vincenty_inverse(coord1, coord2)
    if solution is None:
        LOGGER.debug('Falling back to haversine for %r and %r', coord1, coord2)
        return haversine_inverse(coord1, coord2)

    return solution
