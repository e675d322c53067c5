"""
Representation of a specific point on (or above) earth
"""

__all__ = ['Coordinate', 'RawCoordinate']

import math
from typing import Any, Dict, Mapping, Tuple, Union

RawCoordinate = Mapping[str, Any]


def _to_float(value: Any) -> float:
    """Coerces a raw value to a float, where missing or non-numeric values become 0.0"""
    if value is None:
        return 0.0

    try:
        converted = float(value)
    except (TypeError, ValueError):
        return 0.0

    if math.isnan(converted):
        return 0.0

    return converted


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair) with an altitude
    in meters.

    Values are stored as given; out-of-range latitudes and longitudes are NOT wrapped,
    so they can be reported by validation.
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        altitude: Union[float, int, str] = 0.0,
    ):
        self._latitude = float(latitude)
        self._longitude = float(longitude)
        self._altitude = float(altitude)

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def altitude(self) -> float:
        return self._altitude

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.altitude == other.altitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.altitude))

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude}, {self.altitude})>'

    @classmethod
    def from_raw(cls, raw: RawCoordinate) -> 'Coordinate':
        """
        Creates a Coordinate from a loosely-typed mapping, such as request parameters.

        Altitude may be supplied under either 'altitude' or 'height'; 'altitude' takes
        precedence when both are present. Missing or non-numeric values become 0.0.

        Args:
            raw:
                A mapping with keys 'latitude', 'longitude' and optionally
                'altitude' or 'height'

        Returns:
            Coordinate
        """
        altitude = raw.get('altitude')
        if altitude is None:
            altitude = raw.get('height')

        return cls(
            _to_float(raw.get('latitude')),
            _to_float(raw.get('longitude')),
            _to_float(altitude),
        )

    def to_dict(self) -> Dict[str, float]:
        """Converts the coordinate to a dict of latitude, longitude and altitude"""
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'altitude': self.altitude,
        }

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the coordinate to a tuple of floats (latitude, longitude, altitude)"""
        return self.latitude, self.longitude, self.altitude

    def to_radians(self) -> Tuple[float, float]:
        """Returns (latitude, longitude) in radians"""
        return math.radians(self.latitude), math.radians(self.longitude)
