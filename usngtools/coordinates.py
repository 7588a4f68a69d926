"""
Representation of a specific point on earth
"""

__all__ = ['GeodeticPoint']

from typing import Tuple, Union


class GeodeticPoint:
    """
    Representation of a NAD83 geodetic coordinate (i.e., a lon/lat pair in
    decimal degrees).

    No range checking is performed; callers are responsible for providing
    values inside [-180, 180) and [-90, 90].
    """

    __slots__ = ('_longitude', '_latitude')

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
    ):
        self._longitude = float(longitude)
        self._latitude = float(latitude)

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def latitude(self) -> float:
        return self._latitude

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.longitude == other.longitude and
            self.latitude == other.latitude
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<GeodeticPoint({self.longitude}, {self.latitude})>'

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude
        return self.longitude, self.latitude
