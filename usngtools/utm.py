"""
Universal Transverse Mercator projection for the GRS-80 ellipsoid

Forward and inverse series follow USGS Professional Paper 1395
(Snyder, "Map Projections - A Working Manual"), equations 8-9 through 8-25.
The inverse is the closed-form footpoint approximation rather than an
iterative solution, and is accurate to well under a millimeter within
~3 degrees of the zone's central meridian.
"""

__all__ = [
    'UtmPoint', 'central_meridian', 'meridian_distance', 'project',
    'project_array', 'unproject', 'unproject_array', 'utm_zone',
]

import math
from typing import Optional, Tuple, Union

import numpy as np

from usngtools._const import (
    ECC_4, ECC_6, ECC_PRIME_SQUARED, ECC_SQUARED, GRS80_A, NAD83_UTM_EPSG_BASE,
    UTM_FALSE_EASTING, UTM_SCALE_FACTOR, UTM_ZONE_WIDTH
)
from usngtools.coordinates import GeodeticPoint
from usngtools.utils.logging import warn_once

# Projected output carries no real precision information
_DEFAULT_PRECISION = 6

_ArrayLike = Union[float, np.ndarray]


def utm_zone(longitude: float) -> int:
    """
    Calculates the UTM zone number of a longitude.

    -180 is zone 1 and zones increment every 6 degrees going east, so
    [-180, -174) is zone 1 and [174, 180) is zone 60.

    Args:
        longitude:
            Longitude in decimal degrees

    Returns:
        (int) the UTM zone number
    """
    return math.floor((longitude + 180.0) / UTM_ZONE_WIDTH) + 1


def central_meridian(zone: int) -> float:
    """Returns the longitude (degrees) of a UTM zone's central meridian"""
    return -((30 - zone) * UTM_ZONE_WIDTH + 3)


def meridian_distance(lat: _ArrayLike) -> _ArrayLike:
    """
    Computes the distance (meters) along the meridian from the equator
    to a latitude, in radians. See equation 3-22, USGS Professional Paper 1395.

    Args:
        lat:
            Latitude in radians (float or ndarray)

    Returns:
        Meridian distance in meters
    """
    c1 = GRS80_A * (1 - ECC_SQUARED / 4 - 3 * ECC_4 / 64 - 5 * ECC_6 / 256)
    c2 = -GRS80_A * (3 * ECC_SQUARED / 8 + 3 * ECC_4 / 32 + 45 * ECC_6 / 1024)
    c3 = GRS80_A * (15 * ECC_4 / 256 + 45 * ECC_6 / 1024)
    c4 = -GRS80_A * 35 * ECC_6 / 3072

    return c1 * lat + c2 * np.sin(lat * 2) + c3 * np.sin(lat * 4) + c4 * np.sin(lat * 6)


def _forward(lon: _ArrayLike, lat: _ArrayLike, zone: _ArrayLike) -> Tuple[_ArrayLike, _ArrayLike]:
    """Forward series; longitudes/latitudes in degrees"""
    cm_rad = np.radians(-((30 - zone) * UTM_ZONE_WIDTH + 3))
    lat_rad = np.radians(lat)
    lon_rad = np.radians(lon)

    lat_sin = np.sin(lat_rad)
    lat_cos = np.cos(lat_rad)
    lat_tan = lat_sin / lat_cos
    lat_tan2 = lat_tan * lat_tan
    lat_tan4 = lat_tan2 * lat_tan2

    n = GRS80_A / np.sqrt(1 - ECC_SQUARED * lat_sin * lat_sin)
    c = ECC_PRIME_SQUARED * lat_cos * lat_cos
    a = lat_cos * (lon_rad - cm_rad)
    m = meridian_distance(lat_rad)

    temp5 = 1.0 - lat_tan2 + c
    temp6 = 5.0 - 18.0 * lat_tan2 + lat_tan4 + 72.0 * c - 58.0 * ECC_PRIME_SQUARED
    a5 = a ** 5

    easting = UTM_SCALE_FACTOR * n * (
        a + temp5 * a ** 3 / 6.0 + temp6 * a5 / 120.0
    ) + UTM_FALSE_EASTING

    temp7 = (5.0 - lat_tan2 + 9.0 * c + 4.0 * c * c) * a ** 4 / 24.0
    temp8 = 61.0 - 58.0 * lat_tan2 + lat_tan4 + 600.0 * c - 330.0 * ECC_PRIME_SQUARED
    temp9 = a5 * a / 720.0

    northing = UTM_SCALE_FACTOR * (m + n * lat_tan * (a * a / 2.0 + temp7 + temp8 * temp9))

    return easting, northing


def _inverse(
    zone: _ArrayLike, easting: _ArrayLike, northing: _ArrayLike
) -> Tuple[_ArrayLike, _ArrayLike]:
    """Inverse series; returns longitudes/latitudes in degrees"""
    cm_rad = np.radians(-((30 - zone) * UTM_ZONE_WIDTH + 3))

    temp1 = math.sqrt(1.0 - ECC_SQUARED)
    ecc1 = (1.0 - temp1) / (1.0 + temp1)
    ecc12 = ecc1 * ecc1
    ecc13 = ecc1 * ecc12
    ecc14 = ecc12 * ecc12

    x = easting - UTM_FALSE_EASTING
    m = northing / UTM_SCALE_FACTOR
    mu = m / (GRS80_A * (1.0 - ECC_SQUARED / 4.0 - 3.0 * ECC_4 / 64.0 - 5.0 * ECC_6 / 256.0))

    # Footpoint latitude
    temp8 = 1.5 * ecc1 - (27.0 / 32.0) * ecc13
    temp9 = (21.0 / 16.0) * ecc12 - (55.0 / 32.0) * ecc14
    lat1 = (
        mu + temp8 * np.sin(2 * mu) + temp9 * np.sin(4 * mu)
        + (151.0 * ecc13 / 96.0) * np.sin(6.0 * mu)
    )

    lat1_sin = np.sin(lat1)
    lat1_cos = np.cos(lat1)
    lat1_tan = lat1_sin / lat1_cos
    n1 = GRS80_A / np.sqrt(1.0 - ECC_SQUARED * lat1_sin * lat1_sin)
    t1 = lat1_tan * lat1_tan
    c1 = ECC_PRIME_SQUARED * lat1_cos * lat1_cos

    temp20 = 1.0 - ECC_SQUARED * lat1_sin * lat1_sin
    r1 = GRS80_A * (1.0 - ECC_SQUARED) / np.sqrt(temp20 * temp20 * temp20)

    d1 = x / (n1 * UTM_SCALE_FACTOR)
    d2 = d1 * d1
    d3 = d1 * d2
    d4 = d2 * d2
    d5 = d1 * d4
    d6 = d3 * d3

    t12 = t1 * t1
    c12 = c1 * c1

    temp1 = n1 * lat1_tan / r1
    temp2 = 5.0 + 3.0 * t1 + 10.0 * c1 - 4.0 * c12 - 9.0 * ECC_PRIME_SQUARED
    temp4 = 61.0 + 90.0 * t1 + 298.0 * c1 + 45.0 * t12 - 252.0 * ECC_PRIME_SQUARED - 3.0 * c12
    temp5 = (1.0 + 2.0 * t1 + c1) * d3 / 6.0
    temp6 = 5.0 - 2.0 * c1 + 28.0 * t1 - 3.0 * c12 + 8.0 * ECC_PRIME_SQUARED + 24.0 * t12

    lat = np.degrees(lat1 - temp1 * (d2 / 2.0 - temp2 * (d4 / 24.0) + temp4 * d6 / 720.0))
    lon = np.degrees(cm_rad + (d1 - temp5 + temp6 * d5 / 120.0) / lat1_cos)

    return lon, lat


class UtmPoint:
    """
    A UTM coordinate: zone number, easting and northing (meters).

    Northings are not offset by a false northing, so points in the southern
    hemisphere carry negative northings. Ranges are only checked when the
    point is encoded to USNG.

    Args:
        zone:
            The UTM zone number, 1-60

        easting:
            Easting in meters, including the 500,000m false easting

        northing:
            Northing in meters

        precision:
            The number of significant easting/northing digits (see
            UsngCoordinate), default 6
    """

    __slots__ = ('_zone', '_easting', '_northing', '_precision')

    def __init__(
        self,
        zone: int,
        easting: float,
        northing: float,
        precision: int = _DEFAULT_PRECISION,
    ):
        self._zone = int(zone)
        self._easting = float(easting)
        self._northing = float(northing)
        self._precision = int(precision)

    @property
    def zone(self) -> int:
        return self._zone

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def epsg(self) -> int:
        """The NAD83 / UTM zone EPSG code of this point"""
        return NAD83_UTM_EPSG_BASE + self.zone

    def __eq__(self, other):
        if not isinstance(other, UtmPoint):
            return False

        return (
            self.zone == other.zone and
            self.easting == other.easting and
            self.northing == other.northing and
            self.precision == other.precision
        )

    def __hash__(self):
        return hash((self.zone, self.easting, self.northing, self.precision))

    def __repr__(self):
        return f'<UtmPoint({self.zone}, {self.easting}, {self.northing}, {self.precision})>'

    @classmethod
    def from_geodetic(cls, point: GeodeticPoint, zone: Optional[int] = None) -> 'UtmPoint':
        """Projects a GeodeticPoint. See usngtools.utm.project"""
        return project(point.longitude, point.latitude, zone)

    def to_geodetic(self) -> GeodeticPoint:
        """Unprojects this point. See usngtools.utm.unproject"""
        return unproject(self)

    def with_precision(self, precision: int) -> 'UtmPoint':
        """Returns a copy of this point with a different precision"""
        return UtmPoint(self.zone, self.easting, self.northing, precision)


def project(longitude: float, latitude: float, zone: Optional[int] = None) -> UtmPoint:
    """
    Converts a lon/lat (decimal degrees) to UTM, optionally forcing a
    particular UTM zone.

    Latitudes of +/-90 are not guarded against and produce inf/NaN values.

    Args:
        longitude:
            Longitude in decimal degrees

        latitude:
            Latitude in decimal degrees

        zone: (Optional)
            The UTM zone to project into. If not provided, the zone
            containing the longitude is used.

    Returns:
        UtmPoint, with precision 6
    """
    longitude, latitude = float(longitude), float(latitude)
    if zone is None:
        zone = utm_zone(longitude)
    elif abs(longitude - central_meridian(zone)) > UTM_ZONE_WIDTH / 2:
        warn_once(
            f'Longitude {longitude} lies outside of UTM zone {zone}; '
            'projected coordinates will lose accuracy.'
        )

    easting, northing = _forward(longitude, latitude, zone)
    return UtmPoint(zone, float(easting), float(northing), _DEFAULT_PRECISION)


def unproject(utm: UtmPoint) -> GeodeticPoint:
    """
    Converts a UTM point to a lon/lat (decimal degrees).

    Args:
        utm:
            A UtmPoint

    Returns:
        GeodeticPoint
    """
    lon, lat = _inverse(utm.zone, utm.easting, utm.northing)
    return GeodeticPoint(float(lon), float(lat))


def project_array(
    longitudes: np.ndarray,
    latitudes: np.ndarray,
    zone: Optional[int] = None
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Projects arrays of lon/lat values (decimal degrees) to UTM.

    Args:
        longitudes:
            Array-like of longitudes

        latitudes:
            Array-like of latitudes, same shape as longitudes

        zone: (Optional)
            A UTM zone to project every point into. If not provided, each
            point is projected into the zone containing its longitude.

    Returns:
        (zones, eastings, northings) as ndarrays
    """
    lons = np.asarray(longitudes, dtype=float)
    lats = np.asarray(latitudes, dtype=float)
    if lons.shape != lats.shape:
        raise ValueError('Longitude and latitude arrays must have the same shape.')

    if zone is None:
        zones = np.floor((lons + 180.0) / UTM_ZONE_WIDTH).astype(int) + 1
    else:
        zones = np.full(lons.shape, zone, dtype=int)
        if np.any(np.abs(lons - central_meridian(zone)) > UTM_ZONE_WIDTH / 2):
            warn_once(
                f'Longitudes lie outside of UTM zone {zone}; '
                'projected coordinates will lose accuracy.'
            )

    eastings, northings = _forward(lons, lats, zones)
    return zones, eastings, northings


def unproject_array(
    zones: Union[int, np.ndarray],
    eastings: np.ndarray,
    northings: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Converts arrays of UTM eastings/northings to lon/lat.

    Args:
        zones:
            A single UTM zone, or an array of zones matching the eastings

        eastings:
            Array-like of eastings (meters)

        northings:
            Array-like of northings (meters), same shape as eastings

    Returns:
        (longitudes, latitudes) as ndarrays
    """
    eastings = np.asarray(eastings, dtype=float)
    northings = np.asarray(northings, dtype=float)
    if eastings.shape != northings.shape:
        raise ValueError('Easting and northing arrays must have the same shape.')

    return _inverse(np.asarray(zones), eastings, northings)
