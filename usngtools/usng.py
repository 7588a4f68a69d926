"""
US National Grid (USNG) coordinates

Implements FGDC-STD-011-2001 grid references on top of UTM for the NAD83
datum. Grid zones A, B, Y and Z (the polar regions) are not supported.
"""

__all__ = ['UsngCoordinate', 'grid_zone_letter']

import math
import re
from typing import List, Optional, Tuple

from usngtools._const import (
    GRID_SQUARE_SETS, GRID_ZONE_HEIGHT, GRID_ZONE_LETTERS, GRID_ZONE_MAX_LAT,
    GRID_ZONE_MIN_LAT, GRID_ZONE_NORTHINGS, NAD83_UTM_EPSG_BASE, NS_CYCLE_METERS
)
from usngtools.coordinates import GeodeticPoint
from usngtools.exceptions import (
    GridZoneMismatchError, InvalidCoordinateError, InvalidGridSquareError,
    LatitudeOutOfRangeError, MalformedUsngError, OddDigitCountError
)
from usngtools.utils.functions import fractional_digits, zero_pad
from usngtools.utils.logging import LOGGER
from usngtools.utm import UtmPoint, project, unproject, utm_zone
from usngtools.wkt import polygon_to_ewkt

_RE_TRAILING_DIGITS = re.compile(r'([0-9]+)$')
_RE_GRID_SQUARE = re.compile(r'([A-Z]{2})$')
_RE_ZONE = re.compile(r'([0-9]{1,2})([A-Z])')
_RE_WHITESPACE = re.compile(r'\s+')

_METERS_DIGITS = 5
_SQUARE_SIZE = 100000


def grid_zone_letter(latitude: float) -> Optional[str]:
    """
    Returns the USNG grid zone (latitude band) letter of a latitude, or None
    if the latitude falls outside of [-80, 80).

    Bands are 8 degrees tall and include their southern boundary, so a
    latitude of exactly 0 falls in band 'N'.
    """
    if not GRID_ZONE_MIN_LAT <= latitude < GRID_ZONE_MAX_LAT:
        return None

    return GRID_ZONE_LETTERS[math.floor((latitude - GRID_ZONE_MIN_LAT) / GRID_ZONE_HEIGHT)]


class UsngCoordinate:
    """
    A USNG grid reference, e.g. 15TVK9186

    The easting and northing are kept as digit strings, since leading zeros
    and the number of digits are both significant. Each string holds exactly
    `precision` digits; a precision of 5 addresses a 1m square, 2 a 1km
    square, and 0 the whole 100km grid square.

    Args:
        utm_zone:
            The UTM zone number, e.g. 15

        grid_zone:
            The grid zone (latitude band) letter, e.g. 'T'

        grid_square:
            The two-letter 100km grid square, e.g. 'VK'. May be empty for
            a coordinate referencing a whole grid zone.

        easting:
            Easting digits within the grid square

        northing:
            Northing digits within the grid square

        precision:
            The number of easting/northing digits
    """

    __slots__ = (
        '_utm_zone', '_grid_zone', '_grid_square', '_easting', '_northing', '_precision'
    )

    def __init__(
        self,
        utm_zone: int,
        grid_zone: str,
        grid_square: str,
        easting: str,
        northing: str,
        precision: int,
    ):
        if precision < 0:
            raise MalformedUsngError(f'Precision must be non-negative, got {precision}')

        if not 0 <= int(utm_zone) <= 99:
            raise MalformedUsngError(f'UTM zone must be 1 or 2 digits, got {utm_zone}')

        if not (len(grid_zone) == 1 and grid_zone.isalpha() and grid_zone.isupper()):
            raise MalformedUsngError(f'Invalid grid zone {grid_zone!r}')

        if grid_square and not (
            len(grid_square) == 2 and grid_square.isalpha() and grid_square.isupper()
        ):
            raise MalformedUsngError(f'Invalid 100km grid square {grid_square!r}')

        for name, digits in (('easting', easting), ('northing', northing)):
            if len(digits) != precision or (digits and not digits.isdigit()):
                raise MalformedUsngError(
                    f'USNG {name} must be exactly {precision} digits, got {digits!r}'
                )

        self._utm_zone = int(utm_zone)
        self._grid_zone = grid_zone
        self._grid_square = grid_square
        self._easting = easting
        self._northing = northing
        self._precision = int(precision)

    @property
    def utm_zone(self) -> int:
        return self._utm_zone

    @property
    def grid_zone(self) -> str:
        return self._grid_zone

    @property
    def grid_square(self) -> str:
        return self._grid_square

    @property
    def easting(self) -> str:
        return self._easting

    @property
    def northing(self) -> str:
        return self._northing

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def resolution(self) -> float:
        """The size (meters) of the square this coordinate addresses"""
        return 10 ** (_METERS_DIGITS - self.precision)

    def __eq__(self, other):
        if not isinstance(other, UsngCoordinate):
            return False

        return (
            self.utm_zone == other.utm_zone and
            self.grid_zone == other.grid_zone and
            self.grid_square == other.grid_square and
            self.easting == other.easting and
            self.northing == other.northing and
            self.precision == other.precision
        )

    def __hash__(self):
        return hash((
            self.utm_zone, self.grid_zone, self.grid_square,
            self.easting, self.northing, self.precision
        ))

    def __repr__(self):
        return f'<UsngCoordinate({self.to_str()})>'

    def __str__(self):
        return self.to_str()

    @classmethod
    def parse(cls, usng: str) -> 'UsngCoordinate':
        """
        Parses a USNG string, e.g. '15TVK9186' or '15T VK 91 86'.

        Parsing is case-insensitive and ignores whitespace. The grid square
        and the digits are both optional.

        Args:
            usng:
                The USNG string

        Returns:
            UsngCoordinate
        """
        remainder = _RE_WHITESPACE.sub('', usng.upper())

        easting, northing, precision = '', '', 0
        match = _RE_TRAILING_DIGITS.search(remainder)
        if match:
            digits = match.group(1)
            if len(digits) % 2:
                raise OddDigitCountError(
                    f'USNG {usng!r} has an odd number of easting/northing digits'
                )
            precision = len(digits) // 2
            easting, northing = digits[:precision], digits[precision:]
            remainder = remainder[:match.start()]

        grid_square = ''
        match = _RE_GRID_SQUARE.search(remainder)
        if match:
            grid_square = match.group(1)
            remainder = remainder[:match.start()]

        match = _RE_ZONE.fullmatch(remainder)
        if not match:
            raise MalformedUsngError(f'Could not parse USNG {usng!r}')

        return cls(
            int(match.group(1)), match.group(2), grid_square, easting, northing, precision
        )

    @classmethod
    def from_utm(cls, utm: UtmPoint, precision: Optional[int] = None) -> 'UsngCoordinate':
        """
        Encodes a UTM point to USNG.

        Digits beyond the requested precision are truncated rather than
        rounded, so the result always names the square containing the point.

        Args:
            utm:
                The UtmPoint to encode

            precision: (Optional)
                The number of easting/northing digits. Defaults to the
                precision of the UtmPoint.

        Returns:
            UsngCoordinate
        """
        precision = utm.precision if precision is None else precision
        if precision < 0:
            raise InvalidCoordinateError(f'Precision must be non-negative, got {precision}')

        if not 0 <= utm.zone <= 60:
            raise InvalidCoordinateError(f'Invalid UTM zone {utm.zone}')
        if not 100000 <= utm.easting <= 9000000:
            raise InvalidCoordinateError(f'Invalid easting {utm.easting}')
        if not 0 <= utm.northing <= 10000000:
            raise InvalidCoordinateError(f'Invalid northing {utm.northing}')

        lat = unproject(utm).latitude
        if not GRID_ZONE_MIN_LAT < lat < GRID_ZONE_MAX_LAT:
            raise LatitudeOutOfRangeError(
                f'Latitude must be between -80 and 80, got {lat}. '
                '(Zones A, B, Y and Z are not supported.)'
            )
        grid_zone = grid_zone_letter(lat)

        ew_letters, ns_letters = GRID_SQUARE_SETS[utm.zone % 6]
        ew_idx = math.floor(utm.easting / _SQUARE_SIZE) - 1
        ns_idx = math.floor((utm.northing % NS_CYCLE_METERS) / _SQUARE_SIZE)
        if ew_idx >= len(ew_letters):
            raise InvalidCoordinateError(
                f'Easting {utm.easting} lies beyond the lettered 100km grid squares'
            )
        grid_square = ew_letters[ew_idx] + ns_letters[ns_idx]

        easting = zero_pad(math.floor(utm.easting % _SQUARE_SIZE), _METERS_DIGITS)
        northing = zero_pad(math.floor(utm.northing % _SQUARE_SIZE), _METERS_DIGITS)

        if precision > _METERS_DIGITS:
            extra = precision - _METERS_DIGITS
            easting += fractional_digits(utm.easting, extra)
            northing += fractional_digits(utm.northing, extra)
        else:
            easting = easting[:precision]
            northing = northing[:precision]

        return cls(utm.zone, grid_zone, grid_square, easting, northing, precision)

    @classmethod
    def from_geodetic(cls, point: GeodeticPoint, precision: int = 5) -> 'UsngCoordinate':
        """
        Encodes a lon/lat point to USNG, in the UTM zone containing its longitude.

        Args:
            point:
                A GeodeticPoint

            precision: (int) (Default 5)
                The number of easting/northing digits

        Returns:
            UsngCoordinate
        """
        utm = project(point.longitude, point.latitude).with_precision(precision)
        return cls.from_utm(utm)

    def to_str(self) -> str:
        """Formats the coordinate as a USNG string, without separators"""
        return f'{self.utm_zone}{self.grid_zone}{self.grid_square}{self.easting}{self.northing}'

    def to_utm(self, strict: bool = False) -> UtmPoint:
        """
        Decodes the coordinate to the UTM point at the SW corner of its square.

        The northing letter only identifies a northing modulo 2,000km, so the
        grid zone is used to pick the nearest northing at or above the grid
        zone's approximate southern edge. That estimate is only exact along
        the central meridian; if the result falls outside the grid zone it
        is moved one 2,000km cycle south and checked once more.

        Args:
            strict: (bool)
                (Default False) If True, raise a GridZoneMismatchError when
                the decoded point still does not fall inside the labeled UTM
                zone and grid zone. Otherwise a warning is logged and the
                best-effort point is returned.

        Returns:
            UtmPoint
        """
        if self.grid_zone not in GRID_ZONE_LETTERS:
            raise InvalidCoordinateError(f'Unsupported grid zone {self.grid_zone!r}')

        ew_letters, ns_letters = GRID_SQUARE_SETS[self.utm_zone % 6]
        if (
            len(self.grid_square) != 2 or
            self.grid_square[0] not in ew_letters or
            self.grid_square[1] not in ns_letters
        ):
            raise InvalidGridSquareError(
                f'Invalid 100km grid square {self.grid_square!r} for UTM zone {self.utm_zone}'
            )
        ew_idx = ew_letters.index(self.grid_square[0])
        ns_idx = ns_letters.index(self.grid_square[1])

        scale_factor = 10 ** (_METERS_DIGITS - self.precision)
        easting = (ew_idx + 1) * _SQUARE_SIZE + int(self.easting or 0) * scale_factor
        northing = ns_idx * _SQUARE_SIZE + int(self.northing or 0) * scale_factor

        min_northing = GRID_ZONE_NORTHINGS[GRID_ZONE_LETTERS.index(self.grid_zone)]
        northing += NS_CYCLE_METERS * math.ceil((min_northing - northing) / NS_CYCLE_METERS)

        utm = UtmPoint(self.utm_zone, easting, northing, self.precision)
        found_zone, found_grid_zone = self._locate(utm)
        if found_grid_zone != self.grid_zone:
            northing -= NS_CYCLE_METERS
            utm = UtmPoint(self.utm_zone, easting, northing, self.precision)
            found_zone, found_grid_zone = self._locate(utm)

        if found_zone != self.utm_zone or found_grid_zone != self.grid_zone:
            msg = (
                f'Decoded USNG {self.to_str()} lies outside of its UTM or grid zone. '
                f'Supplied: {self.utm_zone}{self.grid_zone}, '
                f'calculated: {found_zone}{found_grid_zone}'
            )
            if strict:
                raise GridZoneMismatchError(msg)
            LOGGER.warning(msg)

        return utm

    @staticmethod
    def _locate(utm: UtmPoint) -> Tuple[int, Optional[str]]:
        """Returns the UTM zone and grid zone a UTM point actually falls in"""
        point = unproject(utm)
        return utm_zone(point.longitude), grid_zone_letter(point.latitude)

    def to_geodetic(self, strict: bool = False) -> GeodeticPoint:
        """Decodes the SW corner of the coordinate's square to lon/lat"""
        return unproject(self.to_utm(strict=strict))

    def bounding_box(self) -> Tuple[int, List[Tuple[float, float]]]:
        """
        Returns the square represented by this coordinate, in the coordinate
        system of its UTM zone (even if part of the square happens to fall
        outside of the 100km grid square or grid zone).

        Returns:
            (srid, ring), where srid is the NAD83 / UTM zone EPSG code and
            ring is the closed list of (easting, northing) corners starting
            from the SW corner
        """
        utm = self.to_utm()
        size = self.resolution

        min_x, min_y = utm.easting, utm.northing
        max_x, max_y = min_x + size, min_y + size

        return NAD83_UTM_EPSG_BASE + self.utm_zone, [
            (min_x, min_y),
            (min_x, max_y),
            (max_x, max_y),
            (max_x, min_y),
            (min_x, min_y),
        ]

    def to_ewkt(self) -> str:
        """
        Returns the bounding box as an EWKT polygon, e.g.
        SRID=26915;POLYGON((654000 5191000, 654000 5192000, 655000 5192000, 655000 5191000, 654000 5191000))
        """
        return polygon_to_ewkt(*self.bounding_box())
