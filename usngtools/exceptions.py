"""
Errors raised while converting between coordinate representations
"""

__all__ = [
    'GridZoneMismatchError', 'InvalidCoordinateError', 'InvalidGridSquareError',
    'LatitudeOutOfRangeError', 'MalformedUsngError', 'OddDigitCountError', 'UsngError',
]


class UsngError(ValueError):
    """Base class for all usngtools conversion errors"""


class LatitudeOutOfRangeError(UsngError):
    """Latitude falls in the polar zones (A, B, Y, Z), which are not supported"""


class InvalidCoordinateError(UsngError):
    """UTM zone, easting or northing falls outside of its valid range"""


class InvalidGridSquareError(UsngError):
    """100km grid square letters do not exist for the UTM zone"""


class MalformedUsngError(UsngError):
    """A USNG string does not match <zone><grid zone>[<grid square>][<digits>]"""


class OddDigitCountError(MalformedUsngError):
    """The trailing digits of a USNG string cannot be split into easting/northing"""


class GridZoneMismatchError(UsngError):
    """
    A decoded USNG coordinate does not fall inside the UTM zone or grid zone
    it was labeled with.
    """
