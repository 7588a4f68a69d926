
from usngtools._version import __version__  # noqa: F401
from usngtools.utils.logging import LOGGER
from usngtools.coordinates import GeodeticPoint
from usngtools.exceptions import (
    GridZoneMismatchError, InvalidCoordinateError, InvalidGridSquareError,
    LatitudeOutOfRangeError, MalformedUsngError, OddDigitCountError, UsngError
)
from usngtools.utm import UtmPoint, project, unproject
from usngtools.usng import UsngCoordinate


__all__ = [
    'GeodeticPoint',
    'GridZoneMismatchError',
    'InvalidCoordinateError',
    'InvalidGridSquareError',
    'LatitudeOutOfRangeError',
    'MalformedUsngError',
    'OddDigitCountError',
    'UsngCoordinate',
    'UsngError',
    'UtmPoint',
    'project',
    'unproject',
    'LOGGER',
]
