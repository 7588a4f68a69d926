"""
Module for writing Extended Well-Known Text (EWKT) polygons
"""

__all__ = ['polygon_to_ewkt']

from typing import Sequence, Tuple

from usngtools.utils.functions import format_number


def polygon_to_ewkt(srid: int, ring: Sequence[Tuple[float, float]]) -> str:
    """
    Converts a linear ring (self-closing) into an EWKT polygon string,
    e.g. SRID=26915;POLYGON((0 0, 0 1, 1 1, 1 0, 0 0))

    Args:
        srid:
            The spatial reference id (EPSG code) of the coordinates

        ring:
            A closed sequence of (x, y) pairs

    Returns:
        str
    """
    coords = ', '.join(f'{format_number(x)} {format_number(y)}' for x, y in ring)
    return f'SRID={srid};POLYGON(({coords}))'
