"""Module for miscellaneous multi-use functions"""

__all__ = ['format_number', 'fractional_digits', 'zero_pad']

import math
from typing import Union


def format_number(value: Union[float, int]) -> str:
    """
    Stringifies a number for text output, dropping the trailing '.0' of
    integral floats.

    Args:
        value:
            The number to format

    Returns:
        str
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def fractional_digits(value: float, digits: int) -> str:
    """
    Returns the first `digits` decimal places of the fractional part of
    a (non-negative) value, e.g. fractional_digits(12.3456, 2) -> '34'

    Trailing digits are discarded rather than rounded, so a fraction of
    0.9999997 yields '99' for two digits.

    Args:
        value:
            A non-negative number

        digits:
            The number of decimal places to return

    Returns:
        str, of exactly `digits` characters
    """
    if digits <= 0:
        return ''

    return zero_pad(math.floor((value % 1) * 10 ** digits), digits)


def zero_pad(value: Union[str, int], length: int) -> str:
    """Stringifies a value and pads zeros to the prefix"""
    _ = str(value)
    return '0' * (length - len(_)) + _
