"""Helper types, constants and functions for Timecode handling."""

from __future__ import annotations

import re
import sys
from fractions import Fraction
from typing import NewType, TypedDict

if sys.version_info >= (3, 11):
    _frate_type = Fraction | str | float | int | tuple[int, int]
    _number_type = Fraction | float | int
else:
    from typing import Union
    _frate_type = Union[Fraction, str, float, int, tuple[int, int]]
    _number_type = Union[Fraction, float, int]

_Framerate = NewType("_Framerate", _frate_type)
_Number = NewType("_Number", _number_type)

HOURS_IN_ONE_DAY = 24
MINUTES_IN_ONE_HOUR = 60
SECONDS_IN_ONE_MINUTE = 60

# Any non-digit separates the fields, except "." and "," which introduce the
# fractional seconds of a timestamp.
TIMECODE_PATTERN = re.compile(
    r"^(\d{1,2})[^\d.,](\d{1,2})[^\d.,](\d{1,2})[^\d.,](\d{1,2})$"
)
STRICT_TIMECODE_PATTERN = re.compile(
    r"^\d{1,2}[:;]\d{1,2}[:;]\d{1,2}[:;]\d{1,2}$"
)
TIMESTAMP_PATTERN = re.compile(
    r"^(\d{1,2}):(\d{1,2}):(\d{1,2})(?:[.,](\d{1,3}))?$"
)


class TimecodeAttributes(TypedDict, total=False):
    """Field set accepted by and returned from a Timecode.

    Every key is optional when passed to the constructor, a missing key leaves
    the corresponding field untouched.
    """

    hours: int
    minutes: int
    seconds: int
    frames: int
    frame_rate: _Framerate


def _truncated_divmod(value: int, base: int) -> tuple[int, int]:
    """Divide rounding toward zero.

    Unlike the builtin :func:`divmod` the remainder carries the sign of
    ``value``, so ``-1`` split by ``60`` gives ``(0, -1)`` and the caller can
    borrow from the next field itself.

    Args:
        value (int): The dividend.
        base (int): A positive divisor.

    Returns:
        tuple: The truncated quotient and the remainder.
    """
    quotient = abs(value) // base
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * base


def is_valid_timecode_string(timecode: str) -> bool:
    """Check if the given string is a ``HH:MM:SS:FF`` or ``HH:MM:SS;FF`` timecode.

    Args:
        timecode (str): The string to check, each field can be 1 or 2 digits.

    Returns:
        bool: True if the string can be parsed as a timecode.
    """
    if not isinstance(timecode, str):
        return False
    return STRICT_TIMECODE_PATTERN.match(timecode.strip()) is not None


def exact_frame_rate(frame_rate: _Number) -> _Number:
    """Return the exact NTSC rate for a rounded one.

    23.98 -> 24000/1001, 29.97 -> 30000/1001 and 59.94 -> 60000/1001, every
    other rate is returned as is.

    Args:
        frame_rate (int | float | Fraction): A nominal or rounded frame rate.

    Returns:
        Fraction | float | int: The exact frame rate.
    """
    if 59 < frame_rate < 60:
        return Fraction(60000, 1001)
    if 29 < frame_rate < 30:
        return Fraction(30000, 1001)
    if 23 < frame_rate < 24:
        return Fraction(24000, 1001)
    return frame_rate
