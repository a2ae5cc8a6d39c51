"""Helper constants and exact-arithmetic functions for Timecode handling."""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from fractions import Fraction
from typing import NewType

from .errors import ConversionError

if sys.version_info >= (3, 11):
    _frate_type = Fraction | str | int | float | tuple[int, int]
    _frames_type = int | str
    _seconds_type = Fraction | Decimal | str | int | float
    _ticks_type = int | str
else:
    from typing import Union
    _frate_type = Union[Fraction, str, int, float, tuple[int, int]]
    _frames_type = Union[int, str]
    _seconds_type = Union[Fraction, Decimal, str, int, float]
    _ticks_type = Union[int, str]

FramerateSource = NewType("FramerateSource", _frate_type)
FramesSource = NewType("FramesSource", _frames_type)
SecondsSource = NewType("SecondsSource", _seconds_type)
PremiereTicksSource = NewType("PremiereTicksSource", _ticks_type)

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * 60

# Adobe Premiere Pro breaks a second into this many ticks.
PREMIERE_TICKS_PER_SECOND = 254016000000

DEFAULT_RUNTIME_PRECISION = 9

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_HALF = Fraction(1, 2)


def round_half_away(value: Fraction | int) -> int:
    """Round a rational to the nearest integer, ties going away from zero.

    The builtin ``round()`` rounds ties to even, which would shift half-frame
    values in different directions depending on parity.

    Args:
        value (Fraction | int): The value to round.

    Returns:
        int: The rounded value.
    """
    if value < 0:
        return -math.floor(-value + _HALF)
    return math.floor(value + _HALF)


def check_int64(value: int, source_name: str) -> int:
    """Check that an integer fits in a signed 64-bit value.

    Args:
        value (int): The value to check.
        source_name (str): Describes the value for the error message.

    Raises:
        ConversionError: If the value is out of range.

    Returns:
        int: The value unchanged.
    """
    if not INT64_MIN <= value <= INT64_MAX:
        raise ConversionError(
            f"error converting {source_name} to i64: {value} is out of range"
        )
    return value


def float_to_fraction(value: float, source_name: str) -> Fraction:
    """Convert a float to its exact Fraction.

    Args:
        value (float): The float to convert.
        source_name (str): Describes the value for the error message.

    Raises:
        ConversionError: If the float is NaN or infinite.

    Returns:
        Fraction: The exact binary value of the float.
    """
    try:
        return Fraction(value)
    except (ValueError, OverflowError) as err:
        raise ConversionError(
            f"could not convert {source_name} float {value!r} to rational: {err}"
        ) from err


def parse_int(value: str, section_name: str) -> int:
    """Parse a string section of a timecode, runtime or footage as an int.

    Sections are matched as runs of digits before they get here, so the only
    failure left is a value outside the signed 64-bit range.

    Args:
        value (str): The section text.
        section_name (str): Name of the section, used in the error message.

    Raises:
        ConversionError: If the value does not fit in a signed 64-bit int.

    Returns:
        int: The parsed value.
    """
    return check_int64(int(value), section_name)
