"""Framerate class for handling playback and timebase rates."""

from __future__ import annotations

import enum
import logging
import sys
from fractions import Fraction

from .errors import (
    ConversionError,
    DropFrameError,
    ImpreciseError,
    NegativeError,
    NtscError,
)
from .helpers import FramerateSource, check_int64, float_to_fraction, round_half_away

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

_NTSC_FACTOR = Fraction(1000, 1001)

DROP_DIVISOR_PLAYBACK = Fraction(30000, 1001)
DROP_DIVISOR_TIMEBASE = Fraction(30, 1)


#%%
class Ntsc(enum.Enum):
    """The NTSC standard a Framerate adheres to."""

    NONE = "none"
    NON_DROP_FRAME = "non_drop_frame"
    DROP_FRAME = "drop_frame"

    @property
    def is_ntsc(self) -> bool:
        """Return True for both NTSC variants.

        Returns:
            bool: False only for :attr:`Ntsc.NONE`.
        """
        return self is not Ntsc.NONE

    def __str__(self) -> str:
        if self is Ntsc.NON_DROP_FRAME:
            return "NTSC NDF"
        if self is Ntsc.DROP_FRAME:
            return "NTSC DF"
        return ""
####


#%%
class Framerate:
    """The rate at which a video file's frames are played back.

    A Framerate carries the real-world ``playback`` speed as an exact
    fraction, and the ``ntsc`` standard it follows. For NTSC rates the
    ``timebase`` used by timecode arithmetic is the playback speed rounded to
    the nearest whole frame, e.g. ``24000/1001`` plays back at 23.976 fps but
    counts timecode at 24.

    Do not call the constructor directly with user values, use
    :meth:`.with_playback` or :meth:`.with_timebase` which validate their
    input.

    Args:
        playback (Fraction): Frames per second of real-world playback.
        ntsc (Ntsc): The NTSC standard of this rate.
    """

    __slots__ = ("_playback", "_ntsc")

    def __init__(self, playback: Fraction, ntsc: Ntsc = Ntsc.NONE) -> None:
        self._playback = Fraction(playback)
        self._ntsc = ntsc

    @classmethod
    def with_playback(
        cls, rate: FramerateSource, ntsc: Ntsc = Ntsc.NONE
    ) -> Self:
        """Create a Framerate from a real-world playback speed.

        Floats are only accepted for NTSC rates, and are rounded to the nearest
        valid NTSC playback speed, so ``23.98`` and ``23.5`` both become
        ``24000/1001``. Strings may hold a ``"n/d"`` rational, an int or a
        float. Tuples must hold two ints.

        Zero is refused along with negative rates, since a zero rate cannot
        place any frame in time.

        Args:
            rate (FramerateSource): Frames per second of playback.
            ntsc (Ntsc): The NTSC standard this value should be parsed as.

        Raises:
            FramerateParseError: If the value is not a legal rate for ``ntsc``.

        Returns:
            Framerate: The new Framerate.
        """
        return cls(_to_playback(rate, ntsc, is_timebase=False), ntsc)

    @classmethod
    def with_timebase(
        cls, base: FramerateSource, ntsc: Ntsc = Ntsc.NONE
    ) -> Self:
        """Create a Framerate from a timecode timebase.

        For NTSC rates the timebase must be a whole number, and the playback
        speed becomes ``timebase * 1000/1001``. As with playback speeds, zero
        and negative timebases are refused.

        Args:
            base (FramerateSource): Frames per second of the timecode clock.
            ntsc (Ntsc): The NTSC standard this value should be parsed as.

        Raises:
            FramerateParseError: If the value is not a legal timebase for
                ``ntsc``.

        Returns:
            Framerate: The new Framerate.
        """
        return cls(_to_playback(base, ntsc, is_timebase=True), ntsc)

    @property
    def playback(self) -> Fraction:
        """Return the real-world playback speed in frames per second.

        Returns:
            Fraction: The playback speed.
        """
        return self._playback

    @property
    def timebase(self) -> Fraction:
        """Return the rate timecode is counted at.

        Returns:
            Fraction: The playback speed rounded to the nearest whole frame
                for NTSC rates, the playback speed otherwise.
        """
        if self._ntsc.is_ntsc:
            return Fraction(round_half_away(self._playback))
        return self._playback

    @property
    def ntsc(self) -> Ntsc:
        """Return the NTSC standard of this Framerate.

        Returns:
            Ntsc: The NTSC standard.
        """
        return self._ntsc

    @property
    def drop_frames_per_minute(self) -> int | None:
        """Return the number of frame numbers skipped each drop-minute.

        Returns:
            int | None: 2 for 29.97 DF, 4 for 59.94 DF, None for non
                drop-frame rates.
        """
        if self._ntsc is not Ntsc.DROP_FRAME:
            return None
        # Number of drop frames is 6% of framerate rounded to nearest integer
        return round_half_away(
            Fraction(float(self.timebase) * 0.066666)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Framerate):
            return NotImplemented
        return self._playback == other._playback and self._ntsc is other._ntsc

    def __hash__(self) -> int:
        return hash((self._playback, self._ntsc))

    def __str__(self) -> str:
        """Return the display string of this Framerate.

        Returns:
            str: e.g. ``[23.98 NTSC NDF]`` or ``[24]``.
        """
        value_str = f"{float(self._playback):.2f}".rstrip("0").rstrip(".")
        if self._ntsc.is_ntsc:
            return f"[{value_str} {self._ntsc}]"
        return f"[{value_str}]"

    def __repr__(self) -> str:
        return (
            f"{__class__.__name__}('{self._playback}', "
            f"ntsc={self._ntsc.__class__.__name__}.{self._ntsc.name})"
        )
####


def _to_playback(source: FramerateSource, ntsc: Ntsc, is_timebase: bool) -> Fraction:
    """Convert a framerate source to a validated playback Fraction.

    Args:
        source (FramerateSource): The value to convert.
        ntsc (Ntsc): The NTSC standard the value should be parsed as.
        is_timebase (bool): True if ``source`` is a timebase rather than a
            playback speed.

    Returns:
        Fraction: The playback speed.
    """
    if isinstance(source, bool):
        raise TypeError(
            f"cannot parse a framerate from a {source.__class__.__name__}"
        )

    if isinstance(source, str):
        return _str_to_playback(source, ntsc, is_timebase)

    if isinstance(source, float):
        return _float_to_playback(source, ntsc, is_timebase)

    if isinstance(source, int):
        value = Fraction(check_int64(source, "framerate"))
    elif isinstance(source, Fraction):
        value = source
    elif isinstance(source, (tuple, list)):
        if not all(
            isinstance(part, int) and not isinstance(part, bool) for part in source
        ):
            raise ConversionError(
                f"could not parse {source!r} as a (numerator, denominator) "
                "framerate: both parts must be ints"
            )
        try:
            value = Fraction(*source)
        except (TypeError, ZeroDivisionError) as err:
            raise ConversionError(
                f"could not parse {source!r} as a (numerator, denominator) "
                f"framerate: {err}"
            ) from err
    else:
        raise TypeError(
            f"cannot parse a framerate from a {source.__class__.__name__}"
        )

    _validate(value, ntsc, is_timebase)
    if is_timebase and ntsc.is_ntsc:
        return round_half_away(value) * _NTSC_FACTOR
    return value


def _float_to_playback(source: float, ntsc: Ntsc, is_timebase: bool) -> Fraction:
    if not ntsc.is_ntsc:
        raise ImpreciseError(
            "float values cannot be parsed for non-NTSC Framerates due to "
            "imprecision"
        )
    value = float_to_fraction(source, "framerate")

    # Coerce NTSC playback speeds to the nearest legal n/1001 value.
    if not is_timebase:
        coerced = round_half_away(value) * _NTSC_FACTOR
        logger.debug("coerced float framerate %r to %s", source, coerced)
        value = coerced
    return _to_playback(value, ntsc, is_timebase)


def _str_to_playback(source: str, ntsc: Ntsc, is_timebase: bool) -> Fraction:
    text = source.strip()
    if "/" in text:
        try:
            parsed = Fraction(text)
        except (ValueError, ZeroDivisionError) as err:
            raise ConversionError(
                f"could not parse '{source}' as rational, int, or float for "
                "framerate"
            ) from err
        return _to_playback(parsed, ntsc, is_timebase)

    try:
        as_int = int(text)
    except ValueError:
        pass
    else:
        return _to_playback(as_int, ntsc, is_timebase)

    try:
        as_float = float(text)
    except ValueError as err:
        raise ConversionError(
            f"could not parse '{source}' as rational, int, or float for "
            "framerate"
        ) from err
    return _to_playback(as_float, ntsc, is_timebase)


def _validate(value: Fraction, ntsc: Ntsc, is_timebase: bool) -> None:
    """Check a rate against the negative, NTSC and drop-frame rules.

    Raises:
        NegativeError: If the value is negative or zero. Zero is not
            negative, but a zero rate has no frames so it is refused too.
        NtscError: If an NTSC value is not n/1001 (playback) or whole
            (timebase).
        DropFrameError: If a drop-frame value is not a multiple of 29.97.
    """
    if value <= 0:
        raise NegativeError("framerates cannot be negative or zero")

    if not ntsc.is_ntsc:
        return

    if is_timebase:
        if value.denominator != 1:
            raise NtscError("ntsc timebases must be whole numbers")
    elif value.denominator != 1001:
        raise NtscError("ntsc framerates must be n/1001")

    if ntsc is not Ntsc.DROP_FRAME:
        return

    drop_divisor = DROP_DIVISOR_TIMEBASE if is_timebase else DROP_DIVISOR_PLAYBACK
    if value % drop_divisor != 0:
        rate_type = "timebase" if is_timebase else "playback"
        raise DropFrameError(
            f"dropframe must have {rate_type} divisible by {drop_divisor} "
            "(multiple of 29.97)"
        )
