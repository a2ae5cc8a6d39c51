"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import math
import sys
from decimal import Decimal
from fractions import Fraction
from typing import NamedTuple

from .dropframe import frame_num_to_drop_num
from .errors import ConversionError, TimecodeError
from .film import FeetFramesStr, FilmFormat
from .framerate import Framerate, Ntsc
from .helpers import (
    DEFAULT_RUNTIME_PRECISION,
    PREMIERE_TICKS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    FramesSource,
    PremiereTicksSource,
    SecondsSource,
    check_int64,
    float_to_fraction,
    round_half_away,
)
from .parsing import parse_feet_and_frames, parse_frames_str, parse_runtime_str

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


#%%
class TimecodeSections(NamedTuple):
    """The sections of a timecode, as shown in its string.

    Always positive values, the sign lives in ``negative``.
    """

    negative: bool
    hours: int
    minutes: int
    seconds: int
    frames: int
####


#%%
class Timecode:
    """The main timecode class.

    Holds the exact real-world seconds since zero and the Framerate they are
    counted at. Every other representation (frame count, timecode string,
    runtime, Premiere ticks, feet+frames) is derived from those two values
    when requested.

    Timecode values are immutable: every operation returns a new instance.
    Use :meth:`.with_frames`, :meth:`.with_seconds` or
    :meth:`.with_premiere_ticks` to parse external values.

    Args:
        seconds (Fraction | int): Exact seconds since zero. Rounded to the
            nearest whole frame of ``rate``.
        rate (Framerate): The framerate of the Timecode instance.
    """

    __slots__ = ("_seconds", "_rate")

    def __init__(self, seconds: Fraction | int, rate: Framerate) -> None:
        frames = round_half_away(Fraction(seconds) * rate.playback)
        self._seconds = frames / rate.playback
        self._rate = rate

    @classmethod
    def with_frames(cls, frames: FramesSource | FeetFramesStr, rate: Framerate) -> Self:
        """Create a Timecode from a frame count.

        Args:
            frames (FramesSource | FeetFramesStr): An int frame count, a
                timecode string like ``"01:00:00:00"`` or ``"3:12"``, a
                feet+frames string like ``"5400+00"`` (4-perf) or ``"2+5.1"``
                (3-perf), or a :class:`.FeetFramesStr` for other formats.
            rate (Framerate): The framerate of the Timecode.

        Raises:
            TimecodeParseError: If the source cannot be parsed.
            ConversionError: If the frame count does not fit in a signed
                64-bit int.
            TypeError: If the source type is not supported.

        Returns:
            Timecode: The new Timecode.
        """
        if isinstance(frames, FeetFramesStr):
            frame_count = parse_feet_and_frames(frames)
        elif isinstance(frames, str):
            frame_count = parse_frames_str(frames, rate)
        elif isinstance(frames, int) and not isinstance(frames, bool):
            frame_count = frames
        else:
            raise TypeError(
                f"{cls.__name__}.with_frames cannot parse a "
                f"{frames.__class__.__name__}"
            )
        return cls._from_frames(check_int64(frame_count, "frames"), rate)

    @classmethod
    def with_seconds(cls, seconds: SecondsSource, rate: Framerate) -> Self:
        """Create a Timecode from real-world seconds.

        Args:
            seconds (SecondsSource): A Fraction, int, float or Decimal count of
                seconds, or a runtime string like ``"01:00:03.6"`` or
                ``"1.5"``.
            rate (Framerate): The framerate of the Timecode.

        Raises:
            TimecodeParseError: If the source cannot be parsed.
            ConversionError: If a runtime string does not fit in a signed
                64-bit int of seconds, or a number cannot be made exact.
            TypeError: If the source type is not supported.

        Returns:
            Timecode: The new Timecode, rounded to the nearest frame.
        """
        if isinstance(seconds, str):
            seconds_rat = parse_runtime_str(seconds)
        elif isinstance(seconds, float):
            seconds_rat = float_to_fraction(seconds, "seconds")
        elif isinstance(seconds, Decimal):
            if not seconds.is_finite():
                raise ConversionError(
                    f"could not convert seconds {seconds} to rational"
                )
            seconds_rat = Fraction(seconds)
        elif isinstance(seconds, (Fraction, int)) and not isinstance(seconds, bool):
            seconds_rat = Fraction(seconds)
        else:
            raise TypeError(
                f"{cls.__name__}.with_seconds cannot parse a "
                f"{seconds.__class__.__name__}"
            )
        return cls(seconds_rat, rate)

    @classmethod
    def with_premiere_ticks(cls, ticks: PremiereTicksSource, rate: Framerate) -> Self:
        """Create a Timecode from Adobe Premiere Pro ticks.

        There are 254,016,000,000 ticks in a second.

        Args:
            ticks (PremiereTicksSource): An int tick count, or a string holding
                one.
            rate (Framerate): The framerate of the Timecode.

        Raises:
            ConversionError: If the tick count is not a 64-bit integer.
            TypeError: If the source type is not supported.

        Returns:
            Timecode: The new Timecode, rounded to the nearest frame.
        """
        if isinstance(ticks, str):
            try:
                ticks = int(ticks.strip())
            except ValueError as err:
                raise ConversionError(
                    f"could not parse '{ticks}' as a premiere tick count"
                ) from err
        elif not isinstance(ticks, int) or isinstance(ticks, bool):
            raise TypeError(
                f"{cls.__name__}.with_premiere_ticks cannot parse a "
                f"{ticks.__class__.__name__}"
            )
        tick_count = check_int64(ticks, "premiere ticks")
        return cls(Fraction(tick_count, PREMIERE_TICKS_PER_SECOND), rate)

    @classmethod
    def _from_frames(cls, frame_count: int, rate: Framerate) -> Self:
        return cls(frame_count / rate.playback, rate)

    @property
    def rate(self) -> Framerate:
        """Return the Framerate of this Timecode.

        Returns:
            Framerate: The framerate.
        """
        return self._rate

    @property
    def seconds(self) -> Fraction:
        """Return the exact real-world seconds since zero.

        Returns:
            Fraction: The seconds, always on a frame boundary.
        """
        return self._seconds

    @property
    def frames(self) -> int:
        """Return the number of frames this Timecode represents.

        Returns:
            int: The frame count, negative for negative timecodes.
        """
        rational_frames = self._seconds * self._rate.playback
        if rational_frames.denominator == 1:
            return rational_frames.numerator
        return round_half_away(rational_frames)

    @property
    def sections(self) -> TimecodeSections:
        """Return the hours, minutes, seconds and frames of the timecode.

        Drop-frame rates return the drop-frame numbering, which skips frame
        numbers at most minute boundaries.

        Returns:
            TimecodeSections: The sections, all positive.
        """
        # Work on the absolute frame count so floor division behaves the same
        # for negative values.
        frames = Fraction(abs(self.frames))
        timebase = self._rate.timebase

        if self._rate.ntsc is Ntsc.DROP_FRAME:
            frames = Fraction(frame_num_to_drop_num(int(frames), self._rate))

        frames_per_minute = timebase * SECONDS_PER_MINUTE
        frames_per_hour = timebase * SECONDS_PER_HOUR

        hours, frames = divmod(frames, frames_per_hour)
        minutes, frames = divmod(frames, frames_per_minute)
        seconds, frames = divmod(frames, timebase)

        return TimecodeSections(
            negative=self._seconds < 0,
            hours=int(hours),
            minutes=int(minutes),
            seconds=int(seconds),
            frames=round_half_away(frames),
        )

    @property
    def frame_delimiter(self) -> str:
        """Return correct frame deliminator symbol based on the framerate.

        Returns:
            str: ";" if this is a drop frame timecode, ":" in any other case.
        """
        if self._rate.ntsc is Ntsc.DROP_FRAME:
            return ";"
        return ":"

    @property
    def timecode(self) -> str:
        """Return the SMPTE timecode string.

        Returns:
            str: e.g. ``"01:00:00:00"``, ``"00:08:20;16"`` for drop-frame, or
                ``"-00:00:02:00"``.
        """
        negative, hrs, mins, secs, frs = self.sections
        sign = "-" if negative else ""
        return (
            f"{sign}{hrs:02d}:{mins:02d}:{secs:02d}"
            f"{self.frame_delimiter}{frs:02d}"
        )

    def runtime(self, precision: int = DEFAULT_RUNTIME_PRECISION) -> str:
        """Return the true runtime as a ``HH:MM:SS.fff`` string.

        The runtime is built from the real seconds, not the timecode clock, so
        for NTSC rates it runs ahead of :attr:`.timecode`.

        Args:
            precision (int): Maximum number of decimal places. Trailing zeros
                are trimmed, a whole second is shown as ``.0``.

        Returns:
            str: e.g. ``"01:00:03.6"`` for ``01:00:00:00`` at 23.98.
        """
        if precision < 0:
            raise ValueError(f"precision cannot be negative, got {precision}")

        scale = 10**precision
        scaled = round_half_away(abs(self._seconds) * scale)
        whole_seconds, fract_digits = divmod(scaled, scale)

        hours, whole_seconds = divmod(whole_seconds, SECONDS_PER_HOUR)
        minutes, whole_seconds = divmod(whole_seconds, SECONDS_PER_MINUTE)

        if fract_digits == 0:
            fract_str = ".0"
        else:
            fract_str = "." + f"{fract_digits:0{precision}d}".rstrip("0")

        sign = "-" if self._seconds < 0 else ""
        return f"{sign}{hours:02d}:{minutes:02d}:{whole_seconds:02d}{fract_str}"

    @property
    def premiere_ticks(self) -> int:
        """Return the Adobe Premiere Pro tick count.

        Returns:
            int: The ticks, 254,016,000,000 per second.
        """
        return round_half_away(self._seconds * PREMIERE_TICKS_PER_SECOND)

    def feet_and_frames(self, film_format: FilmFormat = FilmFormat.FF35MM_4PERF) -> str:
        """Return the footage count as a feet+frames string.

        A frame counts towards the foot it ends in. For formats where frames
        straddle foot boundaries (3-perf) a ``.N`` suffix gives the position of
        the foot within the footage modulus.

        Args:
            film_format (FilmFormat): The film format to count footage in.

        Returns:
            str: e.g. ``"5400+00"`` (4-perf) or ``"4050+00.0"`` (3-perf).
        """
        perfs_per_frame = film_format.perfs_per_frame
        total_perfs = abs(self.frames) * perfs_per_frame

        feet, perfs = divmod(
            total_perfs + perfs_per_frame - 1, film_format.perfs_per_foot
        )
        frames = perfs // perfs_per_frame

        sign = "-" if self._seconds < 0 else ""
        footage = f"{sign}{feet}+{frames:02d}"
        if film_format.allows_perf_drift:
            footage += f".{feet % film_format.footage_modulus_footage_count}"
        return footage

    def rebase(self, rate: Framerate) -> Self:
        """Return the same frame count at another framerate.

        Args:
            rate (Framerate): The new framerate.

        Returns:
            Timecode: A Timecode with the same frames but a new duration.
        """
        return self._from_frames(self.frames, rate)

    def add(self, other: Timecode) -> Self:
        """Add another Timecode to this one.

        Args:
            other (Timecode): The Timecode to add. Its rate does not matter,
                the seconds are added and the result keeps this rate.

        Raises:
            TimecodeError: If the other is not a Timecode.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        if not isinstance(other, Timecode):
            raise TimecodeError(
                f"Type {other.__class__.__name__} not supported for arithmetic."
            )
        return self.__class__(self._seconds + other._seconds, self._rate)

    def subtract(self, other: Timecode) -> Self:
        """Subtract another Timecode from this one.

        Args:
            other (Timecode): The Timecode to subtract.

        Raises:
            TimecodeError: If the other is not a Timecode.

        Returns:
            Timecode: The resultant Timecode instance, may be negative.
        """
        if not isinstance(other, Timecode):
            raise TimecodeError(
                f"Type {other.__class__.__name__} not supported for arithmetic."
            )
        return self.__class__(self._seconds - other._seconds, self._rate)

    def scale(self, multiplier: int | float | Fraction) -> Self:
        """Multiply the frame count, rounding to the nearest frame.

        Args:
            multiplier (int | float | Fraction): The multiplier.

        Raises:
            TimecodeError: If the multiplier is not a number.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        factor = _scalar(multiplier)
        return self._from_frames(round_half_away(self.frames * factor), self._rate)

    def divide_floor(self, divisor: int | float | Fraction) -> Self:
        """Divide the frame count, flooring to a whole frame.

        Args:
            divisor (int | float | Fraction): The divisor.

        Raises:
            TimecodeError: If the divisor is not a number.
            ZeroDivisionError: If the divisor is zero.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        factor = _scalar(divisor)
        return self._from_frames(math.floor(self.frames / factor), self._rate)

    def remainder(self, divisor: int | float | Fraction) -> Self:
        """Return the frames left over by :meth:`.divide_floor`.

        ``tc.divide_floor(n).scale(n) + tc.remainder(n)`` always has the same
        frame count as ``tc``.

        Args:
            divisor (int | float | Fraction): The divisor.

        Raises:
            TimecodeError: If the divisor is not a number.
            ZeroDivisionError: If the divisor is zero.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        factor = _scalar(divisor)
        frames = self.frames
        quotient = math.floor(frames / factor)
        return self._from_frames(
            frames - round_half_away(quotient * factor), self._rate
        )

    def negate(self) -> Self:
        """Return this Timecode with its sign flipped.

        Returns:
            Timecode: The negated Timecode.
        """
        return self.__class__(-self._seconds, self._rate)

    def abs(self) -> Self:
        """Return this Timecode without its sign.

        Returns:
            Timecode: The absolute Timecode.
        """
        return self.__class__(abs(self._seconds), self._rate)

    def __eq__(self, other: object) -> bool:
        """Compare the real-world seconds of two timecodes.

        Timecodes at different rates are equal if they land at the same time.
        """
        if not isinstance(other, Timecode):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timecode):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Timecode):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Timecode):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Timecode):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __add__(self, other: object) -> Timecode:
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Timecode:
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Timecode:
        if not _is_scalar(other):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Timecode:
        if not _is_scalar(other):
            return NotImplemented
        return self.divide_floor(other)

    __floordiv__ = __truediv__

    def __mod__(self, other: object) -> Timecode:
        if not _is_scalar(other):
            return NotImplemented
        return self.remainder(other)

    def __divmod__(self, other: object) -> tuple[Timecode, Timecode]:
        if not _is_scalar(other):
            return NotImplemented
        return self.divide_floor(other), self.remainder(other)

    def __neg__(self) -> Timecode:
        return self.negate()

    def __pos__(self) -> Timecode:
        return self

    def __abs__(self) -> Timecode:
        return self.abs()

    def __float__(self) -> float:
        """Convert this Timecode instance to a float representation (seconds).

        Returns:
            float: The float representation (seconds).
        """
        return float(self._seconds)

    def __str__(self) -> str:
        """Return the actual Timecode as a string.

        Returns:
            str: The string of this Timecode.
        """
        return self.timecode

    def __repr__(self) -> str:
        return f"{__class__.__name__}('{self.timecode} @ {self._rate}')"
####


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float, Fraction)) and not isinstance(value, bool)


def _scalar(value: int | float | Fraction) -> Fraction:
    if not _is_scalar(value):
        raise TimecodeError(
            f"Type {value.__class__.__name__} not supported for arithmetic."
        )
    if isinstance(value, float):
        return float_to_fraction(value, "scalar")
    return Fraction(value)
