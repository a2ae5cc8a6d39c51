"""Exceptions raised while parsing framerates and timecodes.

Hierarchy
---------
TimecodeError
├── FramerateParseError
│   ├── NtscError
│   ├── DropFrameError
│   ├── NegativeError
│   └── ImpreciseError
├── TimecodeParseError
│   ├── UnknownStrFormatError
│   └── DropFrameValueError
└── ConversionError (both a FramerateParseError and a TimecodeParseError)
"""

from __future__ import annotations


class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


#%%
class FramerateParseError(TimecodeError, ValueError):
    """Raised by :meth:`.Framerate.with_playback` and
    :meth:`.Framerate.with_timebase` when a value cannot become a Framerate.
    """


class NtscError(FramerateParseError):
    """Raised when a bad NTSC playback or timebase rate is given."""


class DropFrameError(FramerateParseError):
    """Raised when a bad drop-frame playback or timebase rate is given."""


class NegativeError(FramerateParseError):
    """Raised when a negative (or zero) value is given for a Framerate."""


class ImpreciseError(FramerateParseError):
    """Raised when a float is given for a non-NTSC Framerate.

    NTSC values have known denominators they must adhere to, and therefore can
    be coerced from imprecise values. No such coercion can be done for
    non-NTSC values.
    """
####


#%%
class TimecodeParseError(TimecodeError, ValueError):
    """Raised when a source value cannot be converted to a Timecode."""


class UnknownStrFormatError(TimecodeParseError):
    """Raised when a string matches none of the known formats."""


class DropFrameValueError(TimecodeParseError):
    """Raised when a drop-frame timecode names a frame that drop-frame skips.

    For 29.97 DF, frames ``:00`` and ``:01`` do not exist on the first second
    of any minute not divisible by 10, so ``"00:01:00;00"`` is illegal.
    """


class ConversionError(FramerateParseError, TimecodeParseError):
    """Raised when a numeric conversion fails.

    For instance an integer that does not fit in a signed 64-bit value, or a
    float that is NaN or infinite.
    """
####
