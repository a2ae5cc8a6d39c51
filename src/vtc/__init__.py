"""SMPTE timecode, framerate and footage value types."""

import logging

from . import rates
from .errors import (
    ConversionError,
    DropFrameError,
    DropFrameValueError,
    FramerateParseError,
    ImpreciseError,
    NegativeError,
    NtscError,
    TimecodeError,
    TimecodeParseError,
    UnknownStrFormatError,
)
from .film import FeetFramesStr, FilmFormat
from .framerate import Framerate, Ntsc
from .timecode import Timecode, TimecodeSections

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "DropFrameError",
    "DropFrameValueError",
    "FeetFramesStr",
    "FilmFormat",
    "Framerate",
    "FramerateParseError",
    "ImpreciseError",
    "NegativeError",
    "Ntsc",
    "NtscError",
    "Timecode",
    "TimecodeError",
    "TimecodeParseError",
    "TimecodeSections",
    "UnknownStrFormatError",
    "rates",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
