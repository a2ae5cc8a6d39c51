"""Parsers for timecode, feet+frames and runtime strings.

The patterns are compiled once at import and shared read-only by every call.
"""

from __future__ import annotations

import logging
import re
from fractions import Fraction
from typing import TYPE_CHECKING

from .dropframe import drop_frame_adjustment
from .errors import UnknownStrFormatError
from .film import FeetFramesStr, FilmFormat
from .framerate import Ntsc
from .helpers import (
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    check_int64,
    parse_int,
    round_half_away,
)

if TYPE_CHECKING:
    from .framerate import Framerate

logger = logging.getLogger(__name__)

TIMECODE_REGEX = re.compile(
    r"(?P<negative>-)?"
    r"((?P<section1>[0-9]+)[:;])?"
    r"((?P<section2>[0-9]+)[:;])?"
    r"((?P<section3>[0-9]+)[:;])?"
    r"(?P<frames>[0-9]+)"
)

FEET_AND_FRAMES_REGEX = re.compile(
    r"(?P<negative>-)?"
    r"(?P<feet>[0-9]+)\+(?P<frames>[0-9]+)"
    r"(\.(?P<perf_offset>[0-9]+))?"
)

RUNTIME_REGEX = re.compile(
    r"(?P<negative>-)?"
    r"((?P<section1>[0-9]+)[:;])?"
    r"((?P<section2>[0-9]+)[:;])?"
    r"(?P<seconds>[0-9]+(\.[0-9]+)?)"
)


def _present_sections(matched: re.Match, names: tuple[str, ...]) -> list[str]:
    return [
        section for section in (matched.group(name) for name in names)
        if section is not None
    ]


def parse_frames_str(value: str, rate: Framerate) -> int:
    """Parse a frame-count string: a timecode, or a feet+frames value.

    Timecodes may be partial (``"3:12"``, ``"04"``) and may carry over-range
    sections (``"00:00:62:04"``), which roll into the next unit.

    Args:
        value (str): The string to parse.
        rate (Framerate): The rate to count frames at.

    Raises:
        UnknownStrFormatError: If the string matches no known format.
        DropFrameValueError: If a drop-frame timecode names a skipped frame.
        ConversionError: If a section does not fit in a signed 64-bit int.

    Returns:
        int: The frame count.
    """
    if (matched := TIMECODE_REGEX.fullmatch(value)) is not None:
        logger.debug("parsing %r as timecode at %s", value, rate)
        return _parse_timecode(matched, rate)

    if (matched := FEET_AND_FRAMES_REGEX.fullmatch(value)) is not None:
        logger.debug("parsing %r as feet+frames", value)
        return _parse_feet_and_frames(matched, None)

    raise UnknownStrFormatError(
        f"{value} is not a known frame-count timecode format"
    )


def parse_feet_and_frames(value: FeetFramesStr) -> int:
    """Parse a feet+frames string counted in an explicit film format.

    Args:
        value (FeetFramesStr): The footage string and its film format.

    Raises:
        UnknownStrFormatError: If the string is not a feet+frames value.
        ConversionError: If a section does not fit in a signed 64-bit int.

    Returns:
        int: The frame count.
    """
    matched = FEET_AND_FRAMES_REGEX.fullmatch(value.text)
    if matched is None:
        raise UnknownStrFormatError(
            f"{value.text} is not a known feet and frames format"
        )
    return _parse_feet_and_frames(matched, value.film_format)


def parse_runtime_str(value: str) -> Fraction:
    """Parse a runtime string into exact seconds.

    Runtimes may be partial (``"1.5"``, ``"02:03.5"``). The fractional part of
    the seconds is parsed on its own so it keeps its full precision.

    Args:
        value (str): The string to parse.

    Raises:
        UnknownStrFormatError: If the string is not a runtime.
        ConversionError: If a section or the whole seconds do not fit in a
            signed 64-bit int.

    Returns:
        Fraction: The seconds, not yet rounded to any frame.
    """
    matched = RUNTIME_REGEX.fullmatch(value)
    if matched is None:
        raise UnknownStrFormatError(
            f"{value} is not a known seconds timecode format"
        )

    sections = _present_sections(matched, ("section1", "section2"))
    minutes = parse_int(sections.pop(), "minutes") if sections else 0
    hours = parse_int(sections.pop(), "hours") if sections else 0

    whole, _, fractal = matched.group("seconds").partition(".")
    seconds = parse_int(whole, "seconds")
    seconds += hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE
    check_int64(seconds, "seconds")

    result = seconds + Fraction(f"0.{fractal or '0'}")
    if matched.group("negative"):
        result = -result
    return result


def _parse_timecode(matched: re.Match, rate: Framerate) -> int:
    frames = parse_int(matched.group("frames"), "frames")

    # Fill in sections from seconds up to hours so partial values like '1:12'
    # are read as seconds and frames.
    sections = _present_sections(matched, ("section1", "section2", "section3"))
    seconds = parse_int(sections.pop(), "seconds") if sections else 0
    minutes = parse_int(sections.pop(), "minutes") if sections else 0
    hours = parse_int(sections.pop(), "hours") if sections else 0

    if rate.ntsc is Ntsc.DROP_FRAME:
        adjustment = drop_frame_adjustment(hours, minutes, seconds, frames, rate)
    else:
        adjustment = 0

    total_seconds = seconds + minutes * SECONDS_PER_MINUTE + hours * SECONDS_PER_HOUR
    frame_count = round_half_away(total_seconds * rate.timebase + frames)
    frame_count += adjustment

    if matched.group("negative"):
        frame_count = -frame_count
    return frame_count


def _parse_feet_and_frames(
    matched: re.Match, film_format: FilmFormat | None
) -> int:
    feet = parse_int(matched.group("feet"), "feet")
    frames = parse_int(matched.group("frames"), "frames")

    # A trailing perf offset only shows up in 3-perf footage. Otherwise we
    # fall back on 4-perf, the historical default. The offset value itself is
    # not read: "2+5.1" and "2+5.2" are both 47 frames, and 47 frames prints
    # back as "2+05.2".
    if film_format is None:
        if matched.group("perf_offset") is not None:
            film_format = FilmFormat.FF35MM_3PERF
        else:
            film_format = FilmFormat.FF35MM_4PERF

    # Feet start on the frame that ends inside them, so the first frame of a
    # foot is the floor of the foot's perf count in frames.
    frames += feet * film_format.perfs_per_foot // film_format.perfs_per_frame

    if matched.group("negative"):
        frames = -frames
    return frames
