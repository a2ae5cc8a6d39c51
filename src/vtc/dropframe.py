"""Drop-frame timecode adjustments.

Drop-frame timecode skips the frame numbers ``:00`` and ``:01`` (``:00`` to
``:03`` for 59.94) at the start of every minute except each tenth minute, so
the nominal clock keeps up with the real 29.97 fps playback. No frames are
actually dropped; only their numbers are.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import DropFrameValueError, TimecodeError
from .helpers import SECONDS_PER_MINUTE

if TYPE_CHECKING:
    from .framerate import Framerate


def _drop_frames(rate: Framerate) -> int:
    drop_frames = rate.drop_frames_per_minute
    if drop_frames is None:
        raise TimecodeError(f"{rate} is not a drop-frame rate")
    return drop_frames


def frame_num_to_drop_num(frame_number: int, rate: Framerate) -> int:
    """Convert a real frame number to the number drop-frame timecode shows.

    Args:
        frame_number (int): A non-negative frame count.
        rate (Framerate): A drop-frame rate.

    Raises:
        TimecodeError: If ``rate`` is not drop-frame.

    Returns:
        int: The frame number with skipped numbers added back in, ready to be
            split into hours, minutes, seconds and frames at the timebase.
    """
    drop_frames = _drop_frames(rate)

    # NTSC timebases are always whole-frame.
    ifps = int(rate.timebase)
    frames_per_minute = ifps * SECONDS_PER_MINUTE

    # Number of frames in a minute that starts with dropped numbers.
    frames_per_minute_drop = frames_per_minute - drop_frames

    # Nine dropping minutes, then one full one.
    frames_per_10_minutes = frames_per_minute_drop * 9 + frames_per_minute

    d, m = divmod(frame_number, frames_per_10_minutes)
    if m > drop_frames:
        frame_number += (drop_frames * 9 * d) + drop_frames * (
            (m - drop_frames) // frames_per_minute_drop
        )
    else:
        frame_number += drop_frames * 9 * d

    return frame_number


def drop_frame_adjustment(
    hours: int, minutes: int, seconds: int, frames: int, rate: Framerate
) -> int:
    """Return the frame adjustment for a parsed drop-frame timecode.

    Args:
        hours (int): The hours section.
        minutes (int): The minutes section.
        seconds (int): The seconds section.
        frames (int): The frames section.
        rate (Framerate): A drop-frame rate.

    Raises:
        DropFrameValueError: If the timecode names a frame number that
            drop-frame skips.
        TimecodeError: If ``rate`` is not drop-frame.

    Returns:
        int: A negative (or zero) count to add to the nominal frame number.
    """
    drop_frames = _drop_frames(rate)

    is_dropped_number = frames < drop_frames
    is_minute_boundary = seconds == 0
    is_tenth_minute = minutes % 10 == 0

    if is_dropped_number and is_minute_boundary and not is_tenth_minute:
        raise DropFrameValueError(
            "drop-frame tc cannot have a frames value of less than "
            f"{drop_frames} on minutes not divisible by 10, found '{frames}'"
        )

    total_minutes = 60 * hours + minutes
    return -(drop_frames * (total_minutes - (total_minutes // 10)))
