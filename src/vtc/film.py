"""Film gauges and pulldowns used for feet+frames footage counts."""

from __future__ import annotations

import enum
import math
from typing import NamedTuple


#%%
class FilmFormat(enum.Enum):
    """Physical film format, described by its perforation geometry.

    Each member carries the number of perforations per frame and per foot.
    Every other footage quantity is derived from those two values.
    """

    FF35MM_4PERF = (4, 64)
    FF35MM_3PERF = (3, 64)
    FF35MM_2PERF = (2, 64)
    FF16MM = (1, 20)

    def __init__(self, perfs_per_frame: int, perfs_per_foot: int) -> None:
        self.perfs_per_frame = perfs_per_frame
        self.perfs_per_foot = perfs_per_foot

    @property
    def footage_modulus_perf_count(self) -> int:
        """Return the smallest perf count where a frame and a foot end together.

        Returns:
            int: e.g. 192 for 3-perf, 64 for 4-perf.
        """
        return math.lcm(self.perfs_per_frame, self.perfs_per_foot)

    @property
    def footage_modulus_frame_count(self) -> int:
        """Return the number of frames in one footage modulus.

        Returns:
            int: e.g. 64 for 3-perf, 16 for 4-perf.
        """
        return self.footage_modulus_perf_count // self.perfs_per_frame

    @property
    def footage_modulus_footage_count(self) -> int:
        """Return the number of feet in one footage modulus.

        Returns:
            int: 3 for 3-perf, 1 for every other format.
        """
        return self.footage_modulus_perf_count // self.perfs_per_foot

    @property
    def allows_perf_drift(self) -> bool:
        """Return True if frames can straddle a foot boundary.

        Returns:
            bool: True when a foot is not a whole number of frames.
        """
        return self.perfs_per_foot % self.perfs_per_frame != 0
####


class FeetFramesStr(NamedTuple):
    """A feet+frames string paired with the film format it was counted in.

    Pass one to :meth:`.Timecode.with_frames` to parse footage of a format
    that cannot be inferred from the string alone, e.g. 16mm.
    """

    text: str
    film_format: FilmFormat
