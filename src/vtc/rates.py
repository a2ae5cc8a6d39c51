"""Common framerates seen in the wild.

The playback values are exact, do not rebuild them from floats.
"""

from __future__ import annotations

from fractions import Fraction

from .framerate import Framerate, Ntsc

F23_98 = Framerate(Fraction(24000, 1001), Ntsc.NON_DROP_FRAME)
F24 = Framerate(Fraction(24, 1), Ntsc.NONE)
F29_97_NDF = Framerate(Fraction(30000, 1001), Ntsc.NON_DROP_FRAME)
F29_97_DF = Framerate(Fraction(30000, 1001), Ntsc.DROP_FRAME)
F30 = Framerate(Fraction(30, 1), Ntsc.NONE)
F47_95 = Framerate(Fraction(48000, 1001), Ntsc.NON_DROP_FRAME)
F48 = Framerate(Fraction(48, 1), Ntsc.NONE)
F59_94_NDF = Framerate(Fraction(60000, 1001), Ntsc.NON_DROP_FRAME)
F59_94_DF = Framerate(Fraction(60000, 1001), Ntsc.DROP_FRAME)
F60 = Framerate(Fraction(60, 1), Ntsc.NONE)
