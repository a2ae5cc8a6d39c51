"""Tests for the string parsers (parsing.py) and section parsing (helpers.py)."""

from __future__ import annotations

import logging
from fractions import Fraction

import pytest

from vtc import rates
from vtc.errors import ConversionError, UnknownStrFormatError
from vtc.film import FeetFramesStr, FilmFormat
from vtc.helpers import parse_int
from vtc.parsing import parse_feet_and_frames, parse_frames_str, parse_runtime_str


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

class TestParseInt:
    @pytest.mark.parametrize(
        "value, expected",
        [("0", 0), ("07", 7), ("9223372036854775807", 2**63 - 1)],
    )
    def test_parse(self, value: str, expected: int) -> None:
        assert parse_int(value, "frames") == expected

    def test_out_of_range(self) -> None:
        with pytest.raises(ConversionError, match="error converting hours to i64"):
            parse_int("9223372036854775808", "hours")


# ---------------------------------------------------------------------------
# Frame-count strings
# ---------------------------------------------------------------------------

class TestParseFramesStr:
    def test_timecode(self) -> None:
        assert parse_frames_str("01:00:00:00", rates.F24) == 86400

    def test_feet_and_frames(self) -> None:
        assert parse_frames_str("5400+00", rates.F24) == 86400

    def test_perf_offset_selects_3perf(self) -> None:
        assert parse_frames_str("2+5.1", rates.F24) == 47
        assert parse_frames_str("2+5.2", rates.F24) == 47
        assert parse_frames_str("2+5", rates.F24) == 37

    def test_unknown(self) -> None:
        with pytest.raises(UnknownStrFormatError, match="frame-count"):
            parse_frames_str("x", rates.F24)

    def test_section_out_of_range(self) -> None:
        with pytest.raises(ConversionError, match="seconds to i64"):
            parse_frames_str("99999999999999999999999:00", rates.F24)

    def test_logs_format(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="vtc.parsing"):
            parse_frames_str("5400+00", rates.F24)
        assert "feet+frames" in caplog.text


class TestParseFeetAndFrames:
    @pytest.mark.parametrize(
        "text, film_format, expected",
        [
            ("91+08", FilmFormat.FF16MM, 1828),
            ("57+4", FilmFormat.FF35MM_2PERF, 1828),
            ("-114+04", FilmFormat.FF35MM_4PERF, -1828),
        ],
    )
    def test_parse(self, text: str, film_format: FilmFormat, expected: int) -> None:
        assert parse_feet_and_frames(FeetFramesStr(text, film_format)) == expected

    def test_unknown(self) -> None:
        with pytest.raises(UnknownStrFormatError, match="feet and frames"):
            parse_feet_and_frames(FeetFramesStr("01:00", FilmFormat.FF16MM))


# ---------------------------------------------------------------------------
# Runtime strings
# ---------------------------------------------------------------------------

class TestParseRuntimeStr:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("0", Fraction(0)),
            ("1.5", Fraction(3, 2)),
            ("01:00.06", Fraction(3003, 50)),
            ("1:00:00", Fraction(3600)),
            ("-2.25", Fraction(-9, 4)),
            ("0.000000000001", Fraction(1, 10**12)),
        ],
    )
    def test_parse(self, value: str, expected: Fraction) -> None:
        assert parse_runtime_str(value) == expected

    def test_unknown(self) -> None:
        with pytest.raises(UnknownStrFormatError, match="seconds"):
            parse_runtime_str("1:2:3:4")

    def test_total_out_of_range(self) -> None:
        with pytest.raises(ConversionError, match="seconds to i64"):
            parse_runtime_str("9223372036854775807:00:00")
