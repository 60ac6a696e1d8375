"""Tests for ukcoords.parser module."""

import pytest

from ukcoords.exceptions import PARSE_ERROR_MESSAGE, ParseError
from ukcoords.formatter import (
    to_degrees_decimal_minutes,
    to_degrees_minutes_seconds,
)
from ukcoords.models import GeoPoint, Notation
from ukcoords.parser import detect_notation, parse_coordinate_text

FORMAT_EXAMPLES = [
    '"SX 41815 48338"',
    '"50.313611, -4.223056"',
    '"50 18.817N, 4 13.383W"',
    '"50° 18\' 49"N, 4° 13\' 23"W"',
]


class TestDetectNotation:
    @pytest.mark.parametrize(
        ("text", "notation"),
        [
            ("SX 41815 48338", Notation.BNG),
            ("sx4181548338", Notation.BNG),
            ("SX 4181, 4833", Notation.BNG),
            ("50.313611, -4.223056", Notation.DD),
            ("50.3 -4.2", Notation.DD),
            ("50 18.817N, 4 13.383W", Notation.DDM),
            ("50° 18' 49\"N, 4° 13' 23\"W", Notation.DMS),
        ],
    )
    def test_detects(self, text: str, notation: Notation):
        assert detect_notation(text) is notation

    @pytest.mark.parametrize("text", ["", "hello", "50N 4W", "SX"])
    def test_unrecognised(self, text: str):
        assert detect_notation(text) is None


class TestDecimalDegrees:
    def test_exact_values(self):
        assert parse_coordinate_text("50.313611, -4.223056") == GeoPoint(
            50.313611, -4.223056
        )

    def test_whitespace_separated(self):
        assert parse_coordinate_text("  51.5 -0.12  ") == GeoPoint(51.5, -0.12)

    def test_integers(self):
        assert parse_coordinate_text("50, 4") == GeoPoint(50.0, 4.0)

    @pytest.mark.parametrize("text", ["91.0, 0.0", "-90.5, 10", "10, 181"])
    def test_out_of_range(self, text: str):
        with pytest.raises(ParseError) as exc_info:
            parse_coordinate_text(text)
        assert "out of valid range" in exc_info.value.reason
        assert str(exc_info.value) == PARSE_ERROR_MESSAGE


class TestDegreesDecimalMinutes:
    def test_parse(self):
        point = parse_coordinate_text("50 18.817N, 4 13.383W")
        assert point.latitude == pytest.approx(50 + 18.817 / 60)
        assert point.longitude == pytest.approx(-(4 + 13.383 / 60))

    def test_lowercase_and_south_east(self):
        point = parse_coordinate_text("33 51.5s 151 12.5e")
        assert point.latitude == pytest.approx(-(33 + 51.5 / 60))
        assert point.longitude == pytest.approx(151 + 12.5 / 60)

    def test_formatter_output_parses_back(self, plymouth: GeoPoint):
        text = (
            f"{to_degrees_decimal_minutes(plymouth.latitude, True)}, "
            f"{to_degrees_decimal_minutes(plymouth.longitude, False)}"
        )
        point = parse_coordinate_text(text)
        assert point.latitude == pytest.approx(plymouth.latitude, abs=2e-5)
        assert point.longitude == pytest.approx(plymouth.longitude, abs=2e-5)

    def test_out_of_range(self):
        with pytest.raises(ParseError):
            parse_coordinate_text("95 10.0N, 4 10.0W")


class TestDegreesMinutesSeconds:
    def test_parse(self):
        point = parse_coordinate_text("50° 18' 49\"N, 4° 13' 23\"W")
        assert point.latitude == pytest.approx(50 + 18 / 60 + 49 / 3600)
        assert point.longitude == pytest.approx(-(4 + 13 / 60 + 23 / 3600))

    def test_without_seconds_mark(self):
        point = parse_coordinate_text("50°18'49.5N 4°13'23.5W")
        assert point.latitude == pytest.approx(50 + 18 / 60 + 49.5 / 3600)

    def test_formatter_output_parses_back(self, plymouth: GeoPoint):
        text = (
            f"{to_degrees_minutes_seconds(plymouth.latitude, True)}, "
            f"{to_degrees_minutes_seconds(plymouth.longitude, False)}"
        )
        point = parse_coordinate_text(text)
        assert point.latitude == pytest.approx(plymouth.latitude, abs=2e-5)
        assert point.longitude == pytest.approx(plymouth.longitude, abs=2e-5)


class TestGridReference:
    def test_parse(self):
        point = parse_coordinate_text("SX 41815 48338")
        assert point.latitude == pytest.approx(50.31, abs=0.01)
        assert point.longitude == pytest.approx(-4.22, abs=0.01)

    @pytest.mark.parametrize(
        "text",
        ["SX4181548338", "sx 41815 48338", "SX 41815, 48338", " SX 41815  48338 "],
    )
    def test_equivalent_spellings(self, text: str):
        assert parse_coordinate_text(text) == parse_coordinate_text(
            "SX 41815 48338"
        )

    @pytest.mark.parametrize("text", ["SX 4181 4833", "SX41814833"])
    def test_short_groups_right_padded(self, text: str):
        assert parse_coordinate_text(text) == parse_coordinate_text(
            "SX 41810 48330"
        )

    def test_odd_digit_count_split(self):
        # 9 digits split 4 / 5
        assert parse_coordinate_text("SX418148338") == parse_coordinate_text(
            "SX 41810 48338"
        )

    def test_unknown_square(self):
        with pytest.raises(ParseError) as exc_info:
            parse_coordinate_text("ZZ 12345 67890")
        assert "unknown grid square" in exc_info.value.reason


class TestParseFailure:
    def test_message_lists_every_format(self):
        with pytest.raises(ParseError) as exc_info:
            parse_coordinate_text("not a coordinate")
        message = str(exc_info.value)
        assert message == PARSE_ERROR_MESSAGE
        for example in FORMAT_EXAMPLES:
            assert example in message
        assert exc_info.value.text == "not a coordinate"

    def test_exact_message(self):
        assert PARSE_ERROR_MESSAGE == (
            'Could not parse coordinates. Please use one of these formats: '
            'Grid Reference (e.g., "SX 41815 48338"), '
            'Decimal Degrees (e.g., "50.313611, -4.223056"), '
            'Degrees Decimal Minutes (e.g., "50 18.817N, 4 13.383W"), '
            'Degrees Minutes Seconds (e.g., "50° 18\' 49"N, 4° 13\' 23"W")'
        )

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text: str):
        with pytest.raises(ParseError) as exc_info:
            parse_coordinate_text(text)
        assert exc_info.value.reason == "empty input"


class TestSexagesimalRange:
    @pytest.mark.parametrize(
        "text",
        [
            "50 75.0N, 4 10.0W",
            "50 18.0N, 4 60.0W",
            "50° 60' 10\"N, 4° 13' 23\"W",
            "50° 18' 60.5\"N, 4° 13' 23\"W",
        ],
    )
    def test_sixty_or_more_rejected(self, text: str):
        with pytest.raises(ParseError) as exc_info:
            parse_coordinate_text(text)
        assert "must be below 60" in exc_info.value.reason
        assert str(exc_info.value) == PARSE_ERROR_MESSAGE

    def test_just_below_sixty_accepted(self):
        point = parse_coordinate_text("50 59.999N, 4 0.5W")
        assert point.latitude == pytest.approx(50 + 59.999 / 60)
