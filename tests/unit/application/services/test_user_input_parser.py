import pytest

from circumpolar.application.services.user_input_parser import CoordinateParser
from circumpolar.domain.models.coordinates import Coordinate
from circumpolar.domain.validators import ValidationError


@pytest.fixture
def parser():
    return CoordinateParser()


@pytest.mark.parametrize(
    "token, expected",
    [
        # Decimal degrees
        ("51.5", 51.5),
        ("-0.1", -0.1),
        ("+12", 12.0),
        (".5", 0.5),
        ("1e1", 10.0),
        ("55,3672698", 55.3672698),
        # Hemisphere letters
        ("51.5N", 51.5),
        ("33.9S", -33.9),
        ("74.0 W", -74.0),
        ("151.2E", 151.2),
        ("12.5°S", -12.5),
        ("33.9s", -33.9),
        ("55.1Ю", -55.1),
        # DMS
        ("55°59'37.13\"N", 55.993647),
        ("92°54'5.54\"E", 92.901539),
        ("55:59:37.13", 55.993647),
        ("179 8 49.12 W", -179.146978),
        ("55°59'37.13\"С", 55.993647),
        ("-55:59:37.13", -55.993647),
        ("-0:30:00", -0.5),
        ("45:30", 45.5),
        ("45°30'S", -45.5),
    ],
)
def test_parse_component_valid(parser, token, expected):
    assert parser.parse_component(token) == pytest.approx(expected, abs=1e-5)


@pytest.mark.parametrize(
    "token",
    ["", "abc", "nan", "inf", "-inf", "12.5X", "1.2.3", "55:61:00", "55:30:60.5", "N"],
)
def test_parse_component_invalid(parser, token):
    with pytest.raises(ValueError):
        parser.parse_component(token)


def test_parse_component_rejects_overflow(parser):
    with pytest.raises(ValueError, match="finite"):
        parser.parse_component("1e400")


def test_negative_value_ignores_hemisphere(parser):
    """An explicit sign takes precedence over the hemisphere letter."""
    assert parser.parse_component("-33.9N") == pytest.approx(-33.9)


def test_parse_pairs(parser):
    coords = parser.parse_pairs(["51.5", "-0.1", "40.7", "-74.0", "0", "0"])
    assert coords == [
        Coordinate(51.5, -0.1),
        Coordinate(40.7, -74.0),
        Coordinate(0.0, 0.0),
    ]


def test_parse_pairs_odd_count(parser):
    with pytest.raises(ValueError, match="odd number of coordinate values: 3"):
        parser.parse_pairs(["51.5", "-0.1", "40.7"])


def test_parse_pairs_reports_bad_token(parser):
    with pytest.raises(ValueError, match="'x1'"):
        parser.parse_pairs(["51.5", "-0.1", "x1", "-74.0"])


def test_parse_pairs_accepts_out_of_range_by_default(parser):
    coords = parser.parse_pairs(["95", "200", "0", "0"])
    assert coords[0] == Coordinate(95.0, 200.0)


def test_strict_parser_rejects_out_of_range():
    with pytest.raises(ValidationError, match="Invalid latitude"):
        CoordinateParser(strict=True).parse_pairs(["95", "0", "0", "0"])
