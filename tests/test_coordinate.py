from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from geocell.core.errors import InvalidCoordinateText, OutOfRange
from geocell.models import Coordinate


def test_from_floats_keeps_values() -> None:
    c = Coordinate.from_floats(57.64911, 10.40744)
    assert c.latitude == 57.64911
    assert c.longitude == 10.40744


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (90.0, 180.0),
        (-90.0, -180.0),
        (0.0, 0.0),
        (90, -180),
    ],
)
def test_bounds_are_inclusive(lat: float, lon: float) -> None:
    c = Coordinate.from_floats(lat, lon)
    assert c.as_tuple() == (float(lat), float(lon))


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
        (math.nan, 0.0),
        (0.0, math.inf),
    ],
)
def test_rejects_out_of_range_values(lat: float, lon: float) -> None:
    with pytest.raises(OutOfRange) as exc_info:
        Coordinate.from_floats(lat, lon)
    assert exc_info.value.code == "OUT_OF_RANGE"
    assert exc_info.value.details


@pytest.mark.parametrize(
    "text",
    [
        "57.64911, 10.40744",
        "57.64911,10.40744",
        "57.64911 10.40744",
    ],
)
def test_from_string_accepts_each_separator(text: str) -> None:
    assert Coordinate.from_string(text) == Coordinate.from_floats(57.64911, 10.40744)


def test_from_string_accepts_signs_integers_and_exponents() -> None:
    c = Coordinate.from_string("-33, +1.5e2")
    assert c.as_tuple() == (-33.0, 150.0)


@pytest.mark.parametrize(
    "text",
    [
        "not,a,location,string",
        "57.64911",
        "",
        "57.6x, 10.0",
        "57.6, 10.0 ",
        " 57.6, 10.0",
        "57.6,  10.0",
        "1, 2, 3",
        "inf, 0",
        "nan 0",
        "1_0, 2",
        ".5, 1",
    ],
)
def test_from_string_rejects_malformed_text(text: str) -> None:
    with pytest.raises(InvalidCoordinateText):
        Coordinate.from_string(text)


def test_from_string_range_check_runs_after_parsing() -> None:
    with pytest.raises(OutOfRange):
        Coordinate.from_string("91.0, 10.0")


def test_from_pair() -> None:
    assert Coordinate.from_pair((1, 2.5)) == Coordinate.from_floats(1.0, 2.5)
    assert Coordinate.from_pair([1.0, 2.5]) == Coordinate.from_floats(1.0, 2.5)


@pytest.mark.parametrize(
    "pair",
    [
        ("1", "2"),
        (1.0, 2.0, 3.0),
        (True, 1.0),
        None,
        "1, 2",
    ],
)
def test_from_pair_rejects_non_pairs(pair: object) -> None:
    with pytest.raises(InvalidCoordinateText):
        Coordinate.from_pair(pair)


def test_str_uses_full_float_repr() -> None:
    assert str(Coordinate.from_floats(57.64911063, 10.40743969)) == (
        "57.64911063, 10.40743969"
    )
    assert str(Coordinate.from_floats(90.0, -180.0)) == "90.0, -180.0"


def test_decimal_places_follow_rendering() -> None:
    assert Coordinate.from_floats(57.64911, 10.4).decimal_places() == (5, 1)
    assert Coordinate.from_floats(90.0, 0.00001).decimal_places() == (1, 5)


def test_equal_inputs_give_equal_values() -> None:
    a = Coordinate.from_string("57.64911, 10.40744")
    b = Coordinate.from_string("57.64911, 10.40744")
    assert a == b
    assert len({a, b}) == 1


def test_is_immutable() -> None:
    c = Coordinate.from_floats(1.0, 2.0)
    with pytest.raises(ValidationError):
        c.latitude = 3.0  # type: ignore[misc]
