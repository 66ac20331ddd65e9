from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from geocell.core.errors import InvalidCoordinateText, OutOfRange


# Leftmost separator wins; at the same position ", " beats "," beats " ".
_SEPARATOR_RE = re.compile(r", |,| ")

# Whole-string float literal: no surrounding whitespace, no inf/nan, no "_".
_FLOAT_RE = re.compile(r"[+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")


def _parse_float(part: str, *, text: str) -> float:
    if not _FLOAT_RE.fullmatch(part):
        raise InvalidCoordinateText(
            f"Not a number: {part!r}", details={"input": text, "part": part}
        )
    return float(part)


def _decimal_places(value: float) -> int:
    exponent = Decimal(repr(value)).as_tuple().exponent
    return max(0, -int(exponent))


class Coordinate(BaseModel):
    """A WGS84 point; any instance that exists is within range."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)

    @classmethod
    def from_floats(cls, latitude: float, longitude: float) -> Coordinate:
        try:
            return cls(latitude=latitude, longitude=longitude)
        except ValidationError as e:
            raise OutOfRange(
                f"Coordinate out of range: ({latitude!r}, {longitude!r})",
                details=e.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            ) from e

    @classmethod
    def from_pair(cls, pair: Any) -> Coordinate:
        """Build from a `(latitude, longitude)` tuple or list."""

        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            raise InvalidCoordinateText(
                "Expected a (latitude, longitude) pair", details={"input": repr(pair)}
            )
        latitude, longitude = pair
        for v in (latitude, longitude):
            # bool is an int subclass but never a coordinate.
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise InvalidCoordinateText(
                    f"Not a number: {v!r}", details={"input": repr(pair)}
                )
        return cls.from_floats(float(latitude), float(longitude))

    @classmethod
    def from_string(cls, text: str) -> Coordinate:
        """Parse "lat, lon", "lat,lon" or "lat lon"."""

        parts = [p for p in _SEPARATOR_RE.split(text, maxsplit=1) if p]
        if len(parts) != 2:
            raise InvalidCoordinateText(
                f"Expected 'latitude, longitude', got {text!r}",
                details={"input": text},
            )
        latitude = _parse_float(parts[0], text=text)
        longitude = _parse_float(parts[1], text=text)
        return cls.from_floats(latitude, longitude)

    def decimal_places(self) -> tuple[int, int]:
        """Digits after the decimal point in (latitude, longitude) as rendered."""

        return _decimal_places(self.latitude), _decimal_places(self.longitude)

    def as_tuple(self) -> tuple[float, float]:
        return self.latitude, self.longitude

    def __str__(self) -> str:
        return f"{self.latitude!r}, {self.longitude!r}"
