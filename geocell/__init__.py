"""Geohash encoding and decoding.

    >>> encode("57.64911, 10.40744")
    'u4pruydqqvj'
    >>> decode("u4pruydqqvj")
    '57.64911063, 10.40743969'
"""

from __future__ import annotations

from typing import Any

from geocell.core.errors import (
    GeocellError,
    InvalidCoordinateText,
    InvalidHashCharacter,
    InvalidHashLength,
    InvalidPrecision,
    OutOfRange,
    PrecisionUnattainable,
)
from geocell.models import Coordinate, GeoHash
from geocell.services import codec
from geocell.services.codec import Cell

__all__ = [
    "Cell",
    "Coordinate",
    "GeoHash",
    "GeocellError",
    "InvalidCoordinateText",
    "InvalidHashCharacter",
    "InvalidHashLength",
    "InvalidPrecision",
    "OutOfRange",
    "PrecisionUnattainable",
    "decode",
    "encode",
    "location_to_hash",
]


def _to_coordinate(value: Any) -> Coordinate:
    if isinstance(value, Coordinate):
        return value
    if isinstance(value, str):
        return Coordinate.from_string(value)
    return Coordinate.from_pair(value)


def encode(value: Any, precision: int | None = None) -> str:
    """Encode a Coordinate, a (lat, lon) pair or "lat, lon" text.

    Without `precision`, returns the shortest hash that decodes back to the
    coordinate at the number of decimals it was given with.
    """

    coordinate = _to_coordinate(value)
    if precision is None:
        return str(codec.find_shortest_hash(coordinate))
    return str(codec.encode(coordinate, precision))


def decode(value: str) -> str:
    if not isinstance(value, str):
        raise InvalidHashCharacter(
            f"Expected a geohash string, got {type(value).__name__}",
            details={"input": repr(value)},
        )
    return str(codec.decode(GeoHash.from_string(value)))


def location_to_hash(
    latitude: float, longitude: float, precision: int | None = None
) -> str:
    return encode((latitude, longitude), precision)
