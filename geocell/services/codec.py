from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from geocell.core.errors import InvalidPrecision, PrecisionUnattainable
from geocell.models.coordinate import Coordinate
from geocell.models.geohash import GeoHash
from geocell.utils.geohash import (
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MAX_PRECISION,
    MIN_PRECISION,
    axis_bits,
    bits_to_chars,
    chars_to_bits,
    deinterleave,
    interleave,
    replay,
    rounding_digits,
    subdivide,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    south: float
    north: float
    west: float
    east: float

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.south <= coordinate.latitude <= self.north
            and self.west <= coordinate.longitude <= self.east
        )


def _check_precision(precision: int) -> None:
    if (
        isinstance(precision, bool)
        or not isinstance(precision, int)
        or not MIN_PRECISION <= precision <= MAX_PRECISION
    ):
        raise InvalidPrecision(
            f"precision must be an integer in {MIN_PRECISION}..{MAX_PRECISION}, "
            f"got {precision!r}",
            details={"precision": repr(precision)},
        )


def encode(coordinate: Coordinate, precision: int) -> GeoHash:
    _check_precision(precision)

    lat_count, lon_count = axis_bits(precision)
    lat_bits = subdivide(coordinate.latitude, LATITUDE_RANGE, lat_count)
    lon_bits = subdivide(coordinate.longitude, LONGITUDE_RANGE, lon_count)
    return GeoHash.from_string(bits_to_chars(interleave(lon_bits, lat_bits)))


def decode_bbox(geohash: GeoHash) -> Cell:
    """Return the unrounded bounds of the cell `geohash` denotes."""

    lat_bits, lon_bits = deinterleave(chars_to_bits(geohash.value))
    lat = replay(lat_bits, LATITUDE_RANGE)
    lon = replay(lon_bits, LONGITUDE_RANGE)
    return Cell(south=lat.min, north=lat.max, west=lon.min, east=lon.max)


def decode(geohash: GeoHash) -> Coordinate:
    """Return the centre of the cell, rounded to the digits its bits support.

    A short hash denotes a large cell, so its centre is reported with fewer
    decimals; 11 characters give 8 decimals on both axes.
    """

    lat_bits, lon_bits = deinterleave(chars_to_bits(geohash.value))
    lat = replay(lat_bits, LATITUDE_RANGE)
    lon = replay(lon_bits, LONGITUDE_RANGE)
    return Coordinate.from_floats(
        round(lat.mid, rounding_digits(len(lat_bits))),
        round(lon.mid, rounding_digits(len(lon_bits))),
    )


def _candidates(coordinate: Coordinate) -> Iterator[GeoHash]:
    for precision in range(MIN_PRECISION, MAX_PRECISION + 1):
        yield encode(coordinate, precision)


def _reads_back_as(
    geohash: GeoHash, coordinate: Coordinate, lat_digits: int, lon_digits: int
) -> bool:
    cell = decode_bbox(geohash)
    center = decode(geohash)
    points = (
        (cell.south, cell.west),
        (cell.north, cell.east),
        center.as_tuple(),
    )
    return all(
        round(lat, lat_digits) == coordinate.latitude
        and round(lon, lon_digits) == coordinate.longitude
        for lat, lon in points
    )


def find_shortest_hash(coordinate: Coordinate) -> GeoHash:
    """Shortest hash whose whole cell rounds back to `coordinate`.

    Digits are taken from the coordinate as written, so (57.64911, 10.40744)
    needs every point of the cell to round to 5 decimals on both axes.
    """

    lat_digits, lon_digits = coordinate.decimal_places()
    for geohash in _candidates(coordinate):
        if _reads_back_as(geohash, coordinate, lat_digits, lon_digits):
            logger.debug("Accepted %s for %s", geohash, coordinate)
            return geohash
        logger.debug("Rejected %s for %s", geohash, coordinate)

    raise PrecisionUnattainable(
        f"No geohash of {MIN_PRECISION}..{MAX_PRECISION} characters reads back as "
        f"{coordinate}",
        details={
            "coordinate": str(coordinate),
            "decimal_places": [lat_digits, lon_digits],
        },
    )
