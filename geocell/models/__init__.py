"""Validated value types.

Instances only exist in a valid state; constructors raise `GeocellError`
subclasses otherwise.
"""

from __future__ import annotations

from geocell.models.coordinate import Coordinate
from geocell.models.geohash import GeoHash

__all__ = [
    "Coordinate",
    "GeoHash",
]
