from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from geocell.core.errors import InvalidHashCharacter, InvalidHashLength
from geocell.utils.geohash import MAX_PRECISION, MIN_PRECISION, is_alphabet_char


class GeoHash(BaseModel):
    """A geohash string of 1..12 lowercase base-32 characters."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: str

    @field_validator("value")
    @classmethod
    def _check_value(cls, value: str) -> str:
        # Raised as-is (not wrapped in ValidationError): neither is a ValueError.
        bad = [c for c in value if not is_alphabet_char(c)]
        if bad:
            raise InvalidHashCharacter(
                f"Invalid geohash character: {bad[0]!r}",
                details={"input": value, "invalid": sorted(set(bad))},
            )
        if not MIN_PRECISION <= len(value) <= MAX_PRECISION:
            raise InvalidHashLength(
                f"Geohash length must be {MIN_PRECISION}..{MAX_PRECISION}, "
                f"got {len(value)}",
                details={"input": value},
            )
        return value

    @classmethod
    def from_string(cls, text: str) -> GeoHash:
        return cls(value=text)

    @property
    def precision(self) -> int:
        return len(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value
