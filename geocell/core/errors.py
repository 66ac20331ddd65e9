from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass(slots=True)
class GeocellError(Exception):
    """Base error; every failure maps to a stable code and the error envelope."""

    message: str
    details: Any | None = None

    code: ClassVar[str] = "GEOCELL_ERROR"

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> dict[str, Any]:
        return make_error_payload(
            code=self.code, message=self.message, details=self.details
        )


class InvalidCoordinateText(GeocellError):
    code = "INVALID_COORDINATE_TEXT"


class OutOfRange(GeocellError):
    code = "OUT_OF_RANGE"


class InvalidHashCharacter(GeocellError):
    code = "INVALID_HASH_CHARACTER"


class InvalidHashLength(GeocellError):
    code = "INVALID_HASH_LENGTH"


class InvalidPrecision(GeocellError):
    code = "INVALID_PRECISION"


class PrecisionUnattainable(GeocellError):
    code = "PRECISION_UNATTAINABLE"


def make_error_payload(
    *, code: str, message: str, details: Any | None
) -> dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "details": details,
    }
