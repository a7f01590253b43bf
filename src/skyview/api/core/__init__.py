"""Core subpackage for shared constants, enums, and exceptions."""

from skyview.api.core.exceptions import (
    InvalidCoordinateError,
    InvalidInputError,
    InvalidTimestampError,
    SkyviewError,
    UnknownBodyError,
)


__all__ = [
    "InvalidCoordinateError",
    "InvalidInputError",
    "InvalidTimestampError",
    "SkyviewError",
    "UnknownBodyError",
]
