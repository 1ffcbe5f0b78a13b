"""Enumerations for ende type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = [
    "Encoding",
    "ErrorKind",
]


class Encoding(StrEnum):
    """Concrete encoding of a code point sequence.

    StrEnum provides automatic string conversion: str(Encoding.UTF8) == "utf-8"
    """

    UTF8 = "utf-8"
    """Variable width, 1-4 eight-bit units per code point."""

    UTF16 = "utf-16"
    """Variable width, 1-2 sixteen-bit units per code point (surrogate pairs)."""

    UCS2 = "ucs-2"
    """Fixed width, exactly 1 sixteen-bit unit per code point (BMP only)."""

    @classmethod
    def from_name(cls, name: str) -> Encoding:
        """Look up an encoding by a loosely spelled name.

        Case, hyphens and underscores are ignored, so "UTF8", "utf_16"
        and "Ucs-2" all resolve.

        Args:
            name: Encoding name

        Returns:
            Matching Encoding member

        Raises:
            TypeError: If name is not a string
            ValueError: If no encoding matches
        """
        if not isinstance(name, str):
            msg = f"Encoding name must be str, got {type(name).__name__}"
            raise TypeError(msg)
        key = name.strip().lower().replace("_", "").replace("-", "")
        for member in cls:
            if member.value.replace("-", "") == key:
                return member
        msg = f"Unknown encoding: {name!r}"
        raise ValueError(msg)


class ErrorKind(StrEnum):
    """Kind of codec failure.

    StrEnum provides automatic string conversion: str(ErrorKind.TRUNCATED_SEQUENCE)
    == "truncated_sequence"
    """

    INVALID_CODE_POINT = "invalid_code_point"
    """Surrogate used as a scalar, or value outside the target's range."""

    TRUNCATED_SEQUENCE = "truncated_sequence"
    """Input ends before a multi-unit symbol is complete."""

    INVALID_CONTINUATION = "invalid_continuation"
    """Continuation byte or low surrogate has the wrong bit pattern."""

    OVERLONG_ENCODING = "overlong_encoding"
    """UTF-8 sequence longer than the minimum for its code point."""

    INVALID_CODE_UNIT = "invalid_code_unit"
    """Unit does not fit the encoding's unit width, or cannot start a symbol."""

    INPUT_TOO_LARGE = "input_too_large"
    """Input longer than the configured limit."""
