"""Code point and code unit validation shared by every codec.

A single predicate, ``is_surrogate``, underlies all "reject invalid code
point" checks: whenever an encoder consumes a scalar or a decoder produces
one outside an active surrogate pair, the value is run through
``check_code_point``. Decoders run every raw input element through
``check_code_unit`` before looking at its bits.

Python 3.13+. Zero external dependencies.
"""

from ende.constants import (
    HIGH_SURROGATE_MAX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_BYTE,
    MAX_CODE_POINT,
    MAX_UNIT16,
    SURROGATE_MAX,
    SURROGATE_MIN,
)
from ende.diagnostics import (
    ErrorTemplate,
    InvalidCodePointError,
    InvalidCodeUnitError,
)
from ende.enums import Encoding
from ende.types import CodePoint, CodeUnit

__all__ = [
    "check_code_point",
    "check_code_unit",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_scalar_value",
    "is_surrogate",
    "require_int",
]

# Largest unit value per unit width in bits.
_MAX_UNIT_BY_WIDTH: dict[int, int] = {8: MAX_BYTE, 16: MAX_UNIT16}


def is_surrogate(code_point: int) -> bool:
    """Return True iff code_point lies in 0xD800..0xDFFF."""
    return SURROGATE_MIN <= code_point <= SURROGATE_MAX


def is_high_surrogate(unit: int) -> bool:
    """Return True iff unit lies in 0xD800..0xDBFF (first half of a pair)."""
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    """Return True iff unit lies in 0xDC00..0xDFFF (second half of a pair)."""
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def is_scalar_value(code_point: int) -> bool:
    """Return True iff code_point is encodable by UTF-8 and UTF-16.

    Scalar values are the code points 0x0..0x10FFFF minus the surrogates.
    """
    return 0 <= code_point <= MAX_CODE_POINT and not is_surrogate(code_point)


def require_int(value: object, position: int) -> int:
    """Return value unchanged if it is a plain int.

    ``bool`` is rejected even though it subclasses ``int``: a True/False in a
    code point list is a caller bug, not the character U+0001.

    Raises:
        TypeError: If value is not an int
    """
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"Expected int at index {position}, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def check_code_point(
    code_point: object,
    *,
    position: int,
    encoding: Encoding,
    limit: int = MAX_CODE_POINT,
) -> CodePoint:
    """Validate a code point about to be encoded or just decoded.

    Args:
        code_point: Candidate value
        position: Index of the value in the caller's input
        encoding: Encoding being produced or consumed
        limit: Highest value the encoding can represent

    Returns:
        The code point, as an int

    Raises:
        TypeError: If code_point is not an int
        InvalidCodePointError: If code_point is negative, above 0x10FFFF,
            above limit, or a surrogate
    """
    cp = require_int(code_point, position)
    if cp < 0 or cp > MAX_CODE_POINT:
        raise InvalidCodePointError(
            ErrorTemplate.code_point_out_of_range(cp, position),
            encoding=encoding,
            value=cp,
        )
    if cp > limit:
        raise InvalidCodePointError(
            ErrorTemplate.code_point_outside_bmp(cp, position),
            encoding=encoding,
            value=cp,
        )
    if is_surrogate(cp):
        raise InvalidCodePointError(
            ErrorTemplate.surrogate_code_point(cp, position, encoding),
            encoding=encoding,
            value=cp,
        )
    return cp


def check_code_unit(unit: object, position: int, encoding: Encoding, width: int) -> CodeUnit:
    """Validate that a raw input element fits the encoding's unit width.

    Args:
        unit: Candidate unit
        position: Index of the unit in the caller's input
        encoding: Encoding being consumed
        width: Unit width in bits (8 or 16)

    Returns:
        The unit, as an int

    Raises:
        TypeError: If unit is not an int
        InvalidCodeUnitError: If unit is negative or needs more than width bits
    """
    value = require_int(unit, position)
    if value < 0 or value > _MAX_UNIT_BY_WIDTH[width]:
        raise InvalidCodeUnitError(
            ErrorTemplate.code_unit_out_of_range(value, position, encoding, width),
            encoding=encoding,
            value=value,
        )
    return value
