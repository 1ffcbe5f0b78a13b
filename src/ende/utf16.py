"""UTF-16 encoding and decoding.

Code points in the BMP are stored as a single 16-bit unit. Supplementary
code points (0x10000..0x10FFFF) are reduced by 0x10000 to a 20-bit value
and split across a surrogate pair:

    high = 0xD800 + (extra >> 10)      110110xxxxxxxxxx
    low  = 0xDC00 + (extra & 0x3FF)    110111xxxxxxxxxx

Units are plain ints; byte order only matters once units are serialized,
which is left to the caller.

Python 3.13+. Zero external dependencies.
"""

import logging

from ende.config import DEFAULT_CONFIG, CodecConfig
from ende.constants import (
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MIN,
    SUPPLEMENTARY_OFFSET,
    SURROGATE_PAYLOAD_MASK,
)
from ende.diagnostics import (
    CodecError,
    ErrorTemplate,
    InvalidCodePointError,
    InvalidContinuationError,
    TruncatedSequenceError,
)
from ende.enums import Encoding
from ende.types import CodePoint, CodePoints, CodeUnits
from ende.unicode import (
    check_code_point,
    check_code_unit,
    is_high_surrogate,
    is_low_surrogate,
)

__all__ = [
    "decode_utf16",
    "encode_utf16",
    "utf16_length",
]

logger = logging.getLogger(__name__)


def utf16_length(code_point: CodePoint) -> int:
    """Number of units encode_utf16 emits for code_point (1 or 2).

    Raises:
        InvalidCodePointError: If code_point is not a scalar value
    """
    cp = check_code_point(code_point, position=0, encoding=Encoding.UTF16)
    return 1 if cp < SUPPLEMENTARY_OFFSET else 2


def encode_utf16(code_points: CodePoints, *, config: CodecConfig | None = None) -> list[int]:
    """Encode a code point sequence as UTF-16 code units.

    Args:
        code_points: Unicode scalar values
        config: Limits to apply (defaults when None)

    Returns:
        16-bit code units

    Raises:
        InvalidCodePointError: If any element is a surrogate or outside
            0x0..0x10FFFF
        InputTooLargeError: If the input exceeds config.max_input_length
        TypeError: If any element is not an int

    Example:
        >>> [hex(u) for u in encode_utf16([0x10001])]
        ['0xd800', '0xdc01']
    """
    (config or DEFAULT_CONFIG).check_length(code_points, Encoding.UTF16)
    units: list[int] = []
    try:
        for position, code_point in enumerate(code_points):
            cp = check_code_point(code_point, position=position, encoding=Encoding.UTF16)
            if cp < SUPPLEMENTARY_OFFSET:
                units.append(cp)
            else:
                extra = cp - SUPPLEMENTARY_OFFSET
                units.append(HIGH_SURROGATE_MIN + (extra >> 10))
                units.append(LOW_SURROGATE_MIN + (extra & SURROGATE_PAYLOAD_MASK))
    except CodecError as e:
        logger.debug("UTF-16 encode rejected at index %s: %s", e.position, e.kind)
        raise
    return units


def decode_utf16(units: CodeUnits, *, config: CodecConfig | None = None) -> list[int]:
    """Decode UTF-16 code units into code points.

    Args:
        units: Sequence of ints 0..0xFFFF
        config: Limits to apply (defaults when None)

    Returns:
        Decoded code points

    Raises:
        TruncatedSequenceError: If the input ends with a high surrogate
        InvalidContinuationError: If a high surrogate is followed by
            anything but a low surrogate
        InvalidCodePointError: If a low surrogate appears without a
            preceding high surrogate
        InvalidCodeUnitError: If an element does not fit in 16 bits
        InputTooLargeError: If the input exceeds config.max_input_length
        TypeError: If any element is not an int

    Example:
        >>> decode_utf16([0xD800, 0xDC01])
        [65537]
    """
    (config or DEFAULT_CONFIG).check_length(units, Encoding.UTF16)
    code_points: list[int] = []
    position = 0
    end = len(units)
    try:
        while position < end:
            unit = check_code_unit(units[position], position, Encoding.UTF16, 16)
            if is_high_surrogate(unit):
                if position + 1 >= end:
                    raise TruncatedSequenceError(
                        ErrorTemplate.unterminated_surrogate_pair(unit, position),
                        encoding=Encoding.UTF16,
                        value=unit,
                    )
                low = check_code_unit(units[position + 1], position + 1, Encoding.UTF16, 16)
                if not is_low_surrogate(low):
                    raise InvalidContinuationError(
                        ErrorTemplate.invalid_low_surrogate(low, position + 1),
                        encoding=Encoding.UTF16,
                        value=low,
                    )
                code_points.append(
                    ((unit & SURROGATE_PAYLOAD_MASK) << 10)
                    + (low & SURROGATE_PAYLOAD_MASK)
                    + SUPPLEMENTARY_OFFSET
                )
                position += 2
            elif is_low_surrogate(unit):
                raise InvalidCodePointError(
                    ErrorTemplate.unpaired_surrogate(unit, position, Encoding.UTF16),
                    encoding=Encoding.UTF16,
                    value=unit,
                )
            else:
                code_points.append(unit)
                position += 1
    except CodecError as e:
        logger.debug("UTF-16 decode rejected at index %s: %s", e.position, e.kind)
        raise
    return code_points
