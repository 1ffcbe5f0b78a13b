"""UCS-2 encoding and decoding.

UCS-2 is the fixed-width predecessor of UTF-16: every code point maps to
exactly one 16-bit unit holding its value. It therefore covers the BMP
only and has no surrogate pairs; a surrogate unit in a UCS-2 stream is
always an error.

Python 3.13+. Zero external dependencies.
"""

import logging

from ende.config import DEFAULT_CONFIG, CodecConfig
from ende.constants import MAX_BMP
from ende.diagnostics import CodecError, ErrorTemplate, InvalidCodePointError
from ende.enums import Encoding
from ende.types import CodePoints, CodeUnits
from ende.unicode import check_code_point, check_code_unit, is_surrogate

__all__ = ["decode_ucs2", "encode_ucs2"]

logger = logging.getLogger(__name__)


def encode_ucs2(code_points: CodePoints, *, config: CodecConfig | None = None) -> list[int]:
    """Encode a code point sequence as UCS-2 code units.

    Raises:
        InvalidCodePointError: If any element is above 0xFFFF, negative,
            or a surrogate
        InputTooLargeError: If the input exceeds config.max_input_length
        TypeError: If any element is not an int
    """
    (config or DEFAULT_CONFIG).check_length(code_points, Encoding.UCS2)
    try:
        return [
            check_code_point(
                code_point, position=position, encoding=Encoding.UCS2, limit=MAX_BMP
            )
            for position, code_point in enumerate(code_points)
        ]
    except CodecError as e:
        logger.debug("UCS-2 encode rejected at index %s: %s", e.position, e.kind)
        raise


def decode_ucs2(units: CodeUnits, *, config: CodecConfig | None = None) -> list[int]:
    """Decode UCS-2 code units into code points.

    Raises:
        InvalidCodePointError: If any unit is a surrogate
        InvalidCodeUnitError: If an element does not fit in 16 bits
        InputTooLargeError: If the input exceeds config.max_input_length
        TypeError: If any element is not an int
    """
    (config or DEFAULT_CONFIG).check_length(units, Encoding.UCS2)
    code_points: list[int] = []
    try:
        for position, raw in enumerate(units):
            unit = check_code_unit(raw, position, Encoding.UCS2, 16)
            if is_surrogate(unit):
                raise InvalidCodePointError(
                    ErrorTemplate.unpaired_surrogate(unit, position, Encoding.UCS2),
                    encoding=Encoding.UCS2,
                    value=unit,
                )
            code_points.append(unit)
    except CodecError as e:
        logger.debug("UCS-2 decode rejected at index %s: %s", e.position, e.kind)
        raise
    return code_points
