"""UTF-8 encoding and decoding.

A code point takes one to four bytes depending on its magnitude:

    0x0000..0x007F      0xxxxxxx
    0x0080..0x07FF      110xxxxx 10xxxxxx
    0x0800..0xFFFF      1110xxxx 10xxxxxx 10xxxxxx
    0x10000..0x10FFFF   11110xxx 10xxxxxx 10xxxxxx 10xxxxxx

UTF-8 is a prefix code: the lead byte alone determines the sequence
length. Continuation bytes carry six payload bits each, most significant
chunk first.

Decoding rejects every ill-formed input instead of substituting U+FFFD:
truncated sequences, bad continuation bytes, overlong forms, encoded
surrogates and values above 0x10FFFF.

Python 3.13+. Zero external dependencies.
"""

import logging

from ende.config import DEFAULT_CONFIG, CodecConfig
from ende.constants import (
    CONTINUATION_MASK,
    CONTINUATION_PAYLOAD_MASK,
    CONTINUATION_TAG,
    MAX_CODE_POINT,
    UTF8_ONE_BYTE_LIMIT,
    UTF8_THREE_BYTE_LIMIT,
    UTF8_TWO_BYTE_LIMIT,
)
from ende.diagnostics import (
    CodecError,
    ErrorTemplate,
    InvalidCodePointError,
    InvalidCodeUnitError,
    InvalidContinuationError,
    OverlongEncodingError,
    TruncatedSequenceError,
)
from ende.enums import Encoding
from ende.types import CodePoint, CodePoints, CodeUnit, CodeUnits
from ende.unicode import check_code_point, check_code_unit, is_surrogate

__all__ = [
    "decode_utf8",
    "encode_utf8",
    "utf8_length",
    "utf8_sequence_length",
]

logger = logging.getLogger(__name__)

# Lead byte layout per sequence length: (mask, tag, payload mask, minimum value).
# A lead byte matches when lead & mask == tag; values below the minimum are overlong.
_LEAD_FORMS: dict[int, tuple[int, int, int, int]] = {
    2: (0xE0, 0xC0, 0x1F, UTF8_ONE_BYTE_LIMIT),
    3: (0xF0, 0xE0, 0x0F, UTF8_TWO_BYTE_LIMIT),
    4: (0xF8, 0xF0, 0x07, UTF8_THREE_BYTE_LIMIT),
}


def utf8_length(code_point: CodePoint) -> int:
    """Number of bytes encode_utf8 emits for code_point.

    Raises:
        InvalidCodePointError: If code_point is not a scalar value
    """
    cp = check_code_point(code_point, position=0, encoding=Encoding.UTF8)
    if cp < UTF8_ONE_BYTE_LIMIT:
        return 1
    if cp < UTF8_TWO_BYTE_LIMIT:
        return 2
    if cp < UTF8_THREE_BYTE_LIMIT:
        return 3
    return 4


def utf8_sequence_length(lead: CodeUnit, *, position: int = 0) -> int:
    """Number of bytes in the sequence opened by lead.

    Args:
        lead: First byte of a sequence
        position: Index of lead in the input (for error reporting)

    Returns:
        1, 2, 3 or 4

    Raises:
        InvalidCodeUnitError: If lead is a continuation byte (10xxxxxx),
            one of 0xF8..0xFF, or not a byte at all
    """
    byte = check_code_unit(lead, position, Encoding.UTF8, 8)
    if byte < UTF8_ONE_BYTE_LIMIT:
        return 1
    for length, (mask, tag, _, _) in _LEAD_FORMS.items():
        if byte & mask == tag:
            return length
    raise InvalidCodeUnitError(
        ErrorTemplate.invalid_lead_byte(byte, position),
        encoding=Encoding.UTF8,
        value=byte,
    )


def _encode_into(cp: int, out: bytearray) -> None:
    """Append the UTF-8 form of an already validated scalar value."""
    if cp < UTF8_ONE_BYTE_LIMIT:
        out.append(cp)
    elif cp < UTF8_TWO_BYTE_LIMIT:
        out.append(0xC0 | cp >> 6)
        out.append(CONTINUATION_TAG | cp & CONTINUATION_PAYLOAD_MASK)
    elif cp < UTF8_THREE_BYTE_LIMIT:
        out.append(0xE0 | cp >> 12)
        out.append(CONTINUATION_TAG | (cp >> 6) & CONTINUATION_PAYLOAD_MASK)
        out.append(CONTINUATION_TAG | cp & CONTINUATION_PAYLOAD_MASK)
    else:
        out.append(0xF0 | cp >> 18)
        out.append(CONTINUATION_TAG | (cp >> 12) & CONTINUATION_PAYLOAD_MASK)
        out.append(CONTINUATION_TAG | (cp >> 6) & CONTINUATION_PAYLOAD_MASK)
        out.append(CONTINUATION_TAG | cp & CONTINUATION_PAYLOAD_MASK)


def _decode_symbol(data: CodeUnits, start: int) -> tuple[int, int]:
    """Decode the symbol whose lead byte sits at data[start].

    Returns:
        (code point, number of bytes consumed)
    """
    lead = check_code_unit(data[start], start, Encoding.UTF8, 8)
    if lead < UTF8_ONE_BYTE_LIMIT:
        return lead, 1

    length = utf8_sequence_length(lead, position=start)
    _, _, payload_mask, minimum = _LEAD_FORMS[length]
    cp = lead & payload_mask
    end = len(data)
    for offset in range(1, length):
        index = start + offset
        if index >= end:
            raise TruncatedSequenceError(
                ErrorTemplate.truncated_sequence(start, length, offset),
                encoding=Encoding.UTF8,
                value=lead,
            )
        byte = check_code_unit(data[index], index, Encoding.UTF8, 8)
        if byte & CONTINUATION_MASK != CONTINUATION_TAG:
            raise InvalidContinuationError(
                ErrorTemplate.invalid_continuation_byte(byte, index, start),
                encoding=Encoding.UTF8,
                value=byte,
            )
        cp = cp << 6 | byte & CONTINUATION_PAYLOAD_MASK

    if cp < minimum:
        raise OverlongEncodingError(
            ErrorTemplate.overlong_encoding(cp, length, start),
            encoding=Encoding.UTF8,
            value=cp,
        )
    if cp > MAX_CODE_POINT:
        raise InvalidCodePointError(
            ErrorTemplate.code_point_out_of_range(cp, start),
            encoding=Encoding.UTF8,
            value=cp,
        )
    if is_surrogate(cp):
        raise InvalidCodePointError(
            ErrorTemplate.surrogate_code_point(cp, start, Encoding.UTF8),
            encoding=Encoding.UTF8,
            value=cp,
        )
    return cp, length


def encode_utf8(code_points: CodePoints, *, config: CodecConfig | None = None) -> bytes:
    """Encode a code point sequence as UTF-8.

    Args:
        code_points: Unicode scalar values
        config: Limits to apply (defaults when None)

    Returns:
        Encoded bytes

    Raises:
        InvalidCodePointError: If any element is a surrogate or outside
            0x0..0x10FFFF
        InputTooLargeError: If the input exceeds config.max_input_length
        TypeError: If any element is not an int

    Example:
        >>> encode_utf8([0x20AC])
        b'\\xe2\\x82\\xac'
    """
    (config or DEFAULT_CONFIG).check_length(code_points, Encoding.UTF8)
    out = bytearray()
    try:
        for position, code_point in enumerate(code_points):
            cp = check_code_point(code_point, position=position, encoding=Encoding.UTF8)
            _encode_into(cp, out)
    except CodecError as e:
        logger.debug("UTF-8 encode rejected at index %s: %s", e.position, e.kind)
        raise
    return bytes(out)


def decode_utf8(data: CodeUnits, *, config: CodecConfig | None = None) -> list[int]:
    """Decode UTF-8 bytes into code points.

    Args:
        data: bytes, bytearray, memoryview, or any sequence of ints 0..0xFF
        config: Limits to apply (defaults when None)

    Returns:
        Decoded code points

    Raises:
        TruncatedSequenceError: If the input ends inside a sequence
        InvalidContinuationError: If a continuation byte is not 10xxxxxx
        OverlongEncodingError: If a sequence is longer than necessary
        InvalidCodePointError: If a sequence encodes a surrogate or a value
            above 0x10FFFF
        InvalidCodeUnitError: If an element is not a byte, or a byte cannot
            start a sequence
        InputTooLargeError: If the input exceeds config.max_input_length
        TypeError: If any element is not an int

    Example:
        >>> decode_utf8(b"\\xf0\\x90\\x80\\x81")
        [65537]
    """
    (config or DEFAULT_CONFIG).check_length(data, Encoding.UTF8)
    code_points: list[int] = []
    position = 0
    end = len(data)
    try:
        while position < end:
            cp, consumed = _decode_symbol(data, position)
            code_points.append(cp)
            position += consumed
    except CodecError as e:
        logger.debug("UTF-8 decode rejected at index %s: %s", e.position, e.kind)
        raise
    return code_points
