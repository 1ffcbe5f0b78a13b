"""Encoding-agnostic entry points.

Dispatches to the UTF-8, UTF-16 and UCS-2 codecs by ``Encoding`` so that
callers can choose the encoding at runtime. The codecs share no state;
the dispatch table only maps names to functions.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from typing import TypeAlias

from ende.config import CodecConfig
from ende.enums import Encoding
from ende.types import CodePoints, CodeUnits
from ende.ucs2 import decode_ucs2, encode_ucs2
from ende.utf8 import decode_utf8, encode_utf8
from ende.utf16 import decode_utf16, encode_utf16

__all__ = ["decode", "encode", "resolve_encoding", "unit_width"]

_Encoder: TypeAlias = Callable[..., bytes | list[int]]
_Decoder: TypeAlias = Callable[..., list[int]]

_ENCODERS: dict[Encoding, _Encoder] = {
    Encoding.UTF8: encode_utf8,
    Encoding.UTF16: encode_utf16,
    Encoding.UCS2: encode_ucs2,
}

_DECODERS: dict[Encoding, _Decoder] = {
    Encoding.UTF8: decode_utf8,
    Encoding.UTF16: decode_utf16,
    Encoding.UCS2: decode_ucs2,
}

_UNIT_WIDTHS: dict[Encoding, int] = {
    Encoding.UTF8: 8,
    Encoding.UTF16: 16,
    Encoding.UCS2: 16,
}


def resolve_encoding(encoding: Encoding | str) -> Encoding:
    """Return encoding as an Encoding member, looking names up via from_name.

    Raises:
        TypeError: If encoding is neither an Encoding nor a str
        ValueError: If encoding is not a known name
    """
    if isinstance(encoding, Encoding):
        return encoding
    return Encoding.from_name(encoding)


def unit_width(encoding: Encoding | str) -> int:
    """Bits per code unit of encoding (8 or 16).

    Raises:
        TypeError: If encoding is neither an Encoding nor a str
        ValueError: If encoding is not a known name
    """
    return _UNIT_WIDTHS[resolve_encoding(encoding)]


def encode(
    code_points: CodePoints,
    encoding: Encoding | str,
    *,
    config: CodecConfig | None = None,
) -> bytes | list[int]:
    """Encode code points with the named encoding.

    Args:
        code_points: Unicode scalar values
        encoding: Encoding member or loosely spelled name ("utf8", "UCS-2")
        config: Limits to apply (defaults when None)

    Returns:
        bytes for UTF-8, list of 16-bit units for UTF-16 and UCS-2

    Raises:
        CodecError: Any failure raised by the selected encoder
        TypeError: If encoding is neither an Encoding nor a str
        ValueError: If encoding is not a known name
    """
    return _ENCODERS[resolve_encoding(encoding)](code_points, config=config)


def decode(
    data: CodeUnits,
    encoding: Encoding | str,
    *,
    config: CodecConfig | None = None,
) -> list[int]:
    """Decode code units with the named encoding.

    Args:
        data: Encoded units (bytes qualify for UTF-8)
        encoding: Encoding member or loosely spelled name ("utf_16", "UTF8")
        config: Limits to apply (defaults when None)

    Returns:
        Decoded code points

    Raises:
        CodecError: Any failure raised by the selected decoder
        TypeError: If encoding is neither an Encoding nor a str
        ValueError: If encoding is not a known name
    """
    return _DECODERS[resolve_encoding(encoding)](data, config=config)
