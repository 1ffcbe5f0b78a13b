"""Codec exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from ende.enums import Encoding, ErrorKind

from .codes import Diagnostic

__all__ = [
    "CodecError",
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidCodeUnitError",
    "InvalidContinuationError",
    "OverlongEncodingError",
    "TruncatedSequenceError",
]


class CodecError(Exception):
    """Base exception for all encode/decode failures.

    Every failure aborts the whole call; no partial output is returned
    alongside the exception.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        encoding: Encoding being produced or consumed (optional)
        position: Index of the offending element in the input (optional)
        value: Offending code point or code unit (optional)
    """

    kind: ErrorKind | None = None

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        encoding: Encoding | None = None,
        value: int | None = None,
    ) -> None:
        """Initialize CodecError.

        Args:
            message: Error message string OR Diagnostic object
            encoding: Encoding being produced or consumed
            value: Offending code point or code unit
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            self.position: int | None = message.position
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            self.position = None
            super().__init__(message)
        self.encoding = encoding
        self.value = value


class InvalidCodePointError(CodecError):
    """Code point is a surrogate or outside the target encoding's range.

    Examples:
    - 0xD800 passed to any encoder
    - 0x110000 passed to any encoder
    - 0x10000 passed to the UCS-2 encoder
    - A lone 0xDC00 unit in a UTF-16 stream
    """

    kind = ErrorKind.INVALID_CODE_POINT


class TruncatedSequenceError(CodecError):
    """Input ends before a multi-unit symbol is complete.

    Examples:
    - [0xE2, 0x82] (3-byte UTF-8 lead with one continuation byte)
    - [0xD800] (UTF-16 high surrogate with no low surrogate)
    """

    kind = ErrorKind.TRUNCATED_SEQUENCE


class InvalidContinuationError(CodecError):
    """Unit expected to continue a symbol has the wrong bit pattern.

    Examples:
    - [0xC3, 0x41] (0x41 is not 10xxxxxx)
    - [0xD800, 0x0041] (0x0041 is not a low surrogate)
    """

    kind = ErrorKind.INVALID_CONTINUATION


class OverlongEncodingError(CodecError):
    """UTF-8 sequence uses more bytes than its code point requires.

    Example:
    - [0xC0, 0x80] encodes U+0000, which fits in a single byte
    """

    kind = ErrorKind.OVERLONG_ENCODING


class InvalidCodeUnitError(CodecError):
    """Unit cannot appear in the encoding at all, or cannot start a symbol.

    Examples:
    - 0x100 in a UTF-8 byte sequence
    - 0x10000 in a UTF-16 unit sequence
    - A UTF-8 continuation byte or 0xF8..0xFF in lead position
    """

    kind = ErrorKind.INVALID_CODE_UNIT


class InputTooLargeError(CodecError):
    """Input is longer than the configured maximum.

    Raised before any element is processed.
    """

    kind = ErrorKind.INPUT_TOO_LARGE
