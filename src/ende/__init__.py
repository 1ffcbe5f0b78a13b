"""ende - Unicode encoder/decoder for UTF-8, UTF-16 and UCS-2.

Converts between sequences of Unicode code points (plain ints) and their
UTF-8 bytes, UTF-16 units or UCS-2 units. Every malformed input is a hard
failure with a typed exception; nothing is silently replaced.

Public API:
    encode_utf8 / decode_utf8 - Variable width, 1-4 bytes per code point
    encode_utf16 / decode_utf16 - Variable width, 1-2 units (surrogate pairs)
    encode_ucs2 / decode_ucs2 - Fixed width, 1 unit, BMP only
    encode / decode - Dispatch by Encoding
    validate - Non-raising well-formedness check
    is_surrogate - Shared surrogate predicate
    CodecConfig - Input limits

Exceptions:
    CodecError - Base exception class
    InvalidCodePointError - Surrogate or out-of-range scalar
    TruncatedSequenceError - Input ends inside a symbol
    InvalidContinuationError - Bad continuation byte or low surrogate
    OverlongEncodingError - Non-shortest UTF-8 form
    InvalidCodeUnitError - Unit outside the unit width, or illegal lead byte
    InputTooLargeError - Configured input limit exceeded

Submodules:
    ende.diagnostics - Diagnostic codes and error templates
    ende.constants - Code space boundaries and limits
"""

from .codec import decode, encode, unit_width
from .config import CodecConfig
from .diagnostics import (
    CodecError,
    Diagnostic,
    DiagnosticCode,
    InputTooLargeError,
    InvalidCodePointError,
    InvalidCodeUnitError,
    InvalidContinuationError,
    OverlongEncodingError,
    TruncatedSequenceError,
)
from .enums import Encoding, ErrorKind
from .ucs2 import decode_ucs2, encode_ucs2
from .unicode import is_high_surrogate, is_low_surrogate, is_scalar_value, is_surrogate
from .utf8 import decode_utf8, encode_utf8, utf8_length, utf8_sequence_length
from .utf16 import decode_utf16, encode_utf16, utf16_length
from .validation import ValidationResult, validate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ende")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CodecConfig",
    "CodecError",
    "Diagnostic",
    "DiagnosticCode",
    "Encoding",
    "ErrorKind",
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidCodeUnitError",
    "InvalidContinuationError",
    "OverlongEncodingError",
    "TruncatedSequenceError",
    "ValidationResult",
    "__version__",
    "decode",
    "decode_ucs2",
    "decode_utf8",
    "decode_utf16",
    "encode",
    "encode_ucs2",
    "encode_utf8",
    "encode_utf16",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_scalar_value",
    "is_surrogate",
    "unit_width",
    "utf8_length",
    "utf8_sequence_length",
    "utf16_length",
    "validate",
]
