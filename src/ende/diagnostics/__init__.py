"""Diagnostic system for codec errors.

Provides structured error diagnostics with codes, positions, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CodecError,
    InputTooLargeError,
    InvalidCodePointError,
    InvalidCodeUnitError,
    InvalidContinuationError,
    OverlongEncodingError,
    TruncatedSequenceError,
)
from .templates import ErrorTemplate

__all__ = [
    "CodecError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidCodeUnitError",
    "InvalidContinuationError",
    "OverlongEncodingError",
    "TruncatedSequenceError",
]
