"""Shared constants for ende.

Centralizes the numeric boundaries used by every codec so that the
encoders, decoders and validation helpers agree on a single source of
truth. Placing constants here avoids circular imports between the codec
modules and the diagnostics package.

Constants are grouped by domain:
- Code point space: Scalar value limits and planes
- Surrogates: UTF-16 pairing ranges
- UTF-8: Sequence length thresholds and bit patterns
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code point space
    "MAX_CODE_POINT",
    "MAX_BMP",
    "SUPPLEMENTARY_OFFSET",
    # Surrogates
    "SURROGATE_MIN",
    "SURROGATE_MAX",
    "HIGH_SURROGATE_MIN",
    "HIGH_SURROGATE_MAX",
    "LOW_SURROGATE_MIN",
    "LOW_SURROGATE_MAX",
    "SURROGATE_PAYLOAD_MASK",
    # UTF-8
    "MAX_BYTE",
    "UTF8_ONE_BYTE_LIMIT",
    "UTF8_TWO_BYTE_LIMIT",
    "UTF8_THREE_BYTE_LIMIT",
    "CONTINUATION_MASK",
    "CONTINUATION_TAG",
    "CONTINUATION_PAYLOAD_MASK",
    # UTF-16 / UCS-2
    "MAX_UNIT16",
    # Input limits
    "MAX_INPUT_LENGTH",
]

# ============================================================================
# CODE POINT SPACE
# ============================================================================

# Highest Unicode code point (last code point of plane 16).
MAX_CODE_POINT: int = 0x10FFFF

# Last code point of the Basic Multilingual Plane; the UCS-2 ceiling.
MAX_BMP: int = 0xFFFF

# First supplementary code point. Subtracted before splitting into surrogates.
SUPPLEMENTARY_OFFSET: int = 0x10000

# ============================================================================
# SURROGATES
# ============================================================================

SURROGATE_MIN: int = 0xD800
SURROGATE_MAX: int = 0xDFFF

HIGH_SURROGATE_MIN: int = 0xD800
HIGH_SURROGATE_MAX: int = 0xDBFF

LOW_SURROGATE_MIN: int = 0xDC00
LOW_SURROGATE_MAX: int = 0xDFFF

# Each surrogate half carries 10 bits of the supplementary offset.
SURROGATE_PAYLOAD_MASK: int = 0x3FF

# ============================================================================
# UTF-8
# ============================================================================

MAX_BYTE: int = 0xFF

# Exclusive upper bounds for 1-, 2- and 3-byte sequences.
# Everything from UTF8_THREE_BYTE_LIMIT to MAX_CODE_POINT takes 4 bytes.
UTF8_ONE_BYTE_LIMIT: int = 0x80
UTF8_TWO_BYTE_LIMIT: int = 0x800
UTF8_THREE_BYTE_LIMIT: int = 0x10000

# Continuation bytes match 10xxxxxx and carry 6 payload bits.
CONTINUATION_MASK: int = 0xC0
CONTINUATION_TAG: int = 0x80
CONTINUATION_PAYLOAD_MASK: int = 0x3F

# ============================================================================
# UTF-16 / UCS-2
# ============================================================================

MAX_UNIT16: int = 0xFFFF

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum number of input elements (code points or code units)
# accepted by a single encode/decode call (64 Mi elements).
# Python ints are boxed, so a list this long already costs gigabytes;
# anything larger is almost certainly a mistake or an attack.
MAX_INPUT_LENGTH: int = 64 * 1024 * 1024
