"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from ende.constants import MAX_BMP, MAX_CODE_POINT
from ende.enums import Encoding

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _hex(value: int) -> str:
    """Render a code point or unit the way Unicode documents do."""
    if value < 0:
        return f"-0x{-value:04X}"
    return f"0x{value:04X}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _DOCS_URL = "https://www.unicode.org/faq/utf_bom.html"

    # ------------------------------------------------------------------
    # Code point errors
    # ------------------------------------------------------------------

    @staticmethod
    def surrogate_code_point(code_point: int, position: int, encoding: Encoding) -> Diagnostic:
        """Surrogate value used as a scalar.

        Args:
            code_point: The offending value (0xD800..0xDFFF)
            position: Index in the input
            encoding: Encoding being produced or consumed

        Returns:
            Diagnostic for SURROGATE_CODE_POINT
        """
        msg = f"Surrogate {_hex(code_point)} is not a valid {encoding} scalar value"
        return Diagnostic(
            code=DiagnosticCode.SURROGATE_CODE_POINT,
            message=msg,
            position=position,
            hint="Surrogates 0xD800..0xDFFF only exist as halves of a UTF-16 pair",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def code_point_out_of_range(code_point: int, position: int) -> Diagnostic:
        """Value outside the Unicode code space.

        Args:
            code_point: The offending value
            position: Index in the input

        Returns:
            Diagnostic for CODE_POINT_OUT_OF_RANGE
        """
        msg = f"Code point {_hex(code_point)} is outside 0x0000..{_hex(MAX_CODE_POINT)}"
        return Diagnostic(
            code=DiagnosticCode.CODE_POINT_OUT_OF_RANGE,
            message=msg,
            position=position,
            hint="Unicode defines code points from 0x0 to 0x10FFFF only",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def code_point_outside_bmp(code_point: int, position: int) -> Diagnostic:
        """Supplementary code point passed to the UCS-2 encoder.

        Args:
            code_point: The offending value (> 0xFFFF)
            position: Index in the input

        Returns:
            Diagnostic for CODE_POINT_OUTSIDE_BMP
        """
        msg = f"Code point {_hex(code_point)} cannot be represented in UCS-2"
        return Diagnostic(
            code=DiagnosticCode.CODE_POINT_OUTSIDE_BMP,
            message=msg,
            position=position,
            hint=f"UCS-2 covers 0x0000..{_hex(MAX_BMP)}; use UTF-16 for supplementary planes",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def unpaired_surrogate(unit: int, position: int, encoding: Encoding) -> Diagnostic:
        """Surrogate unit standing alone in a 16-bit stream.

        Args:
            unit: The offending unit (0xD800..0xDFFF)
            position: Index in the input
            encoding: UTF-16 or UCS-2

        Returns:
            Diagnostic for UNPAIRED_SURROGATE
        """
        msg = f"Unpaired surrogate unit {_hex(unit)} in {encoding} input"
        if encoding is Encoding.UCS2:
            hint = "UCS-2 carries no surrogate pairs; decode as UTF-16 instead"
        else:
            hint = "A low surrogate must directly follow a high surrogate"
        return Diagnostic(
            code=DiagnosticCode.UNPAIRED_SURROGATE,
            message=msg,
            position=position,
            hint=hint,
            help_url=ErrorTemplate._DOCS_URL,
        )

    # ------------------------------------------------------------------
    # Sequence structure errors
    # ------------------------------------------------------------------

    @staticmethod
    def truncated_sequence(position: int, length: int, available: int) -> Diagnostic:
        """UTF-8 input ends inside a multi-byte sequence.

        Args:
            position: Index of the lead byte
            length: Declared sequence length
            available: Bytes actually present from the lead byte on

        Returns:
            Diagnostic for TRUNCATED_SEQUENCE
        """
        msg = f"Input ends inside a {length}-byte UTF-8 sequence"
        return Diagnostic(
            code=DiagnosticCode.TRUNCATED_SEQUENCE,
            message=msg,
            position=position,
            hint=f"The sequence needs {length - available} more byte(s)",
        )

    @staticmethod
    def unterminated_surrogate_pair(high: int, position: int) -> Diagnostic:
        """High surrogate is the last unit of the input.

        Args:
            high: The high surrogate
            position: Index of the high surrogate

        Returns:
            Diagnostic for UNTERMINATED_SURROGATE_PAIR
        """
        msg = f"High surrogate {_hex(high)} is not followed by a low surrogate"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_SURROGATE_PAIR,
            message=msg,
            position=position,
            hint="Input ends in the middle of a surrogate pair",
        )

    @staticmethod
    def invalid_continuation_byte(byte: int, position: int, lead_position: int) -> Diagnostic:
        """Byte after a lead byte does not match 10xxxxxx.

        Args:
            byte: The offending byte
            position: Index of the offending byte
            lead_position: Index of the lead byte that opened the sequence

        Returns:
            Diagnostic for INVALID_CONTINUATION_BYTE
        """
        msg = f"Byte {_hex(byte)} is not a UTF-8 continuation byte"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CONTINUATION_BYTE,
            message=msg,
            position=position,
            hint=f"The sequence starting at index {lead_position} expects bytes 0x80..0xBF",
        )

    @staticmethod
    def invalid_low_surrogate(unit: int, position: int) -> Diagnostic:
        """Unit after a high surrogate is not a low surrogate.

        Args:
            unit: The offending unit
            position: Index of the offending unit

        Returns:
            Diagnostic for INVALID_LOW_SURROGATE
        """
        msg = f"Unit {_hex(unit)} is not a low surrogate"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOW_SURROGATE,
            message=msg,
            position=position,
            hint="A high surrogate must be followed by a unit in 0xDC00..0xDFFF",
        )

    @staticmethod
    def overlong_encoding(code_point: int, length: int, position: int) -> Diagnostic:
        """UTF-8 sequence is longer than necessary.

        Args:
            code_point: The decoded value
            length: Sequence length used
            position: Index of the lead byte

        Returns:
            Diagnostic for OVERLONG_ENCODING
        """
        msg = f"Overlong {length}-byte UTF-8 encoding of {_hex(code_point)}"
        return Diagnostic(
            code=DiagnosticCode.OVERLONG_ENCODING,
            message=msg,
            position=position,
            hint="UTF-8 requires the shortest possible sequence for every code point",
            help_url=ErrorTemplate._DOCS_URL,
        )

    # ------------------------------------------------------------------
    # Code unit errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_lead_byte(byte: int, position: int) -> Diagnostic:
        """Byte cannot start a UTF-8 sequence.

        Args:
            byte: The offending byte (0x80..0xBF or 0xF8..0xFF)
            position: Index of the offending byte

        Returns:
            Diagnostic for INVALID_LEAD_BYTE
        """
        if byte & 0xC0 == 0x80:
            msg = f"Unexpected continuation byte {_hex(byte)}"
        else:
            msg = f"Byte {_hex(byte)} never appears in UTF-8"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LEAD_BYTE,
            message=msg,
            position=position,
            hint="A UTF-8 sequence starts with 0xxxxxxx, 110xxxxx, 1110xxxx or 11110xxx",
        )

    @staticmethod
    def code_unit_out_of_range(unit: int, position: int, encoding: Encoding, width: int) -> Diagnostic:
        """Unit does not fit the encoding's unit width.

        Args:
            unit: The offending unit
            position: Index of the offending unit
            encoding: Encoding being consumed
            width: Unit width in bits

        Returns:
            Diagnostic for CODE_UNIT_OUT_OF_RANGE
        """
        msg = f"Value {_hex(unit)} is not a {width}-bit {encoding} code unit"
        return Diagnostic(
            code=DiagnosticCode.CODE_UNIT_OUT_OF_RANGE,
            message=msg,
            position=position,
            hint=f"{encoding} units range from 0x0000 to {_hex((1 << width) - 1)}",
        )

    # ------------------------------------------------------------------
    # Input limit errors
    # ------------------------------------------------------------------

    @staticmethod
    def input_too_large(length: int, limit: int) -> Diagnostic:
        """Input exceeds the configured maximum length.

        Args:
            length: Actual input length
            limit: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LARGE
        """
        msg = f"Input of {length} elements exceeds the limit of {limit}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LARGE,
            message=msg,
            hint="Raise CodecConfig.max_input_length or split the input",
        )
