"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for codec failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from ende.enums import ErrorKind

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Code point errors (surrogates, out of range values)
        2000-2999: Sequence structure errors (truncation, continuation, overlong)
        3000-3999: Code unit errors (unit width, illegal lead bytes)
        4000-4999: Input limit errors
    """

    # Code point errors (1000-1999)
    SURROGATE_CODE_POINT = 1001
    CODE_POINT_OUT_OF_RANGE = 1002
    CODE_POINT_OUTSIDE_BMP = 1003
    UNPAIRED_SURROGATE = 1004

    # Sequence structure errors (2000-2999)
    TRUNCATED_SEQUENCE = 2001
    UNTERMINATED_SURROGATE_PAIR = 2002
    INVALID_CONTINUATION_BYTE = 2003
    INVALID_LOW_SURROGATE = 2004
    OVERLONG_ENCODING = 2005

    # Code unit errors (3000-3999)
    INVALID_LEAD_BYTE = 3001
    CODE_UNIT_OUT_OF_RANGE = 3002

    # Input limit errors (4000-4999)
    INPUT_TOO_LARGE = 4001

    @property
    def kind(self) -> ErrorKind:
        """Error kind this code belongs to."""
        return _KIND_BY_CODE[self]


_KIND_BY_CODE: dict[DiagnosticCode, ErrorKind] = {
    DiagnosticCode.SURROGATE_CODE_POINT: ErrorKind.INVALID_CODE_POINT,
    DiagnosticCode.CODE_POINT_OUT_OF_RANGE: ErrorKind.INVALID_CODE_POINT,
    DiagnosticCode.CODE_POINT_OUTSIDE_BMP: ErrorKind.INVALID_CODE_POINT,
    DiagnosticCode.UNPAIRED_SURROGATE: ErrorKind.INVALID_CODE_POINT,
    DiagnosticCode.TRUNCATED_SEQUENCE: ErrorKind.TRUNCATED_SEQUENCE,
    DiagnosticCode.UNTERMINATED_SURROGATE_PAIR: ErrorKind.TRUNCATED_SEQUENCE,
    DiagnosticCode.INVALID_CONTINUATION_BYTE: ErrorKind.INVALID_CONTINUATION,
    DiagnosticCode.INVALID_LOW_SURROGATE: ErrorKind.INVALID_CONTINUATION,
    DiagnosticCode.OVERLONG_ENCODING: ErrorKind.OVERLONG_ENCODING,
    DiagnosticCode.INVALID_LEAD_BYTE: ErrorKind.INVALID_CODE_UNIT,
    DiagnosticCode.CODE_UNIT_OUT_OF_RANGE: ErrorKind.INVALID_CODE_UNIT,
    DiagnosticCode.INPUT_TOO_LARGE: ErrorKind.INPUT_TOO_LARGE,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a
    caller to render its own report without re-parsing the message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Index of the offending element in the input (None when the
            error concerns the input as a whole)
        hint: Suggestion for fixing the error
        help_url: Reference documentation for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[TRUNCATED_SEQUENCE]: Input ends inside a 3-byte UTF-8 sequence
              --> index 4
              = help: The sequence needs 2 more byte(s)

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(f"  --> index {self.position}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        if self.help_url:
            lines.append(f"  = note: see {self.help_url}")
        return "\n".join(lines)
