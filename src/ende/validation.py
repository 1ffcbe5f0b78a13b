"""Non-raising validation of encoded input.

``validate`` runs the matching decoder and reports the outcome as a
ValidationResult instead of raising, for callers that only need a yes/no
answer and the reason. Type misuse (non-int elements) still raises
TypeError: that is a programming error, not a property of the data.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from ende.codec import decode, resolve_encoding
from ende.config import CodecConfig
from ende.diagnostics import CodecError, Diagnostic
from ende.enums import Encoding, ErrorKind
from ende.types import CodeUnits

__all__ = ["ValidationResult", "validate"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one encoded input.

    Attributes:
        encoding: Encoding the input was checked against
        unit_count: Number of code units in the input
        code_point_count: Number of code points decoded (0 when invalid)
        error: First failure found, or None when the input is well formed
    """

    encoding: Encoding
    unit_count: int
    code_point_count: int = 0
    error: CodecError | None = None

    @property
    def is_valid(self) -> bool:
        """True when the input decoded without error."""
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Kind of the failure, if any."""
        return None if self.error is None else self.error.kind

    @property
    def diagnostic(self) -> Diagnostic | None:
        """Structured diagnostic of the failure, if any."""
        return None if self.error is None else self.error.diagnostic


def validate(
    data: CodeUnits,
    encoding: Encoding | str,
    *,
    config: CodecConfig | None = None,
) -> ValidationResult:
    """Check whether data is well formed in encoding.

    Args:
        data: Encoded units (bytes qualify for UTF-8)
        encoding: Encoding member or loosely spelled name
        config: Limits to apply (defaults when None)

    Returns:
        ValidationResult describing the outcome

    Raises:
        TypeError: If any element is not an int, or encoding is neither
            an Encoding nor a str
        ValueError: If encoding is not a known name

    Example:
        >>> result = validate(b"\\xc0\\x80", "utf-8")
        >>> result.is_valid
        False
        >>> str(result.kind)
        'overlong_encoding'
    """
    resolved = resolve_encoding(encoding)
    try:
        code_points = decode(data, resolved, config=config)
    except CodecError as e:
        logger.debug("Validation failed for %s input: %s", resolved, e.kind)
        return ValidationResult(encoding=resolved, unit_count=len(data), error=e)
    return ValidationResult(
        encoding=resolved,
        unit_count=len(data),
        code_point_count=len(code_points),
    )
