"""Codec configuration.

Provides a single frozen dataclass that encapsulates the tunable limits
shared by every encode/decode operation. Operations accept it through the
keyword-only ``config`` parameter; ``None`` selects the defaults.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sized
from dataclasses import dataclass

from ende.constants import MAX_INPUT_LENGTH
from ende.diagnostics import ErrorTemplate, InputTooLargeError
from ende.enums import Encoding

__all__ = ["DEFAULT_CONFIG", "CodecConfig"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable configuration for encode/decode calls.

    Constructing ``CodecConfig()`` with no arguments produces the defaults
    used when ``config=None`` is passed.

    Attributes:
        max_input_length: Maximum number of input elements (code points or
            code units) accepted by a single call (default: 64 Mi).

    Example:
        >>> from ende import CodecConfig, decode_utf8
        >>> config = CodecConfig(max_input_length=4)
        >>> decode_utf8(b"abc", config=config)
        [97, 98, 99]
    """

    max_input_length: int = MAX_INPUT_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_input_length is not positive.
        """
        if self.max_input_length <= 0:
            msg = "max_input_length must be positive"
            raise ValueError(msg)

    def check_length(self, data: Sized, encoding: Encoding) -> None:
        """Reject inputs longer than max_input_length.

        Args:
            data: Input sequence
            encoding: Encoding being produced or consumed

        Raises:
            InputTooLargeError: If len(data) exceeds the limit
        """
        length = len(data)
        if length > self.max_input_length:
            logger.warning(
                "Rejected %s input of %d elements (limit %d)",
                encoding,
                length,
                self.max_input_length,
            )
            raise InputTooLargeError(
                ErrorTemplate.input_too_large(length, self.max_input_length),
                encoding=encoding,
            )


DEFAULT_CONFIG = CodecConfig()
