"""Type aliases for the codec domain.

Provides semantic type aliases used throughout the package and by user
code when annotating encode/decode call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from typing import TypeAlias

__all__ = [
    "CodePoint",
    "CodePoints",
    "CodeUnit",
    "CodeUnits",
]

CodePoint: TypeAlias = int
"""Unicode scalar value in [0x0, 0x10FFFF], excluding surrogates."""

CodeUnit: TypeAlias = int
"""Encoded unit: 8 bits for UTF-8, 16 bits for UTF-16 and UCS-2."""

CodePoints: TypeAlias = Sequence[int]
"""Ordered code point sequence accepted by the encoders."""

CodeUnits: TypeAlias = Sequence[int]
"""Ordered code unit sequence accepted by the decoders (bytes qualify)."""
