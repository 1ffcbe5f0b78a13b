"""Hypothesis strategies for ende property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- unicode: Code points, code point sequences and malformed unit sequences

Usage:
    from tests.strategies import scalar_values, code_point_lists
    from tests.strategies.unicode import bmp_scalar_values, surrogates

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - scalar_value_by_length, code_point_lists, utf8_byte_soup
"""

from .unicode import (
    SCALAR_BOUNDARIES,
    bmp_code_point_lists,
    bmp_scalar_values,
    code_point_lists,
    high_surrogates,
    low_surrogates,
    non_scalar_values,
    scalar_value_by_length,
    scalar_values,
    supplementary_scalar_values,
    surrogates,
    utf8_byte_soup,
    utf16_unit_soup,
)

__all__ = [
    "SCALAR_BOUNDARIES",
    "bmp_code_point_lists",
    "bmp_scalar_values",
    "code_point_lists",
    "high_surrogates",
    "low_surrogates",
    "non_scalar_values",
    "scalar_value_by_length",
    "scalar_values",
    "supplementary_scalar_values",
    "surrogates",
    "utf8_byte_soup",
    "utf16_unit_soup",
]
