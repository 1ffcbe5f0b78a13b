"""Tests for ende.unicode: shared surrogate and range validation.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from ende import Encoding, InvalidCodePointError, InvalidCodeUnitError
from ende.constants import MAX_BYTE, MAX_UNIT16
from ende.diagnostics import DiagnosticCode
from ende.unicode import (
    check_code_point,
    check_code_unit,
    is_high_surrogate,
    is_low_surrogate,
    is_scalar_value,
    is_surrogate,
    require_int,
)
from tests.strategies import non_scalar_values, scalar_values, surrogates


class TestSurrogatePredicates:
    """Test the range predicates."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0xD7FF, False), (0xD800, True), (0xDBFF, True), (0xDC00, True), (0xDFFF, True), (0xE000, False)],
    )
    def test_is_surrogate_edges(self, value: int, expected: bool) -> None:
        """is_surrogate is true exactly on 0xD800..0xDFFF."""
        assert is_surrogate(value) is expected

    def test_high_and_low_split(self) -> None:
        """High and low ranges meet at 0xDBFF/0xDC00."""
        assert is_high_surrogate(0xDBFF)
        assert not is_high_surrogate(0xDC00)
        assert is_low_surrogate(0xDC00)
        assert not is_low_surrogate(0xDBFF)

    @given(value=surrogates)
    def test_every_surrogate_is_high_or_low(self, value: int) -> None:
        """PROPERTY: the surrogate range is exactly high | low."""
        assert is_surrogate(value)
        assert is_high_surrogate(value) != is_low_surrogate(value)

    @given(value=scalar_values)
    def test_scalar_values(self, value: int) -> None:
        """PROPERTY: generated scalar values satisfy is_scalar_value."""
        assert is_scalar_value(value)
        assert not is_surrogate(value)

    @given(value=non_scalar_values)
    def test_non_scalar_values(self, value: int) -> None:
        """PROPERTY: surrogates and out-of-range values are not scalars."""
        assert not is_scalar_value(value)


class TestCheckCodePoint:
    """Test check_code_point."""

    def test_returns_value(self) -> None:
        """Valid values are returned unchanged."""
        assert check_code_point(0x10FFFF, position=0, encoding=Encoding.UTF8) == 0x10FFFF

    def test_limit_applies(self) -> None:
        """limit narrows the accepted range."""
        with pytest.raises(InvalidCodePointError) as exc_info:
            check_code_point(0x10000, position=3, encoding=Encoding.UCS2, limit=0xFFFF)

        assert exc_info.value.position == 3
        assert exc_info.value.encoding is Encoding.UCS2

    @given(value=non_scalar_values)
    def test_rejects_non_scalars(self, value: int) -> None:
        """PROPERTY: every non-scalar is rejected as InvalidCodePoint."""
        with pytest.raises(InvalidCodePointError) as exc_info:
            check_code_point(value, position=0, encoding=Encoding.UTF16)

        assert exc_info.value.value == value

    def test_surrogate_code(self) -> None:
        """Surrogates get their own diagnostic code."""
        with pytest.raises(InvalidCodePointError) as exc_info:
            check_code_point(0xDABC, position=0, encoding=Encoding.UTF8)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SURROGATE_CODE_POINT
        assert "0xDABC" in str(exc_info.value)

    def test_position_and_encoding_keyword_only(self) -> None:
        """position and encoding cannot be passed positionally."""
        with pytest.raises(TypeError):
            check_code_point(0x41, 0, Encoding.UTF8)  # type: ignore[misc]


class TestCheckCodeUnit:
    """Test check_code_unit."""

    @pytest.mark.parametrize(("unit", "width"), [(0x0, 8), (0xFF, 8), (0x0, 16), (0xFFFF, 16)])
    def test_in_range(self, unit: int, width: int) -> None:
        """Units within the width pass."""
        assert check_code_unit(unit, 0, Encoding.UTF16, width) == unit

    @pytest.mark.parametrize(("unit", "width"), [(0x100, 8), (-1, 8), (0x10000, 16), (-1, 16)])
    def test_out_of_range(self, unit: int, width: int) -> None:
        """Units outside the width fail."""
        with pytest.raises(InvalidCodeUnitError) as exc_info:
            check_code_unit(unit, 5, Encoding.UTF16, width)

        assert exc_info.value.position == 5
        assert f"{width}-bit" in str(exc_info.value)

    @pytest.mark.parametrize(("maximum", "width"), [(MAX_BYTE, 8), (MAX_UNIT16, 16)])
    def test_width_maximum_is_inclusive(self, maximum: int, width: int) -> None:
        """The largest unit for each width passes; one more fails."""
        assert check_code_unit(maximum, 0, Encoding.UTF8, width) == maximum
        with pytest.raises(InvalidCodeUnitError):
            check_code_unit(maximum + 1, 0, Encoding.UTF8, width)


class TestRequireInt:
    """Test require_int."""

    def test_int_passes(self) -> None:
        """Plain ints pass through."""
        assert require_int(42, 0) == 42

    @pytest.mark.parametrize("value", ["a", 1.0, None, True, b"\x00"])
    def test_non_int_rejected(self, value: object) -> None:
        """Everything else raises TypeError."""
        with pytest.raises(TypeError, match="Expected int at index 9"):
            require_int(value, 9)
