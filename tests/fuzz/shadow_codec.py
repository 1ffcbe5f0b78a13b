"""Shadow codec - reference implementation for differential testing.

Routes every operation through Python's built-in ``str`` codecs, which are
strict about surrogates, overlong forms and truncation. The shadow only
reports *whether* an input is accepted and what it decodes to; error kinds
and positions are not modeled.

Key characteristics:
- No bit manipulation (delegates to CPython's codec machinery)
- Explicit failure value (None) instead of exceptions
- Same argument shapes as the ende API

Usage:
    shadow = ShadowCodec()
    expected = shadow.decode_utf8(data)
    if expected is None:
        with pytest.raises(CodecError):
            decode_utf8(data)

Python 3.13+.
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

_MAX_BMP = 0xFFFF


def _to_utf16_bytes(units: Sequence[int]) -> bytes | None:
    if any(not 0 <= unit <= _MAX_BMP for unit in units):
        return None
    return struct.pack(f">{len(units)}H", *units)


def _from_utf16_bytes(raw: bytes) -> list[int]:
    return list(struct.unpack(f">{len(raw) // 2}H", raw))


class ShadowCodec:
    """Reference codec backed by ``str.encode`` / ``bytes.decode``."""

    def _text(self, code_points: Sequence[int]) -> str | None:
        try:
            text = "".join(map(chr, code_points))
        except (ValueError, OverflowError):
            return None
        # chr() accepts surrogates; the strict codecs below reject them.
        return text

    def encode_utf8(self, code_points: Sequence[int]) -> bytes | None:
        text = self._text(code_points)
        if text is None:
            return None
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError:
            return None

    def decode_utf8(self, data: bytes) -> list[int] | None:
        try:
            return [ord(ch) for ch in data.decode("utf-8")]
        except UnicodeDecodeError:
            return None

    def encode_utf16(self, code_points: Sequence[int]) -> list[int] | None:
        text = self._text(code_points)
        if text is None:
            return None
        try:
            return _from_utf16_bytes(text.encode("utf-16-be"))
        except UnicodeEncodeError:
            return None

    def decode_utf16(self, units: Sequence[int]) -> list[int] | None:
        raw = _to_utf16_bytes(units)
        if raw is None:
            return None
        try:
            return [ord(ch) for ch in raw.decode("utf-16-be")]
        except UnicodeDecodeError:
            return None

    def encode_ucs2(self, code_points: Sequence[int]) -> list[int] | None:
        if any(cp > _MAX_BMP for cp in code_points):
            return None
        return self.encode_utf16(code_points)

    def decode_ucs2(self, units: Sequence[int]) -> list[int] | None:
        if any(0xD800 <= unit <= 0xDFFF for unit in units):
            return None
        return self.decode_utf16(units)
