"""Tests for hex-string framing."""

from __future__ import annotations

import pytest

from tfsattrs import FramingError, decode_hex, encode_hex, from_hex, to_hex


class TestHexString:
    """Test hex conversion."""

    def test_to_hex_uppercase(self) -> None:
        """Test hex output is uppercase by default."""
        assert to_hex(b"\x0f\xab") == "0FAB"
        assert to_hex(b"\x0f\xab", uppercase=False) == "0fab"

    def test_from_hex(self) -> None:
        """Test either case and whitespace are accepted."""
        assert from_hex("0f AB\n05") == b"\x0f\xab\x05"

    @pytest.mark.parametrize("text", ["0", "0G", "zz"])
    def test_from_hex_invalid(self, text: str) -> None:
        """Test invalid hex raises FramingError."""
        with pytest.raises(FramingError, match="Invalid hex"):
            from_hex(text)


class TestHexCodec:
    """Test hex-string decode/encode helpers."""

    def test_decode_hex(self) -> None:
        """Test decoding from hex text."""
        item = decode_hex("0F05")

        assert item.count == 5

    def test_encode_hex(self) -> None:
        """Test encoding to uppercase hex text."""
        item = decode_hex("0f1e241e00")

        assert encode_hex(item) == "0F1E241E00"
