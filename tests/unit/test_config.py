"""Unit tests for codec configuration."""

from __future__ import annotations

import pytest

from tfsattrs import CodecConfig


class TestCodecConfig:
    """Test CodecConfig validation."""

    def test_defaults(self) -> None:
        """Test default configuration."""
        config = CodecConfig()

        assert config.text_encoding == "latin-1"
        assert config.append_terminator is False

    def test_unknown_encoding(self) -> None:
        """Test unknown text encodings are rejected."""
        with pytest.raises(ValueError, match="Unknown text_encoding"):
            CodecConfig(text_encoding="not-a-codec")
