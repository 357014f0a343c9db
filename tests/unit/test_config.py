"""Unit tests for codec configuration."""

from __future__ import annotations

import pytest

from tagpack import DEFAULT_CONFIG, CodecConfig


class TestCodecConfig:
    """Test configuration validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        assert DEFAULT_CONFIG.max_depth == 128
        assert DEFAULT_CONFIG.max_buffer_size is None

    @pytest.mark.parametrize("depth", [0, -1, 193])
    def test_invalid_depth(self, depth: int) -> None:
        """Test max_depth bounds."""
        with pytest.raises(ValueError, match="max_depth"):
            CodecConfig(max_depth=depth)

    def test_invalid_buffer_size(self) -> None:
        """Test max_buffer_size must be positive."""
        with pytest.raises(ValueError, match="max_buffer_size"):
            CodecConfig(max_buffer_size=0)

    def test_frozen(self) -> None:
        """Test configs are immutable."""
        config = CodecConfig(max_depth=8)
        with pytest.raises(AttributeError):
            config.max_depth = 9  # type: ignore[misc]
