"""
Tests for the packer configuration
"""
import pytest
from pydantic import ValidationError

from rectatlas import PackerConfig, Size, SkylinePacker


class TestPackerConfig:
    """Test defaults and validation"""

    def test_defaults(self):
        config = PackerConfig()
        assert config.max_width == 1024
        assert config.max_height == 1024
        assert config.allow_flipping is True

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            PackerConfig(max_width=-1)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PackerConfig(padding=2)

    def test_frozen(self):
        config = PackerConfig()
        with pytest.raises(ValidationError):
            config.max_width = 10

    def test_with_size(self):
        config = PackerConfig(allow_flipping=False)
        resized = config.with_size(Size(64, 32))
        assert (resized.max_width, resized.max_height) == (64, 32)
        assert resized.allow_flipping is False
        assert config.max_width == 1024

    def test_packer_defaults_to_default_config(self):
        packer = SkylinePacker()
        assert packer.config == PackerConfig()
