"""
Tests for the row/strip packer
"""
import pytest

from rectatlas import PackerConfig, Rectf, Size, StripPacker


@pytest.fixture
def packer():
    return StripPacker(PackerConfig(max_width=50, max_height=10))


class TestStripPacker:
    """Test row filling"""

    def test_rows_wrap_and_overflow(self, packer):
        assert packer.insert(20, 5) == Rectf(0, 0, 20, 5, False)
        assert packer.insert(20, 5) == Rectf(20, 0, 20, 5, False)
        assert packer.insert(20, 5) == Rectf(0, 5, 20, 5, False)
        assert packer.insert(40, 5) is None
        assert packer.fill_ratio() == 1.0
        assert packer.overflowed

    def test_failed_insert_keeps_cursor(self, packer):
        for _ in range(3):
            packer.insert(20, 5)
        assert packer.cursor() == (20, 5)
        assert packer.insert(40, 5) is None
        assert packer.cursor() == (20, 5)
        assert packer.used_area() == Size(40, 10)
        assert packer.insert(30, 5) == Rectf(20, 5, 30, 5, False)

    def test_too_wide_is_rejected_without_overflow(self, packer):
        assert packer.insert(51, 1) is None
        assert not packer.overflowed
        assert packer.fill_ratio() == 0.0

    def test_row_height_follows_tallest(self, packer):
        packer.insert(10, 3)
        packer.insert(10, 6)
        assert packer.fill_ratio() == pytest.approx(0.6)
        packer.insert(40, 1)
        assert packer.cursor() == (40, 6)

    def test_never_rotates(self):
        packer = StripPacker(PackerConfig(max_width=10, max_height=50, allow_flipping=True))
        assert packer.insert(20, 5) is None

    def test_reset_clears_overflow(self, packer):
        packer.insert(50, 10)
        packer.insert(1, 1)
        assert packer.overflowed
        packer.reset()
        assert not packer.overflowed
        assert packer.cursor() == (0, 0)
        assert packer.used_area() == Size(0, 0)
        assert packer.fill_ratio() == 0.0

    def test_reset_with_resize(self, packer):
        packer.reset(Size(100, 100))
        assert packer.insert(100, 100) == Rectf(0, 0, 100, 100, False)

    def test_zero_height_atlas_is_full(self):
        packer = StripPacker(PackerConfig(max_width=10, max_height=0))
        assert packer.fill_ratio() == 1.0
        assert packer.insert(1, 1) is None

    def test_glyph_row(self, glyph_inputs):
        packer = StripPacker(PackerConfig(max_width=128, max_height=128))
        placed = [packer.insert(r.size.w, r.size.h) for r in glyph_inputs]
        assert all(p is not None for p in placed)
        assert all(not p.flipped for p in placed)
        assert 0.0 < packer.fill_ratio() <= 1.0
