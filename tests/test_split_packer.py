"""
Tests for the free rectangle split packer
"""
from rectatlas import PackerConfig, Rect, Rectf, Size, SplitPacker, insert_and_split


def no_flip(w, h):
    return PackerConfig(max_width=w, max_height=h, allow_flipping=False)


class TestInsertAndSplit:
    """Test the split rule on a single space"""

    space = Rect(0, 0, 10, 10)

    def test_too_big_fails(self):
        splits = insert_and_split(11, 1, self.space)
        assert not splits
        assert splits.valid_spaces() == []

    def test_exact_fit_creates_no_splits(self):
        splits = insert_and_split(10, 10, self.space)
        assert splits
        assert splits.count == 0

    def test_matching_height_leaves_strip_to_the_right(self):
        splits = insert_and_split(4, 10, self.space)
        assert splits.valid_spaces() == [Rect(4, 0, 6, 10)]

    def test_matching_width_leaves_strip_below(self):
        splits = insert_and_split(10, 4, self.space)
        assert splits.valid_spaces() == [Rect(0, 4, 10, 6)]

    def test_more_width_left_splits_vertically(self):
        """Big split spans the full height to the right, small one sits below"""
        splits = insert_and_split(2, 5, self.space)
        assert splits.valid_spaces() == [Rect(2, 0, 8, 10), Rect(0, 5, 2, 5)]

    def test_more_height_left_splits_horizontally(self):
        """Big split spans the full width below, small one sits to the right"""
        splits = insert_and_split(5, 2, self.space)
        assert splits.valid_spaces() == [Rect(0, 2, 10, 8), Rect(5, 0, 5, 2)]

    def test_fewer_splits_is_better(self):
        assert insert_and_split(10, 10, self.space).better_than(insert_and_split(4, 10, self.space))
        assert insert_and_split(4, 10, self.space).better_than(insert_and_split(2, 5, self.space))


class TestSplitPacker:
    """Test insertion into a split packer"""

    def test_second_large_square_does_not_fit(self):
        packer = SplitPacker(no_flip(100, 100))
        assert packer.insert(60, 60) == Rectf(0, 0, 60, 60, False)
        assert packer.insert(60, 60) is None

    def test_newest_space_is_tried_first(self):
        packer = SplitPacker(no_flip(100, 100))
        packer.insert(60, 60)
        assert packer.remaining_spaces() == [Rect(0, 60, 100, 40), Rect(60, 0, 40, 60)]
        assert packer.insert(30, 30) == Rectf(60, 0, 30, 30, False)

    def test_flipping_when_only_rotation_fits(self):
        packer = SplitPacker(PackerConfig(max_width=10, max_height=4))
        assert packer.insert(4, 10) == Rectf(0, 0, 10, 4, True)
        assert packer.remaining_spaces() == []

    def test_flipping_prefers_fewer_splits(self):
        packer = SplitPacker(PackerConfig(max_width=10, max_height=6))
        assert packer.insert(6, 4) == Rectf(0, 0, 4, 6, True)
        assert packer.remaining_spaces() == [Rect(4, 0, 6, 6)]

    def test_normal_orientation_wins_ties(self):
        packer = SplitPacker(PackerConfig(max_width=10, max_height=10))
        assert packer.insert(3, 5) == Rectf(0, 0, 3, 5, False)

    def test_no_flipping_when_disabled(self):
        packer = SplitPacker(no_flip(10, 4))
        assert packer.insert(4, 10) is None

    def test_failed_insert_keeps_state(self):
        packer = SplitPacker(no_flip(100, 100))
        packer.insert(60, 60)
        spaces = packer.remaining_spaces()
        used = packer.used_area()
        assert packer.insert(70, 70) is None
        assert packer.remaining_spaces() == spaces
        assert packer.used_area() == used

    def test_used_area_is_bounding_box(self):
        packer = SplitPacker(no_flip(100, 100))
        packer.insert(60, 20)
        packer.insert(10, 50)
        assert packer.used_area() == Size(60, 70)

    def test_reset_with_resize(self):
        packer = SplitPacker(no_flip(100, 100))
        packer.insert(60, 60)
        packer.reset(Size(30, 20))
        assert packer.used_area() == Size(0, 0)
        assert packer.remaining_spaces() == [Rect(0, 0, 30, 20)]
        assert packer.config.max_width == 30
        assert packer.config.max_height == 20
        assert packer.insert(31, 1) is None

    def test_reset_does_not_touch_callers_config(self):
        config = no_flip(100, 100)
        packer = SplitPacker(config)
        packer.reset(Size(5, 5))
        assert config.max_width == 100

    def test_zero_sized_atlas_accepts_nothing(self):
        packer = SplitPacker(no_flip(0, 100))
        assert packer.insert(1, 1) is None

    def test_zero_sized_request_is_never_placed(self):
        packer = SplitPacker(no_flip(100, 100))
        assert packer.insert(0, 10) is None
        assert packer.remaining_spaces() == [Rect(0, 0, 100, 100)]

    def test_reset_reproduces_placements(self, make_inputs):
        packer = SplitPacker(PackerConfig(max_width=256, max_height=256))
        inputs = make_inputs(count=30)

        first = [packer.insert(r.size.w, r.size.h) for r in inputs]
        packer.reset()
        second = [packer.insert(r.size.w, r.size.h) for r in inputs]

        assert first == second
