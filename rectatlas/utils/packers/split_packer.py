"""Split packer - free rectangle list bin packing.

This module provides the free-space splitting strategy of the rectpack2D
algorithm originally written in C++ by TeamHypersomnia. It is derived from
the lightmap packer by Jim Scott but keeps the empty spaces in a flat list
instead of a tree.

Original C++ implementation by TeamHypersomnia:
https://github.com/TeamHypersomnia/rectpack2D

Copyright (c) 2022 Patryk Czachurski

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

Typical usage example:
    packer = SplitPacker(PackerConfig(max_width=256, max_height=256))
    rect = packer.insert(100, 200)
"""

from typing import List, Optional, Tuple

from ... import globs
from ...config import PackerConfig
from ..rects import Rect, Rectf
from .base_packer import Packer

# Type alias for spaces
SpaceRect = Rect


class CreatedSplits:
    """Splits created after inserting a rectangle.

    Holds the zero, one or two spaces left over after placing a rectangle in
    a larger space. Only the first ``count`` entries of ``spaces`` are valid.

    Attributes:
        count: Number of splits created, or -1 if the insertion failed.
        spaces: Fixed-capacity list of space rectangles.
    """

    __slots__ = ("count", "spaces")

    def __init__(self, *spaces: SpaceRect) -> None:
        """Initialize with provided spaces.

        Args:
            *spaces: At most ``MAX_SPLITS`` space rectangles.
        """
        self.count = len(spaces)
        self.spaces: List[Optional[SpaceRect]] = list(spaces)
        self.spaces.extend([None] * (globs.MAX_SPLITS - len(spaces)))

    @staticmethod
    def failed() -> "CreatedSplits":
        """Create a failed splits instance.

        Used when a rectangle cannot be inserted into a space.

        Returns:
            A CreatedSplits instance marked as failed.
        """
        result = CreatedSplits()
        result.count = -1
        return result

    @staticmethod
    def none() -> "CreatedSplits":
        """Create an empty splits instance for an exact fit."""
        return CreatedSplits()

    def valid_spaces(self) -> List[SpaceRect]:
        """Get the created spaces, never reading past ``count``."""
        return [self.spaces[i] for i in range(max(self.count, 0))]

    def better_than(self, other: "CreatedSplits") -> bool:
        """Check if this split is better than another.

        Fewer splits are considered better as it reduces fragmentation.

        Args:
            other: Another CreatedSplits instance to compare with.

        Returns:
            True if this split is better than the other, False otherwise.
        """
        return self.count < other.count

    def __bool__(self) -> bool:
        return 0 <= self.count <= globs.MAX_SPLITS

    def __repr__(self) -> str:
        return "CreatedSplits(count={}, spaces={!r})".format(
            self.count, self.valid_spaces()
        )


def insert_and_split(w: int, h: int, sp: SpaceRect) -> CreatedSplits:
    """Insert a rectangle into a space and create splits if needed.

    Args:
        w: Width of the rectangle to insert.
        h: Height of the rectangle to insert.
        sp: Space rectangle to insert into.

    Returns:
        CreatedSplits instance containing the resulting splits after insertion.
        Returns failed splits if the rectangle doesn't fit.
    """
    free_w = sp.w - w
    free_h = sp.h - h

    if free_w < 0 or free_h < 0:
        # Image is bigger than the candidate empty space
        return CreatedSplits.failed()

    if free_w == 0 and free_h == 0:
        return CreatedSplits.none()

    # Image fits with one dimension exactly
    if free_w > 0 and free_h == 0:
        return CreatedSplits(SpaceRect(sp.x + w, sp.y, free_w, sp.h))

    if free_w == 0 and free_h > 0:
        return CreatedSplits(SpaceRect(sp.x, sp.y + h, sp.w, free_h))

    # Image is strictly smaller than the space. One huge and one tiny space
    # leave more room for later insertions than two medium ones.
    if free_w > free_h:
        bigger_split = SpaceRect(sp.x + w, sp.y, free_w, sp.h)
        lesser_split = SpaceRect(sp.x, sp.y + h, w, free_h)
        return CreatedSplits(bigger_split, lesser_split)

    bigger_split = SpaceRect(sp.x, sp.y + h, sp.w, free_h)
    lesser_split = SpaceRect(sp.x + w, sp.y, free_w, h)
    return CreatedSplits(bigger_split, lesser_split)


class EmptySpaces:
    """Storage of empty spaces in a bin.

    Attributes:
        empty_spaces: List of empty space rectangles.
    """

    def __init__(self) -> None:
        self.empty_spaces: List[SpaceRect] = []

    def remove(self, i: int) -> None:
        """Remove a space at the given index.

        Efficiently removes by swapping with the last element.

        Args:
            i: Index of the space to remove.
        """
        self.empty_spaces[i] = self.empty_spaces[-1]
        self.empty_spaces.pop()

    def add(self, r: SpaceRect) -> None:
        self.empty_spaces.append(r)

    def get_count(self) -> int:
        return len(self.empty_spaces)

    def reset(self) -> None:
        self.empty_spaces.clear()

    def get(self, i: int) -> SpaceRect:
        return self.empty_spaces[i]


class SplitPacker(Packer):
    """Free rectangle list packer.

    Every insertion consumes one empty space and replaces it with the
    remainder spaces produced by ``insert_and_split``. Spaces are tried in
    reverse creation order, so small leftover fragments get reused before
    the larger original spaces.

    Attributes:
        spaces: Storage for empty spaces.
    """

    def __init__(self, config: Optional[PackerConfig] = None) -> None:
        super().__init__(config)
        self.spaces = EmptySpaces()
        self._clear()

    def _clear(self) -> None:
        self.spaces.reset()
        self.spaces.add(SpaceRect(0, 0, self.config.max_width, self.config.max_height))

    @staticmethod
    def _try_insertion(
        w: int,
        h: int,
        candidate_space: SpaceRect,
        try_flipping: bool,
    ) -> Tuple[Optional[CreatedSplits], bool]:
        """Try to insert a rectangle, optionally with flipping.

        Args:
            w: Width of the rectangle to insert.
            h: Height of the rectangle to insert.
            candidate_space: Space to insert into.
            try_flipping: Whether to try flipping the rectangle.

        Returns:
            Tuple of (splits_to_use, should_flip). ``splits_to_use`` is None
            if neither orientation fits.
        """
        normal = insert_and_split(w, h, candidate_space)

        if try_flipping:
            flipped = insert_and_split(h, w, candidate_space)
            if normal and flipped:
                if flipped.better_than(normal):
                    return flipped, True
                return normal, False
            elif flipped:
                return flipped, True

        if normal:
            return normal, False

        return None, False

    def insert(self, w: int, h: int) -> Optional[Rectf]:
        if not self._accepts(w, h):
            return None

        try_flipping = self.config.allow_flipping

        for i in range(self.spaces.get_count() - 1, -1, -1):
            candidate_space = self.spaces.get(i)

            splits_to_use, should_flip = self._try_insertion(
                w, h, candidate_space, try_flipping
            )
            if splits_to_use is None:
                continue

            self.spaces.remove(i)
            for space in splits_to_use.valid_spaces():
                self.spaces.add(space)

            if should_flip:
                result = Rectf(candidate_space.x, candidate_space.y, h, w, True)
            else:
                result = Rectf(candidate_space.x, candidate_space.y, w, h, False)

            self.used.expand_with(result)
            return result

        return None

    def remaining_spaces(self) -> List[SpaceRect]:
        """Get a copy of the current empty spaces, in storage order."""
        return [Rect(s.x, s.y, s.w, s.h) for s in self.spaces.empty_spaces]
