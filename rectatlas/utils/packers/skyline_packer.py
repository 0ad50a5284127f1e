"""Skyline bin packing.

The packer keeps the upper boundary of the placed content as a list of
horizontal segments sorted by their ``x`` position. The segments always
cover the full atlas width and no two neighbours share the same height.

Derived from the skyline packer of texture_packer:
https://github.com/PistonDevelopers/texture_packer
"""

from typing import List, Optional, Tuple

from ...config import PackerConfig
from ...type_hints import SkylineSegment
from ..rects import Rect, Rectf
from .base_packer import Packer


class Skyline:
    """One horizontal segment of the skyline.

    Attributes:
        x: Left edge of the segment.
        y: Height at which the next rectangle can rest on this segment.
        w: Width of the segment.
    """

    __slots__ = ("x", "y", "w")

    def __init__(self, x: int, y: int, w: int) -> None:
        self.x = x
        self.y = y
        self.w = w

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return self.x + self.w - 1

    def __repr__(self) -> str:
        return "Skyline(x={}, y={}, w={})".format(self.x, self.y, self.w)


class SkylinePacker(Packer):
    """Bottom-left skyline packer.

    Each rectangle is placed where its bottom edge ends up lowest, preferring
    the narrowest starting segment on ties. This keeps the skyline flat and
    avoids tall needle-like gaps.

    Attributes:
        skylines: Segments sorted by their ``x`` position.
    """

    def __init__(self, config: Optional[PackerConfig] = None) -> None:
        super().__init__(config)
        self.skylines: List[Skyline] = []
        self._clear()

    def _clear(self) -> None:
        self.skylines = [Skyline(0, 0, self.config.max_width)]

    def can_put(self, i: int, w: int, h: int) -> Optional[Rect]:
        """Check whether a rectangle can rest on the skyline starting at ``i``.

        Args:
            i: Index of the leftmost segment the rectangle would span.
            w: Width of the rectangle.
            h: Height of the rectangle.

        Returns:
            The placement, or None if it would leave the atlas.
        """
        rect = Rect(self.skylines[i].x, 0, w, h)
        width_left = rect.w
        while True:
            rect.y = max(rect.y, self.skylines[i].y)
            if (
                rect.x + rect.w > self.config.max_width
                or rect.y + rect.h > self.config.max_height
            ):
                return None
            if self.skylines[i].w >= width_left:
                return rect
            width_left -= self.skylines[i].w
            i += 1

    def find_skyline(self, w: int, h: int) -> Optional[Tuple[int, Rect, bool]]:
        """Find the lowest and narrowest placement for a rectangle.

        Args:
            w: Requested width.
            h: Requested height.

        Returns:
            Tuple of (segment_index, placement, flipped), or None if the
            rectangle fits nowhere in either orientation.
        """
        best = None
        bottom = width = None

        orientations = [(w, h, False)]
        if self.config.allow_flipping and w != h:
            orientations.append((h, w, True))

        for i, skyline in enumerate(self.skylines):
            for rw, rh, flipped in orientations:
                r = self.can_put(i, rw, rh)
                if r is None:
                    continue
                if (
                    best is None
                    or r.bottom() < bottom
                    or (r.bottom() == bottom and skyline.w < width)
                ):
                    bottom = r.bottom()
                    width = skyline.w
                    best = (i, r, flipped)

        return best

    def split(self, index: int, rect: Rect) -> None:
        """Raise the skyline under a newly placed rectangle.

        Args:
            index: Index where the new segment is inserted.
            rect: The placed rectangle.
        """
        self.skylines.insert(index, Skyline(rect.left(), rect.bottom() + 1, rect.w))

        i = index + 1
        while i < len(self.skylines):
            previous = self.skylines[i - 1]
            current = self.skylines[i]
            if current.left() > previous.right():
                break

            shrink = previous.right() - current.left() + 1
            if current.w <= shrink:
                del self.skylines[i]
            else:
                current.x += shrink
                current.w -= shrink
                break

    def merge(self) -> None:
        """Join neighbouring segments that share the same height."""
        i = 1
        while i < len(self.skylines):
            if self.skylines[i - 1].y == self.skylines[i].y:
                self.skylines[i - 1].w += self.skylines[i].w
                del self.skylines[i]
            else:
                i += 1

    def insert(self, w: int, h: int) -> Optional[Rectf]:
        if not self._accepts(w, h):
            return None

        found = self.find_skyline(w, h)
        if found is None:
            return None

        i, rect, flipped = found
        self.split(i, rect)
        self.merge()
        self.used.expand_with(rect)
        return Rectf.from_rect(rect, flipped)

    def segments(self) -> List[SkylineSegment]:
        """Get the skyline as ``(x, y, w)`` tuples, left to right."""
        return [(s.x, s.y, s.w) for s in self.skylines]
