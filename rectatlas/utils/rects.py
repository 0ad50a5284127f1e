"""Geometry primitives shared by every packing strategy.

Sizes and rectangles are plain integer pixel values with the origin at the
top-left corner of an atlas. Rectangles returned by a packer carry a
``flipped`` flag telling the caller that the placed width and height are
swapped relative to the requested ones.
"""

from typing import Generic, Optional

from ..type_hints import Box, Key


class Size:
    """Width and height of a rectangle.

    Attributes:
        w: Width in pixels.
        h: Height in pixels.
    """

    __slots__ = ("w", "h")

    def __init__(self, w: int = 0, h: int = 0) -> None:
        self.w = w
        self.h = h

    def flip(self) -> "Size":
        """Swap width and height.

        Returns:
            Self after flipping for method chaining.
        """
        self.w, self.h = self.h, self.w
        return self

    def flipped(self) -> "Size":
        """Get a rotated copy, leaving this size untouched."""
        return Size(self.h, self.w)

    def max_side(self) -> int:
        return max(self.w, self.h)

    def min_side(self) -> int:
        return min(self.w, self.h)

    def area(self) -> int:
        return self.w * self.h

    def perimeter(self) -> int:
        return 2 * self.w + 2 * self.h

    def pathological_mult(self) -> float:
        """Get the area weighted by how far the shape is from a square.

        Long thin rectangles score much higher than squares of the same
        area, which makes them sort first in the pathological ordering.

        Returns:
            ``max_side / min_side * area``.
        """
        return self.max_side() / self.min_side() * self.area()

    def expand_with(self, r: "Rect") -> None:
        """Expand this size so that it encloses ``r`` measured from the origin.

        Args:
            r: Rectangle with position and size.
        """
        self.w = max(self.w, r.x + r.w)
        self.h = max(self.h, r.y + r.h)

    def copy(self) -> "Size":
        return Size(self.w, self.h)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.w == other.w and self.h == other.h

    def __hash__(self) -> int:
        return hash((self.w, self.h))

    def __repr__(self) -> str:
        return "Size(w={}, h={})".format(self.w, self.h)


class Rect:
    """Rectangle with position (x, y) and size (w, h).

    ``bottom()`` and ``right()`` are inclusive, so they are only meaningful
    for rectangles with a non-zero height and width. Packers never place
    zero-sized rectangles.

    Attributes:
        x: X-coordinate of the top-left corner.
        y: Y-coordinate of the top-left corner.
        w: Width of the rectangle.
        h: Height of the rectangle.
    """

    __slots__ = ("x", "y", "w", "h")

    def __init__(self, x: int = 0, y: int = 0, w: int = 0, h: int = 0) -> None:
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def area(self) -> int:
        return self.w * self.h

    def size(self) -> Size:
        return Size(self.w, self.h)

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return self.y + self.h - 1

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return self.x + self.w - 1

    def contains(self, other: "Rect") -> bool:
        """Check if this rectangle completely contains another rectangle.

        Args:
            other: The rectangle to check for containment.

        Returns:
            True if ``other`` lies inside this rectangle on all four edges.
        """
        return (
            self.left() <= other.left()
            and self.right() >= other.right()
            and self.top() <= other.top()
            and self.bottom() >= other.bottom()
        )

    def intersects(self, other: "Rect") -> bool:
        """Check if the interiors of two rectangles overlap.

        Rectangles that only share an edge do not intersect.

        Args:
            other: The rectangle to test against.

        Returns:
            True if the rectangles share at least one pixel.
        """
        return not (
            self.x + self.w <= other.x
            or other.x + other.w <= self.x
            or self.y + self.h <= other.y
            or other.y + other.h <= self.y
        )

    def as_box(self) -> Box:
        return self.x, self.y, self.w, self.h

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.as_box() == other.as_box()

    def __hash__(self) -> int:
        return hash(self.as_box())

    def __repr__(self) -> str:
        return "Rect(x={}, y={}, w={}, h={})".format(self.x, self.y, self.w, self.h)


class Rectf(Rect):
    """Placed rectangle that may have been flipped sideways.

    ``w`` and ``h`` are the placed dimensions: when ``flipped`` is True they
    are the requested height and width respectively.

    Attributes:
        flipped: Whether the rectangle was rotated by 90 degrees.
    """

    __slots__ = ("flipped",)

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        w: int = 0,
        h: int = 0,
        flipped: bool = False,
    ) -> None:
        super().__init__(x, y, w, h)
        self.flipped = flipped

    @classmethod
    def from_rect(cls, rect: Rect, flipped: bool) -> "Rectf":
        return cls(rect.x, rect.y, rect.w, rect.h, flipped)

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectf):
            return NotImplemented
        return self.as_box() == other.as_box() and self.flipped == other.flipped

    def __hash__(self) -> int:
        return hash((self.as_box(), self.flipped))

    def __repr__(self) -> str:
        return "Rectf(x={}, y={}, w={}, h={}, flipped={})".format(
            self.x, self.y, self.w, self.h, self.flipped
        )


class RectInput(Generic[Key]):
    """Rectangle requested by the caller.

    Attributes:
        size: Requested width and height.
        key: Caller-owned identifier, carried to the output unchanged.
    """

    __slots__ = ("size", "key")

    def __init__(self, size: Size, key: Key) -> None:
        self.size = size
        self.key = key

    @classmethod
    def of(cls, w: int, h: int, key: Key) -> "RectInput[Key]":
        return cls(Size(w, h), key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RectInput):
            return NotImplemented
        return self.size == other.size and self.key == other.key

    def __repr__(self) -> str:
        return "RectInput(size={!r}, key={!r})".format(self.size, self.key)


class RectOutput(Generic[Key]):
    """Final placement of one input rectangle.

    Attributes:
        rect: Placed rectangle in atlas-local coordinates.
        atlas: Index of the atlas the rectangle landed in, starting at 0.
        key: The key of the matching ``RectInput``.
    """

    __slots__ = ("rect", "atlas", "key")

    def __init__(self, rect: Rectf, atlas: int, key: Key) -> None:
        self.rect = rect
        self.atlas = atlas
        self.key = key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RectOutput):
            return NotImplemented
        return (
            self.rect == other.rect
            and self.atlas == other.atlas
            and self.key == other.key
        )

    def __repr__(self) -> str:
        return "RectOutput(rect={!r}, atlas={}, key={!r})".format(
            self.rect, self.atlas, self.key
        )


class Frame(Generic[Key]):
    """Placement reported by the single-atlas best-packing search.

    Attributes:
        key: The key of the matching ``RectInput``.
        rect: Placed rectangle in atlas-local coordinates.
        source: The requested rectangle, anchored at the origin.
    """

    __slots__ = ("key", "rect", "source")

    def __init__(self, key: Key, rect: Rectf, source: Optional[Rect] = None) -> None:
        self.key = key
        self.rect = rect
        if source is None:
            w, h = (rect.h, rect.w) if rect.flipped else (rect.w, rect.h)
            source = Rect(0, 0, w, h)
        self.source = source

    @property
    def flipped(self) -> bool:
        return self.rect.flipped

    def __repr__(self) -> str:
        return "Frame(key={!r}, rect={!r}, source={!r})".format(
            self.key, self.rect, self.source
        )
