"""Contract shared by every packing strategy.

A packer owns the free-space state of exactly one atlas. Callers feed it
rectangles one at a time, read back the bounding box of what it placed and
reset it before packing the next atlas.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ...config import PackerConfig
from ..rects import RectInput, Rectf, Size


class PackingError(Exception):
    """Indicates that the input can not be packed under the given bounds."""

    pass


class Packer(ABC):
    """Base class for the skyline, split and strip strategies.

    Attributes:
        used: Bounding box of every rectangle placed since the last reset.
    """

    def __init__(self, config: Optional[PackerConfig] = None) -> None:
        self._config = config if config is not None else PackerConfig()
        self.used = Size()

    @property
    def config(self) -> PackerConfig:
        """The configuration bounding the current atlas."""
        return self._config

    @abstractmethod
    def insert(self, w: int, h: int) -> Optional[Rectf]:
        """Place a rectangle of the given size.

        A failed insertion leaves the packer exactly as it was.

        Args:
            w: Requested width.
            h: Requested height.

        Returns:
            The placed rectangle, or None if it fits nowhere in this atlas.
        """

    def reset(self, resize: Optional[Size] = None) -> None:
        """Clear all placed rectangles.

        Args:
            resize: New atlas bounds for subsequent insertions, if given.
        """
        if resize is not None:
            self._config = self._config.with_size(resize)
        self.used = Size()
        self._clear()

    @abstractmethod
    def _clear(self) -> None:
        """Restore the strategy specific state of an empty atlas."""

    def used_area(self) -> Size:
        """Get the bounding box of everything placed so far.

        Returns:
            A copy of the bounding box, measured from the atlas origin.
        """
        return self.used.copy()

    def _accepts(self, w: int, h: int) -> bool:
        return (
            w > 0
            and h > 0
            and self._config.max_width > 0
            and self._config.max_height > 0
        )


def check_input_sizes(inputs: Iterable[RectInput]) -> None:
    """Reject rectangles with a zero-sized side.

    Raises:
        PackingError: For the first zero-sized rectangle found.
    """
    for rect_input in inputs:
        if rect_input.size.w <= 0 or rect_input.size.h <= 0:
            raise PackingError(
                "Rectangle {!r} has a zero-sized side {}x{}".format(
                    rect_input.key, rect_input.size.w, rect_input.size.h
                )
            )
