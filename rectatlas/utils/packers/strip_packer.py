"""Strip (row) packing.

Rectangles are laid out left to right in rows, top to bottom. There is no
backtracking and no rotation, which makes every insertion O(1). It packs
loosely unless the inputs have about the same height, as font glyphs do.
"""

from typing import Optional

from ...config import PackerConfig
from ...type_hints import Position
from ..rects import Rectf
from .base_packer import Packer


class StripPacker(Packer):
    """Row-filling packer with a single cursor.

    Attributes:
        cursor_x: Left edge of the next rectangle in the current row.
        cursor_y: Top edge of the current row.
        row_height: Height of the tallest rectangle in the current row.
        overflowed: Set when a rectangle did not fit below the last row.
    """

    def __init__(self, config: Optional[PackerConfig] = None) -> None:
        super().__init__(config)
        self.cursor_x = 0
        self.cursor_y = 0
        self.row_height = 0
        self.overflowed = False

    def _clear(self) -> None:
        self.cursor_x = 0
        self.cursor_y = 0
        self.row_height = 0
        self.overflowed = False

    def cursor(self) -> Position:
        return self.cursor_x, self.cursor_y

    def fill_ratio(self) -> float:
        """Get the fraction of the atlas height used by the current row.

        When this gets high it might be time to start a new atlas.

        Returns:
            A value between 0 and 1, exactly 1 once the packer overflowed.
        """
        if self.overflowed or self.config.max_height == 0:
            return 1.0
        return (self.cursor_y + self.row_height) / self.config.max_height

    def insert(self, w: int, h: int) -> Optional[Rectf]:
        if not self._accepts(w, h) or w > self.config.max_width:
            return None

        x, y, row_height = self.cursor_x, self.cursor_y, self.row_height
        if x + w > self.config.max_width:
            # new row
            x = 0
            y += row_height
            row_height = 0

        row_height = max(row_height, h)
        if y + row_height > self.config.max_height:
            self.overflowed = True
            return None

        self.cursor_x, self.cursor_y, self.row_height = x + w, y, row_height

        rect = Rectf(x, y, w, h, False)
        self.used.expand_with(rect)
        return rect
