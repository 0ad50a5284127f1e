"""Texture atlas rectangle packing.

This library packs axis-aligned rectangles (images, glyphs, sprites) into
one or more fixed-size atlases with little wasted area, optionally rotating
them by 90 degrees. Three strategies share one packer contract: skyline,
free rectangle splitting and row filling. On top of them sit a driver that
tries several input orderings and spills into as many atlases as needed,
and a search for the smallest single atlas holding every rectangle.

MIT License

Copyright (c) 2018 shotariya

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
"""

__version__ = "1.0.0"

from .config import PackerConfig  # noqa: E402
from .utils.occupancy import (  # noqa: E402
    coverage_ratio,
    find_overlaps,
    occupancy_mask,
    validate_layout,
)
from .utils.packers import (  # noqa: E402
    PackerKind,
    create_packer,
    pack,
)
from .utils.packers.base_packer import Packer, PackingError  # noqa: E402
from .utils.packers.bin_size_optimizer import (  # noqa: E402
    BinDimension,
    CallbackResult,
    PackingResult,
    best_packing_for_ordering,
    find_best_packing,
    pack_single_atlas,
)
from .utils.packers.heuristics import HEURISTICS, Heuristic  # noqa: E402
from .utils.packers.skyline_packer import SkylinePacker  # noqa: E402
from .utils.packers.split_packer import SplitPacker, insert_and_split  # noqa: E402
from .utils.packers.strip_packer import StripPacker  # noqa: E402
from .utils.rects import (  # noqa: E402
    Frame,
    Rect,
    RectInput,
    Rectf,
    RectOutput,
    Size,
)

__all__ = [
    "BinDimension",
    "CallbackResult",
    "Frame",
    "HEURISTICS",
    "Heuristic",
    "Packer",
    "PackerConfig",
    "PackerKind",
    "PackingError",
    "PackingResult",
    "Rect",
    "RectInput",
    "RectOutput",
    "Rectf",
    "Size",
    "SkylinePacker",
    "SplitPacker",
    "StripPacker",
    "best_packing_for_ordering",
    "coverage_ratio",
    "create_packer",
    "find_best_packing",
    "find_overlaps",
    "insert_and_split",
    "occupancy_mask",
    "pack",
    "pack_single_atlas",
    "validate_layout",
]
