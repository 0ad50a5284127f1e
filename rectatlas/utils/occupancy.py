"""Occupancy checks for packed layouts.

Rasterizes placements into per-pixel coverage counts so that a finished
layout can be checked for overlaps and for rectangles leaving their atlas.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from ..config import PackerConfig
from .packers.base_packer import PackingError
from .rects import Rect, RectOutput, Size

# Coverage counts, one per atlas pixel
coverage_dtype = np.uint16


def occupancy_mask(rects: Iterable[Rect], size: Size) -> np.ndarray:
    """Count how many rectangles cover each pixel of an atlas.

    Rectangles are clipped to the atlas.

    Args:
        rects: Placed rectangles.
        size: Atlas size.

    Returns:
        Array of shape ``(size.h, size.w)``.
    """
    mask = np.zeros((size.h, size.w), dtype=coverage_dtype)
    for r in rects:
        x0, y0 = max(r.x, 0), max(r.y, 0)
        x1, y1 = min(r.x + r.w, size.w), min(r.y + r.h, size.h)
        if x1 > x0 and y1 > y0:
            mask[y0:y1, x0:x1] += 1
    return mask


def coverage_ratio(rects: Iterable[Rect], size: Size) -> float:
    """Get the fraction of atlas pixels covered by at least one rectangle."""
    if size.area() == 0:
        return 0.0
    mask = occupancy_mask(rects, size)
    return float(np.count_nonzero(mask)) / size.area()


def find_overlaps(rects: Sequence[Rect]) -> List[Tuple[int, int]]:
    """Find every pair of rectangles whose interiors intersect.

    Args:
        rects: Rectangles of one atlas.

    Returns:
        Sorted index pairs ``(i, j)`` with ``i < j``.
    """
    if not rects:
        return []

    boxes = np.array([(r.x, r.y, r.x + r.w, r.y + r.h) for r in rects], dtype=np.int64)
    order = np.argsort(boxes[:, 0], kind="stable")
    left, top, right, bottom = boxes[order].T

    # Sweep along x: only rectangles starting before a right edge can reach it
    ends = np.searchsorted(left, right, side="left")

    pairs = []
    for a in range(len(order)):
        b = np.arange(a + 1, max(a + 1, ends[a]))
        if not b.size:
            continue
        hits = b[
            (left[a] < right[b])
            & (top[a] < bottom[b])
            & (top[b] < bottom[a])
        ]
        i = int(order[a])
        for j in order[hits].tolist():
            pairs.append((min(i, j), max(i, j)))
    return sorted(pairs)


def validate_layout(outputs: Iterable[RectOutput], config: PackerConfig) -> None:
    """Check a multi-atlas layout for stray or overlapping placements.

    Args:
        outputs: Placements produced by one packing run.
        config: The configuration the layout was packed with.

    Raises:
        PackingError: If a placement leaves its atlas or two placements of
            the same atlas overlap.
    """
    bounds = Rect(0, 0, config.max_width, config.max_height)
    by_atlas: Dict[int, List[RectOutput]] = defaultdict(list)

    for output in outputs:
        if not bounds.contains(output.rect):
            raise PackingError(
                "{!r} leaves the {}x{} atlas {}".format(
                    output.key, config.max_width, config.max_height, output.atlas
                )
            )
        by_atlas[output.atlas].append(output)

    for atlas, placed in by_atlas.items():
        overlaps = find_overlaps([o.rect for o in placed])
        if overlaps:
            i, j = overlaps[0]
            raise PackingError(
                "{!r} overlaps {!r} in atlas {}".format(placed[i].key, placed[j].key, atlas)
            )
