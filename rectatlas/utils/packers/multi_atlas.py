"""Multi-heuristic, multi-atlas packing.

The driver packs the same input once per ordering heuristic, spilling into a
new atlas whenever the current one is full, and keeps the ordering whose
atlases have the smallest total bounding box area.

Typical usage example:
    inputs = [RectInput.of(100, 200, 'mat1'), RectInput.of(150, 100, 'mat2')]
    outputs = pack_multi_atlas(inputs, SkylinePacker(PackerConfig()))
"""

import logging
from typing import List, Tuple

from ..rects import RectInput, RectOutput
from .base_packer import Packer, PackingError, check_input_sizes
from .heuristics import HEURISTICS, Heuristic

logger = logging.getLogger(__name__)


def _pack_ordering(
    inputs: List[RectInput], packer: Packer
) -> Tuple[List[RectOutput], int]:
    """Pack an ordering into as many atlases as needed.

    Args:
        inputs: Rectangles in the order to insert them.
        packer: Strategy to pack with. It is reset before use.

    Returns:
        Tuple of (placements, total_area) where total_area is the sum of the
        bounding box areas of every atlas used.

    Raises:
        PackingError: If a rectangle does not fit even an empty atlas.
    """
    placements = []
    total_area = 0
    atlas = 0
    atlas_is_empty = True

    packer.reset()
    for rect_input in inputs:
        rect = packer.insert(rect_input.size.w, rect_input.size.h)
        if rect is None and not atlas_is_empty:
            # use another atlas
            total_area += packer.used_area().area()
            atlas += 1
            packer.reset()
            rect = packer.insert(rect_input.size.w, rect_input.size.h)

        if rect is None:
            raise PackingError(
                "Rectangle {!r} of size {}x{} does not fit an empty {}x{} atlas".format(
                    rect_input.key,
                    rect_input.size.w,
                    rect_input.size.h,
                    packer.config.max_width,
                    packer.config.max_height,
                )
            )

        placements.append(RectOutput(rect, atlas, rect_input.key))
        atlas_is_empty = False

    total_area += packer.used_area().area()
    return placements, total_area


def pack_multi_atlas(inputs: List[RectInput], packer: Packer) -> List[RectOutput]:
    """Pack rectangles into fixed-size atlases using the best ordering.

    Every heuristic sorts ``inputs`` in place before its trial, so on return
    the list is left in the order of the last heuristic.

    Args:
        inputs: Rectangles to pack.
        packer: Strategy instance, reused and reset between trials.

    Returns:
        Placements of the winning ordering, grouped by atlas with atlas
        indices starting at 0.

    Raises:
        PackingError: If any rectangle is zero-sized or larger than an
            empty atlas in every orientation the packer may use.
    """
    if not inputs:
        return []

    check_input_sizes(inputs)

    best_output: List[RectOutput] = []
    best_area = None
    best_heuristic: Heuristic = HEURISTICS[0]

    for heuristic in HEURISTICS:
        heuristic.sort(inputs)
        current, current_area = _pack_ordering(inputs, packer)

        logger.debug(
            "Heuristic %s: %d atlas(es), total used area %d",
            heuristic.name,
            current[-1].atlas + 1,
            current_area,
        )

        if best_area is None or current_area < best_area:
            best_area = current_area
            best_output = current
            best_heuristic = heuristic

    logger.debug(
        "Packed %d rectangles with heuristic %s (total used area %d)",
        len(best_output),
        best_heuristic.name,
        best_area,
    )
    return best_output
