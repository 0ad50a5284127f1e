"""Binary search for the smallest single atlas.

Instead of spilling into several fixed-size atlases, this module shrinks one
atlas as far as the split packer still fits every rectangle. The search is
the one of the original rectpack2D: both sides are halved together first,
then the width alone, then the height alone.

The search stops when the bin was successfully inserted into and the next
bin size to try differs from the last viable one by less than
``discard_step``. If the rectangles do not fit even the starting bin, the
search fails and reports the area it managed to insert instead of a size.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from ... import globs
from ...config import PackerConfig
from ..rects import Frame, Rect, RectInput, RectOutput, Size
from .base_packer import Packer, PackingError, check_input_sizes
from .heuristics import orderings as heuristic_orderings
from .split_packer import SplitPacker

logger = logging.getLogger(__name__)


class CallbackResult(Enum):
    """Result of callbacks for rectangle insertion.

    Used to control flow while the winning ordering is replayed.
    """

    ABORT_PACKING = 0
    CONTINUE_PACKING = 1


class BinDimension(Enum):
    """Dimensions for binary search on bin sizes."""

    BOTH = 0  # Shrink width and height together
    WIDTH = 1  # Only optimize width
    HEIGHT = 2  # Only optimize height


class PackingResult:
    """Outcome of a bin size search.

    Exactly one of ``size`` and ``inserted_area`` is meaningful: a successful
    search carries the viable bin, a failed one the area it did insert.

    Attributes:
        size: Smallest viable bin found, or None if the search failed.
        inserted_area: Total area inserted by the last failed attempt.
    """

    __slots__ = ("size", "inserted_area")

    def __init__(self, size: Optional[Size] = None, inserted_area: int = 0) -> None:
        self.size = size
        self.inserted_area = inserted_area

    @property
    def succeeded(self) -> bool:
        return self.size is not None

    def __repr__(self) -> str:
        if self.succeeded:
            return "PackingResult(size={!r})".format(self.size)
        return "PackingResult(inserted_area={})".format(self.inserted_area)


def _try_pack_all(packer: Packer, ordering: Sequence[RectInput], bin_size: Size) -> Tuple[bool, int]:
    """Reset the packer at ``bin_size`` and insert the whole ordering.

    Returns:
        Tuple of (all_inserted, total_inserted_area).
    """
    packer.reset(bin_size.copy())

    total_inserted_area = 0
    for rect_input in ordering:
        if packer.insert(rect_input.size.w, rect_input.size.h) is None:
            return False, total_inserted_area
        total_inserted_area += rect_input.size.area()

    return True, total_inserted_area


def _resize(candidate_bin: Size, dim: BinDimension, delta: int, limit: Size) -> None:
    """Move the tried side(s) of ``candidate_bin`` by ``delta`` within [0, limit]."""
    if dim in (BinDimension.BOTH, BinDimension.WIDTH):
        candidate_bin.w = min(limit.w, max(0, candidate_bin.w + delta))
    if dim in (BinDimension.BOTH, BinDimension.HEIGHT):
        candidate_bin.h = min(limit.h, max(0, candidate_bin.h + delta))


def _reached(candidate_bin: Size, dim: BinDimension, limit: Size) -> bool:
    """Check whether every tried side of ``candidate_bin`` is at its limit."""
    if dim == BinDimension.WIDTH:
        return candidate_bin.w >= limit.w
    if dim == BinDimension.HEIGHT:
        return candidate_bin.h >= limit.h
    return candidate_bin.w >= limit.w and candidate_bin.h >= limit.h


def best_packing_for_ordering_impl(
    packer: Packer,
    ordering: Sequence[RectInput],
    starting_bin: Size,
    discard_step: int,
    tried_dimension: BinDimension,
) -> PackingResult:
    """Binary search the bin size along one or both dimensions.

    Args:
        packer: Strategy to pack with; it is resized on every attempt.
        ordering: Rectangles in the order to insert them.
        starting_bin: Largest allowed bin.
        discard_step: Step at which the search stops. A value of zero or
            less means a step of one followed by ``-discard_step`` extra
            shrink attempts.
        tried_dimension: Which side(s) of the bin to vary.

    Returns:
        The smallest viable bin, or the inserted area if even the starting
        bin is too small. A viable bin never exceeds ``starting_bin`` on
        either side.
    """
    candidate_bin = starting_bin.copy()
    tries_before_discarding = 0

    if discard_step <= 0:
        tries_before_discarding = -discard_step
        discard_step = 1

    if tried_dimension == BinDimension.BOTH:
        candidate_bin.w //= 2
        candidate_bin.h //= 2
        step = candidate_bin.w // 2
    elif tried_dimension == BinDimension.WIDTH:
        candidate_bin.w //= 2
        step = candidate_bin.w // 2
    else:
        candidate_bin.h //= 2
        step = candidate_bin.h // 2

    while True:
        all_inserted, total_inserted_area = _try_pack_all(packer, ordering, candidate_bin)

        if all_inserted:
            # Successfully packed - try with a smaller bin
            if step <= discard_step:
                if tries_before_discarding > 0:
                    tries_before_discarding -= 1
                else:
                    return PackingResult(size=candidate_bin)

            _resize(candidate_bin, tried_dimension, -step, starting_bin)
        else:
            # Even the starting bin is too small
            if _reached(candidate_bin, tried_dimension, starting_bin):
                return PackingResult(inserted_area=total_inserted_area)

            # Failed to pack - try with a bigger bin, never past the starting one
            _resize(candidate_bin, tried_dimension, step, starting_bin)

        step = max(1, step // 2)


def best_packing_for_ordering(
    packer: Packer,
    ordering: Sequence[RectInput],
    starting_bin: Size,
    discard_step: int = globs.DEFAULT_DISCARD_STEP,
) -> PackingResult:
    """Find the smallest bin that holds a whole ordering.

    Both sides are optimized together first, then the width alone starting
    from that result, then the height alone starting from the width result.

    Args:
        packer: Strategy to pack with.
        ordering: Rectangles in the order to insert them.
        starting_bin: Largest allowed bin.
        discard_step: See ``best_packing_for_ordering_impl``.

    Returns:
        The smallest viable bin over the three phases, or the failed result
        of the joint phase.
    """
    result = best_packing_for_ordering_impl(
        packer, ordering, starting_bin, discard_step, BinDimension.BOTH
    )
    if not result.succeeded:
        return result

    best_bin = result.size
    logger.debug("Joint search settled on %dx%d", best_bin.w, best_bin.h)

    for dim in (BinDimension.WIDTH, BinDimension.HEIGHT):
        even_better = best_packing_for_ordering_impl(
            packer, ordering, best_bin, discard_step, dim
        )
        if even_better.succeeded and even_better.size.area() <= best_bin.area():
            best_bin = even_better.size
            logger.debug("%s search settled on %dx%d", dim.name, best_bin.w, best_bin.h)

    return PackingResult(size=best_bin)


def find_best_packing(
    orderings: Sequence[Sequence[RectInput]],
    config: Optional[PackerConfig] = None,
    discard_step: int = globs.DEFAULT_DISCARD_STEP,
    on_success: Optional[Callable[[Frame], CallbackResult]] = None,
    on_failure: Optional[Callable[[RectInput], CallbackResult]] = None,
) -> Size:
    """Find the best bin size among all provided rectangle orders.

    Only the best order is replayed into the final bin, reporting every
    rectangle to ``on_success`` or ``on_failure``. If no order fits the
    maximum bin, the order that inserted the most area is replayed at the
    maximum bin instead.

    Args:
        orderings: Candidate insertion orders of the same rectangles.
        config: Maximum bin and flipping policy.
        discard_step: See ``best_packing_for_ordering_impl``.
        on_success: Called with the frame of every placed rectangle.
        on_failure: Called with every rectangle that did not fit.

    Returns:
        The bounding box of the replayed placements.

    Raises:
        PackingError: If no orderings were given.
    """
    config = config if config is not None else PackerConfig()
    max_bin = Size(config.max_width, config.max_height)

    best_order = None
    best_bin = max_bin
    best_total_inserted = -1
    found_size = False

    # The root packer is reused, it is always reset before any attempt
    root = SplitPacker(config)

    for index, order in enumerate(orderings):
        result = best_packing_for_ordering(root, order, max_bin, discard_step)
        if result.succeeded:
            if result.size.area() <= best_bin.area():
                best_order = order
                best_bin = result.size
                found_size = True
            logger.debug("Ordering %d fits %dx%d", index, result.size.w, result.size.h)
        else:
            # Track the order inserting the most area in case none fits at all
            if not found_size and result.inserted_area > best_total_inserted:
                best_order = order
                best_total_inserted = result.inserted_area
            logger.debug("Ordering %d inserted only %d", index, result.inserted_area)

    if best_order is None:
        raise PackingError("no order found")

    root.reset(best_bin.copy())

    for rect_input in best_order:
        w, h = rect_input.size.w, rect_input.size.h
        rect = root.insert(w, h)
        if rect is not None:
            callback_result = (
                on_success(Frame(rect_input.key, rect, Rect(0, 0, w, h)))
                if on_success
                else CallbackResult.CONTINUE_PACKING
            )
        else:
            callback_result = (
                on_failure(rect_input) if on_failure else CallbackResult.CONTINUE_PACKING
            )
        if callback_result == CallbackResult.ABORT_PACKING:
            break

    return root.used_area()


def pack_single_atlas(
    inputs: Sequence[RectInput],
    config: Optional[PackerConfig] = None,
    discard_step: int = globs.DEFAULT_DISCARD_STEP,
) -> Tuple[Size, List[RectOutput]]:
    """Pack every rectangle into one atlas that is as small as possible.

    Every ordering heuristic is searched and the one reaching the smallest
    bin wins.

    Args:
        inputs: Rectangles to pack. The sequence itself is not reordered.
        config: Maximum atlas size and flipping policy.
        discard_step: See ``best_packing_for_ordering_impl``.

    Returns:
        Tuple of (used_size, placements), every placement on atlas 0.

    Raises:
        PackingError: If a rectangle is zero-sized or some rectangles do not
            fit the maximum atlas.
    """
    check_input_sizes(inputs)
    if not inputs:
        return Size(), []

    placements: List[RectOutput] = []
    unplaced: List[RectInput] = []

    def handle_success(frame: Frame) -> CallbackResult:
        placements.append(RectOutput(frame.rect, 0, frame.key))
        return CallbackResult.CONTINUE_PACKING

    def handle_failure(rect_input: RectInput) -> CallbackResult:
        unplaced.append(rect_input)
        return CallbackResult.CONTINUE_PACKING

    used = find_best_packing(
        heuristic_orderings(inputs),
        config,
        discard_step,
        handle_success,
        handle_failure,
    )

    if unplaced:
        logger.warning(
            "%d of %d rectangles do not fit a single atlas", len(unplaced), len(inputs)
        )
        raise PackingError(
            "Rectangles do not fit a single atlas: {}".format(
                ", ".join(repr(r.key) for r in unplaced)
            )
        )

    return used, placements
