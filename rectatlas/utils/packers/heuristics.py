"""Orderings tried by the multi-heuristic packers.

Each heuristic sorts the input so that the rectangles that are hardest to
place come first. All of them sort in descending order.
"""

from typing import Callable, List, NamedTuple, Sequence

from ..rects import RectInput, Size


class Heuristic(NamedTuple):
    """A named sort key over rectangle sizes."""

    name: str
    key: Callable[[Size], float]

    def sort(self, inputs: List[RectInput]) -> None:
        """Sort ``inputs`` in place, largest key first.

        The sort is stable, so ties keep their previous relative order.
        """
        key = self.key
        inputs.sort(key=lambda r: key(r.size), reverse=True)

    def sorted(self, inputs: Sequence[RectInput]) -> List[RectInput]:
        ordering = list(inputs)
        self.sort(ordering)
        return ordering


HEURISTICS = (
    Heuristic("area", lambda s: s.area()),
    Heuristic("perimeter", lambda s: s.perimeter()),
    Heuristic("max_side", lambda s: s.max_side()),
    Heuristic("width", lambda s: s.w),
    Heuristic("height", lambda s: s.h),
    Heuristic("pathological", lambda s: s.pathological_mult()),
)


def orderings(inputs: Sequence[RectInput]) -> List[List[RectInput]]:
    """Get one sorted copy of ``inputs`` per heuristic, in heuristic order."""
    return [heuristic.sorted(inputs) for heuristic in HEURISTICS]
