"""
Tests for the ordering heuristics
"""
import pytest

from rectatlas import HEURISTICS, RectInput
from rectatlas.utils.packers.heuristics import orderings


def shapes():
    return [
        RectInput.of(10, 2, "a"),
        RectInput.of(4, 6, "b"),
        RectInput.of(3, 9, "c"),
        RectInput.of(5, 5, "d"),
    ]


class TestHeuristics:
    """Test the fixed table of descending orderings"""

    def test_names_in_order(self):
        assert [h.name for h in HEURISTICS] == [
            "area",
            "perimeter",
            "max_side",
            "width",
            "height",
            "pathological",
        ]

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("area", ["c", "d", "b", "a"]),
            # a and c tie on 24, b and d on 20; ties keep the input order
            ("perimeter", ["a", "c", "b", "d"]),
            ("max_side", ["a", "c", "b", "d"]),
            ("width", ["a", "d", "b", "c"]),
            ("height", ["c", "b", "d", "a"]),
            ("pathological", ["a", "c", "b", "d"]),
        ],
    )
    def test_sorts_descending(self, name, expected):
        heuristic = next(h for h in HEURISTICS if h.name == name)
        assert [r.key for r in heuristic.sorted(shapes())] == expected

    def test_sort_is_in_place(self):
        inputs = shapes()
        HEURISTICS[0].sort(inputs)
        assert [r.key for r in inputs] == ["c", "d", "b", "a"]

    def test_orderings_leave_input_alone(self):
        inputs = shapes()
        result = orderings(inputs)
        assert len(result) == len(HEURISTICS)
        assert [r.key for r in inputs] == ["a", "b", "c", "d"]
        assert [r.key for r in result[3]] == ["a", "d", "b", "c"]
