from typing import List, Tuple

import pytest

from gridpoint import Point, plot_line


def line_tuples(src: Tuple[int, int], dest: Tuple[int, int]) -> List[Tuple[int, int]]:
    return [p.as_tuple() for p in plot_line(Point(*src), Point(*dest))]


def test_single_point_line() -> None:
    assert line_tuples((2, 2), (2, 2)) == [(2, 2)]


def test_horizontal_line() -> None:
    assert line_tuples((0, 0), (3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_vertical_line_going_down() -> None:
    assert line_tuples((1, 2), (1, -1)) == [(1, 2), (1, 1), (1, 0), (1, -1)]


def test_diagonal_line() -> None:
    assert line_tuples((0, 0), (-3, 3)) == [(0, 0), (-1, 1), (-2, 2), (-3, 3)]


def test_shallow_line() -> None:
    assert line_tuples((0, 0), (4, 2)) == [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2)]


@pytest.mark.parametrize(
    "src, dest",
    [((0, 0), (7, 3)), ((5, -2), (-4, 6)), ((-3, -3), (2, 9)), ((0, 0), (0, 5))],
)
def test_line_properties(src: Tuple[int, int], dest: Tuple[int, int]) -> None:
    points = list(plot_line(Point(*src), Point(*dest)))
    assert points[0] == Point(*src)
    assert points[-1] == Point(*dest)
    # One point per step along the major axis, each a king's move from the last.
    dx, dy = abs(dest[0] - src[0]), abs(dest[1] - src[1])
    assert len(points) == max(dx, dy) + 1
    for a, b in zip(points, points[1:]):
        step = b - a
        assert max(abs(step.x), abs(step.y)) == 1


def test_point_plot_line_delegates() -> None:
    assert list(Point.plot_line(Point(0, 0), Point(2, 0))) == [
        Point(0, 0),
        Point(1, 0),
        Point(2, 0),
    ]
