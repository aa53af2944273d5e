"""Line rasterisation.

Uses Bresenham's line algorithm to list the grid points between two points.
Only integer additions are involved and every produced point lies within the
bounding box of the endpoints, so no 32-bit wrapping can occur.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from gridpoint.point import Point


def plot_line(src: Point, dest: Point) -> Iterator[Point]:
    """Yield every point on the line from ``src`` to ``dest``.

    Both endpoints are included; if ``src == dest`` only that point is yielded.

    Args:
        src (Point): Starting point.
        dest (Point): End point.

    Yields:
        Point: Successive points along the line, starting at ``src``.
    """
    point_cls = type(src)
    x, y = src.x, src.y
    end_x, end_y = dest.x, dest.y

    dx = abs(end_x - x)
    sx = 1 if x < end_x else -1
    dy = -abs(end_y - y)
    sy = 1 if y < end_y else -1
    err = dx + dy

    while True:
        yield point_cls(x, y)
        e2 = 2 * err
        if e2 >= dy:
            if x == end_x:
                return
            err += dy
            x += sx
        if e2 <= dx:
            if y == end_y:
                return
            err += dx
            y += sy
