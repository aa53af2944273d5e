"""Integer point / vector value type.

``Point`` represents either a position on a 2D grid or a displacement between
two positions. Coordinates are signed 32-bit integers and every operation wraps
on overflow (see `gridpoint.utils.int32`), so ``Point(I32_MAX, 0) + Point(1, 0)``
is ``Point(I32_MIN, 0)``.

Points are immutable and hashable: operations always return a new ``Point``.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from gridpoint import line
from gridpoint.types import Int32, PointTuple
from gridpoint.utils.int32 import (
    I32_MAX,
    wrap_i32,
    wrapping_abs,
    wrapping_add,
    wrapping_div,
    wrapping_mul,
    wrapping_neg,
    wrapping_sub,
)


@dataclass(frozen=True)
class Point:
    """
    A 2D integer co-ordinate.

    Attributes:
        x: X co-ordinate.
        y: Y co-ordinate.
    """

    x: Int32
    y: Int32

    ORIGIN: ClassVar[Point]

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "x", wrap_i32(self.x))
        object.__setattr__(self, "y", wrap_i32(self.y))

    @classmethod
    def from_tuple(cls, value: PointTuple) -> Point:
        x, y = value
        return cls(x, y)

    def as_tuple(self) -> PointTuple:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # -------- Vector arithmetic --------

    def add(self, other: Point) -> Point:
        """Component-wise sum."""
        return Point(wrapping_add(self.x, other.x), wrapping_add(self.y, other.y))

    def subtract(self, other: Point) -> Point:
        """Component-wise difference."""
        return Point(wrapping_sub(self.x, other.x), wrapping_sub(self.y, other.y))

    def scale(self, k: Int32) -> Point:
        """Multiply both co-ordinates by the scalar ``k``."""
        k = wrap_i32(k)
        return Point(wrapping_mul(self.x, k), wrapping_mul(self.y, k))

    def dot(self, other: Point) -> Int32:
        """Dot product ``x1*x2 + y1*y2``."""
        return wrap_i32(self.x * other.x + self.y * other.y)

    def neg(self) -> Point:
        return Point(wrapping_neg(self.x), wrapping_neg(self.y))

    def div(self, divisor: Int32) -> Point:
        """Divide both co-ordinates by ``divisor``, rounding toward zero.

        Raises:
            ZeroDivisionError: If ``divisor`` is zero.
        """
        divisor = wrap_i32(divisor)
        return Point(wrapping_div(self.x, divisor), wrapping_div(self.y, divisor))

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, k: object) -> Point:
        try:
            scalar = operator.index(k)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return self.neg()

    # -------- Rotation --------

    def rotate_90_cw(self) -> Point:
        """Rotate about the origin by 90 degrees clockwise: ``(1, 0) -> (0, -1)``."""
        return Point(self.y, wrapping_neg(self.x))

    def rotate_90_acw(self) -> Point:
        """Rotate about the origin by 90 degrees anti-clockwise: ``(1, 0) -> (0, 1)``."""
        return Point(wrapping_neg(self.y), self.x)

    def rotate_180(self) -> Point:
        """Rotate about the origin by 180 degrees. Same as ``-p``."""
        return self.neg()

    # -------- Neighbourhood --------

    def get_all_adjacent(self) -> PVector[Point]:
        """Return the four orthogonally adjacent points.

        Order starts east and rotates clockwise: east, south, west, north.
        """
        points = []
        offset = Point(1, 0)
        for _ in range(4):
            points.append(self + offset)
            offset = offset.rotate_90_cw()
        return pvector(points)

    def get_all_adjacent_diagonal(self) -> PVector[Point]:
        """Return the eight points surrounding this one, diagonals included."""
        return pvector(
            self + Point(dx, dy)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if dx != 0 or dy != 0
        )

    def get_adjacent(self, max_x: Int32, max_y: Int32) -> PVector[Optional[Point]]:
        """Return the orthogonal neighbours, with ``None`` for any outside the bounds.

        Uses the same ordering as `get_all_adjacent`; a neighbour is kept only if it
        passes ``bounds_check(max_x, max_y)``.
        """
        return pvector(
            p if p.bounds_check(max_x, max_y) else None for p in self.get_all_adjacent()
        )

    def bounds_check(self, max_x: Int32, max_y: Int32) -> bool:
        """Return True if ``0 <= x < max_x`` and ``0 <= y < max_y``."""
        return 0 <= self.x < max_x and 0 <= self.y < max_y

    # -------- Direction indexing --------

    def dir(self) -> int:
        """Map the four unit points to 0..3 for indexing a 4-element collection.

        South ``(0, -1)`` -> 0, west ``(-1, 0)`` -> 1, north ``(0, 1)`` -> 2,
        east ``(1, 0)`` -> 3. Any other point returns a meaningless value.
        """
        return abs(wrap_i32(2 * self.x + self.y + 1))

    def inv_dir(self) -> int:
        """Index two away from `dir`, i.e. the opposite direction."""
        d = self.dir()
        return d + 2 if d < 2 else d - 2

    # -------- Distances --------

    def dist(self, other: Point) -> float:
        """Euclidean distance to ``other``.

        Computed from the wrapped `dist_squared`; if that has wrapped negative the
        result is ``nan``.
        """
        squared = self.dist_squared(other)
        if squared < 0:
            return math.nan
        return math.sqrt(squared)

    def dist_squared(self, other: Point) -> Int32:
        """Squared euclidean distance to ``other`` (skips the square root)."""
        disp = self - other
        return disp.dot(disp)

    def manhattan_dist(self, other: Point) -> Int32:
        """Manhattan (taxicab) distance to ``other``."""
        return wrapping_add(
            wrapping_abs(wrapping_sub(self.x, other.x)),
            wrapping_abs(wrapping_sub(self.y, other.y)),
        )

    # -------- Index conversion --------

    @classmethod
    def convert_up(cls, index: int, width: int) -> Point:
        """Convert a row-major index into a co-ordinate, given the row ``width``.

        Raises:
            ValueError: If ``index`` is outside ``0..I32_MAX`` or ``width`` is not
                positive.
        """
        if width <= 0:
            raise ValueError(f"Width must be positive, got {width}")
        if not 0 <= index <= I32_MAX:
            raise ValueError(f"Index must be in 0..{I32_MAX}, got {index}")
        return cls(index % width, index // width)

    def convert_down(self, width: int) -> int:
        """Inverse of `convert_up`: the row-major index of this point.

        Raises:
            ValueError: If ``width`` is not positive or the point has a negative
                co-ordinate.
        """
        if width <= 0:
            raise ValueError(f"Width must be positive, got {width}")
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Cannot convert negative point {self} to an index")
        return self.y * width + self.x

    # -------- Lines --------

    @staticmethod
    def plot_line(src: Point, dest: Point) -> Iterator[Point]:
        """Iterate over the points on the line from ``src`` to ``dest`` (inclusive)."""
        return line.plot_line(src, dest)


Point.ORIGIN = Point(0, 0)
