"""
Array conversion utilities.

Converts between sequences of ``Point`` and numpy arrays of shape ``(n, 2)``
with ``int32`` columns ``[x, y]``, for handing point sets to numeric code.
"""

from typing import Iterable

import numpy as np
from numpy.typing import NDArray
from pyrsistent import pvector
from pyrsistent.typing import PVector

from gridpoint.point import Point

PointArray = NDArray[np.int32]


def points_to_array(points: Iterable[Point]) -> PointArray:
    """Return an ``(n, 2)`` ``int32`` array with one ``[x, y]`` row per point."""
    rows = [p.as_tuple() for p in points]
    if not rows:
        return np.empty((0, 2), dtype=np.int32)
    return np.array(rows, dtype=np.int32)


def array_to_points(array: NDArray[np.integer]) -> PVector[Point]:
    """Return the points described by the rows of an ``(n, 2)`` integer array.

    Raises:
        ValueError: If ``array`` is not two-dimensional with exactly two columns,
            or does not hold integers.
    """
    arr = np.asarray(array)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an array of shape (n, 2), got {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Expected an integer array, got dtype {arr.dtype}")
    return pvector(Point(int(x), int(y)) for x, y in arr.tolist())
