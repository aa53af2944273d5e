from .point import Point
from .line import plot_line
from .types import Int32, PointTuple
from .utils.array import array_to_points, points_to_array
from .utils.int32 import I32_MAX, I32_MIN

__all__ = [
    "Point",
    "plot_line",
    "Int32",
    "PointTuple",
    "array_to_points",
    "points_to_array",
    "I32_MAX",
    "I32_MIN",
]
