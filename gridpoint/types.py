from typing import Tuple


# Python ints are unbounded; values annotated ``Int32`` are kept in the signed
# 32-bit range by ``gridpoint.utils.int32``.
Int32 = int

PointTuple = Tuple[Int32, Int32]
