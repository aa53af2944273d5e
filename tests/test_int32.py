import logging

import pytest

from gridpoint.utils.int32 import (
    I32_MAX,
    I32_MIN,
    wrap_i32,
    wrapping_abs,
    wrapping_add,
    wrapping_div,
    wrapping_mul,
    wrapping_neg,
    wrapping_sub,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (I32_MAX, I32_MAX),
        (I32_MIN, I32_MIN),
        (I32_MAX + 1, I32_MIN),
        (I32_MIN - 1, I32_MAX),
        (2**32, 0),
        (2**32 + 5, 5),
        (-(2**33) - 1, -1),
        (True, 1),
    ],
)
def test_wrap_i32(value: int, expected: int) -> None:
    assert wrap_i32(value) == expected


def test_wrap_i32_rejects_float() -> None:
    with pytest.raises(TypeError):
        wrap_i32(1.0)  # type: ignore[arg-type]


def test_wrapping_ops() -> None:
    assert wrapping_add(I32_MAX, 1) == I32_MIN
    assert wrapping_sub(I32_MIN, 1) == I32_MAX
    assert wrapping_mul(I32_MAX, I32_MAX) == 1
    assert wrapping_neg(I32_MIN) == I32_MIN
    assert wrapping_abs(I32_MIN) == I32_MIN
    assert wrapping_abs(-5) == 5


def test_wrapping_div_truncates() -> None:
    assert wrapping_div(-7, 2) == -3
    assert wrapping_div(7, -2) == -3
    assert wrapping_div(I32_MIN, -1) == I32_MIN
    with pytest.raises(ZeroDivisionError):
        wrapping_div(1, 0)


def test_overflow_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="gridpoint.utils.int32"):
        wrap_i32(5)
        assert caplog.records == []
        wrap_i32(I32_MAX + 1)
    assert len(caplog.records) == 1
    assert "overflow" in caplog.records[0].getMessage()
