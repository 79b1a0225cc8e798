# tests/test_intmath.py

import random

import pytest

from calschema.core.errors import ArithmeticOverflowError
from calschema.engines._intmath import (
    INT32_MAX,
    INT32_MIN,
    adjusted_modulo,
    augmented_divide,
    checked_add,
    checked_mul,
    divide,
    divide_mod,
    is_int32,
    modulo,
)


def test_floor_semantics_on_negative_operands():
    assert divide(-1, 4) == -1
    assert modulo(-1, 4) == 3
    assert divide_mod(-7, 3) == (-3, 2)
    assert divide(7, 3) == 2


def test_shift_matches_floor_division():
    """The schemas rely on >> and & being floor division/modulo by powers of 2."""
    random.seed(42)
    for _ in range(10000):
        n = random.randint(-10**9, 10**9)
        assert n >> 2 == divide(n, 4)
        assert n & 3 == modulo(n, 4)


def test_augmented_divide_remainder_is_one_based():
    assert augmented_divide(0, 30) == (0, 1)
    assert augmented_divide(29, 30) == (0, 30)
    assert augmented_divide(30, 30) == (1, 1)
    assert augmented_divide(-1, 30) == (-1, 30)


def test_adjusted_modulo():
    assert [adjusted_modulo(n, 12) for n in (1, 12, 13, 0, -11)] == [1, 12, 1, 12, 1]


def test_checked_arithmetic():
    assert checked_add(INT32_MAX - 1, 1) == INT32_MAX
    assert checked_add(INT32_MIN + 1, -1) == INT32_MIN
    with pytest.raises(ArithmeticOverflowError):
        checked_add(INT32_MAX, 1)
    with pytest.raises(ArithmeticOverflowError):
        checked_add(INT32_MIN, -1)
    with pytest.raises(ArithmeticOverflowError):
        checked_mul(1 << 16, 1 << 16)
    assert checked_mul(-(1 << 16), 1 << 15) == INT32_MIN
    assert is_int32(INT32_MAX) and not is_int32(INT32_MAX + 1)


def test_overflow_error_is_an_overflow_error():
    with pytest.raises(OverflowError):
        checked_add(INT32_MAX, INT32_MAX)
