import math

import pytest

from uniquote.utils.math import div_trunc, isqrt


@pytest.mark.parametrize(
    "value,expected",
    [(0, 0), (1, 1), (2, 1), (3, 1), (4, 2), (15, 3), (16, 4), (17, 4), (10**40, 10**20)],
)
def test_isqrt(value, expected):
    assert isqrt(value) == expected


def test_isqrt_matches_stdlib():
    for value in range(2_000):
        assert isqrt(value) == math.isqrt(value)


@pytest.mark.parametrize("root", [2**128 - 1, 10**30 + 7, 12345678901234567890])
def test_isqrt_large(root):
    assert isqrt(root * root) == root
    assert isqrt(root * root - 1) == root - 1
    assert isqrt(root * root + 2 * root) == root


def test_isqrt_negative():
    with pytest.raises(ValueError):
        isqrt(-1)


@pytest.mark.parametrize(
    "numerator,denominator,expected",
    [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)],
)
def test_div_trunc(numerator, denominator, expected):
    assert div_trunc(numerator, denominator) == expected


def test_div_trunc_zero():
    with pytest.raises(ZeroDivisionError):
        div_trunc(1, 0)
