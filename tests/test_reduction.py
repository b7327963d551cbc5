import pytest

from ratio.errors import DivideByZero, Overflow
from ratio.reduction import gcd, reduce_pair
from ratio.storage import INT32


@pytest.mark.parametrize(
    "a,b,g",
    [(12, 18, 6), (-12, 18, 6), (12, -18, 6), (0, 5, 5), (5, 0, 5), (0, 0, 1), (17, 5, 1), (1, 1, 1)],
)
def test_gcd(a, b, g) -> None:
    assert gcd(a, b) == g


@pytest.mark.parametrize(
    "pair,expected",
    [((-4, 8), (-1, 2)), ((4, -8), (-1, 2)), ((-4, -8), (1, 2)), ((0, 7), (0, 1)), ((0, -3), (0, 1)), ((10, 3), (10, 3))],
)
def test_reduce_pair(pair, expected) -> None:
    assert reduce_pair(*pair, INT32) == expected


def test_reduce_pair_zero_denominator() -> None:
    with pytest.raises(DivideByZero):
        reduce_pair(7, 0, INT32)


def test_reduce_pair_sign_flip_of_most_negative_overflows() -> None:
    with pytest.raises(Overflow):
        reduce_pair(INT32.min, -1, INT32)
    assert reduce_pair(INT32.min, -2, INT32) == (2**30, 1)
