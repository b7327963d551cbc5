from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from ratio import Overflow, RangeError, Rational, Rational32, Rational64, ratio_type
from ratio.rational import DEFAULT_PRECISION


def test_to_float(width) -> None:
    x = width.from_pair(10, 3)
    assert x.to_float() == 3.3333333333333335
    assert float(x) == 3.3333333333333335
    assert isinstance(float(x), float)
    assert x.to_float(np.float32) == np.float32(10) / np.float32(3)
    assert width(-1, 4).to_float() == -0.25


def test_to_float_rejects_integer_dtypes() -> None:
    with pytest.raises(TypeError):
        Rational(1, 2).to_float(np.int64)


@pytest.mark.parametrize(
    "value,precision,expected",
    [
        (0.5, 1, (1, 2)),
        (0.1, DEFAULT_PRECISION, (1, 10)),
        (-0.25, 2, (-1, 4)),
        (3.14159, 2, (157, 50)),
        (2.5, 0, (3, 1)),
        (-2.5, 0, (-3, 1)),
        (7, 3, (7, 1)),
        (Decimal("1.005"), 2, (101, 100)),
        (np.float32(0.75), 2, (3, 4)),
    ],
)
def test_from_decimal(width, value, precision, expected) -> None:
    x = width.from_decimal(value, precision)
    assert (x.numerator(), x.denominator()) == expected


def test_from_decimal_default_precision() -> None:
    x = Rational64.from_decimal(1 / 3)
    assert (x.numerator(), x.denominator()) == (333333, 1000000)


def test_from_decimal_overflow() -> None:
    with pytest.raises(Overflow):
        Rational32.from_decimal(2**31 - 1, 1)
    with pytest.raises(Overflow):
        Rational32.from_decimal(0.5, 10)
    with pytest.raises(Overflow):
        Rational64.from_decimal(float(2**62), 2)
    with pytest.raises(Overflow):
        Rational64.from_decimal(1.0, 19)


def test_from_decimal_rejects_bad_input() -> None:
    with pytest.raises(RangeError):
        Rational64.from_decimal(float("inf"))
    with pytest.raises(RangeError):
        Rational64.from_decimal(float("nan"))
    with pytest.raises(RangeError):
        Rational64.from_decimal(Decimal("-Infinity"))
    with pytest.raises(ValueError):
        Rational64.from_decimal(0.5, -1)


def test_to_fraction() -> None:
    assert Rational32(-4, 8).to_fraction() == Fraction(-1, 2)
    assert Rational64(10, 3).to_fraction() == Fraction(10, 3)


def test_widening_conversion() -> None:
    x = Rational32(1, 2).convert(Rational64)
    assert type(x) is Rational64
    assert x == Rational64(1, 2)
    assert Rational64.from_ratio(Rational32(-3, 7)) == Rational64(-3, 7)


def test_narrowing_conversion_is_checked() -> None:
    assert Rational64(5, 9).convert(Rational32) == Rational32(5, 9)
    with pytest.raises(RangeError):
        Rational64(2**40).convert(Rational32)
    with pytest.raises(RangeError):
        Rational64(1, 2**33).convert(Rational32)
    R8 = ratio_type(np.int8)
    with pytest.raises(RangeError):
        Rational32(300, 7).convert(R8)
    assert Rational32(-128, 127).convert(R8).numerator() == -128


def test_from_ratio_requires_a_ratio() -> None:
    with pytest.raises(TypeError):
        Rational32.from_ratio(Fraction(1, 2))


@pytest.mark.parametrize("precision", [2.0, "2", None, True])
def test_from_decimal_precision_must_be_an_int(precision) -> None:
    with pytest.raises(TypeError):
        Rational64.from_decimal(0.5, precision)


def test_from_decimal_accepts_numpy_precision() -> None:
    x = Rational64.from_decimal(0.25, np.int32(2))
    assert (x.numerator(), x.denominator()) == (1, 4)
