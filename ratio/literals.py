from __future__ import annotations

from ratio.errors import RangeError
from ratio.rational import Rational


def r(n: int) -> Rational:
    """Whole-number shorthand: r(5) is Rational(5, 1)."""
    if n < 0:
        raise RangeError(f"literal must be non-negative, got {n}")
    return Rational.from_integer(n)


R = r
