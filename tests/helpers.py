from __future__ import annotations

from ratio.reduction import gcd


def is_canonical(value) -> bool:
    n, d = value.numerator(), value.denominator()
    return d > 0 and gcd(n, d) == 1 and (n != 0 or d == 1)
