from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Any
import logging

import numpy as np

from ratio.errors import DivideByZero, Overflow, RangeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntStorage:
    """A fixed-width signed integer type used to hold numerators and denominators.

    Values are carried as Python ints and checked against the width's range
    after every operation, so nothing ever wraps around silently.
    """

    dtype: np.dtype
    min: int
    max: int

    @staticmethod
    @lru_cache(maxsize=None)
    def _of_dtype(dtype: np.dtype) -> "IntStorage":
        info = np.iinfo(dtype)
        return IntStorage(dtype, int(info.min), int(info.max))

    @staticmethod
    def of(dtype: Any) -> "IntStorage":
        dt = np.dtype(dtype)
        if not np.issubdtype(dt, np.signedinteger):
            raise TypeError(f"storage must be a signed integer dtype, not {dt}")
        return IntStorage._of_dtype(dt)

    @property
    def name(self) -> str:
        return self.dtype.name

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    def fits(self, value: int) -> bool:
        return self.min <= value <= self.max

    def contains(self, other: IntStorage) -> bool:
        return self.min <= other.min and other.max <= self.max

    def coerce(self, value: Any) -> int:
        if not isinstance(value, (int, np.integer)):
            raise TypeError(f"expected an integer, got {type(value).__name__}")
        v = int(value)
        if not self.fits(v):
            logger.debug("%d does not fit %s", v, self.name)
            raise RangeError(f"{v} does not fit in {self.name}")
        return v

    def check(self, value: int, op: str) -> int:
        if not self.fits(value):
            logger.debug("%s overflowed %s: %d", op, self.name, value)
            raise Overflow(f"{op} overflowed {self.name}")
        return value

    def add(self, a: int, b: int) -> int:
        return self.check(a + b, "addition")

    def sub(self, a: int, b: int) -> int:
        return self.check(a - b, "subtraction")

    def mul(self, a: int, b: int) -> int:
        return self.check(a * b, "multiplication")

    def neg(self, a: int) -> int:
        return self.check(-a, "negation")

    def abs(self, a: int) -> int:
        return self.check(abs(a), "absolute value")

    def div(self, a: int, b: int) -> int:
        # truncates toward zero
        if b == 0:
            raise DivideByZero()
        q = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            q = -q
        return self.check(q, "division")

    def rem(self, a: int, b: int) -> int:
        # sign follows the dividend; |result| < |b| so it always fits
        if b == 0:
            raise DivideByZero()
        r = abs(a) % abs(b)
        return -r if a < 0 else r

    def pow10(self, exp: int) -> int:
        return self.check(10**exp, f"10**{exp}")


INT32 = IntStorage.of(np.int32)
INT64 = IntStorage.of(np.int64)
INTP = IntStorage.of(np.intp)
