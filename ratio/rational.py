from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, Optional, Type, TypeVar, Union
import logging
import math

import numpy as np

from ratio.errors import RangeError
from ratio.parser import parse_ratio
from ratio.reduction import reduce_pair
from ratio.storage import INT32, INT64, INTP, IntStorage

logger = logging.getLogger(__name__)

# decimal digits kept by from_decimal unless told otherwise
DEFAULT_PRECISION = 6

R = TypeVar("R", bound="Ratio")
Number = Union[int, float, Decimal, np.integer, np.floating]

def _exact(value: Number) -> Fraction:
	if isinstance(value, (int, np.integer)):
		return Fraction(int(value))
	if isinstance(value, Decimal):
		finite = value.is_finite()
	else:
		value = float(value)
		finite = math.isfinite(value)
	if not finite:
		logger.debug("refusing non-finite value %r", value)
		raise RangeError(f"cannot represent {value!r} as a ratio")
	return Fraction(value)

def _round_half_away(f: Fraction) -> int:
	q, r = divmod(abs(f.numerator), f.denominator)
	if 2 * r >= f.denominator:
		q += 1
	return -q if f < 0 else q

class Ratio:
	"""Exact fraction numerator/denominator over a fixed-width signed integer.

	Ratio itself is generic; concrete widths are the subclasses Rational32,
	Rational64, Rational (native pointer width) and whatever ratio_type()
	builds. Values of different widths never mix implicitly.
	"""
	__slots__ = ("_n", "_d")
	storage: IntStorage
	def __new__(cls, *args: Any, **kwargs: Any) -> Ratio:
		if getattr(cls, "storage", None) is None:
			raise TypeError("Ratio is generic; use Rational32, Rational64, Rational or ratio_type()")
		return super().__new__(cls)
	def __init__(self, num: int, den: int | None = None) -> None:
		s = self.storage
		if den is None:
			self._n, self._d = s.coerce(num), 1
		else:
			self._n, self._d = reduce_pair(s.coerce(num), s.coerce(den), s)

	# construction
	@classmethod
	def _raw(cls: Type[R], n: int, d: int) -> R:
		r = cls.__new__(cls)
		r._n, r._d = n, d
		return r
	@classmethod
	def from_integer(cls: Type[R], n: int) -> R:
		return cls._raw(cls.storage.coerce(n), 1)
	@classmethod
	def from_pair(cls: Type[R], numerator: int, denominator: int) -> R:
		"""Reduced value; raises DivideByZero for a zero denominator."""
		return cls(numerator, denominator)
	@classmethod
	def from_raw_pair(cls: Type[R], numerator: int, denominator: int) -> R:
		"""Stores the pair as given: no reduction, no sign normalization."""
		s = cls.storage
		return cls._raw(s.coerce(numerator), s.coerce(denominator))
	@classmethod
	def from_decimal(cls: Type[R], value: Number, precision: int = DEFAULT_PRECISION) -> R:
		"""Nearest value with denominator 10**precision, then reduced.

		Raises Overflow when 10**precision or the scaled value leave the
		storage range.
		"""
		if isinstance(precision, bool) or not isinstance(precision, (int, np.integer)):
			raise TypeError(f"precision must be an int, not {type(precision).__name__}")
		precision = int(precision)
		if precision < 0:
			raise ValueError("precision must be non-negative")
		s = cls.storage
		scale = s.pow10(precision)
		scaled = _round_half_away(_exact(value) * scale)
		return cls.from_pair(s.check(scaled, "decimal scaling"), scale)
	@classmethod
	def from_ratio(cls: Type[R], value: Ratio) -> R:
		if not isinstance(value, Ratio):
			raise TypeError(f"expected a ratio, got {type(value).__name__}")
		s = cls.storage
		if not (s.fits(value._n) and s.fits(value._d)):
			logger.debug("narrowing %r to %s failed", value, s.name)
			raise RangeError(f"{value!r} does not fit in {s.name}")
		return cls._raw(value._n, value._d)
	@classmethod
	def parse(cls: Type[R], text: str) -> R:
		return parse_ratio(text, cls)
	@classmethod
	def zero(cls: Type[R]) -> R:
		return cls.from_pair(0, 1)
	@classmethod
	def one(cls: Type[R]) -> R:
		return cls.from_pair(1, 1)
	@classmethod
	def pi(cls: Type[R]) -> R:
		return cls.from_pair(6283, 2000)
	def convert(self, target: Type[R]) -> R:
		return target.from_ratio(self)
	def reduced(self: R) -> R:
		return self.from_pair(self._n, self._d)

	# accessors
	def numerator(self) -> int:
		return self._n
	def denominator(self) -> int:
		return self._d
	def is_zero(self) -> bool:
		return self._n == 0
	def is_positive(self) -> bool:
		return self.signum() > 0
	def is_negative(self) -> bool:
		return self.signum() < 0
	def is_integer(self) -> bool:
		return self._d == 1
	def signum(self) -> int:
		# raw pairs may carry the sign in the denominator
		if self._n == 0:
			return 0
		return 1 if (self._n > 0) == (self._d > 0) else -1

	# arithmetic
	def _operand(self: R, other: Any) -> Optional[R]:
		if type(other) is type(self):
			return other
		if isinstance(other, (int, np.integer)):
			return self.from_integer(other)
		return None
	def __add__(self: R, other: Any) -> R:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		s = self.storage
		return self.from_pair(s.add(s.mul(self._n, rhs._d), s.mul(self._d, rhs._n)), s.mul(self._d, rhs._d))
	def __sub__(self: R, other: Any) -> R:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		s = self.storage
		return self.from_pair(s.sub(s.mul(self._n, rhs._d), s.mul(self._d, rhs._n)), s.mul(self._d, rhs._d))
	def __mul__(self: R, other: Any) -> R:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		s = self.storage
		return self.from_pair(s.mul(self._n, rhs._n), s.mul(self._d, rhs._d))
	def __truediv__(self: R, other: Any) -> R:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		s = self.storage
		return self.from_pair(s.mul(self._n, rhs._d), s.mul(self._d, rhs._n))
	def __mod__(self: R, other: Any) -> R:
		# truncated remainder: the result takes the sign of self
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		s = self.storage
		r = s.rem(s.mul(self._n, rhs._d), s.mul(self._d, rhs._n))
		return self.from_pair(r, s.mul(self._d, rhs._d))
	def __radd__(self: R, other: Any) -> R:
		lhs = self._operand(other)
		return NotImplemented if lhs is None else lhs + self
	def __rsub__(self: R, other: Any) -> R:
		lhs = self._operand(other)
		return NotImplemented if lhs is None else lhs - self
	def __rmul__(self: R, other: Any) -> R:
		lhs = self._operand(other)
		return NotImplemented if lhs is None else lhs * self
	def __rtruediv__(self: R, other: Any) -> R:
		lhs = self._operand(other)
		return NotImplemented if lhs is None else lhs / self
	def __rmod__(self: R, other: Any) -> R:
		lhs = self._operand(other)
		return NotImplemented if lhs is None else lhs % self
	def __neg__(self: R) -> R:
		return self._raw(self.storage.neg(self._n), self._d)
	def __pos__(self: R) -> R:
		return self._raw(self._n, self._d)
	def __abs__(self: R) -> R:
		return -self if self.signum() < 0 else +self
	def __pow__(self: R, exp: int) -> R:
		if not isinstance(exp, (int, np.integer)):
			return NotImplemented
		exp = int(exp)
		if exp < 0:
			return self.recip() ** -exp
		# powers of a coprime pair with positive denominator stay canonical
		base = self.reduced()
		return self._raw(self._checked_pow(base._n, exp), self._checked_pow(base._d, exp))
	def _checked_pow(self, base: int, exp: int) -> int:
		s = self.storage
		result = 1
		while exp:
			if exp & 1:
				result = s.mul(result, base)
			exp >>= 1
			if exp:
				base = s.mul(base, base)
		return result
	def pow(self: R, exp: int) -> R:
		return self ** exp
	def recip(self: R) -> R:
		return self.from_pair(self._d, self._n)
	def abs(self: R) -> R:
		return abs(self)
	def abs_sub(self: R, other: Any) -> R:
		return abs(self - other)
	def increment(self: R) -> R:
		return self + 1
	def decrement(self: R) -> R:
		return self - 1

	# comparison
	def _cross(self, other: Ratio) -> tuple[int, int]:
		# exact products; flip when exactly one denominator is negative (raw pairs)
		lhs, rhs = self._n * other._d, other._n * self._d
		if (self._d < 0) != (other._d < 0):
			return -lhs, -rhs
		return lhs, rhs
	def __eq__(self, other: object) -> bool:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		lhs_x, rhs_x = self._cross(rhs)
		return lhs_x == rhs_x
	def __gt__(self, other: Any) -> bool:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		lhs_x, rhs_x = self._cross(rhs)
		return lhs_x > rhs_x
	def __lt__(self, other: Any) -> bool:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		return rhs > self
	def __le__(self, other: Any) -> bool:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		return not self > rhs
	def __ge__(self, other: Any) -> bool:
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		return not self < rhs
	def __hash__(self) -> int:
		return hash(self.to_fraction())
	def __bool__(self) -> bool:
		return self._n != 0

	# rounding
	def _signed_numerator(self: R) -> R:
		# rounding below assumes the sign lives in the numerator
		return self if self._d > 0 else self.reduced()
	def trunc(self: R) -> R:
		x = self._signed_numerator()
		return self.from_integer(self.storage.div(x._n, x._d))
	def fract(self: R) -> R:
		"""Signed remainder over the same denominator; trunc() + fract() == self."""
		x = self._signed_numerator()
		r = self.storage.rem(x._n, x._d)
		return self._raw(r, x._d) if r else self.zero()
	def floor(self: R) -> R:
		x = self._signed_numerator()
		s = self.storage
		q = s.div(x._n, x._d)
		if x._n < 0 and s.rem(x._n, x._d):
			q = s.sub(q, 1)
		return self.from_integer(q)
	def ceil(self: R) -> R:
		x = self._signed_numerator()
		s = self.storage
		q = s.div(x._n, x._d)
		if x._n >= 0 and s.rem(x._n, x._d):
			q = s.add(q, 1)
		return self.from_integer(q)
	def round(self: R) -> R:
		"""Nearest whole value, halves away from zero."""
		x = self._signed_numerator()
		f = x.fract()
		fn, fd = abs(f._n), f._d
		half_or_larger = fn >= (fd // 2 if fd % 2 == 0 else fd // 2 + 1)
		t = x.trunc()
		if not half_or_larger:
			return t
		return t + 1 if x._n > 0 else t - 1
	def __trunc__(self) -> int:
		return self.to_integer()
	def __floor__(self) -> int:
		return self.floor()._n
	def __ceil__(self) -> int:
		return self.ceil()._n
	def __round__(self) -> int:
		return self.round()._n

	# conversion
	def to_integer(self) -> int:
		return self.storage.div(self._n, self._d)
	def __int__(self) -> int:
		return self.to_integer()
	def to_float(self, dtype: Any = float) -> Any:
		ft = np.dtype(dtype)
		if not np.issubdtype(ft, np.floating):
			raise TypeError(f"to_float needs a floating dtype, not {ft}")
		F = ft.type
		return F(F(self._n) / F(self._d))
	def __float__(self) -> float:
		return float(self.to_float())
	def to_fraction(self) -> Fraction:
		return Fraction(self._n, self._d)
	def to_string(self) -> str:
		return f"{self._n}/{self._d}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"{type(self).__name__}({self._n}, {self._d})"

class Rational32(Ratio):
	__slots__ = ()
	storage = INT32

class Rational64(Ratio):
	__slots__ = ()
	storage = INT64

class Rational(Ratio):
	"""Native pointer width (numpy.intp)."""
	__slots__ = ()
	storage = INTP

_WIDTHS: Dict[IntStorage, Type[Ratio]] = {INT32: Rational32, INT64: Rational64}

def ratio_type(dtype: Any) -> Type[Ratio]:
	"""The Ratio class for a signed integer dtype, created once per width."""
	storage = IntStorage.of(dtype)
	cls = _WIDTHS.get(storage)
	if cls is None:
		cls = type(f"Ratio_{storage.name}", (Ratio,), {"__slots__": (), "storage": storage})
		_WIDTHS[storage] = cls
	return cls
