from __future__ import annotations
from typing import Tuple
from ratio.errors import DivideByZero
from ratio.storage import IntStorage

def gcd(a: int, b: int) -> int:
	"""Euclid on absolute values. gcd(0, 0) is 1 so that 0/1 reduces to itself."""
	a, b = abs(a), abs(b)
	if a == 0 and b == 0:
		return 1
	while b != 0:
		a, b = b, a % b
	return a

def reduce_pair(numerator: int, denominator: int, storage: IntStorage) -> Tuple[int, int]:
	if denominator == 0:
		raise DivideByZero()
	g = gcd(numerator, denominator)
	n, d = numerator // g, denominator // g
	# sign lives in the numerator
	if d < 0:
		n, d = storage.neg(n), storage.neg(d)
	return n, d
