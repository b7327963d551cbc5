import logging

from ratio.errors import DivideByZero, Overflow, ParseError, RangeError, RatioError
from ratio.storage import INT32, INT64, INTP, IntStorage
from ratio.reduction import gcd, reduce_pair
from ratio.rational import DEFAULT_PRECISION, Ratio, Rational, Rational32, Rational64, ratio_type
from ratio.parser import parse_ratio
from ratio.literals import R, r

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_PRECISION",
    "DivideByZero",
    "INT32",
    "INT64",
    "INTP",
    "IntStorage",
    "Overflow",
    "ParseError",
    "R",
    "RangeError",
    "Ratio",
    "RatioError",
    "Rational",
    "Rational32",
    "Rational64",
    "gcd",
    "parse_ratio",
    "r",
    "ratio_type",
    "reduce_pair",
]
