from __future__ import annotations


class RatioError(Exception):
    """Base class for every failure raised by the ratio package."""


class DivideByZero(RatioError, ZeroDivisionError):
    def __init__(self, message: str = "Division by zero is undefined.") -> None:
        super().__init__(message)


class Overflow(RatioError, OverflowError):
    def __init__(self, message: str = "Arithmetic operation resulted in an overflow.") -> None:
        super().__init__(message)


class ParseError(RatioError, ValueError):
    pass


class RangeError(RatioError, ValueError):
    """A value does not fit the integer width it is being converted to."""
