from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple, Type, TypeVar
import logging

from ratio.errors import RatioError, ParseError

if TYPE_CHECKING:
    from ratio.rational import Ratio

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Ratio")

# =====================
# "N/D" text form
# =====================

DIGITS = "0123456789"
# digits in the largest int64 magnitude, the widest signed storage
MAX_FIELD_DIGITS = 19


class Tok:
    def __init__(self, kind: str, lex: str = "", pos: int = 0):
        self.kind, self.lex, self.pos = kind, lex, pos

    def __repr__(self) -> str:
        return f"Tok({self.kind!r}, {self.lex!r})"


def _fail(text: str, message: str) -> ParseError:
    logger.debug("cannot parse %r: %s", text, message)
    return ParseError(f"invalid ratio {text!r}: {message}")


def tokenize(text: str) -> List[Tok]:
    s = text
    i, n = 0, len(s)
    toks: List[Tok] = []
    while i < n:
        c = s[i]
        if c.isspace():
            i += 1
            continue
        if c in "+-":
            toks.append(Tok("SIGN", c, i))
            i += 1
            continue
        if c == "/":
            toks.append(Tok("/", c, i))
            i += 1
            continue
        if c in DIGITS:
            j = i
            while j < n and s[j] in DIGITS:
                j += 1
            toks.append(Tok("NUM", s[i:j], i))
            i = j
            continue
        raise _fail(text, f"unexpected char {c!r} at {i}")
    return toks


def _field(text: str, toks: List[Tok], pos: int, what: str) -> Tuple[int, int]:
    sign = 1
    if pos < len(toks) and toks[pos].kind == "SIGN":
        sign = -1 if toks[pos].lex == "-" else 1
        pos += 1
    if pos >= len(toks) or toks[pos].kind != "NUM":
        raise _fail(text, f"missing {what}")
    digits = toks[pos].lex.lstrip("0")
    if len(digits) > MAX_FIELD_DIGITS:
        raise _fail(text, f"{what} out of range")
    return sign * int(digits or "0"), pos + 1


def parse_fields(text: str) -> Tuple[int, int]:
    """Split "N/D" into two ints without reduction or per-width range checks."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    toks = tokenize(text)
    num, pos = _field(text, toks, 0, "numerator")
    if pos >= len(toks) or toks[pos].kind != "/":
        raise _fail(text, "missing '/' separator")
    den, pos = _field(text, toks, pos + 1, "denominator")
    if pos != len(toks):
        raise _fail(text, f"unexpected {toks[pos].lex!r} at {toks[pos].pos}")
    return num, den


def parse_ratio(text: str, cls: Type[R]) -> R:
    """Parse "N/D" into a reduced value of the given width.

    The range of both fields comes from cls.storage, so the same parser
    serves every width. Zero denominators and out-of-range fields are
    reported as ParseError.
    """
    num, den = parse_fields(text)
    try:
        return cls.from_pair(num, den)
    except RatioError as exc:
        raise _fail(text, str(exc)) from exc
