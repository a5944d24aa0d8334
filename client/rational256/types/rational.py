import functools
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

from podite import (
    U128,
    pod,
)

from rational256.constants import U128_MAX, WORD_BYTES
from rational256.errors import DivisionByZero, Overflow, Underflow
from rational256.utils import word
from rational256.utils.math import gcd


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@pod(dataclass_fn=functools.partial(dataclass, frozen=True))
class Rational:
    numerator: U128
    denominator: U128

    def __post_init__(self):
        word.check_u128(self.numerator, "numerator")
        word.check_u128(self.denominator, "denominator")
        if self.denominator == 0 and self.numerator != 0:
            raise DivisionByZero(f"{self.numerator}/0")

    # the wire form is the packed word, so the denominator (low half) leads
    @classmethod
    def _to_bytes_partial(cls, buffer, obj, **kwargs):
        buffer.write(obj.to_word().to_bytes(WORD_BYTES, byteorder="little"))

    @classmethod
    def _from_bytes_partial(cls, buffer, **kwargs):
        raw = buffer.read(WORD_BYTES)
        if len(raw) < WORD_BYTES:
            raise RuntimeError("Bytes object was too small.")
        return from_word(int.from_bytes(raw, byteorder="little"))

    @classmethod
    def to_bytes(cls, obj, **kwargs):
        return cls.pack(obj, converter="bytes", **kwargs)

    @classmethod
    def from_bytes(cls, raw, **kwargs):
        return cls.unpack(raw, converter="bytes", **kwargs)

    @classmethod
    def into(cls, x: Union["Rational", int]) -> "Rational":
        if isinstance(x, cls):
            return x
        elif isinstance(x, int):
            return from_integer(x)
        else:
            raise TypeError(f"Expected Rational or int, got {type(x)}")

    def to_word(self) -> int:
        return word.pack(self.numerator, self.denominator)

    def is_zero(self) -> bool:
        return self.numerator == 0

    def __add__(self, other):
        return add(self, Rational.into(other))

    def __radd__(self, other):
        return add(Rational.into(other), self)

    def __sub__(self, other):
        return sub(self, Rational.into(other))

    def __rsub__(self, other):
        return sub(Rational.into(other), self)

    def __mul__(self, other):
        return mul(self, Rational.into(other))

    def __rmul__(self, other):
        return mul(Rational.into(other), self)

    def __truediv__(self, other):
        return div(self, Rational.into(other))

    def __rtruediv__(self, other):
        return div(Rational.into(other), self)

    def __eq__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return equal(self, other)

    def __ne__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return not_equal(self, other)

    def __lt__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return less_than(self, other)

    def __le__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return less_or_equal(self, other)

    def __gt__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return greater_than(self, other)

    def __ge__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return greater_or_equal(self, other)

    def __hash__(self):
        n, d = _terms(self)
        if n != 0:
            g = gcd(n, d)
            n, d = n // g, d // g
        # keep hash(Rational(k, 1)) == hash(k) since they compare equal
        if d == 1:
            return hash(n)
        return hash((n, d))

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        return to_integer(self)

    def __repr__(self):
        return f"{self.numerator}/{self.denominator}"


ZERO = Rational(0, 1)
ONE = Rational(1, 1)


def from_integer(x: int) -> Rational:
    return Rational(word.check_u128(x), 1)


def to_integer(x: Rational) -> int:
    if x.numerator == 0:
        return 0
    return x.numerator // x.denominator


def from_word(w: int) -> Rational:
    return Rational(*word.unpack(word.check_u256(w)))


def reduce(numerator: int, denominator: int) -> Rational:
    """Brings numerator/denominator to lowest terms and packs it.

    A zero numerator is packed as-is, whatever the denominator; use ZERO
    where the canonical zero is wanted.
    """
    if numerator != 0:
        if denominator == 0:
            raise DivisionByZero(f"{numerator}/0")
        g = gcd(numerator, denominator)
        numerator //= g
        denominator //= g

    if numerator > U128_MAX or denominator > U128_MAX:
        raise Overflow(f"{numerator}/{denominator} does not fit in 128-bit halves")
    return Rational(numerator, denominator)


def add(x: Rational, y: Rational) -> Rational:
    if x.is_zero():
        return y
    if y.is_zero():
        return x

    return reduce(
        x.numerator * y.denominator + y.numerator * x.denominator,
        x.denominator * y.denominator,
    )


def sub(x: Rational, y: Rational) -> Rational:
    """x - y, defined only for x >= y since there is no sign bit.

    Raises Underflow instead of producing a negative result.
    """
    if y.is_zero():
        return x
    if x.is_zero():
        raise Underflow(f"Cannot subtract {y} from zero")

    lhs = x.numerator * y.denominator
    rhs = y.numerator * x.denominator
    if lhs < rhs:
        raise Underflow(f"{x} - {y} is negative")
    if lhs == rhs:
        return ZERO

    return reduce(lhs - rhs, x.denominator * y.denominator)


def mul(x: Rational, y: Rational) -> Rational:
    if x.is_zero() or y.is_zero():
        return ZERO

    return reduce(
        x.numerator * y.numerator,
        x.denominator * y.denominator,
    )


def div(x: Rational, y: Rational) -> Rational:
    if y.is_zero():
        raise DivisionByZero(f"Cannot divide {x} by zero")
    if x.is_zero():
        return ZERO

    return reduce(
        x.numerator * y.denominator,
        x.denominator * y.numerator,
    )


def _terms(x: Union[Rational, int]) -> Tuple[int, int]:
    if isinstance(x, Rational):
        # any zero numerator, including the all-zero word, is the zero fraction
        if x.numerator == 0:
            return 0, 1
        return x.numerator, x.denominator
    return x, 1


def compare(x: Union[Rational, int], y: Union[Rational, int]) -> Ordering:
    xn, xd = _terms(x)
    yn, yd = _terms(y)

    lhs = xn * yd
    rhs = yn * xd
    if lhs < rhs:
        return Ordering.LESS
    elif lhs > rhs:
        return Ordering.GREATER
    else:
        return Ordering.EQUAL


def equal(x, y) -> bool:
    return compare(x, y) == Ordering.EQUAL


def not_equal(x, y) -> bool:
    return not equal(x, y)


def less_than(x, y) -> bool:
    return compare(x, y) == Ordering.LESS


def greater_than(x, y) -> bool:
    return compare(x, y) == Ordering.GREATER


def less_or_equal(x, y) -> bool:
    return not greater_than(x, y)


def greater_or_equal(x, y) -> bool:
    return not less_than(x, y)
