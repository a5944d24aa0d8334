from typing import Tuple

from rational256.constants import HALF_BITS, HALF_MASK, U128_MAX, U256_MAX
from rational256.errors import Overflow, Underflow


def check_u128(x: int, what="value") -> int:
    if x < 0:
        raise Underflow(f"{what} must be unsigned, got {x}")
    if x > U128_MAX:
        raise Overflow(f"{what} does not fit in 128 bits: {x}")
    return x


def check_u256(x: int, what="word") -> int:
    if x < 0:
        raise Underflow(f"{what} must be unsigned, got {x}")
    if x > U256_MAX:
        raise Overflow(f"{what} does not fit in 256 bits: {x}")
    return x


def pack(numerator: int, denominator: int) -> int:
    """Numerator goes in the high 128 bits, denominator in the low 128 bits."""
    check_u128(numerator, "numerator")
    check_u128(denominator, "denominator")
    return (numerator << HALF_BITS) | denominator


def unpack(word: int) -> Tuple[int, int]:
    return (word >> HALF_BITS) & HALF_MASK, word & HALF_MASK
