from rational256.errors import (
    DivisionByZero,
    Overflow,
    RationalError,
    RationalException,
    Underflow,
    exception_for,
)
from rational256.types.rational import (
    ONE,
    ZERO,
    Ordering,
    Rational,
    add,
    compare,
    div,
    equal,
    from_integer,
    from_word,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    mul,
    not_equal,
    reduce,
    sub,
    to_integer,
)
