from podite import (
    AutoTagType,
    Enum,
    pod,
)


@pod
class RationalError(Enum[AutoTagType]):
    OVERFLOW = None
    UNDERFLOW = None
    DIVISION_BY_ZERO = None

    @classmethod
    def to_bytes(cls, obj, **kwargs):
        return cls.pack(obj, converter="bytes", **kwargs)

    @classmethod
    def from_bytes(cls, raw, **kwargs):
        return cls.unpack(raw, converter="bytes", **kwargs)


class RationalException(ArithmeticError):
    code: RationalError

    def __init__(self, message=None):
        if message is None:
            message = repr(self.code)
        super().__init__(message)


class Overflow(RationalException, OverflowError):
    code = RationalError.OVERFLOW


class Underflow(RationalException):
    code = RationalError.UNDERFLOW


class DivisionByZero(RationalException, ZeroDivisionError):
    code = RationalError.DIVISION_BY_ZERO


def exception_for(code: RationalError, message=None) -> RationalException:
    code = RationalError(int(code))
    for exc in (Overflow, Underflow, DivisionByZero):
        if exc.code.is_a(code):
            return exc(message)
    raise ValueError(f"Unknown rational error code: {int(code)}")
