"""
signed_int.py - Signed 256-bit magnitude integer

SignedInt is a Uint256 magnitude plus a sign flag, following the same
sign-and-magnitude algebra as SignedDecimal.

NaN sentinel: magnitude zero with is_positive=False. Only SignedInt.nan()
(or decoding the string "NaN") produces it; no arithmetic operation does.
Because of the sentinel, a zero magnitude is not normalized at construction;
the operations themselves always return positive zeros.

Equality policy: exact (magnitude, sign) equality, so NaN != zero.
NaN orders like a negative zero: above every negative value, below zero.
"""

from __future__ import annotations
from dataclasses import dataclass

from .core import (
    ParseError,
    SignConversionError,
    product_sign,
    sign_prefix,
    split_sign,
)
from .magnitude import Decimal256, Uint256


NAN_TEXT = "NaN"


@dataclass(frozen=True, slots=True, eq=False)
class SignedInt:
    """
    Uint256 with a sign.

    Attributes:
        magnitude: Absolute value of the number.
        is_positive: Sign flag. False with a zero magnitude marks NaN.
    """
    magnitude: Uint256
    is_positive: bool = True

    def __post_init__(self):
        if not isinstance(self.magnitude, Uint256):
            raise TypeError(
                f"SignedInt magnitude must be Uint256, got {type(self.magnitude).__name__}"
            )

    @classmethod
    def zero(cls) -> SignedInt:
        return cls(Uint256.zero(), True)

    @classmethod
    def one(cls) -> SignedInt:
        return cls(Uint256.one(), True)

    @classmethod
    def nan(cls) -> SignedInt:
        return cls(Uint256.zero(), False)

    @classmethod
    def default(cls) -> SignedInt:
        return cls.zero()

    @classmethod
    def from_magnitude(cls, magnitude: Uint256) -> SignedInt:
        return cls(magnitude, True)

    @classmethod
    def from_int(cls, value: int) -> SignedInt:
        """
        Raises:
            RangeOverflow: If abs(value) does not fit in 256 bits.
        """
        return _signed(Uint256(abs(value)), value >= 0)

    @classmethod
    def from_str(cls, text: str) -> SignedInt:
        """
        Parse "123", "-123" or "NaN".

        "-0" parses to positive zero, not NaN.

        Raises:
            ParseError: If the text is not a valid integer numeral.
        """
        if not isinstance(text, str):
            raise ParseError(f"SignedInt must be parsed from str, got {type(text).__name__}")
        if text == NAN_TEXT:
            return cls.nan()
        is_positive, unsigned_text = split_sign(text)
        return _signed(Uint256.from_str(unsigned_text), is_positive)

    try_from = from_str

    def is_zero(self) -> bool:
        return self.magnitude.is_zero()

    def is_nan(self) -> bool:
        return self.magnitude.is_zero() and not self.is_positive

    def is_negative(self) -> bool:
        return not self.is_positive

    def value(self) -> Uint256:
        """Return the magnitude of a value that must be positive."""
        if not self.is_positive:
            raise SignConversionError("SignedInt is negative!")
        return self.magnitude

    def to_unsigned(self) -> Uint256:
        """
        Narrow to Uint256.

        Raises:
            SignConversionError: If the value is negative and non-zero.
        """
        if not self.is_positive and not self.magnitude.is_zero():
            raise SignConversionError("Cannot convert negative SignedInt to Uint256")
        return self.magnitude

    def abs(self) -> SignedInt:
        return SignedInt(self.magnitude, True)

    def abs_sub(self, other: SignedInt) -> SignedInt:
        return sub(self, other).abs()

    def signum(self) -> SignedInt:
        return SignedInt(Uint256.one(), self.is_positive)

    def to_string(self) -> str:
        if self.is_nan():
            return NAN_TEXT
        return sign_prefix(self) + str(self.magnitude)

    def __int__(self) -> int:
        if self.is_nan():
            raise ValueError("cannot convert SignedInt NaN to integer")
        return self.magnitude.value if self.is_positive else -self.magnitude.value

    def __neg__(self) -> SignedInt:
        return neg(self)

    def __pos__(self) -> SignedInt:
        return self

    def __abs__(self) -> SignedInt:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        if isinstance(other, Uint256):
            from .mixed import add_uint_to_signed_int
            return add_uint_to_signed_int(other, self)
        return NotImplemented

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return sub(self, other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return sub(other, self)

    def __mul__(self, other):
        if isinstance(other, Decimal256):
            from .mixed import mul_signed_int_by_decimal
            return mul_signed_int_by_decimal(self, other)
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return mul(self, other)

    def __rmul__(self, other):
        if isinstance(other, Decimal256):
            from .mixed import mul_signed_int_by_decimal
            return mul_signed_int_by_decimal(self, other)
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return mul(other, self)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return div(self, other)

    __floordiv__ = __truediv__

    def __mod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return rem(self, other)

    def __eq__(self, other):
        if not isinstance(other, SignedInt):
            return NotImplemented
        return self.magnitude == other.magnitude and self.is_positive == other.is_positive

    def __hash__(self) -> int:
        return hash((SignedInt, self.magnitude.value, self.is_positive))

    def __lt__(self, other):
        if not isinstance(other, SignedInt):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, SignedInt):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, SignedInt):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, SignedInt):
            return NotImplemented
        return compare(self, other) >= 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SignedInt('{self.to_string()}')"


def _signed(magnitude: Uint256, is_positive: bool) -> SignedInt:
    # Operators never emit NaN: a zero result is positive.
    return SignedInt(magnitude, is_positive or magnitude.is_zero())


def _coerce(value):
    if isinstance(value, SignedInt):
        return value
    if isinstance(value, Uint256):
        return SignedInt.from_magnitude(value)
    return None


# ============================================================================
# ALGEBRA
# ============================================================================

def add(lhs: SignedInt, rhs: SignedInt) -> SignedInt:
    """
    Sign-and-magnitude addition; equal magnitudes with opposite signs give positive zero.

    Raises:
        RangeOverflow: If the sum of magnitudes exceeds 256 bits.
    """
    if lhs.is_positive == rhs.is_positive:
        return _signed(lhs.magnitude.checked_add(rhs.magnitude), lhs.is_positive)
    if lhs.magnitude > rhs.magnitude:
        return _signed(lhs.magnitude.checked_sub(rhs.magnitude), lhs.is_positive)
    if lhs.magnitude < rhs.magnitude:
        return _signed(rhs.magnitude.checked_sub(lhs.magnitude), rhs.is_positive)
    return SignedInt.zero()


def neg(value: SignedInt) -> SignedInt:
    if value.is_zero():
        return value
    return SignedInt(value.magnitude, not value.is_positive)


def sub(lhs: SignedInt, rhs: SignedInt) -> SignedInt:
    return add(lhs, SignedInt(rhs.magnitude, not rhs.is_positive))


def mul(lhs: SignedInt, rhs: SignedInt) -> SignedInt:
    """
    Raises:
        RangeOverflow: If the product exceeds 256 bits.
    """
    magnitude = lhs.magnitude.checked_mul(rhs.magnitude)
    return SignedInt(magnitude, product_sign(lhs.is_positive, rhs.is_positive, magnitude.is_zero()))


def div(lhs: SignedInt, rhs: SignedInt) -> SignedInt:
    """Truncating division; a zero divisor yields positive zero."""
    if rhs.magnitude.is_zero():
        magnitude = Uint256.zero()
    else:
        magnitude = lhs.magnitude.checked_div(rhs.magnitude)
    return SignedInt(magnitude, product_sign(lhs.is_positive, rhs.is_positive, magnitude.is_zero()))


def rem(lhs: SignedInt, rhs: SignedInt) -> SignedInt:
    """Remainder of the magnitudes; signs are ignored and the result is positive."""
    if rhs.magnitude.is_zero():
        return SignedInt.zero()
    return SignedInt.from_magnitude(lhs.magnitude.checked_rem(rhs.magnitude))


def compare(lhs: SignedInt, rhs: SignedInt) -> int:
    if lhs.is_positive == rhs.is_positive:
        left, right = lhs.magnitude, rhs.magnitude
        if not lhs.is_positive:
            left, right = right, left
        return (left > right) - (left < right)
    return 1 if lhs.is_positive else -1
