"""
signed_decimal.py - Signed fixed-point decimal

SignedDecimal is a Decimal256 magnitude plus a sign flag. The module-level
functions (add, sub, mul, div, rem, neg, compare) implement the
sign-and-magnitude algebra; the operator methods on the class delegate to them.

Invariant: a zero magnitude always carries is_positive=True. Construction
normalizes a negative zero, and every operation returns normalized values.

Equality policy: all zero-magnitude values compare equal.

Example:
    a = SignedDecimal.from_str("100")
    b = SignedDecimal.from_str("-50.5")
    str(a + b)   # "49.5"
    str(a * b)   # "-5050"
    str(a / SignedDecimal.zero())   # "0.0"
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal

from .core import (
    ParseError,
    SignConversionError,
    product_sign,
    sign_prefix,
    split_sign,
)
from .magnitude import Decimal256, Uint256


@dataclass(frozen=True, slots=True, eq=False)
class SignedDecimal:
    """
    Decimal256 with a sign.

    Attributes:
        magnitude: Absolute value of the number.
        is_positive: Sign flag. Always True when the magnitude is zero.
    """
    magnitude: Decimal256
    is_positive: bool = True

    def __post_init__(self):
        if not isinstance(self.magnitude, Decimal256):
            raise TypeError(
                f"SignedDecimal magnitude must be Decimal256, got {type(self.magnitude).__name__}"
            )
        if self.magnitude.is_zero() and not self.is_positive:
            object.__setattr__(self, 'is_positive', True)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> SignedDecimal:
        return cls(Decimal256.zero(), True)

    @classmethod
    def one(cls) -> SignedDecimal:
        return cls(Decimal256.one(), True)

    @classmethod
    def default(cls) -> SignedDecimal:
        return cls.zero()

    @classmethod
    def from_magnitude(cls, magnitude: Decimal256) -> SignedDecimal:
        """Unsigned values have no sign to recover: the result is positive."""
        return cls(magnitude, True)

    @classmethod
    def from_uint256(cls, value: Uint256) -> SignedDecimal:
        """
        Create a positive decimal with the integer value of a Uint256.

        Raises:
            RangeOverflow: If the integer is larger than the biggest Decimal256.
        """
        return cls(Decimal256.from_atomics(value, 0), True)

    @classmethod
    def from_str(cls, text: str) -> SignedDecimal:
        """
        Parse a signed decimal string such as "12.5", "-0.001" or "7".

        A leading '-' makes the value negative; "-0" parses to positive zero.

        Raises:
            ParseError: If the text is not a valid numeral.
        """
        if not isinstance(text, str):
            raise ParseError(f"SignedDecimal must be parsed from str, got {type(text).__name__}")
        is_positive, unsigned_text = split_sign(text)
        return cls(Decimal256.from_str(unsigned_text), is_positive)

    try_from = from_str

    @classmethod
    def from_decimal(cls, value: Decimal) -> SignedDecimal:
        """
        Convert a finite Python Decimal with at most 18 significant fractional digits.

        Trailing fractional zeros carried by the exponent are dropped, so
        Decimal("0E-25") and Decimal("1.000000000000000000000") convert exactly.

        Raises:
            ParseError: For NaN, infinities, or too many fractional digits.
        """
        if not value.is_finite():
            raise ParseError(f"Cannot convert non-finite Decimal {value} to SignedDecimal")
        text = format(value, 'f')
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return cls.from_str(text)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.magnitude.is_zero()

    def is_negative(self) -> bool:
        return not self.is_positive

    def value(self) -> Decimal256:
        """Return the magnitude of a value that must be positive."""
        if not self.is_positive:
            raise SignConversionError("SignedDecimal is negative!")
        return self.magnitude

    def to_unsigned(self) -> Decimal256:
        """
        Narrow to Decimal256.

        Raises:
            SignConversionError: If the value is negative and non-zero.
        """
        if not self.is_positive and not self.magnitude.is_zero():
            raise SignConversionError("Cannot convert negative SignedDecimal to Decimal256")
        return self.magnitude

    def to_decimal(self) -> Decimal:
        magnitude = self.magnitude.to_decimal()
        return magnitude if self.is_positive else magnitude.copy_negate()

    def abs(self) -> SignedDecimal:
        return SignedDecimal(self.magnitude, True)

    def abs_sub(self, other: SignedDecimal) -> SignedDecimal:
        """Absolute difference |self - other|."""
        return sub(self, other).abs()

    def signum(self) -> SignedDecimal:
        """One carrying this value's sign (zero counts as positive)."""
        return SignedDecimal(Decimal256.one(), self.is_positive)

    def to_string(self) -> str:
        if self.is_zero():
            return "0.0"
        return sign_prefix(self) + str(self.magnitude)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __neg__(self) -> SignedDecimal:
        return neg(self)

    def __pos__(self) -> SignedDecimal:
        return self

    def __abs__(self) -> SignedDecimal:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(other, self)

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
        if isinstance(other, SignedDecimal):
            return mul(self, other)
        if isinstance(other, Decimal256):
            from .mixed import mul_signed_decimal_by_decimal
            return mul_signed_decimal_by_decimal(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Uint256):
            from .mixed import mul_uint_by_signed_decimal
            return mul_uint_by_signed_decimal(other, self)
        if isinstance(other, Decimal256):
            from .mixed import mul_signed_decimal_by_decimal
            return mul_signed_decimal_by_decimal(self, other)
        return NotImplemented

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return div(self, other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return div(other, self)

    def __mod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return rem(self, other)

    def __eq__(self, other):
        if not isinstance(other, SignedDecimal):
            return NotImplemented
        if self.is_zero():
            return other.is_zero()
        return self.magnitude == other.magnitude and self.is_positive == other.is_positive

    def __hash__(self) -> int:
        if self.is_zero():
            return hash((SignedDecimal, 0))
        return hash((SignedDecimal, self.magnitude.atomics, self.is_positive))

    def __lt__(self, other):
        if not isinstance(other, SignedDecimal):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, SignedDecimal):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, SignedDecimal):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, SignedDecimal):
            return NotImplemented
        return compare(self, other) >= 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SignedDecimal('{self.to_string()}')"


def _coerce(value):
    """Promote a Decimal256 operand; return None for unsupported types."""
    if isinstance(value, SignedDecimal):
        return value
    if isinstance(value, Decimal256):
        return SignedDecimal.from_magnitude(value)
    return None


# ============================================================================
# ALGEBRA
# ============================================================================

def add(lhs: SignedDecimal, rhs: SignedDecimal) -> SignedDecimal:
    """
    Sign-and-magnitude addition.

    Same signs add magnitudes. Opposite signs subtract the smaller magnitude
    from the larger and keep the sign of the larger. Equal magnitudes with
    opposite signs give positive zero.

    Raises:
        RangeOverflow: If the sum of magnitudes exceeds Decimal256.
    """
    if lhs.is_positive == rhs.is_positive:
        return SignedDecimal(lhs.magnitude.checked_add(rhs.magnitude), lhs.is_positive)
    if lhs.magnitude > rhs.magnitude:
        return SignedDecimal(lhs.magnitude.checked_sub(rhs.magnitude), lhs.is_positive)
    if lhs.magnitude < rhs.magnitude:
        return SignedDecimal(rhs.magnitude.checked_sub(lhs.magnitude), rhs.is_positive)
    return SignedDecimal.zero()


def neg(value: SignedDecimal) -> SignedDecimal:
    """Flip the sign; zero stays positive."""
    if value.is_zero():
        return value
    return SignedDecimal(value.magnitude, not value.is_positive)


def sub(lhs: SignedDecimal, rhs: SignedDecimal) -> SignedDecimal:
    """lhs + (-rhs)."""
    return add(lhs, SignedDecimal(rhs.magnitude, not rhs.is_positive))


def mul(lhs: SignedDecimal, rhs: SignedDecimal) -> SignedDecimal:
    """
    Multiply magnitudes; like signs give a positive result and so does a zero product.

    Raises:
        RangeOverflow: If the product exceeds Decimal256.
    """
    magnitude = lhs.magnitude.checked_mul(rhs.magnitude)
    return SignedDecimal(
        magnitude,
        product_sign(lhs.is_positive, rhs.is_positive, magnitude.is_zero()),
    )


def div(lhs: SignedDecimal, rhs: SignedDecimal) -> SignedDecimal:
    """
    Truncating division. A zero divisor yields positive zero, not an error.

    Raises:
        RangeOverflow: If the quotient exceeds Decimal256.
    """
    if rhs.magnitude.is_zero():
        magnitude = Decimal256.zero()
    else:
        magnitude = lhs.magnitude.checked_div(rhs.magnitude)
    return SignedDecimal(
        magnitude,
        product_sign(lhs.is_positive, rhs.is_positive, magnitude.is_zero()),
    )


def rem(lhs: SignedDecimal, rhs: SignedDecimal) -> SignedDecimal:
    """
    Remainder of the raw atomics of both magnitudes.

    Both operand signs are ignored and the result is always positive.
    A zero divisor yields positive zero.
    """
    if rhs.magnitude.is_zero():
        return SignedDecimal.zero()
    return SignedDecimal.from_magnitude(lhs.magnitude.checked_rem(rhs.magnitude))


def compare(lhs: SignedDecimal, rhs: SignedDecimal) -> int:
    """
    Three-way comparison returning -1, 0 or 1.

    Positive values are greater than negative values regardless of magnitude.
    Among negatives the larger magnitude is the smaller value.
    """
    if lhs.is_positive == rhs.is_positive:
        left, right = lhs.magnitude, rhs.magnitude
        if not lhs.is_positive:
            left, right = right, left
        return (left > right) - (left < right)
    return 1 if lhs.is_positive else -1
