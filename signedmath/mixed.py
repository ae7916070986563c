"""
mixed.py - Operations across signed and unsigned operand types

One operand of each function here is an unsigned magnitude, so the result
carries the signed operand's sign directly rather than combining two signs.
A zero result is always positive.

These functions back the mixed-type operators:
    Uint256 * SignedDecimal     -> SignedInt
    SignedInt * Decimal256      -> SignedInt
    SignedDecimal * Decimal256  -> SignedDecimal
    Uint256 + SignedInt         -> SignedInt
"""

from __future__ import annotations

from .core import carried_sign
from .magnitude import Decimal256, Uint256
from .signed_decimal import SignedDecimal
from .signed_int import SignedInt, add


def mul_uint_by_signed_decimal(lhs: Uint256, rhs: SignedDecimal) -> SignedInt:
    """
    Scale an integer by a signed decimal, flooring the magnitude.

    Example: Uint256(1000) * SignedDecimal("-0.25") == SignedInt("-250")

    Raises:
        RangeOverflow: If the product exceeds 256 bits.
    """
    magnitude = rhs.magnitude.mul_uint(lhs)
    return SignedInt(magnitude, carried_sign(rhs.is_positive, magnitude.is_zero()))


def mul_signed_int_by_decimal(lhs: SignedInt, rhs: Decimal256) -> SignedInt:
    """
    Scale a signed integer by an unsigned decimal, flooring the magnitude.

    Raises:
        RangeOverflow: If the product exceeds 256 bits.
    """
    magnitude = rhs.mul_uint(lhs.magnitude)
    return SignedInt(magnitude, carried_sign(lhs.is_positive, magnitude.is_zero()))


def mul_signed_decimal_by_decimal(lhs: SignedDecimal, rhs: Decimal256) -> SignedDecimal:
    """
    Raises:
        RangeOverflow: If the product exceeds Decimal256.
    """
    magnitude = lhs.magnitude.checked_mul(rhs)
    return SignedDecimal(magnitude, carried_sign(lhs.is_positive, magnitude.is_zero()))


def add_uint_to_signed_int(lhs: Uint256, rhs: SignedInt) -> SignedInt:
    return add(SignedInt.from_magnitude(lhs), rhs)
