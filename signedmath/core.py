"""
Core constants, exceptions and protocols for the signed numeric types.

This module provides the foundations shared by both signed types:
1. Constants: magnitude bit width and fixed-point scale
2. Decimal context used for interop with Python's Decimal
3. Exceptions: SignedMathError and its domain-specific subclasses
4. Protocols: SignedNumber, the capability interface both signed types satisfy
5. Sign helpers: pure functions implementing the sign rules of the algebra

All functions in this module are pure. No function holds or mutates state.
"""

from __future__ import annotations
from decimal import Context, ROUND_DOWN
from typing import Any, Protocol, runtime_checkable


# ============================================================================
# CONSTANTS
# ============================================================================

# Width of the unsigned magnitude types.
UINT256_BITS = 256
UINT256_MAX = (1 << UINT256_BITS) - 1

# Fixed-point scale of Decimal256: number of fractional digits.
DECIMAL_PLACES = 18
DECIMAL_FRACTIONAL = 10 ** DECIMAL_PLACES

# Decimal256 stores atomics in a Uint256, so its largest value is
# UINT256_MAX / 10**18 (about 1.15e59).
DECIMAL256_MAX_ATOMICS = UINT256_MAX


# ============================================================================
# DECIMAL CONTEXT CONFIGURATION
# ============================================================================
#
# Conversions to Python's Decimal use a private context so that the
# process-global context is never touched.
#
# Context parameters:
#   - prec=100: enough digits for any 256-bit magnitude (78 digits) plus scale
#   - rounding=ROUND_DOWN: truncation, matching the magnitude arithmetic
#
SIGNEDMATH_DECIMAL_CONTEXT = Context(prec=100, rounding=ROUND_DOWN)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class SignedMathError(Exception):
    """Base exception for all signed arithmetic errors."""
    pass


class ParseError(SignedMathError, ValueError):
    """Raised when numeral text cannot be parsed into a magnitude or signed value."""
    pass


class RangeOverflow(SignedMathError, ArithmeticError):
    """Raised when magnitude arithmetic leaves the representable 256-bit range."""
    pass


class SignConversionError(SignedMathError, ValueError):
    """Raised when a negative signed value is narrowed to an unsigned type."""
    pass


# ============================================================================
# PROTOCOLS
# ============================================================================

@runtime_checkable
class SignedNumber(Protocol):
    """
    Capability interface shared by SignedDecimal and SignedInt.

    Both types are a magnitude plus a sign flag. Functions that only need
    sign/zero queries and the unsigned narrowing accept a SignedNumber and
    work with either type.
    """

    magnitude: Any
    is_positive: bool

    def is_zero(self) -> bool:
        """Return True if the magnitude is zero."""
        ...

    def is_negative(self) -> bool:
        """Return True if the sign flag is negative."""
        ...

    def abs(self) -> 'SignedNumber':
        """Return the value with a positive sign."""
        ...

    def signum(self) -> 'SignedNumber':
        """Return one with the sign of this value."""
        ...

    def to_unsigned(self) -> Any:
        """Return the magnitude, raising SignConversionError if negative."""
        ...


# ============================================================================
# SIGN RULES
# ============================================================================

def product_sign(lhs_positive: bool, rhs_positive: bool, magnitude_is_zero: bool) -> bool:
    """
    Sign of a product or quotient.

    Like signs give a positive result. A zero magnitude is always positive,
    overriding the sign rule.
    """
    return lhs_positive == rhs_positive or magnitude_is_zero


def carried_sign(is_positive: bool, magnitude_is_zero: bool) -> bool:
    """Sign of a result that carries one operand's sign, positive when zero."""
    return is_positive or magnitude_is_zero


def split_sign(text: str) -> tuple:
    """
    Split a signed numeral into (is_positive, unsigned_text).

    A single leading '-' marks a negative value. Empty input yields
    (True, "") so that the magnitude parser reports the error.
    """
    if text[:1] == "-":
        return False, text[1:]
    return True, text


def sign_prefix(value: SignedNumber) -> str:
    """'-' for a negative non-zero value, '' otherwise."""
    if value.is_negative() and not value.is_zero():
        return "-"
    return ""
