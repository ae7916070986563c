"""
magnitude.py - Unsigned fixed-width magnitude types

Uint256 and Decimal256 are the unsigned collaborators behind the signed types.
They provide ordering, overflow-checked arithmetic and string parsing and
formatting. Neither type can hold a negative value: any operation that would
leave [0, 2**256 - 1] raises RangeOverflow instead of wrapping.

Decimal256 is a fixed-point number with 18 fractional digits, stored as an
integer count of atomics (the value multiplied by 10**18).
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
import re
from typing import Union

from .core import (
    UINT256_MAX,
    DECIMAL_PLACES,
    DECIMAL_FRACTIONAL,
    DECIMAL256_MAX_ATOMICS,
    SIGNEDMATH_DECIMAL_CONTEXT,
    ParseError,
    RangeOverflow,
)


_DIGITS = re.compile(r"[0-9]+")

# Decimal digits in 2**256 - 1.
_MAX_DIGITS = len(str(UINT256_MAX))


def _check_range(value: int, what: str) -> int:
    if value < 0:
        raise RangeOverflow(f"{what} underflow: result {value} is negative")
    if value > UINT256_MAX:
        raise RangeOverflow(f"{what} overflow: result exceeds 2**256 - 1")
    return value


def _parse_digits(text: str, label: str) -> int:
    if not isinstance(text, str):
        raise ParseError(f"Parsing {label}: expected str, got {type(text).__name__}")
    if not text:
        raise ParseError(f"Parsing {label}: received empty string")
    if not _DIGITS.fullmatch(text):
        raise ParseError(f"Parsing {label}: invalid digit found in '{text}'")
    significant = text.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        raise ParseError(f"Parsing {label}: '{text[:_MAX_DIGITS]}...' is too big for 256 bits")
    return int(significant) if significant else 0


# ============================================================================
# UINT256
# ============================================================================

@dataclass(frozen=True, slots=True, order=True)
class Uint256:
    """
    Unsigned 256-bit integer.

    Attributes:
        value: The integer value, in [0, 2**256 - 1].

    This class is immutable (frozen=True) and memory-optimized (slots=True).
    The range is validated in __post_init__.
    """
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Uint256 value must be int, got {type(self.value).__name__}")
        _check_range(self.value, "Uint256")

    @classmethod
    def zero(cls) -> Uint256:
        return cls(0)

    @classmethod
    def one(cls) -> Uint256:
        return cls(1)

    @classmethod
    def max(cls) -> Uint256:
        return cls(UINT256_MAX)

    @classmethod
    def from_str(cls, text: str) -> Uint256:
        """
        Parse a base-10 string of ASCII digits.

        Raises:
            ParseError: On empty input, non-digit characters, or a value
                        that does not fit in 256 bits.
        """
        value = _parse_digits(text, "u256")
        if value > UINT256_MAX:
            raise ParseError(f"Parsing u256: '{text}' is too big for 256 bits")
        return cls(value)

    def is_zero(self) -> bool:
        return self.value == 0

    def checked_add(self, other: Uint256) -> Uint256:
        return Uint256(_check_range(self.value + other.value, "Uint256 addition"))

    def checked_sub(self, other: Uint256) -> Uint256:
        return Uint256(_check_range(self.value - other.value, "Uint256 subtraction"))

    def checked_mul(self, other: Uint256) -> Uint256:
        return Uint256(_check_range(self.value * other.value, "Uint256 multiplication"))

    def checked_div(self, other: Uint256) -> Uint256:
        if other.value == 0:
            raise ZeroDivisionError("Uint256 division by zero")
        return Uint256(self.value // other.value)

    def checked_rem(self, other: Uint256) -> Uint256:
        if other.value == 0:
            raise ZeroDivisionError("Uint256 remainder by zero")
        return Uint256(self.value % other.value)

    def __add__(self, other):
        if isinstance(other, Uint256):
            return self.checked_add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Uint256):
            return self.checked_sub(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Uint256):
            return self.checked_mul(other)
        return NotImplemented

    def __floordiv__(self, other):
        if isinstance(other, Uint256):
            return self.checked_div(other)
        return NotImplemented

    __truediv__ = __floordiv__

    def __mod__(self, other):
        if isinstance(other, Uint256):
            return self.checked_rem(other)
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Uint256({self.value})"


# ============================================================================
# DECIMAL256
# ============================================================================

@dataclass(frozen=True, slots=True, order=True)
class Decimal256:
    """
    Unsigned fixed-point decimal with 18 fractional digits.

    Attributes:
        atomics: The value in units of 10**-18, in [0, 2**256 - 1].

    Arithmetic truncates toward zero, like integer arithmetic on atomics.
    """
    atomics: int

    def __post_init__(self):
        if isinstance(self.atomics, bool) or not isinstance(self.atomics, int):
            raise TypeError(f"Decimal256 atomics must be int, got {type(self.atomics).__name__}")
        _check_range(self.atomics, "Decimal256")

    @classmethod
    def zero(cls) -> Decimal256:
        return cls(0)

    @classmethod
    def one(cls) -> Decimal256:
        return cls(DECIMAL_FRACTIONAL)

    @classmethod
    def max(cls) -> Decimal256:
        return cls(DECIMAL256_MAX_ATOMICS)

    @classmethod
    def from_atomics(cls, atomics: Union[int, Uint256], decimal_places: int) -> Decimal256:
        """
        Create a decimal from an integer and the number of decimal places it carries.

        from_atomics(1234, 3) is 1.234. Digits beyond 18 decimal places are
        truncated.

        Raises:
            RangeOverflow: If the scaled value does not fit in 256 bits.
        """
        raw = int(atomics)
        if decimal_places < 0:
            raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")
        if decimal_places <= DECIMAL_PLACES:
            scaled = raw * 10 ** (DECIMAL_PLACES - decimal_places)
        else:
            scaled = raw // 10 ** (decimal_places - DECIMAL_PLACES)
        if scaled > DECIMAL256_MAX_ATOMICS:
            raise RangeOverflow(
                f"Decimal256 range exceeded: {raw} with {decimal_places} decimal places"
            )
        return cls(scaled)

    @classmethod
    def from_str(cls, text: str) -> Decimal256:
        """
        Parse a non-negative decimal string such as "1", "1.5" or "0.000001".

        Raises:
            ParseError: On malformed text, more than one dot, more than 18
                        fractional digits, or a value that is too big.
        """
        if not isinstance(text, str):
            raise ParseError(f"Parsing Decimal256: expected str, got {type(text).__name__}")
        parts = text.split(".")
        if len(parts) > 2:
            raise ParseError(f"Unexpected number of dots in '{text}'")

        try:
            whole = _parse_digits(parts[0], "whole part")
        except ParseError as e:
            raise ParseError(f"Error parsing whole: {e}") from e
        atomics = whole * DECIMAL_FRACTIONAL

        if len(parts) == 2:
            fractional_text = parts[1]
            if len(fractional_text) > DECIMAL_PLACES:
                raise ParseError(
                    f"Cannot parse more than {DECIMAL_PLACES} fractional digits"
                )
            try:
                fractional = _parse_digits(fractional_text, "fractional part")
            except ParseError as e:
                raise ParseError(f"Error parsing fractional: {e}") from e
            atomics += fractional * 10 ** (DECIMAL_PLACES - len(fractional_text))

        if atomics > DECIMAL256_MAX_ATOMICS:
            raise ParseError(f"Value too big: '{text}'")
        return cls(atomics)

    def is_zero(self) -> bool:
        return self.atomics == 0

    def checked_add(self, other: Decimal256) -> Decimal256:
        return Decimal256(_check_range(self.atomics + other.atomics, "Decimal256 addition"))

    def checked_sub(self, other: Decimal256) -> Decimal256:
        return Decimal256(_check_range(self.atomics - other.atomics, "Decimal256 subtraction"))

    def checked_mul(self, other: Decimal256) -> Decimal256:
        product = self.atomics * other.atomics // DECIMAL_FRACTIONAL
        return Decimal256(_check_range(product, "Decimal256 multiplication"))

    def checked_div(self, other: Decimal256) -> Decimal256:
        if other.atomics == 0:
            raise ZeroDivisionError("Decimal256 division by zero")
        quotient = self.atomics * DECIMAL_FRACTIONAL // other.atomics
        return Decimal256(_check_range(quotient, "Decimal256 division"))

    def checked_rem(self, other: Decimal256) -> Decimal256:
        """Remainder of the raw atomics (not of the decimal values)."""
        if other.atomics == 0:
            raise ZeroDivisionError("Decimal256 remainder by zero")
        return Decimal256(self.atomics % other.atomics)

    def mul_uint(self, other: Uint256) -> Uint256:
        """Multiply by an integer, flooring the result to a Uint256."""
        product = self.atomics * other.value // DECIMAL_FRACTIONAL
        return Uint256(_check_range(product, "Decimal256 x Uint256 multiplication"))

    def to_decimal(self) -> Decimal:
        """Return the exact value as a Python Decimal with 18 fractional digits."""
        return Decimal(self.atomics).scaleb(-DECIMAL_PLACES, context=SIGNEDMATH_DECIMAL_CONTEXT)

    def __add__(self, other):
        if isinstance(other, Decimal256):
            return self.checked_add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Decimal256):
            return self.checked_sub(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Decimal256):
            return self.checked_mul(other)
        if isinstance(other, Uint256):
            return self.mul_uint(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Uint256):
            return self.mul_uint(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Decimal256):
            return self.checked_div(other)
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, Decimal256):
            return self.checked_rem(other)
        return NotImplemented

    def __str__(self) -> str:
        whole, fractional = divmod(self.atomics, DECIMAL_FRACTIONAL)
        if fractional == 0:
            return str(whole)
        digits = str(fractional).rjust(DECIMAL_PLACES, "0").rstrip("0")
        return f"{whole}.{digits}"

    def __repr__(self) -> str:
        return f"Decimal256('{self}')"
