"""
signedmath - Signed arithmetic over unsigned 256-bit magnitudes

Sign-and-magnitude numeric types for balance and PnL computation on top of
unsigned fixed-width primitives.

Usage:
    from signedmath import SignedDecimal, SignedInt, Uint256

    balance = SignedDecimal.from_str("100")
    pnl = SignedDecimal.from_str("-150.25")
    total = balance + pnl           # SignedDecimal('-50.25')
    total.to_unsigned()             # raises SignConversionError

    shares = Uint256(1000)
    shares * pnl                    # SignedInt('-150250')
"""

# Core
from .core import (
    SignedNumber,
    SignedMathError,
    ParseError,
    RangeOverflow,
    SignConversionError,
    UINT256_BITS,
    UINT256_MAX,
    DECIMAL_PLACES,
    DECIMAL_FRACTIONAL,
)

# Magnitudes
from .magnitude import Uint256, Decimal256

# Signed types
from .signed_decimal import SignedDecimal
from .signed_int import SignedInt

# Mixed-type operations
from .mixed import (
    mul_uint_by_signed_decimal,
    mul_signed_int_by_decimal,
    mul_signed_decimal_by_decimal,
    add_uint_to_signed_int,
)

# Wire encoding
from . import codec

__all__ = [
    # Core
    'SignedNumber',
    'SignedMathError',
    'ParseError',
    'RangeOverflow',
    'SignConversionError',
    'UINT256_BITS',
    'UINT256_MAX',
    'DECIMAL_PLACES',
    'DECIMAL_FRACTIONAL',
    # Magnitudes
    'Uint256',
    'Decimal256',
    # Signed types
    'SignedDecimal',
    'SignedInt',
    # Mixed-type operations
    'mul_uint_by_signed_decimal',
    'mul_signed_int_by_decimal',
    'mul_signed_decimal_by_decimal',
    'add_uint_to_signed_int',
    # Wire encoding
    'codec',
]
