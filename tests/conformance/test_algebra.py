"""
Algebra Conformance Tests

INVARIANT: Sign-and-magnitude arithmetic agrees with exact signed arithmetic.

    ∀ a, b:
        atoms(a + b) = atoms(a) + atoms(b)
        atoms(a - b) = atoms(a) - atoms(b)
        atoms(a * b) = trunc(atoms(a) * atoms(b) / 10**18)
        atoms(a / b) = trunc(atoms(a) * 10**18 / atoms(b))      (b ≠ 0)

where atoms(x) is the signed count of 10**-18 units of a SignedDecimal.
SignedInt is checked against Python int arithmetic the same way.
"""

from hypothesis import given, settings, assume
from hypothesis import strategies as st

from signedmath import SignedDecimal, SignedInt, Uint256, Decimal256, DECIMAL_FRACTIONAL

from tests.strategies import (
    signed_decimals,
    nonzero_signed_decimals,
    signed_ints,
    uint256s,
    decimal256s,
    signed_atomics,
    truncated_quotient,
)


class TestSignedDecimalAlgebra:
    """Property-based algebra tests for SignedDecimal."""

    @given(signed_decimals(), signed_decimals())
    @settings(max_examples=300)
    def test_addition_matches_integer_oracle(self, a, b):
        assert signed_atomics(a + b) == signed_atomics(a) + signed_atomics(b)

    @given(signed_decimals(), signed_decimals())
    @settings(max_examples=200)
    def test_subtraction_is_addition_of_negation(self, a, b):
        """
        PROPERTY: a - b == a + (-b), field for field.
        """
        lhs = a - b
        rhs = a + (-b)
        assert (lhs.magnitude, lhs.is_positive) == (rhs.magnitude, rhs.is_positive)

    @given(signed_decimals(), signed_decimals())
    @settings(max_examples=200)
    def test_same_sign_addition(self, a, b):
        """
        PROPERTY: Same-sign operands keep their sign and add magnitudes.
        """
        assume(a.is_positive == b.is_positive)
        assume(not (a.is_zero() and b.is_zero()))
        result = a + b
        assert result.is_positive == a.is_positive
        assert result.magnitude == a.magnitude + b.magnitude

    @given(signed_decimals(), signed_decimals())
    @settings(max_examples=200)
    def test_addition_commutes(self, a, b):
        assert a + b == b + a

    @given(signed_decimals(), signed_decimals())
    @settings(max_examples=300)
    def test_multiplication_matches_integer_oracle(self, a, b):
        expected = truncated_quotient(signed_atomics(a) * signed_atomics(b), DECIMAL_FRACTIONAL)
        assert signed_atomics(a * b) == expected

    @given(signed_decimals(), nonzero_signed_decimals())
    @settings(max_examples=300)
    def test_division_matches_integer_oracle(self, a, b):
        expected = truncated_quotient(signed_atomics(a) * DECIMAL_FRACTIONAL, signed_atomics(b))
        assert signed_atomics(a / b) == expected

    @given(signed_decimals(), nonzero_signed_decimals())
    @settings(max_examples=200)
    def test_remainder_on_atomics_ignores_signs(self, a, b):
        result = a % b
        assert result.is_positive
        assert result.magnitude.atomics == a.magnitude.atomics % b.magnitude.atomics

    @given(decimal256s(), signed_decimals())
    @settings(max_examples=100)
    def test_unsigned_promotion_is_positive(self, magnitude, b):
        assert magnitude + b == SignedDecimal.from_magnitude(magnitude) + b


class TestSignedIntAlgebra:
    """Property-based algebra tests for SignedInt."""

    @given(signed_ints(), signed_ints())
    @settings(max_examples=300)
    def test_matches_int_arithmetic(self, a, b):
        x, y = int(a), int(b)
        assert int(a + b) == x + y
        assert int(a - b) == x - y
        assert int(a * b) == x * y

    @given(signed_ints(), signed_ints())
    @settings(max_examples=300)
    def test_division_truncates_toward_zero(self, a, b):
        assume(not b.is_zero())
        assert int(a / b) == truncated_quotient(int(a), int(b))

    @given(signed_ints(), signed_ints())
    @settings(max_examples=100)
    def test_subtraction_is_addition_of_negation(self, a, b):
        assert a - b == a + (-b)

    @given(uint256s(), signed_ints())
    @settings(max_examples=100)
    def test_uint_plus_signed(self, u, b):
        assert int(u + b) == int(u) + int(b)


class TestMixedAlgebra:
    """Property-based tests for mixed-type multiplication."""

    @given(uint256s(10 ** 20), signed_decimals())
    @settings(max_examples=200)
    def test_uint_by_signed_decimal(self, u, d):
        result = u * d
        magnitude = u.value * d.magnitude.atomics // DECIMAL_FRACTIONAL
        assert result.magnitude == Uint256(magnitude)
        assert result.is_positive == (d.is_positive or magnitude == 0)

    @given(signed_ints(10 ** 20), decimal256s())
    @settings(max_examples=200)
    def test_signed_int_by_decimal(self, i, d):
        result = i * d
        magnitude = i.magnitude.value * d.atomics // DECIMAL_FRACTIONAL
        assert result.magnitude == Uint256(magnitude)
        assert result.is_positive == (i.is_positive or magnitude == 0)

    @given(st.integers(min_value=0, max_value=10 ** 6), signed_ints(10 ** 6))
    @settings(max_examples=50)
    def test_whole_decimal_scales_exactly(self, n, i):
        assert int(i * Decimal256(n * DECIMAL_FRACTIONAL)) == int(i) * n
