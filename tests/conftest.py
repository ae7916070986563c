"""
conftest.py - Shared pytest fixtures for signedmath tests

Provides the sample values used across unit and conformance tests:
- Signed decimals: big/small, positive/negative, fractional
- Signed integers: the same set without the fractional value
"""

import pytest

from signedmath import SignedDecimal, SignedInt


# =============================================================================
# SIGNED DECIMAL FIXTURES
# =============================================================================

@pytest.fixture
def decimals():
    """The sample set: 100, -100, 50, -50 and -50.50."""
    return {
        "big_pos": SignedDecimal.from_str("100"),
        "big_neg": SignedDecimal.from_str("-100"),
        "small_pos": SignedDecimal.from_str("50"),
        "small_neg": SignedDecimal.from_str("-50"),
        "dec_neg": SignedDecimal.from_str("-50.50"),
    }


# =============================================================================
# SIGNED INT FIXTURES
# =============================================================================

@pytest.fixture
def ints():
    """The sample set: 100, -100, 50 and -50."""
    return {
        "big_pos": SignedInt.from_str("100"),
        "big_neg": SignedInt.from_str("-100"),
        "small_pos": SignedInt.from_str("50"),
        "small_neg": SignedInt.from_str("-50"),
    }
