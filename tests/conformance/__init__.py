"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the signed numeric types.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. test_canonical_zero.py - Zero is always represented as positive
2. test_algebra.py - Agreement with exact signed integer arithmetic
3. test_ordering.py - Total, sign-aware ordering
4. test_round_trip.py - String round-trips and unsigned narrowing

These tests use hypothesis for property-based testing.
"""
