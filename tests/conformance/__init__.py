"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of tweetbits.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. test_dispatch.py - Exactly one continuation per gated action
2. test_capture.py - Bound context is isolated per callback
3. test_traversal.py - Delegated traversal preserves length and order

These tests use hypothesis for property-based testing.
"""
