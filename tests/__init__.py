"""
Test suite for the settlement engine

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/properties/    : Property-based tests (hypothesis)
"""
